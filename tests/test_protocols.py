import pytest

from jiofiwidget.display.protocols import (
    ErrorSimulatingSurface,
    MockSurface,
    WidgetSurface,
    assert_surface_shows,
)
from jiofiwidget.display.render import ConsoleSurface, HtmlFileSurface, PngFileSurface
from jiofiwidget.display.view import WidgetView
from jiofiwidget.status.models import Reading


class TestMockSurface:
    def test_update_tracking(self):
        """Test that update calls are properly tracked."""
        surface = MockSurface()
        view = WidgetView.from_reading(Reading.ok(20))

        surface.update(view)

        assert surface.update_calls == [view]
        assert surface.last_view is view

    def test_reset_call_history(self):
        """Test that reset_call_history clears all tracked calls."""
        surface = MockSurface()
        surface.update(WidgetView())

        surface.reset_call_history()

        assert surface.update_calls == []
        assert surface.last_view is None


class TestErrorSimulatingSurface:
    def test_update_raises_after_recording(self):
        surface = ErrorSimulatingSurface()
        with pytest.raises(RuntimeError, match="Simulated surface failure"):
            surface.update(WidgetView())
        assert len(surface.update_calls) == 1


class TestAssertions:
    def test_assert_surface_shows(self):
        surface = MockSurface()
        surface.update(WidgetView.from_reading(Reading.failed("Offline")))
        assert assert_surface_shows(surface, percentage_text="--", status_text="Offline")

    def test_assert_surface_shows_fails_without_updates(self):
        with pytest.raises(AssertionError, match="Surface was not updated"):
            assert_surface_shows(MockSurface())

    def test_assert_surface_shows_mismatch(self):
        surface = MockSurface()
        surface.update(WidgetView.from_reading(Reading.ok(30)))
        with pytest.raises(AssertionError):
            assert_surface_shows(surface, percentage_text="31%")


@pytest.mark.parametrize(
    "surface_type", [MockSurface, ConsoleSurface, HtmlFileSurface, PngFileSurface]
)
def test_surfaces_satisfy_protocol(surface_type: type) -> None:
    assert hasattr(surface_type, "update")
    if surface_type in (MockSurface, ConsoleSurface):
        assert isinstance(surface_type(), WidgetSurface)
