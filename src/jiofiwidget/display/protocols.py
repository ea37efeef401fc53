# src/jiofiwidget/display/protocols.py
from __future__ import annotations

from typing import Protocol, runtime_checkable

from jiofiwidget.display.view import WidgetView


@runtime_checkable
class WidgetSurface(Protocol):
    """Protocol defining the interface for widget rendering targets.

    A surface owns whatever it draws to (a file, a terminal, a real
    home-screen widget) and is only ever handed complete views, so it
    never shows a mix of two refreshes.
    """

    def update(self, view: WidgetView) -> None:
        """Redraw the surface with ``view``.

        Args:
            view: Complete widget state to show
        """
        ...


class MockSurface:
    """Mock implementation of WidgetSurface for testing."""

    def __init__(self) -> None:
        self.update_calls: list[WidgetView] = []

    def update(self, view: WidgetView) -> None:
        """Record the update without drawing anything."""
        self.update_calls.append(view)

    @property
    def last_view(self) -> WidgetView | None:
        return self.update_calls[-1] if self.update_calls else None

    def reset_call_history(self) -> None:
        """Reset the call history for testing."""
        self.update_calls = []


class ErrorSimulatingSurface(MockSurface):
    """Surface mock that fails on every update."""

    def update(self, view: WidgetView) -> None:
        super().update(view)
        raise RuntimeError("Simulated surface failure")


def assert_surface_shows(
    surface: MockSurface,
    percentage_text: str | None = None,
    status_text: str | None = None,
) -> bool:
    """Assert that the last view pushed to ``surface`` matches.

    Args:
        surface: The mock surface instance
        percentage_text: Expected percentage label (None to skip check)
        status_text: Expected status line (None to skip check)

    Returns:
        True if the assertion passes, raises AssertionError otherwise
    """
    view = surface.last_view
    assert view is not None, "Surface was not updated"

    if percentage_text is not None:
        assert view.percentage_text == percentage_text, (
            f"Expected {percentage_text}, got {view.percentage_text}"
        )

    if status_text is not None:
        assert view.status_visible, "Status line is hidden"
        assert view.status_text == status_text, (
            f"Expected status {status_text}, got {view.status_text}"
        )

    return True
