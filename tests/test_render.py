import logging
from datetime import UTC, datetime
from pathlib import Path

import pytest
from PIL import Image

from jiofiwidget.display.render import ConsoleSurface, HtmlFileSurface, PngFileSurface
from jiofiwidget.display.view import WidgetView
from jiofiwidget.settings import UserSettings
from jiofiwidget.status.models import Reading

UPDATED = datetime(2025, 5, 3, 14, 30, tzinfo=UTC)


@pytest.fixture
def charging_view() -> WidgetView:
    return WidgetView.from_reading(Reading.ok(64, charging=True), UPDATED)


@pytest.fixture
def offline_view() -> WidgetView:
    return WidgetView.from_reading(Reading.failed("Offline"), UPDATED)


def test_html_surface_writes_widget(
    tmp_path: Path, settings: UserSettings, charging_view: WidgetView
) -> None:
    out = tmp_path / "nested" / "widget.html"
    HtmlFileSurface(out, settings).update(charging_view)

    html = out.read_text(encoding="utf-8")
    assert "64%" in html
    assert 'value="64"' in html
    assert "&#9889;" in html
    assert "Updated 14:30" in html
    assert "#4caf50" in html


def test_html_surface_shows_status_on_failure(
    tmp_path: Path, settings: UserSettings, offline_view: WidgetView
) -> None:
    html = HtmlFileSurface(tmp_path / "w.html", settings).render(offline_view)
    assert "--" in html
    assert '<div class="status">Offline</div>' in html
    assert "&#9889;" not in html


def test_html_surface_escapes_status_text(tmp_path: Path, settings: UserSettings) -> None:
    view = WidgetView.from_reading(Reading.failed("<script>"))
    html = HtmlFileSurface(tmp_path / "w.html", settings).render(view)
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_html_surface_custom_template(tmp_path: Path, settings: UserSettings) -> None:
    surface = HtmlFileSurface(tmp_path / "w.html", settings, template="{{ view.percentage_text }}")
    assert surface.render(WidgetView.from_reading(Reading.ok(9))) == "9%"


def test_png_surface_writes_image(
    tmp_path: Path, settings: UserSettings, charging_view: WidgetView
) -> None:
    out = tmp_path / "widget.png"
    PngFileSurface(out, settings).update(charging_view)

    with Image.open(out) as image:
        assert image.format == "PNG"
        assert image.size == (settings.widget_width, settings.widget_height)


def test_png_progress_bar_fill(tmp_path: Path, settings: UserSettings) -> None:
    surface = PngFileSurface(tmp_path / "widget.png", settings)
    full = surface.draw(WidgetView.from_reading(Reading.ok(100, charging=True)))
    empty = surface.draw(WidgetView.from_reading(Reading.failed("Offline")))

    margin = settings.widget_height // 10
    probe = (settings.widget_width - margin - 2, settings.widget_height // 2 + 2)
    assert full.getpixel(probe) == (0x4C, 0xAF, 0x50)
    assert empty.getpixel(probe) == (0x5F, 0x63, 0x68)


def test_console_surface_logs(
    caplog: pytest.LogCaptureFixture,
    settings: UserSettings,
    charging_view: WidgetView,
    offline_view: WidgetView,
) -> None:
    surface = ConsoleSurface(settings)
    assert surface.format(charging_view) == "Battery 64% charging @ 14:30"
    assert surface.format(offline_view) == "Battery -- [Offline]"

    with caplog.at_level(logging.INFO, logger="jiofiwidget.display.render"):
        surface.update(charging_view)
    assert "Battery 64% charging" in caplog.text
