"""Widget rendering surfaces.

Each surface turns a ``WidgetView`` into something visible: an HTML
page rendered with Jinja2, a PNG drawn with Pillow, or a log line.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Final

from jinja2 import Template
from PIL import Image, ImageDraw, ImageFont

from jiofiwidget.display.view import WidgetView
from jiofiwidget.settings.user import UserSettings

logger: Final = logging.getLogger(__name__)

FONT_CANDIDATES: Final = (
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
)

BACKGROUND: Final = "#202124"
FOREGROUND: Final = "#ffffff"
TRACK: Final = "#5f6368"
BOLT: Final = "#ffd600"


def _format_updated(view: WidgetView, settings: UserSettings) -> str:
    return settings.format_time(view.updated_at) if view.updated_at else ""


class HtmlFileSurface:
    """Render the widget as a standalone HTML page."""

    WIDGET_TEMPLATE = """<!DOCTYPE html>
    <html>
    <head>
        <meta charset="UTF-8">
        <meta http-equiv="refresh" content="60">
        <title>JioFi Battery</title>
        <style>
            body {
                font-family: sans-serif;
                background-color: #202124;
                color: white;
                margin: 0;
            }
            .widget {
                width: {{ width }}px;
                height: {{ height }}px;
                padding: 12px;
                box-sizing: border-box;
            }
            .percentage {
                font-size: 36px;
                font-weight: bold;
            }
            .charging {
                color: #ffd600;
                font-size: 28px;
            }
            progress {
                width: 100%;
                height: 12px;
                accent-color: {{ view.tint.value }};
            }
            .status {
                font-size: 16px;
            }
            .updated {
                font-size: 12px;
                color: #9aa0a6;
            }
        </style>
    </head>
    <body>
        <div class="widget">
            <span class="percentage">{{ view.percentage_text }}</span>
            {% if view.charging_visible %}<span class="charging">&#9889;</span>{% endif %}
            <progress max="{{ view.progress_max }}" value="{{ view.progress }}"></progress>
            {% if view.status_visible %}<div class="status">{{ view.status_text }}</div>{% endif %}
            {% if updated %}<div class="updated">Updated {{ updated }}</div>{% endif %}
        </div>
    </body>
    </html>"""

    def __init__(
        self,
        output_path: Path,
        settings: UserSettings | None = None,
        template: str | None = None,
    ) -> None:
        """Initialize the HTML surface.

        Args:
            output_path: File the page is written to
            settings: User configuration (defaults if None)
            template: Custom widget template (uses default if None)
        """
        self.output_path = output_path
        self.settings = settings or UserSettings()
        self.template = Template(template or self.WIDGET_TEMPLATE, autoescape=True)

    def render(self, view: WidgetView) -> str:
        """Render ``view`` to an HTML string."""
        context: dict[str, Any] = {
            "view": view,
            "updated": _format_updated(view, self.settings),
            "width": self.settings.widget_width,
            "height": self.settings.widget_height,
        }
        return self.template.render(**context)

    def update(self, view: WidgetView) -> None:
        html = self.render(view)
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.output_path.write_text(html, encoding="utf-8")
        logger.debug("Widget HTML written to %s", self.output_path)


class PngFileSurface:
    """Draw the widget into a PNG image with Pillow."""

    def __init__(self, output_path: Path, settings: UserSettings | None = None) -> None:
        self.output_path = output_path
        self.settings = settings or UserSettings()
        self.width = self.settings.widget_width
        self.height = self.settings.widget_height

    @staticmethod
    def _load_font(size: int) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
        for candidate in FONT_CANDIDATES:
            try:
                return ImageFont.truetype(candidate, size)
            except OSError:
                continue
        return ImageFont.load_default(size=size)

    def draw(self, view: WidgetView) -> Image.Image:
        """Return the widget image for ``view``."""
        image = Image.new("RGB", (self.width, self.height), BACKGROUND)
        draw = ImageDraw.Draw(image)
        margin = max(4, self.height // 10)

        big = self._load_font(max(12, self.height // 3))
        small = self._load_font(max(8, self.height // 8))

        # Percentage label
        draw.text((margin, margin), view.percentage_text, font=big, fill=FOREGROUND)

        # Charging bolt in the top-right corner
        if view.charging_visible:
            size = self.height // 3
            x0 = self.width - margin - size
            y0 = margin
            draw.polygon(
                [
                    (x0 + size * 0.6, y0),
                    (x0 + size * 0.15, y0 + size * 0.55),
                    (x0 + size * 0.45, y0 + size * 0.55),
                    (x0 + size * 0.35, y0 + size),
                    (x0 + size * 0.85, y0 + size * 0.4),
                    (x0 + size * 0.55, y0 + size * 0.4),
                ],
                fill=BOLT,
            )

        # Progress bar
        bar_top = self.height // 2
        bar_bottom = bar_top + max(4, self.height // 10)
        bar_right = self.width - margin
        draw.rectangle((margin, bar_top, bar_right, bar_bottom), fill=TRACK)
        filled = margin + int((bar_right - margin) * view.progress_fraction)
        if filled > margin:
            draw.rectangle((margin, bar_top, filled, bar_bottom), fill=view.tint.value)

        # Status line or last-updated time
        footer = view.status_text if view.status_visible else _format_updated(view, self.settings)
        if footer:
            draw.text((margin, bar_bottom + margin), footer, font=small, fill=FOREGROUND)

        return image

    def update(self, view: WidgetView) -> None:
        image = self.draw(view)
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        image.save(self.output_path, format="PNG")
        logger.debug("Widget PNG written to %s", self.output_path)


class ConsoleSurface:
    """Log every widget update as a single line."""

    def __init__(self, settings: UserSettings | None = None) -> None:
        self.settings = settings or UserSettings()

    def format(self, view: WidgetView) -> str:
        if view.status_visible:
            return f"Battery {view.percentage_text} [{view.status_text}]"
        suffix = " charging" if view.charging_visible else ""
        updated = _format_updated(view, self.settings)
        return f"Battery {view.percentage_text}{suffix}" + (f" @ {updated}" if updated else "")

    def update(self, view: WidgetView) -> None:
        logger.info("%s", self.format(view))
