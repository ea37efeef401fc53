"""Display package - widget view model and rendering surfaces."""

from jiofiwidget.display.protocols import MockSurface, WidgetSurface
from jiofiwidget.display.render import ConsoleSurface, HtmlFileSurface, PngFileSurface
from jiofiwidget.display.view import WidgetView

__all__ = [
    "ConsoleSurface",
    "HtmlFileSurface",
    "MockSurface",
    "PngFileSurface",
    "WidgetSurface",
    "WidgetView",
]
