from __future__ import annotations

from typing import Final

# Router status pages, tried in this order on every cycle
DEFAULT_ENDPOINTS: Final[tuple[str, ...]] = (
    "http://jiofi.local.html/",
    "http://192.168.225.1/",
)

# Per-endpoint network timeouts (seconds)
DEFAULT_CONNECT_TIMEOUT: Final = 3.0
DEFAULT_READ_TIMEOUT: Final = 3.0

# Case-insensitive tokens that mark the router as charging
CHARGING_TOKENS: Final[tuple[str, ...]] = ("charging", "plugged")

# Short status strings shown on the widget
STATUS_OFFLINE: Final = "Offline"
STATUS_PARSE_ERROR: Final = "Parse Error"
STATUS_CANCELLED: Final = "Cancelled"
STATUS_UPDATING: Final = "Updating..."
STATUS_UNKNOWN_ERROR: Final = "Err"

# Output filenames for file-backed widget surfaces
WIDGET_HTML_NAME: Final = "widget.html"
WIDGET_PNG_NAME: Final = "widget.png"
