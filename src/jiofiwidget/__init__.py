"""Battery widget for JioFi-style portable routers.

Polls the router's local status page, extracts the battery level and
charging state, and renders the result to a small widget layout.
"""

__version__ = "0.1.0"
