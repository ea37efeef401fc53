"""Application settings management.

This package provides:
- UserSettings: User-configurable settings loaded from config.yaml
- ApplicationSettings: Internal application settings and defaults
"""

from jiofiwidget.settings.application import AppPaths, ApplicationSettings
from jiofiwidget.settings.user import UserSettings

__all__ = ["AppPaths", "ApplicationSettings", "UserSettings"]
