"""Internal application settings derived from user settings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from jiofiwidget.constants import DEFAULT_ENDPOINTS, WIDGET_HTML_NAME, WIDGET_PNG_NAME
from jiofiwidget.scheduling.models import RefreshSettings
from jiofiwidget.settings.user import UserSettings
from jiofiwidget.status.resolver import ResolverConfig


@dataclass
class AppPaths:
    """Output file locations for the file-backed widget surfaces."""

    output_dir: Path
    widget_html: str = WIDGET_HTML_NAME
    widget_png: str = WIDGET_PNG_NAME

    @property
    def html_path(self) -> Path:
        return self.output_dir / self.widget_html

    @property
    def png_path(self) -> Path:
        return self.output_dir / self.widget_png


class ApplicationSettings:
    """Application settings container.

    Combines user-provided configuration with build-time defaults:

    - Output paths for the rendered widget
    - Refresh timing and failure back-off
    - The resolver configuration (fixed endpoints, user timeouts)

    Examples:
        user_settings = UserSettings.load()
        app_settings = ApplicationSettings(user_settings)
        resolver = StatusResolver(app_settings.resolver_config())
    """

    def __init__(
        self,
        user_settings: UserSettings,
        paths: AppPaths | None = None,
        refresh: RefreshSettings | None = None,
        endpoints: tuple[str, ...] = DEFAULT_ENDPOINTS,
    ):
        """Initialize application settings with configuration sources."""
        self.user = user_settings
        self.paths = paths or AppPaths(output_dir=user_settings.output_dir)
        self.refresh = refresh or RefreshSettings(interval_minutes=user_settings.refresh_minutes)
        self.endpoints = endpoints

    def resolver_config(self) -> ResolverConfig:
        """Build the immutable resolver configuration."""
        return ResolverConfig(
            endpoints=self.endpoints,
            connect_timeout=self.user.connect_timeout,
            read_timeout=self.user.read_timeout,
        )
