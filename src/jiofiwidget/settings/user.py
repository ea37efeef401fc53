"""User-configurable settings loaded from config.yaml."""

from __future__ import annotations

import os
import re
from datetime import datetime
from pathlib import Path
from typing import ClassVar
from zoneinfo import ZoneInfo

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

# Load environment variables from .env file(s)
load_dotenv()


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class UserSettings(BaseModel):
    """User settings for polling behaviour and the rendered widget.

    Every field has a default, so an empty config file is valid. The
    router endpoint list is deliberately not configurable here.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("config.yaml"),
        Path("~/.config/jiofiwidget/config.yaml").expanduser(),
        Path("/etc/jiofiwidget/config.yaml"),
    ]

    # Polling
    refresh_minutes: int = Field(30, gt=0, description="Widget refresh interval (minutes)")
    connect_timeout: float = Field(
        3.0, gt=0, le=30, description="Per-endpoint connect timeout (seconds)"
    )
    read_timeout: float = Field(3.0, gt=0, le=30, description="Per-endpoint read timeout (seconds)")

    # Widget surface
    widget_width: int = Field(320, ge=80, description="Width of the rendered widget in pixels")
    widget_height: int = Field(120, ge=40, description="Height of the rendered widget in pixels")
    output_dir: Path = Field(Path("widget"), description="Directory for widget.html/widget.png")

    # Time formatting
    time_format: str = Field("%-I:%M %p", description="Last-updated time format (e.g. 6:04 AM)")
    timezone: str = Field("UTC", description="Local timezone for the last-updated time")

    # ---- validators ----
    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except Exception as exc:
            raise ValueError(f"Unknown timezone: {v}") from exc
        return v

    # ---- convenience methods ----
    def get_timezone(self) -> ZoneInfo:
        """Get configured timezone as ZoneInfo object."""
        return ZoneInfo(self.timezone)

    def format_time(self, dt: datetime) -> str:
        """Format a datetime in the configured timezone and format.

        Naive datetimes are assumed to already be in the configured
        timezone.
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=self.get_timezone())
        return dt.astimezone(self.get_timezone()).strftime(self.time_format)

    @classmethod
    def load(cls, path: Path | None = None) -> UserSettings:
        """Load configuration from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated UserSettings object

        Raises:
            FileNotFoundError: If no config file is found
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        # Try to find config file
        if path is None:
            # Check environment variable first
            env_path = os.environ.get("JIOFIWIDGET_CONFIG")
            if env_path:
                path = Path(env_path)
                if not path.exists():
                    raise FileNotFoundError(f"Config file from JIOFIWIDGET_CONFIG not found: {path}")
            else:
                # Try default paths
                for default_path in cls.DEFAULT_CONFIG_PATHS:
                    if default_path.exists():
                        path = default_path
                        break
                else:
                    raise FileNotFoundError(
                        "No configuration file found. Create config.yaml or set JIOFIWIDGET_CONFIG."
                    )

        import yaml  # local import to avoid hard dep for callers

        try:
            raw = _interpolate_env(path.read_text())
            data = yaml.safe_load(raw) or {}
        except Exception as exc:
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> UserSettings:
        """Load configuration, falling back to defaults when no file exists.

        Only the default search is relaxed: an explicit ``path`` or a
        ``JIOFIWIDGET_CONFIG`` pointing at a missing file still fails.
        """
        if (
            path is None
            and not os.environ.get("JIOFIWIDGET_CONFIG")
            and not any(p.exists() for p in cls.DEFAULT_CONFIG_PATHS)
        ):
            return cls()
        return cls.load(path)
