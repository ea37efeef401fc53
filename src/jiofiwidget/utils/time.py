# src/jiofiwidget/utils/time.py
"""Time and date handling utilities."""

from __future__ import annotations

from datetime import UTC, datetime


class TimeUtils:
    """Time-related utility functions."""

    @staticmethod
    def now_localized() -> datetime:
        """Get current datetime with local timezone.

        Returns:
            Current datetime with local timezone
        """
        return datetime.now(UTC).astimezone()
