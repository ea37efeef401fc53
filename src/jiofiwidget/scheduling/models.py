"""Data models for scheduling and refresh settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RefreshSettings:
    """Periodic refresh and failure back-off settings."""

    interval_minutes: int = 30
    failure_streak_limit: int = 3
    backoff_multiplier: int = 4

    def sleep_minutes(self, error_streak: int) -> int:
        """Minutes to wait before the next cycle.

        Once ``failure_streak_limit`` consecutive cycles have failed,
        the interval is stretched by ``backoff_multiplier``.
        """
        if error_streak >= self.failure_streak_limit:
            return self.interval_minutes * self.backoff_multiplier
        return self.interval_minutes
