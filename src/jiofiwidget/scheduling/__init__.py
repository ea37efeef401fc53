"""Scheduler package for the battery widget."""

import logging
import time
from typing import TYPE_CHECKING, Final

from jiofiwidget.scheduling.models import RefreshSettings
from jiofiwidget.status.models import Reading

if TYPE_CHECKING:
    from jiofiwidget.controller import BatteryWidget

logger: Final = logging.getLogger(__name__)


class Scheduler:
    """Periodically triggers widget refreshes.

    Plays the role of the platform's periodic update: one trigger per
    interval, each waited on before sleeping. After a run of failed
    readings the interval is stretched to avoid hammering an
    unreachable router.
    """

    def __init__(
        self,
        widget: "BatteryWidget",
        refresh: RefreshSettings | None = None,
    ) -> None:
        self.widget = widget
        self.refresh = refresh or widget.settings.refresh
        self.error_streak = 0

    def run_cycle(self) -> Reading:
        """Trigger one refresh, wait for it and track the failure streak."""
        reading = self.widget.refresh_now()
        if reading.success:
            self.error_streak = 0
        else:
            self.error_streak += 1
            logger.info("Refresh failed (%s), streak %d", reading.error, self.error_streak)
        return reading

    def run(self, once: bool = False) -> None:
        """Run the refresh loop until interrupted or ``once`` is done."""
        while True:
            self.run_cycle()

            # If running only once, exit now
            if once:
                break

            sleep_min = self.refresh.sleep_minutes(self.error_streak)
            if self.error_streak >= self.refresh.failure_streak_limit:
                logger.warning(
                    "%d consecutive failures → backing off x%d interval",
                    self.error_streak,
                    self.refresh.backoff_multiplier,
                )
            else:
                logger.debug("Sleeping %d min until next refresh", sleep_min)
            time.sleep(sleep_min * 60)


__all__ = ["RefreshSettings", "Scheduler"]
