"""Widget layout state derived from a status reading."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from jiofiwidget.common.enums import ProgressTint
from jiofiwidget.constants import STATUS_UNKNOWN_ERROR, STATUS_UPDATING
from jiofiwidget.status.models import Reading

PROGRESS_MAX = 100
EMPTY_PERCENTAGE = "--"


@dataclass(frozen=True)
class WidgetView:
    """Everything a surface needs to draw the battery widget.

    Mirrors the fixed widget layout: a percentage label, a progress
    bar, a charging icon and a status line that is only shown while
    updating or on failure.
    """

    percentage_text: str = EMPTY_PERCENTAGE
    progress: int = 0
    charging_visible: bool = False
    tint: ProgressTint = ProgressTint.IDLE
    status_visible: bool = False
    status_text: str = ""
    updated_at: datetime | None = None

    @property
    def progress_max(self) -> int:
        return PROGRESS_MAX

    @property
    def progress_fraction(self) -> float:
        return self.progress / PROGRESS_MAX

    @classmethod
    def from_reading(cls, reading: Reading, updated_at: datetime | None = None) -> WidgetView:
        """Map a completed reading onto the widget layout."""
        if reading.success and reading.level is not None:
            return cls(
                percentage_text=f"{reading.level}%",
                progress=reading.level,
                charging_visible=reading.charging,
                tint=ProgressTint.CHARGING if reading.charging else ProgressTint.IDLE,
                status_visible=False,
                updated_at=updated_at,
            )

        return cls(
            status_visible=True,
            status_text=reading.error or STATUS_UNKNOWN_ERROR,
            updated_at=updated_at,
        )

    @classmethod
    def updating(cls, previous: WidgetView | None = None) -> WidgetView:
        """Transient state shown while a refresh is in flight.

        Keeps the previous percentage and progress on screen and only
        swaps in the "Updating..." status line.
        """
        base = previous or cls()
        return cls(
            percentage_text=base.percentage_text,
            progress=base.progress,
            charging_visible=base.charging_visible,
            tint=base.tint,
            status_visible=True,
            status_text=STATUS_UPDATING,
            updated_at=base.updated_at,
        )
