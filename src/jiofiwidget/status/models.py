"""Typed models for router status readings."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from jiofiwidget.common.enums import FailureKind


class EndpointFailure(BaseModel):
    """Diagnostic record of one failed endpoint attempt."""

    model_config = ConfigDict(frozen=True)

    url: str
    kind: FailureKind
    reason: str


class Reading(BaseModel):
    """Outcome of one resolution cycle.

    A reading is either successful, carrying a battery ``level`` in
    the 0-100 range, or failed, carrying a short human-readable
    ``error``. Readings are immutable and compare equal field by field,
    so two cycles against an unchanged router produce equal readings.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    level: int | None = Field(None, ge=0, le=100, description="Battery percentage")
    charging: bool = False
    error: str | None = None

    # Diagnostics
    source: str | None = Field(None, description="Endpoint that produced the level")
    attempts: tuple[EndpointFailure, ...] = ()

    @model_validator(mode="after")
    def check_outcome_fields(self) -> Reading:
        if self.success:
            if self.level is None:
                raise ValueError("a successful reading requires a level")
            if self.error is not None:
                raise ValueError("a successful reading cannot carry an error")
        else:
            if self.error is None:
                raise ValueError("a failed reading requires an error")
            if self.level is not None:
                raise ValueError("a failed reading cannot carry a level")
            if self.charging:
                raise ValueError("a failed reading cannot be charging")
        return self

    @classmethod
    def ok(
        cls,
        level: int,
        charging: bool = False,
        source: str | None = None,
        attempts: tuple[EndpointFailure, ...] = (),
    ) -> Reading:
        """Build a successful reading."""
        return cls(
            success=True,
            level=level,
            charging=charging,
            source=source,
            attempts=attempts,
        )

    @classmethod
    def failed(cls, error: str, attempts: tuple[EndpointFailure, ...] = ()) -> Reading:
        """Build a failed reading."""
        return cls(success=False, error=error, attempts=attempts)

    @property
    def summary(self) -> str:
        """One-line description, e.g. ``85% (charging)`` or ``Offline``."""
        if not self.success:
            return self.error or ""
        return f"{self.level}%" + (" (charging)" if self.charging else "")
