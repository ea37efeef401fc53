"""Common utility functions and helpers for the jiofiwidget package."""

from jiofiwidget.utils.time import TimeUtils

__all__ = ["TimeUtils"]
