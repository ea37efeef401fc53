# filepath: src/jiofiwidget/controller.py
"""Widget adapter for the router battery status."""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Final

from jiofiwidget.display.protocols import WidgetSurface
from jiofiwidget.display.view import WidgetView
from jiofiwidget.settings.application import ApplicationSettings
from jiofiwidget.settings.user import UserSettings
from jiofiwidget.status.models import Reading
from jiofiwidget.status.resolver import StatusResolver
from jiofiwidget.utils.time import TimeUtils

logger: Final = logging.getLogger(__name__)


class BatteryWidget:
    """Home-screen style widget showing the router battery.

    This class is the only place that knows about the widget:
    - Owns a ``StatusResolver`` and calls it on every trigger
    - Runs resolutions on a single background worker
    - Shows "Updating..." while a resolution is in flight
    - Hands each completed reading to every surface

    Triggers that arrive while a resolution is queued are coalesced
    into it; triggers that arrive while one is running queue behind
    it. Surfaces therefore always show the most recently completed
    resolution.
    """

    def __init__(
        self,
        settings: UserSettings | None = None,
        surfaces: Sequence[WidgetSurface] = (),
        resolver: StatusResolver | None = None,
    ) -> None:
        """Initialize the widget.

        Args:
            settings: User configuration (defaults if None)
            surfaces: Rendering targets updated on every refresh
            resolver: Optional custom status resolver
        """
        self.config: UserSettings = settings or UserSettings()
        self.settings = ApplicationSettings(self.config)
        self.resolver = resolver or StatusResolver(self.settings.resolver_config())
        self.surfaces: list[WidgetSurface] = list(surfaces)

        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="jiofiwidget")
        self._lock = threading.Lock()
        self._render_lock = threading.Lock()
        self._cancel = threading.Event()
        self._queued: Future[Reading] | None = None
        self._closed = False

        self.last_reading: Reading | None = None
        self.last_view: WidgetView | None = None

    def refresh(self) -> Future[Reading]:
        """Trigger a refresh and return a future for its reading.

        Raises:
            RuntimeError: If the widget has been closed
        """
        with self._lock:
            if self._closed:
                raise RuntimeError("Widget is closed")
            if self._queued is not None:
                logger.debug("Refresh already queued, coalescing trigger")
                return self._queued

            with self._render_lock:
                self._render(WidgetView.updating(self.last_view))
            future = self._executor.submit(self._run_cycle)
            self._queued = future

        return future

    def refresh_now(self) -> Reading:
        """Trigger a refresh and block until its reading is available."""
        return self.refresh().result()

    def close(self) -> None:
        """Abandon in-flight work and stop the worker."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._queued = None
            # Waits out a render in progress; none can start afterwards
            with self._render_lock:
                self._cancel.set()
        self._executor.shutdown(wait=False, cancel_futures=True)
        logger.debug("Widget closed")

    def __enter__(self) -> BatteryWidget:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _run_cycle(self) -> Reading:
        with self._lock:
            # Later triggers must queue behind this run
            self._queued = None

        reading = self.resolver.resolve(cancel=self._cancel)

        with self._render_lock:
            if self._cancel.is_set():
                logger.debug("Discarding reading from cancelled cycle")
                return reading

            self.last_reading = reading
            self._render(WidgetView.from_reading(reading, TimeUtils.now_localized()))
        return reading

    def _render(self, view: WidgetView) -> None:
        """Hand ``view`` to every surface. Caller holds ``_render_lock``."""
        self.last_view = view
        for surface in self.surfaces:
            try:
                surface.update(view)
            except Exception as exc:
                logger.warning("Surface %s failed to update: %s", type(surface).__name__, exc)
