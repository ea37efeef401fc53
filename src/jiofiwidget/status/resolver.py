"""Router status resolver.

Tries each configured endpoint in order, fetches its status page under
bounded connect/read timeouts, and extracts a battery ``Reading`` from
the HTML. Per-endpoint failures never abort the cycle; they are
recorded and the next endpoint is tried.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Final

import requests

from jiofiwidget.constants import (
    CHARGING_TOKENS,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_ENDPOINTS,
    DEFAULT_READ_TIMEOUT,
)
from jiofiwidget.status.errors import (
    AllEndpointsExhausted,
    HttpStatusError,
    NetworkError,
    ParseError,
    ResolutionCancelled,
    RouterStatusError,
)
from jiofiwidget.status.models import EndpointFailure, Reading
from jiofiwidget.status.rules import DEFAULT_RULES, ExtractionRule, detect_charging, extract_level

logger: Final = logging.getLogger(__name__)

REQUEST_HEADERS: Final = {"Accept": "text/html"}


@dataclass(frozen=True)
class ResolverConfig:
    """Immutable resolver configuration.

    Endpoints and rules are tried in declared order on every cycle.
    """

    endpoints: tuple[str, ...] = DEFAULT_ENDPOINTS
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    read_timeout: float = DEFAULT_READ_TIMEOUT
    rules: tuple[ExtractionRule, ...] = DEFAULT_RULES
    charging_tokens: tuple[str, ...] = field(default=CHARGING_TOKENS)

    def __post_init__(self) -> None:
        if not self.endpoints:
            raise ValueError("At least one endpoint is required")
        if not self.rules:
            raise ValueError("At least one extraction rule is required")
        if self.connect_timeout <= 0 or self.read_timeout <= 0:
            raise ValueError("Timeouts must be positive")

    @property
    def timeout(self) -> tuple[float, float]:
        """``(connect, read)`` timeout pair as accepted by requests."""
        return (self.connect_timeout, self.read_timeout)


class StatusResolver:
    """Resolve the router's battery status from its status page.

    ``resolve`` always returns a well-formed ``Reading``; it never
    raises for network, HTTP or parse failures. Use ``resolve_strict``
    to get the aggregate failure as an exception instead.
    """

    def __init__(self, config: ResolverConfig | None = None) -> None:
        """Initialize the resolver.

        Args:
            config: Endpoint, timeout and rule configuration
        """
        self.config = config or ResolverConfig()

    def resolve(self, cancel: threading.Event | None = None) -> Reading:
        """Run one resolution cycle and return its reading.

        Args:
            cancel: Optional event; once set, no further endpoint is tried

        Returns:
            A successful reading, or a failed one carrying a short reason
        """
        try:
            return self.resolve_strict(cancel)
        except AllEndpointsExhausted as exc:
            logger.warning(
                "All %d endpoint(s) failed, last reason: %s",
                len(self.config.endpoints),
                exc.reason,
            )
            return Reading.failed(exc.reason, attempts=exc.failures)
        except ResolutionCancelled as exc:
            logger.info("Resolution cancelled")
            return Reading.failed(exc.reason, attempts=exc.failures)

    def resolve_strict(self, cancel: threading.Event | None = None) -> Reading:
        """Run one resolution cycle, raising if no endpoint succeeds.

        Raises:
            AllEndpointsExhausted: When every endpoint failed
            ResolutionCancelled: When ``cancel`` was set mid-cycle
        """
        failures: list[EndpointFailure] = []

        for url in self.config.endpoints:
            if cancel is not None and cancel.is_set():
                raise ResolutionCancelled(failures)

            try:
                body = self.fetch(url)
                reading = self.parse(body, url)
            except RouterStatusError as exc:
                logger.debug("Endpoint %s failed: %s", url, exc.reason)
                failures.append(exc.to_failure())
                continue

            return reading.model_copy(update={"attempts": tuple(failures)})

        raise AllEndpointsExhausted(failures)

    def fetch(self, url: str) -> str:
        """Fetch the status page at ``url`` and return its body.

        Raises:
            NetworkError: When the endpoint is unreachable or the read fails
            HttpStatusError: When the response status is not 200
        """
        try:
            resp = requests.get(url, headers=REQUEST_HEADERS, timeout=self.config.timeout)
        except requests.RequestException as exc:
            raise NetworkError(url, exc) from exc

        if resp.status_code != 200:
            raise HttpStatusError(url, resp.status_code)

        return resp.text

    def parse(self, body: str, url: str) -> Reading:
        """Extract a successful reading from a status page body.

        Raises:
            ParseError: When no rule yields a level between 0 and 100
        """
        found = extract_level(body, self.config.rules)
        if found is None:
            raise ParseError(url)

        level, rule = found
        charging = detect_charging(body, self.config.charging_tokens)
        logger.debug("Endpoint %s: %d%% via %s rule, charging=%s", url, level, rule.name, charging)
        return Reading.ok(level, charging=charging, source=url)
