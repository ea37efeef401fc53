"""Exception classes for router status resolution.

Every per-endpoint failure is a ``RouterStatusError`` carrying a short,
stable ``reason`` suitable for display on the widget. The resolver
catches these internally to drive its endpoint fallback; only the
aggregate errors (``AllEndpointsExhausted``, ``ResolutionCancelled``)
can escape ``StatusResolver.resolve_strict``.
"""

from __future__ import annotations

from collections.abc import Sequence

from jiofiwidget.common.enums import FailureKind
from jiofiwidget.constants import STATUS_CANCELLED, STATUS_OFFLINE, STATUS_PARSE_ERROR
from jiofiwidget.status.models import EndpointFailure


class RouterStatusError(Exception):
    """Error while fetching or interpreting a router status page."""

    kind: FailureKind | None = None

    def __init__(self, reason: str, url: str | None = None) -> None:
        """Initialize the exception.

        Args:
            reason: Short human-readable reason shown to the user
            url: Endpoint the error relates to, if any
        """
        super().__init__(f"{url}: {reason}" if url else reason)
        self.reason: str = reason
        self.url: str | None = url

    def to_failure(self) -> EndpointFailure:
        """Convert to a diagnostic record for ``Reading.attempts``.

        Raises:
            ValueError: If the error is not tied to a single endpoint
        """
        if self.kind is None or self.url is None:
            raise ValueError(f"{type(self).__name__} is not an endpoint failure")
        return EndpointFailure(url=self.url, kind=self.kind, reason=self.reason)


class NetworkError(RouterStatusError):
    """Raised when the endpoint cannot be reached or the read fails."""

    kind = FailureKind.NETWORK

    def __init__(self, url: str, original_error: Exception | None = None) -> None:
        """Initialize with network error details.

        Args:
            url: Endpoint that could not be reached
            original_error: The original exception that was caught
        """
        super().__init__(STATUS_OFFLINE, url)
        self.original_error = original_error


class HttpStatusError(RouterStatusError):
    """Raised when the endpoint answers with anything other than 200."""

    kind = FailureKind.HTTP_STATUS

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(f"HTTP {status_code}", url)
        self.status_code: int = status_code

    @property
    def is_client_error(self) -> bool:
        """True for 400-499 status codes."""
        return 400 <= self.status_code < 500

    @property
    def is_server_error(self) -> bool:
        """True for 500-599 status codes."""
        return self.status_code >= 500


class ParseError(RouterStatusError):
    """Raised when a status page contains no usable battery level."""

    kind = FailureKind.PARSE

    def __init__(self, url: str) -> None:
        super().__init__(STATUS_PARSE_ERROR, url)


class AllEndpointsExhausted(RouterStatusError):
    """Raised when every endpoint in a cycle has failed.

    The reason is taken from the last failure, so a single-endpoint
    setup reports exactly what went wrong with that endpoint, and an
    all-network outage reports ``Offline``.
    """

    def __init__(self, failures: Sequence[EndpointFailure]) -> None:
        """Initialize with the failures recorded during the cycle.

        Args:
            failures: Per-endpoint failures in the order they occurred
        """
        self.failures: tuple[EndpointFailure, ...] = tuple(failures)
        reason = self.failures[-1].reason if self.failures else STATUS_OFFLINE
        super().__init__(reason)


class ResolutionCancelled(RouterStatusError):
    """Raised when a cycle is abandoned before it completes."""

    def __init__(self, failures: Sequence[EndpointFailure] = ()) -> None:
        self.failures: tuple[EndpointFailure, ...] = tuple(failures)
        super().__init__(STATUS_CANCELLED)
