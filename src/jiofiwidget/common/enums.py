from enum import Enum


class FailureKind(Enum):
    """Category of a failed endpoint attempt.

    Every kind is non-fatal for the cycle: the resolver moves on to the
    next endpoint regardless of which kind of failure occurred.
    """

    NETWORK = "network"  # connect/read timeout, DNS, refused, I/O fault
    HTTP_STATUS = "http_status"  # any response other than 200
    PARSE = "parse"  # 200 response without a usable battery level


class ProgressTint(Enum):
    """Colour applied to the widget's progress bar."""

    CHARGING = "#4caf50"
    IDLE = "#d3d3d3"
