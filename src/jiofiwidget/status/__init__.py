"""Status package - router status resolver, extraction rules, and errors."""

from .errors import (
    AllEndpointsExhausted,
    HttpStatusError,
    NetworkError,
    ParseError,
    ResolutionCancelled,
    RouterStatusError,
)
from .models import EndpointFailure, Reading
from .resolver import ResolverConfig, StatusResolver
from .rules import DEFAULT_RULES, ExtractionRule, detect_charging, extract_level

__all__ = [
    "DEFAULT_RULES",
    "AllEndpointsExhausted",
    "EndpointFailure",
    "ExtractionRule",
    "HttpStatusError",
    "NetworkError",
    "ParseError",
    "Reading",
    "ResolutionCancelled",
    "ResolverConfig",
    "RouterStatusError",
    "StatusResolver",
    "detect_charging",
    "extract_level",
]
