"""Battery level extraction rules for router status pages.

Router firmware exposes the battery level in several loosely
structured ways. Rules are tried in a fixed priority order, from
explicitly labelled fields down to a bare ``NN%`` token, and the first
rule that captures an integer between 0 and 100 decides the level.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Final

from jiofiwidget.constants import CHARGING_TOKENS

logger: Final = logging.getLogger(__name__)

MIN_LEVEL: Final = 0
MAX_LEVEL: Final = 100


@dataclass(frozen=True)
class ExtractionRule:
    """A named pattern whose first capture group is a battery level."""

    name: str
    pattern: re.Pattern[str]

    @classmethod
    def compile(cls, name: str, regex: str, flags: int = re.IGNORECASE) -> ExtractionRule:
        """Create a rule from a regular expression string.

        Raises:
            ValueError: If the expression has no capture group
        """
        pattern = re.compile(regex, flags)
        if pattern.groups < 1:
            raise ValueError(f"Rule {name!r} must capture the level in a group")
        return cls(name=name, pattern=pattern)

    def extract(self, body: str) -> int | None:
        """Return the level captured by this rule, or None.

        Only the first match is considered. A capture outside the
        0-100 range is rejected so the caller can fall through to the
        next rule.
        """
        match = self.pattern.search(body)
        if match is None:
            return None

        digits = match.group(1).lstrip("0") or "0"
        if len(digits) > len(str(MAX_LEVEL)):
            logger.debug("Rule %s rejected %d-digit capture", self.name, len(digits))
            return None

        value = int(digits)
        if not MIN_LEVEL <= value <= MAX_LEVEL:
            logger.debug("Rule %s rejected out-of-range capture %d", self.name, value)
            return None
        return value


DEFAULT_RULES: Final[tuple[ExtractionRule, ...]] = (
    ExtractionRule.compile("battery_level", r"battery\s*level\s*[:=]\s*(\d+)"),
    # JioFi markup, e.g. <td id="batterylevel">80%</td>
    ExtractionRule.compile(
        "battery_element",
        r"(?:id|name)\s*=\s*[\"']?(?:battery_?level|batt_level)[\"']?[^>]*>\s*(\d+)",
    ),
    ExtractionRule.compile("capacity", r"capacity\s*[:=]\s*(\d+)"),
    ExtractionRule.compile("percent", r"(\d+)\s*%"),
)


def extract_level(
    body: str, rules: Sequence[ExtractionRule] = DEFAULT_RULES
) -> tuple[int, ExtractionRule] | None:
    """Apply ``rules`` in order and return the first valid level.

    Args:
        body: Response body of a status page
        rules: Extraction rules in priority order

    Returns:
        ``(level, rule)`` for the first rule yielding a level in
        0-100, or None when no rule does
    """
    for rule in rules:
        level = rule.extract(body)
        if level is not None:
            return level, rule
    return None


def detect_charging(body: str, tokens: Iterable[str] = CHARGING_TOKENS) -> bool:
    """Return True if any charging token appears anywhere in ``body``."""
    lowered = body.lower()
    return any(token.lower() in lowered for token in tokens)
