import re

import pytest

from jiofiwidget.status.rules import (
    DEFAULT_RULES,
    ExtractionRule,
    detect_charging,
    extract_level,
)


@pytest.mark.parametrize(
    "body, expected_level, expected_rule",
    [
        ("Battery Level: 80%", 80, "battery_level"),
        ("battery level=7", 7, "battery_level"),
        ('<td id="batterylevel">65%</td>', 65, "battery_element"),
        ("<span name='batt_level'> 12 %</span>", 12, "battery_element"),
        ("capacity: 55", 55, "capacity"),
        ("CAPACITY=100", 100, "capacity"),
        ("<b>42 %</b>", 42, "percent"),
        ("Battery Level: 0", 0, "battery_level"),
    ],
)
def test_default_rules_extract_level(body: str, expected_level: int, expected_rule: str) -> None:
    found = extract_level(body)
    assert found is not None
    level, rule = found
    assert level == expected_level
    assert rule.name == expected_rule


def test_label_beats_generic_percent() -> None:
    body = "<p>Signal 55%</p><p>Battery Level: 80</p>"
    found = extract_level(body)
    assert found is not None
    assert found[0] == 80
    assert found[1].name == "battery_level"


def test_out_of_range_capture_falls_through_to_next_rule() -> None:
    body = "Battery Level: 500<br>capacity: 64"
    found = extract_level(body)
    assert found is not None
    assert found == (64, DEFAULT_RULES[2])


def test_out_of_range_everywhere_yields_nothing() -> None:
    assert extract_level("Battery Level: 100000 and 250%") is None


def test_no_match_yields_nothing() -> None:
    assert extract_level("<html><body>Welcome</body></html>") is None


def test_rule_only_considers_first_match() -> None:
    rule = ExtractionRule.compile("percent", r"(\d+)\s*%")
    assert rule.extract("900% then 40%") is None


def test_compile_requires_capture_group() -> None:
    with pytest.raises(ValueError):
        ExtractionRule.compile("broken", r"\d+%")


def test_compile_is_case_insensitive_by_default() -> None:
    rule = ExtractionRule.compile("level", r"level\s*(\d+)")
    assert rule.pattern.flags & re.IGNORECASE
    assert rule.extract("LEVEL 9") == 9


def test_custom_rule_order_is_respected() -> None:
    rules = (DEFAULT_RULES[3], DEFAULT_RULES[0])
    found = extract_level("Battery Level: 80, signal 30%", rules)
    assert found is not None
    assert found[0] == 30


@pytest.mark.parametrize(
    "body, expected",
    [
        ("Battery Status: Charging", True),
        ("CHARGER PLUGGED IN", True),
        ("status: plugged", True),
        ("Battery Status: Normal", False),
        ("", False),
    ],
)
def test_detect_charging(body: str, expected: bool) -> None:
    assert detect_charging(body) is expected


def test_detect_charging_with_custom_tokens() -> None:
    assert detect_charging("AC power", tokens=("ac power",)) is True
    assert detect_charging("Charging", tokens=("ac power",)) is False


def test_oversized_capture_is_rejected_not_raised() -> None:
    body = "Battery Level: " + "9" * 5000 + "<br>capacity: 64"
    assert DEFAULT_RULES[0].extract(body) is None
    assert extract_level(body) == (64, DEFAULT_RULES[2])


def test_leading_zeros_do_not_count_as_extra_digits() -> None:
    assert DEFAULT_RULES[0].extract("Battery Level: 0080") == 80
    assert DEFAULT_RULES[0].extract("Battery Level: 0000") == 0
