import pytest
from pydantic import ValidationError

from jiofiwidget.common.enums import FailureKind
from jiofiwidget.status.models import EndpointFailure, Reading


def test_ok_reading_fields() -> None:
    reading = Reading.ok(85, charging=True, source="http://router/")
    assert reading.success is True
    assert reading.level == 85
    assert reading.charging is True
    assert reading.error is None
    assert reading.summary == "85% (charging)"


def test_failed_reading_fields() -> None:
    failure = EndpointFailure(url="http://router/", kind=FailureKind.NETWORK, reason="Offline")
    reading = Reading.failed("Offline", attempts=(failure,))
    assert reading.success is False
    assert reading.level is None
    assert reading.charging is False
    assert reading.summary == "Offline"
    assert reading.attempts == (failure,)


@pytest.mark.parametrize(
    "fields",
    [
        {"success": True},
        {"success": True, "level": 50, "error": "Offline"},
        {"success": False},
        {"success": False, "error": "Offline", "level": 10},
        {"success": False, "error": "Offline", "charging": True},
        {"success": True, "level": 101},
        {"success": True, "level": -1},
    ],
)
def test_reading_invariants(fields: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        Reading(**fields)  # type: ignore[arg-type]


def test_reading_is_frozen() -> None:
    reading = Reading.ok(10)
    with pytest.raises(ValidationError):
        reading.level = 20  # type: ignore[misc]


def test_readings_compare_by_value() -> None:
    assert Reading.ok(40, charging=False) == Reading.ok(40, charging=False)
    assert Reading.ok(40) != Reading.ok(41)


def test_reading_json_round_trip_keeps_kind() -> None:
    failure = EndpointFailure(url="http://router/", kind=FailureKind.PARSE, reason="Parse Error")
    reading = Reading.failed("Parse Error", attempts=(failure,))
    dumped = reading.model_dump(mode="json")
    assert dumped["attempts"][0]["kind"] == "parse"
    assert Reading.model_validate(dumped) == reading
