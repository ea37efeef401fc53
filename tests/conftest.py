from collections.abc import Callable, Generator
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from jiofiwidget.settings import UserSettings
from jiofiwidget.status.resolver import ResolverConfig, StatusResolver

JIOFI_PAGE = """\
<html><body>
<table>
  <tr><td>Battery Level: 80%</td></tr>
  <tr><td>Battery Status: Charging</td></tr>
</table>
</body></html>
"""


@pytest.fixture
def jiofi_page() -> str:
    return JIOFI_PAGE


@pytest.fixture
def make_response() -> Callable[..., Mock]:
    def _make(status_code: int = 200, text: str = "") -> Mock:
        resp = Mock()
        resp.status_code = status_code
        resp.text = text
        return resp

    return _make


@pytest.fixture
def mock_get() -> Generator[Mock, None, None]:
    with patch("jiofiwidget.status.resolver.requests.get") as get:
        yield get


@pytest.fixture
def two_endpoints() -> ResolverConfig:
    return ResolverConfig(endpoints=("http://first.local/", "http://second.local/"))


@pytest.fixture
def resolver(two_endpoints: ResolverConfig) -> StatusResolver:
    return StatusResolver(two_endpoints)


@pytest.fixture
def settings(tmp_path: Path) -> UserSettings:
    return UserSettings(
        refresh_minutes=15,
        connect_timeout=2.0,
        read_timeout=4.0,
        widget_width=320,
        widget_height=120,
        output_dir=tmp_path / "widget",
        time_format="%H:%M",
        timezone="UTC",
    )
