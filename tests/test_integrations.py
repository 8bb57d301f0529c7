"""Tests for external integration connectivity helpers."""

from __future__ import annotations

import httpx
import pytest
import pytest_mock

from cutout.config.settings import get_settings
from cutout.integrations.checks import check_removebg, run_all_checks


@pytest.fixture(autouse=True)
def _setup_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REMOVE_BG_API_KEY", "test-removebg")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.mark.asyncio
async def test_check_removebg_success(mocker: pytest_mock.MockerFixture) -> None:
    client_mock = mocker.patch("cutout.integrations.checks.RemoveBgClient", autospec=True)
    instance = client_mock.from_settings.return_value
    instance.ping = mocker.AsyncMock(return_value=True)
    instance.close = mocker.AsyncMock(return_value=None)

    result = await check_removebg()

    assert result.success
    instance.ping.assert_awaited_once()
    instance.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_check_removebg_failure(mocker: pytest_mock.MockerFixture) -> None:
    client_mock = mocker.patch("cutout.integrations.checks.RemoveBgClient", autospec=True)
    instance = client_mock.from_settings.return_value
    instance.ping = mocker.AsyncMock(return_value=False)
    instance.close = mocker.AsyncMock(return_value=None)

    results = await run_all_checks()

    assert len(results) == 1
    assert not results[0].success
    assert "non-success" in results[0].message.lower()


@pytest.mark.asyncio
async def test_check_removebg_reports_network_error(mocker: pytest_mock.MockerFixture) -> None:
    client_mock = mocker.patch("cutout.integrations.checks.RemoveBgClient", autospec=True)
    instance = client_mock.from_settings.return_value
    instance.ping = mocker.AsyncMock(side_effect=httpx.ConnectError("connection refused"))
    instance.close = mocker.AsyncMock(return_value=None)

    result = await check_removebg()

    assert not result.success
    assert result.message == "connection refused"
    instance.close.assert_awaited_once()
