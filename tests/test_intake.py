"""Tests for the garment intake fallback."""

from __future__ import annotations

import pytest
import pytest_mock
from PIL import Image

from cutout.removebg.client import RemoveBgClient
from cutout.removebg.errors import TransportError
from cutout.removebg.outcome import Failure, Success
from cutout.services.intake import CutoutIntakeService


@pytest.mark.asyncio
async def test_prepare_garment_uses_cutout(mocker: pytest_mock.MockerFixture) -> None:
    cutout = Image.new("RGBA", (10, 10))
    client = mocker.create_autospec(RemoveBgClient, instance=True)
    client.remove_background = mocker.AsyncMock(return_value=Success(image=cutout, data=b"png"))
    original = Image.new("RGB", (10, 10))

    result = await CutoutIntakeService(client).prepare_garment(original)

    assert result.is_cutout
    assert result.image is cutout
    assert result.error is None
    client.remove_background.assert_awaited_once_with(original)


@pytest.mark.asyncio
async def test_prepare_garment_falls_back_to_original(mocker: pytest_mock.MockerFixture) -> None:
    error = TransportError("remove.bg returned HTTP 500", status_code=500)
    client = mocker.create_autospec(RemoveBgClient, instance=True)
    client.remove_background = mocker.AsyncMock(return_value=Failure(error))
    original = Image.new("RGB", (10, 10))

    result = await CutoutIntakeService(client).prepare_garment(original)

    assert not result.is_cutout
    assert result.image is original
    assert result.error is error
