from __future__ import annotations

from datetime import datetime, timedelta, timezone

import aiohttp
import pytest

from core.config import settings
from features.common.exceptions.observation_exceptions import UpstreamResolverError
from features.observations.services.latest_time_service import LatestTimeService

URL = "https://www.jma.go.jp/bosai/amedas/data/latest_time.txt"


@pytest.fixture
async def service():
    service = LatestTimeService(timeout=5)
    yield service
    await service.close()


def test_latest_time_url() -> None:
    assert settings.latest_time_url == URL


async def test_get_latest_time(service, mock_http) -> None:
    mock_http.get(URL, status=200, body="2025-07-06T15:20:00+09:00\n")

    latest = await service.get_latest_time()

    assert latest == datetime(2025, 7, 6, 15, 20, tzinfo=timezone(timedelta(hours=9)))


async def test_get_latest_time_http_error(service, mock_http) -> None:
    mock_http.get(URL, status=503)

    with pytest.raises(UpstreamResolverError, match="503"):
        await service.get_latest_time()


@pytest.mark.parametrize("body", ["", "not a time", "2025-07-06T15:20:00"])
async def test_get_latest_time_unusable_body(service, mock_http, body: str) -> None:
    mock_http.get(URL, status=200, body=body)

    with pytest.raises(UpstreamResolverError):
        await service.get_latest_time()


async def test_get_latest_time_connection_error(service, mock_http) -> None:
    mock_http.get(URL, exception=aiohttp.ClientConnectionError("unreachable"))

    with pytest.raises(UpstreamResolverError, match="unreachable"):
        await service.get_latest_time()


async def test_get_latest_time_unexpected_error(service, mock_http) -> None:
    mock_http.get(URL, exception=RuntimeError("boom"))

    with pytest.raises(UpstreamResolverError, match="boom"):
        await service.get_latest_time()
