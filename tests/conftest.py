from __future__ import annotations

from datetime import datetime

import pytest
from aioresponses import aioresponses as aioresponses_mocker

from core.cache import init_cache
from features.airports.services.airport_service import AirportService
from features.observations.models.observation_types import SnapshotResult
from features.observations.utils.timestamp_codec import JST


SNAPSHOT = {
    "44166": {
        "temp": [28.1, 0],
        "wind": [6.2, 0],
        "windDirection": [8, 0],
        "humidity": [70, 0],
    },
    "91197": {
        "wind": [0.3, 0],
        "windDirection": [0, 0],
    },
    "14136": {
        "wind": [3.1, 5],
        "windDirection": [4, 0],
    },
}


class StubLatestTimeService:
    def __init__(self, latest: datetime | None = None, error: Exception | None = None) -> None:
        self.latest = latest or datetime(2025, 7, 6, 15, 20, tzinfo=JST)
        self.error = error
        self.calls = 0

    async def get_latest_time(self) -> datetime:
        self.calls += 1
        if self.error:
            raise self.error
        return self.latest


class StubAmedasClient:
    def __init__(self, result: SnapshotResult) -> None:
        self.result = result
        self.keys: list[str] = []

    async def fetch_snapshot(self, provider_key: str) -> SnapshotResult:
        self.keys.append(provider_key)
        return self.result


@pytest.fixture
def mock_http():
    with aioresponses_mocker() as mock:
        yield mock


@pytest.fixture(scope="session", autouse=True)
def route_cache():
    init_cache()


@pytest.fixture
def airport_service() -> AirportService:
    return AirportService()


@pytest.fixture
def haneda(airport_service):
    return airport_service.get_airport("haneda")
