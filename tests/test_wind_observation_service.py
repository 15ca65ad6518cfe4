from __future__ import annotations

import pytest

from features.common.exceptions.observation_exceptions import (
    SnapshotFetchError,
    UpstreamResolverError,
)
from features.observations.models.observation_types import (
    FetchError,
    FetchErrorKind,
    Snapshot,
    SnapshotResult,
)
from features.wind.models.wind_types import ColorTokenEnum, ObservationStatusEnum, WindStrengthEnum
from features.wind.services.wind_observation_service import WindObservationService

from conftest import SNAPSHOT, StubAmedasClient, StubLatestTimeService


def make_service(result: SnapshotResult, resolver: StubLatestTimeService | None = None):
    client = StubAmedasClient(result)
    service = WindObservationService(
        amedas_client=client,
        latest_time_service=resolver or StubLatestTimeService(),
    )
    return service, client


async def test_airport_wind_ready(haneda) -> None:
    service, client = make_service(SnapshotResult.success(Snapshot("20250706152000", SNAPSHOT)))

    wind = await service.get_airport_wind(haneda)

    assert client.keys == ["20250706152000"]
    assert wind.status == ObservationStatusEnum.READY
    assert wind.speed == 6.2
    assert wind.bearing == 180.0
    assert wind.presentation.direction_label == "S"
    assert wind.presentation.rotation_degrees == 0
    assert wind.presentation.strength_class == WindStrengthEnum.STRONG


async def test_airport_wind_station_missing(airport_service) -> None:
    sendai = airport_service.get_airport("sendai")
    service, _ = make_service(SnapshotResult.success(Snapshot("20250706152000", SNAPSHOT)))

    wind = await service.get_airport_wind(sendai)

    assert wind.status == ObservationStatusEnum.NO_DATA
    assert wind.presentation is None
    assert "仙台空港" in wind.message


async def test_airport_wind_flagged_speed_is_no_data(airport_service) -> None:
    chitose = airport_service.get_airport("new-chitose")
    service, _ = make_service(SnapshotResult.success(Snapshot("20250706152000", SNAPSHOT)))

    wind = await service.get_airport_wind(chitose)

    assert wind.status == ObservationStatusEnum.NO_DATA
    assert wind.speed is None
    assert wind.bearing == 90.0


async def test_airport_wind_calm(airport_service) -> None:
    naha = airport_service.get_airport("naha")
    service, _ = make_service(SnapshotResult.success(Snapshot("20250706152000", SNAPSHOT)))

    wind = await service.get_airport_wind(naha)

    assert wind.status == ObservationStatusEnum.CALM
    assert wind.calm
    assert wind.speed == 0.3
    assert wind.presentation is None
    assert wind.speed_badge.strength_class == WindStrengthEnum.LIGHT
    assert wind.speed_badge.color_token == ColorTokenEnum.GREEN


async def test_airport_wind_fetch_failure_raises(haneda) -> None:
    error = FetchError(kind=FetchErrorKind.EMPTY_BODY, message="Empty response from JMA API")
    service, _ = make_service(SnapshotResult.failure(error))

    with pytest.raises(SnapshotFetchError) as exc_info:
        await service.get_airport_wind(haneda)

    assert exc_info.value.error.kind == FetchErrorKind.EMPTY_BODY


async def test_airport_wind_resolver_failure(haneda) -> None:
    resolver = StubLatestTimeService(error=UpstreamResolverError("Latest time not available"))
    service, client = make_service(
        SnapshotResult.success(Snapshot("20250706152000", SNAPSHOT)), resolver
    )

    with pytest.raises(UpstreamResolverError):
        await service.get_airport_wind(haneda)

    assert client.keys == []


async def test_airport_wind_non_finite_values_are_no_data(haneda) -> None:
    snapshot = Snapshot("20250706152000", {"44166": {"wind": [float("inf"), 0], "windDirection": [float("nan"), 0]}})
    service, _ = make_service(SnapshotResult.success(snapshot))

    wind = await service.get_airport_wind(haneda)

    assert wind.status == ObservationStatusEnum.NO_DATA
    assert wind.speed is None
    assert wind.bearing is None


async def test_airport_wind_ready_includes_speed_badge(haneda) -> None:
    service, _ = make_service(SnapshotResult.success(Snapshot("20250706152000", SNAPSHOT)))

    wind = await service.get_airport_wind(haneda)

    assert wind.speed_badge.strength_class == wind.presentation.strength_class
