import logging

from features.airports.models.airport_types import Airport
from features.common.exceptions.observation_exceptions import SnapshotFetchError
from features.observations.services.amedas_client import AmedasClient
from features.observations.services.latest_time_service import LatestTimeService
from features.observations.services.station_extractor import extract_station
from features.observations.utils.timestamp_codec import encode_timestamp
from features.wind.models.wind_types import AirportWindResponse, ObservationStatusEnum
from features.wind.services.wind_presenter import present_wind, speed_badge

logger = logging.getLogger(__name__)

class WindObservationService:
    """Runs the latest-time -> snapshot -> station -> presentation chain."""

    def __init__(
        self,
        amedas_client: AmedasClient,
        latest_time_service: LatestTimeService
    ):
        self.amedas_client = amedas_client
        self.latest_time_service = latest_time_service

    async def get_airport_wind(self, airport: Airport) -> AirportWindResponse:
        """Get the current wind presentation for one airport.

        Raises:
            UpstreamResolverError: latest publication time unavailable
            SnapshotFetchError: snapshot could not be fetched or parsed
        """
        latest_time = await self.latest_time_service.get_latest_time()
        provider_key = encode_timestamp(latest_time)

        result = await self.amedas_client.fetch_snapshot(provider_key)
        if not result.ok:
            raise SnapshotFetchError(result.error)

        observation = extract_station(result.snapshot, airport.amedas_station)
        if observation is None:
            logger.info(f"🔍 No observation for {airport.id} ({airport.amedas_station}) at {provider_key}")
            return AirportWindResponse(
                airport=airport,
                status=ObservationStatusEnum.NO_DATA,
                observed_at=latest_time,
                message=f"No observation available for {airport.name_ja}"
            )

        speed = observation.wind_speed
        bearing = observation.wind_bearing_degrees
        calm = observation.is_calm

        if calm and speed is not None:
            return AirportWindResponse(
                airport=airport,
                status=ObservationStatusEnum.CALM,
                observed_at=latest_time,
                speed=speed,
                calm=True,
                speed_badge=speed_badge(speed),
                message="Calm"
            )

        if speed is None or bearing is None:
            return AirportWindResponse(
                airport=airport,
                status=ObservationStatusEnum.NO_DATA,
                observed_at=latest_time,
                speed=speed,
                bearing=bearing,
                calm=calm,
                message="No wind data"
            )

        return AirportWindResponse(
            airport=airport,
            status=ObservationStatusEnum.READY,
            observed_at=latest_time,
            speed=speed,
            bearing=bearing,
            speed_badge=speed_badge(speed),
            presentation=present_wind(speed, bearing)
        )
