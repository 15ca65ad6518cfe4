from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from features.common.exceptions.observation_exceptions import ObservationError
from features.observations.services.amedas_client import AmedasClient
from features.observations.services.latest_time_service import LatestTimeService
from features.observations.utils.timestamp_codec import encode_timestamp
import logging

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/weather",
    tags=["Weather"],
    responses={
        500: {"description": "Upstream AMeDAS data unavailable"}
    }
)

def get_amedas_client(request: Request) -> AmedasClient:
    """Dependency to get the AmedasClient instance."""
    return request.app.state.amedas_client

def get_latest_time_service(request: Request) -> LatestTimeService:
    """Dependency to get the LatestTimeService instance."""
    return request.app.state.latest_time_service

@router.get(
    "",
    summary="Get latest AMeDAS observation time",
    description="Returns the most recent time for which JMA has published AMeDAS data"
)
async def get_latest_time(
    service: LatestTimeService = Depends(get_latest_time_service)
):
    """Get the latest published observation time."""
    try:
        latest_time = await service.get_latest_time()
    except ObservationError as e:
        logger.error(f"❌ Error resolving latest time: {str(e)}")
        return JSONResponse(status_code=500, content={"error": str(e)})
    return {"latestTime": latest_time.isoformat()}

@router.get(
    "/amedas/{timestamp}",
    summary="Get AMeDAS snapshot",
    description="Returns the raw AMeDAS map snapshot (station code -> observations) for an ISO-8601 timestamp"
)
async def get_amedas_snapshot(
    timestamp: str,
    client: AmedasClient = Depends(get_amedas_client)
):
    """Proxy one AMeDAS snapshot, passing the provider JSON through unchanged."""
    try:
        provider_key = encode_timestamp(timestamp)
    except ObservationError as e:
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to fetch AMeDAS data", "details": str(e)}
        )

    result = await client.fetch_snapshot(provider_key)
    if not result.ok:
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to fetch AMeDAS data", "details": result.error.message}
        )
    return JSONResponse(content=result.snapshot.data)
