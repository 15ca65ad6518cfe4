from typing import List
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from features.airports.models.airport_types import Airport, AirportRegion
from features.airports.services.airport_service import AirportService
from features.common.exceptions.observation_exceptions import ObservationError, SnapshotFetchError
from features.wind.models.wind_types import AirportWindResponse
from features.wind.services.wind_observation_service import WindObservationService
from core.cache import cached_static
import logging

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/airports",
    tags=["Airports"],
    responses={
        404: {"description": "Airport not found"}
    }
)

def get_service(request: Request) -> AirportService:
    """Dependency to get the AirportService instance."""
    return request.app.state.airport_service

def get_wind_service(request: Request) -> WindObservationService:
    """Dependency to get the WindObservationService instance."""
    return request.app.state.wind_service

@router.get(
    "",
    response_model=List[Airport],
    summary="Get all airports",
    description="Returns every airport with its linked AMeDAS station"
)
@cached_static("airports")
async def get_airports(
    service: AirportService = Depends(get_service)
):
    """Get all airports."""
    return service.get_airports()

@router.get(
    "/regions",
    response_model=List[AirportRegion],
    summary="Get airports grouped by region",
    description="Returns airports grouped by region, north to south"
)
@cached_static("airport_regions")
async def get_airport_regions(
    service: AirportService = Depends(get_service)
):
    """Get airports grouped by region."""
    return service.get_airports_by_region()

@router.get(
    "/default",
    response_model=Airport,
    summary="Get the default airport"
)
async def get_default_airport(
    service: AirportService = Depends(get_service)
):
    """Get the airport selected when the map first loads."""
    return service.get_default_airport()

@router.get(
    "/{airport_id}",
    response_model=Airport,
    summary="Get one airport"
)
async def get_airport(
    airport_id: str,
    service: AirportService = Depends(get_service)
):
    """Get a single airport by ID."""
    return service.get_airport(airport_id)

@router.get(
    "/{airport_id}/wind",
    response_model=AirportWindResponse,
    summary="Get current wind at an airport",
    description="Returns the latest AMeDAS wind observation for the airport with compass presentation attributes"
)
async def get_airport_wind(
    airport_id: str,
    service: AirportService = Depends(get_service),
    wind_service: WindObservationService = Depends(get_wind_service)
):
    """Get current wind for a specific airport."""
    airport = service.get_airport(airport_id)
    try:
        return await wind_service.get_airport_wind(airport)
    except SnapshotFetchError as e:
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to fetch AMeDAS data", "details": e.error.message}
        )
    except ObservationError as e:
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to fetch weather data", "details": str(e)}
        )
