from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime

from core.config import settings
from core.logging_config import setup_logging
from core.cache import init_cache

# Feature routes
from features.observations.routes.weather_routes import router as weather_router
from features.airports.routes.airport_routes import router as airport_router

# Services and clients
from features.observations.services.amedas_client import AmedasClient
from features.observations.services.latest_time_service import LatestTimeService
from features.airports.services.airport_service import AirportService
from features.wind.services.wind_observation_service import WindObservationService

setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    try:
        logger.info("🚀 Starting AMeDAS Wind API...")

        init_cache()

        airport_service = AirportService()
        airports = airport_service.get_airports()
        logger.info(f"✈️ {len(airports)} airports available")

        amedas_client = AmedasClient()
        latest_time_service = LatestTimeService()

        # Store services in app state
        app.state.airport_service = airport_service
        app.state.amedas_client = amedas_client
        app.state.latest_time_service = latest_time_service
        app.state.wind_service = WindObservationService(
            amedas_client=amedas_client,
            latest_time_service=latest_time_service
        )

        logger.info("✨ API startup complete - ready to serve requests")
        yield

    except Exception as e:
        logger.error(f"❌ Startup error: {str(e)}")
        raise
    finally:
        logger.info("🔄 Shutting down API...")
        if hasattr(app.state, "amedas_client"):
            await app.state.amedas_client.close()
        if hasattr(app.state, "latest_time_service"):
            await app.state.latest_time_service.close()
        logger.info("👋 API shutdown complete")

app = FastAPI(
    title="AMeDAS Wind API",
    description="Near-real-time surface wind at Japanese airports from JMA AMeDAS",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include feature routers
app.include_router(weather_router)
app.include_router(airport_router)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "time": datetime.now().isoformat()
    }

if __name__ == "__main__":
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", 5010))

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=True,
        log_level="info",
        workers=1
    )
