import json
import logging
from typing import Dict, Optional, List
from fastapi import HTTPException
from pathlib import Path

from features.airports.models.airport_types import Airport, AirportRegion
from core.config import settings

logger = logging.getLogger(__name__)

# Display order for the region selector, north to south
REGION_ORDER = ["北海道", "東北", "関東", "中部", "関西", "中国", "四国", "九州", "沖縄", "その他"]

PROJECT_ROOT = Path(__file__).resolve().parents[3]

class AirportService:
    def __init__(self, airports_file: Optional[Path] = None):
        path = Path(airports_file or settings.airports_file)
        self.airports_file = path if path.is_absolute() else PROJECT_ROOT / path
        self._airports: Optional[List[Airport]] = None

    def _load_airports(self) -> List[Airport]:
        """Load airport reference data from JSON file."""
        if self._airports is not None:
            return self._airports

        try:
            with open(self.airports_file, encoding="utf-8") as f:
                airports_data = json.load(f)
            self._airports = [Airport.model_validate(airport) for airport in airports_data]
            logger.info(f"✈️ Loaded {len(self._airports)} airports from {self.airports_file}")
            return self._airports
        except Exception as e:
            logger.error(f"❌ Error loading airport data: {str(e)}")
            raise HTTPException(
                status_code=500,
                detail=f"Error loading airport data: {str(e)}"
            )

    def get_airports(self) -> List[Airport]:
        return self._load_airports()

    def get_airport(self, airport_id: str) -> Airport:
        """Get airport by ID."""
        airports = self._load_airports()
        airport = next(
            (a for a in airports if a.id == airport_id),
            None
        )

        if not airport:
            raise HTTPException(
                status_code=404,
                detail=f"Airport {airport_id} not found"
            )
        return airport

    def get_default_airport(self) -> Airport:
        return self.get_airport(settings.default_airport_id)

    def get_airports_by_region(self) -> List[AirportRegion]:
        """Group airports by region in north-to-south order."""
        regions: Dict[str, List[Airport]] = {}
        for airport in self._load_airports():
            region = airport.region if airport.region in REGION_ORDER else "その他"
            regions.setdefault(region, []).append(airport)

        return [
            AirportRegion(region=region, airports=regions[region])
            for region in REGION_ORDER
            if region in regions
        ]
