import logging
from typing import Optional

from features.observations.models.observation_types import Snapshot, StationObservation

logger = logging.getLogger(__name__)

def extract_station(snapshot: Snapshot, station_code: str) -> Optional[StationObservation]:
    """Look up one station's record in a snapshot.

    A missing station is a normal outcome (the station did not report for
    this time), so it returns None rather than raising.
    """
    record = snapshot.get(station_code)
    if record is None:
        logger.debug(f"Station {station_code} not present in snapshot {snapshot.provider_key}")
        return None
    return StationObservation(record)
