from typing import List
from pydantic import BaseModel, Field
from geojson_pydantic import Point

class Airport(BaseModel):
    """Static airport reference record linked to one AMeDAS station."""
    id: str
    name: str
    name_ja: str = Field(alias="nameJa")
    iata_code: str = Field(alias="iataCode")
    icao_code: str = Field(alias="icaoCode")
    amedas_station: str = Field(alias="amedasStation", description="AMeDAS station code used as the snapshot key")
    station_name: str = Field("", alias="stationName")
    region: str = "その他"
    location: Point

    class Config:
        populate_by_name = True
        from_attributes = True

class AirportRegion(BaseModel):
    """Airports grouped under one region."""
    region: str
    airports: List[Airport]
