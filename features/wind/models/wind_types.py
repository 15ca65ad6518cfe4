from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
from enum import Enum

from features.airports.models.airport_types import Airport

class WindStrengthEnum(str, Enum):
    LIGHT = "light"
    MODERATE = "moderate"
    STRONG = "strong"
    SEVERE = "severe"

class ColorTokenEnum(str, Enum):
    GREEN = "#22c55e"
    YELLOW = "#eab308"
    ORANGE = "#f97316"
    RED = "#dc2626"

class WindStrengthModel(BaseModel):
    strength: WindStrengthEnum
    min_speed: float
    max_speed: float
    color: ColorTokenEnum
    level_ja: str

class WindPresentation(BaseModel):
    """Everything needed to draw the compass for one speed/bearing pair."""
    direction_label: str = Field(..., description="16-point compass label, e.g. NNE")
    direction_label_ja: str
    rotation_degrees: float = Field(..., description="Arrow rotation, 0 = up, clockwise positive")
    arrow_stroke_width: float
    arrow_head_radius: float
    color_token: ColorTokenEnum
    strength_class: WindStrengthEnum
    strength_label_ja: str

class WindSpeedBadge(BaseModel):
    """Speed classification shown even when there is no bearing to draw."""
    strength_class: WindStrengthEnum
    color_token: ColorTokenEnum
    strength_label_ja: str

class ObservationStatusEnum(str, Enum):
    READY = "ready"
    CALM = "calm"
    NO_DATA = "no_data"

class AirportWindResponse(BaseModel):
    """Current wind at one airport."""
    airport: Airport
    status: ObservationStatusEnum
    observed_at: datetime
    speed: Optional[float] = Field(None, description="Wind speed in m/s")
    bearing: Optional[float] = Field(None, description="Degrees clockwise from true N, direction wind blows from")
    calm: bool = False
    speed_badge: Optional[WindSpeedBadge] = None
    presentation: Optional[WindPresentation] = None
    message: Optional[str] = None

    class Config:
        from_attributes = True

class SelectionStateEnum(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    CALM = "calm"
    ERROR = "error"
    NO_DATA = "no_data"

class SelectionState(BaseModel):
    """Interaction-layer state for the currently selected airport."""
    state: SelectionStateEnum = SelectionStateEnum.IDLE
    generation: int = 0
    airport: Optional[Airport] = None
    wind: Optional[AirportWindResponse] = None
    message: Optional[str] = None

    @property
    def presentation(self) -> Optional[WindPresentation]:
        return self.wind.presentation if self.wind else None
