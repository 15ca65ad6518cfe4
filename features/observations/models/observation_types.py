import math
from enum import Enum
from typing import Any, ClassVar, Dict, FrozenSet, Optional
from pydantic import BaseModel, Field

from core.config import settings

class ObservationTuple(BaseModel):
    """One measured quantity plus the provider's quality flag.

    AMeDAS encodes every element as ``[value, flag]``. Only flags listed in
    ``VALID_QUALITY_FLAGS`` count as a usable reading; anything else is
    treated as missing regardless of the literal value.
    """
    value: Optional[float] = None
    quality_flag: int

    VALID_QUALITY_FLAGS: ClassVar[FrozenSet[int]] = frozenset(settings.valid_quality_flags)

    @classmethod
    def from_raw(cls, raw: Any) -> Optional["ObservationTuple"]:
        """Build from a raw ``[value, flag]`` pair, or None if misshaped."""
        if not isinstance(raw, (list, tuple)) or len(raw) < 2:
            return None
        value, flag = raw[0], raw[1]
        if isinstance(flag, bool) or not isinstance(flag, int):
            return None
        if value is not None and (isinstance(value, bool) or not isinstance(value, (int, float))):
            return None
        return cls(value=value, quality_flag=flag)

    @property
    def is_valid(self) -> bool:
        return (
            self.quality_flag in self.VALID_QUALITY_FLAGS
            and self.value is not None
            and math.isfinite(self.value)
        )

    @property
    def usable_value(self) -> Optional[float]:
        return self.value if self.is_valid else None

class StationObservation:
    """Loosely-typed record for one station in a snapshot.

    Only ``wind`` and ``windDirection`` are read; every other field is left
    untouched in ``raw``.
    """

    # AMeDAS 16-point wind direction code: 0 = calm, 1 = NNE ... 16 = N
    CALM_DIRECTION_CODE: ClassVar[int] = 0
    DIRECTION_CODE_STEP: ClassVar[float] = 22.5

    def __init__(self, raw: Dict[str, Any]):
        self.raw = raw

    def _element(self, name: str) -> Optional[ObservationTuple]:
        return ObservationTuple.from_raw(self.raw.get(name))

    @property
    def wind(self) -> Optional[ObservationTuple]:
        return self._element("wind")

    @property
    def wind_direction(self) -> Optional[ObservationTuple]:
        return self._element("windDirection")

    @property
    def wind_speed(self) -> Optional[float]:
        """Wind speed in m/s, or None when missing or flagged."""
        wind = self.wind
        return wind.usable_value if wind else None

    @property
    def wind_bearing_degrees(self) -> Optional[float]:
        """Bearing the wind blows from, in degrees clockwise from North.

        Calm and out-of-range direction codes have no bearing.
        """
        direction = self.wind_direction
        code = direction.usable_value if direction else None
        if code is None or code != int(code):
            return None
        code = int(code)
        if code <= self.CALM_DIRECTION_CODE or code > 16:
            return None
        return code * self.DIRECTION_CODE_STEP

    @property
    def is_calm(self) -> bool:
        direction = self.wind_direction
        return direction is not None and direction.usable_value == self.CALM_DIRECTION_CODE

    def __repr__(self) -> str:
        return f"StationObservation({self.raw!r})"

class Snapshot:
    """One provider-published map of station code -> record.

    The parsed payload is kept verbatim; nothing is validated until a
    station is read.
    """

    def __init__(self, provider_key: str, data: Any):
        self.provider_key = provider_key
        self.data = data

    def get(self, station_code: str) -> Optional[Dict[str, Any]]:
        if not isinstance(self.data, dict):
            return None
        record = self.data.get(station_code)
        return record if isinstance(record, dict) else None

    def __len__(self) -> int:
        return len(self.data) if isinstance(self.data, dict) else 0

class FetchErrorKind(str, Enum):
    HTTP_STATUS = "http_status"
    EMPTY_BODY = "empty_body"
    MALFORMED_PAYLOAD = "malformed_payload"
    NETWORK = "network"

class FetchError(BaseModel):
    """Structured snapshot fetch failure."""
    kind: FetchErrorKind
    message: str
    status: Optional[int] = Field(None, description="HTTP status for http_status failures")
    raw_prefix: Optional[str] = Field(None, description="Bounded prefix of an unparseable body")

class SnapshotResult:
    """Either a snapshot or a fetch error, never both."""

    def __init__(self, snapshot: Optional[Snapshot] = None, error: Optional[FetchError] = None):
        if (snapshot is None) == (error is None):
            raise ValueError("SnapshotResult needs exactly one of snapshot or error")
        self.snapshot = snapshot
        self.error = error

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, snapshot: Snapshot) -> "SnapshotResult":
        return cls(snapshot=snapshot)

    @classmethod
    def failure(cls, error: FetchError) -> "SnapshotResult":
        return cls(error=error)
