from enum import Enum
from .wind_types import WindStrengthEnum, ColorTokenEnum, WindStrengthModel

class WindStrength(Enum):
    """Speed buckets in m/s, lower bound inclusive."""
    LIGHT = WindStrengthModel(strength=WindStrengthEnum.LIGHT, min_speed=0, max_speed=2, color=ColorTokenEnum.GREEN, level_ja="微風")
    MODERATE = WindStrengthModel(strength=WindStrengthEnum.MODERATE, min_speed=2, max_speed=5, color=ColorTokenEnum.YELLOW, level_ja="弱風")
    STRONG = WindStrengthModel(strength=WindStrengthEnum.STRONG, min_speed=5, max_speed=8, color=ColorTokenEnum.ORANGE, level_ja="中風")
    SEVERE = WindStrengthModel(strength=WindStrengthEnum.SEVERE, min_speed=8, max_speed=float('inf'), color=ColorTokenEnum.RED, level_ja="強風")

    def __init__(self, model: WindStrengthModel):
        self.min_speed = model.min_speed
        self.max_speed = model.max_speed
        self.color = model.color
        self.level_ja = model.level_ja
        self.strength = model.strength

    @classmethod
    def from_speed(cls, speed: float) -> 'WindStrength':
        for category in cls:
            if category.min_speed <= speed < category.max_speed:
                return category
        return cls.SEVERE if speed >= cls.SEVERE.min_speed else cls.LIGHT

class CompassPoint(Enum):
    """16 compass points, in clockwise order starting at North."""
    N = ("N", "北")
    NNE = ("NNE", "北北東")
    NE = ("NE", "北東")
    ENE = ("ENE", "東北東")
    E = ("E", "東")
    ESE = ("ESE", "東南東")
    SE = ("SE", "南東")
    SSE = ("SSE", "南南東")
    S = ("S", "南")
    SSW = ("SSW", "南南西")
    SW = ("SW", "南西")
    WSW = ("WSW", "西南西")
    W = ("W", "西")
    WNW = ("WNW", "西北西")
    NW = ("NW", "北西")
    NNW = ("NNW", "北北西")

    def __init__(self, label: str, label_ja: str):
        self.label = label
        self.label_ja = label_ja

    @classmethod
    def from_degrees(cls, degrees: float) -> 'CompassPoint':
        points = list(cls)
        return points[round(degrees / 22.5) % len(points)]
