from features.wind.models.wind_types import WindPresentation, WindSpeedBadge
from features.wind.models.wind_categories import WindStrength, CompassPoint

# Arrow geometry bounds, in SVG user units
STROKE_WIDTH_RANGE = (2.0, 6.0)
HEAD_RADIUS_RANGE = (3.0, 6.0)
HEAD_RADIUS_SCALE = 0.8

def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))

def direction_label(bearing_degrees: float) -> str:
    """16-point compass label for a meteorological bearing."""
    return CompassPoint.from_degrees(bearing_degrees).label

def arrow_rotation(bearing_degrees: float) -> float:
    """Rotation for an arrow drawn 'up' at 0 degrees.

    The bearing is where the wind comes from, so the arrow points the
    opposite way.
    """
    return bearing_degrees - 180

def speed_badge(speed: float) -> WindSpeedBadge:
    """Strength class and colour for a speed alone."""
    strength = WindStrength.from_speed(speed)
    return WindSpeedBadge(
        strength_class=strength.strength,
        color_token=strength.color,
        strength_label_ja=strength.level_ja
    )

def present_wind(speed: float, bearing_degrees: float) -> WindPresentation:
    """Derive all display attributes from a present speed (m/s) and bearing."""
    point = CompassPoint.from_degrees(bearing_degrees)
    strength = WindStrength.from_speed(speed)

    return WindPresentation(
        direction_label=point.label,
        direction_label_ja=point.label_ja,
        rotation_degrees=arrow_rotation(bearing_degrees),
        arrow_stroke_width=clamp(speed, *STROKE_WIDTH_RANGE),
        arrow_head_radius=clamp(speed * HEAD_RADIUS_SCALE, *HEAD_RADIUS_RANGE),
        color_token=strength.color,
        strength_class=strength.strength,
        strength_label_ja=strength.level_ja
    )
