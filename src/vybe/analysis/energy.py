"""
Energy expenditure and distance estimates.

Step-based estimates use an average step length of 0.762 m for calories and a
height-derived stride (41.5% of height) for distance. Timed workouts use a
per-type MET (Metabolic Equivalent of Task) factor.
"""
from dataclasses import dataclass
from typing import Dict

from vybe.analysis.rounding import round_half_up

_KM_PER_STEP = 0.000762
_STRIDE_HEIGHT_RATIO = 0.415

DEFAULT_WEIGHT_KG = 70.0
DEFAULT_HEIGHT_CM = 170.0
DEFAULT_STEP_MET = 3.5


@dataclass(frozen=True)
class ActivityType:
    key: str
    met: float
    label: str


ACTIVITY_TYPES: Dict[str, ActivityType] = {
    "walking": ActivityType("walking", 3.5, "Walking"),
    "running": ActivityType("running", 8.0, "Running"),
    "cycling": ActivityType("cycling", 6.0, "Cycling"),
    "workout": ActivityType("workout", 7.0, "Workout"),
}

_FALLBACK_MET = 5.0
_FALLBACK_LABEL = "Activity"

# Timed-session conventions shared by manual entry and the live workout timer
_CALORIE_MULTIPLIER = 1.2
_KM_PER_MINUTE_CYCLING = 0.4
_KM_PER_MINUTE_ON_FOOT = 0.08


def activity_type_info(activity_type: str) -> ActivityType:
    """MET and display label for an activity type; unknown types get a 5.0 MET."""
    return ACTIVITY_TYPES.get(
        activity_type, ActivityType(activity_type, _FALLBACK_MET, _FALLBACK_LABEL)
    )


def calories_from_steps(
    steps: int,
    weight_kg: float = DEFAULT_WEIGHT_KG,
    met: float = DEFAULT_STEP_MET,
) -> int:
    """
    Estimate calories burned walking a number of steps.

    calories = steps × 0.000762 km/step × weight_kg × MET / 10

    Negative steps are clamped to 0. Non-positive weight or MET fall back to
    the defaults, so the result is always a non-negative integer.
    """
    steps = max(0, steps or 0)
    if not weight_kg or weight_kg <= 0:
        weight_kg = DEFAULT_WEIGHT_KG
    if not met or met <= 0:
        met = DEFAULT_STEP_MET
    return round_half_up(steps * _KM_PER_STEP * weight_kg * met / 10)


def distance_from_steps(steps: int, height_cm: float = DEFAULT_HEIGHT_CM) -> float:
    """Distance in km (2 decimals) from a step count and a height-based stride."""
    steps = max(0, steps or 0)
    if not height_cm or height_cm <= 0:
        height_cm = DEFAULT_HEIGHT_CM
    stride_m = height_cm * _STRIDE_HEIGHT_RATIO / 100
    return round(steps * stride_m / 1000, 2)


def workout_calories(duration_minutes: int, activity_type: str) -> int:
    """calories = minutes × MET × 1.2"""
    met = activity_type_info(activity_type).met
    return round_half_up(max(0, duration_minutes) * met * _CALORIE_MULTIPLIER)


def workout_distance(duration_minutes: int, activity_type: str) -> float:
    """Rough distance in km (1 decimal): 0.4 km/min cycling, 0.08 km/min otherwise."""
    per_minute = (
        _KM_PER_MINUTE_CYCLING if activity_type == "cycling" else _KM_PER_MINUTE_ON_FOOT
    )
    return round(max(0, duration_minutes) * per_minute, 1)


def classify_activity(magnitude: float, speed_kmh: float = 0.0) -> ActivityType:
    """
    Coarse activity classification from acceleration magnitude (g) and speed.

    sitting < 1.2 g; walking below 3 g or 5 km/h; running below 6 g or
    12 km/h; cycling above 12 km/h; otherwise a generic workout.
    """
    if magnitude < 1.2:
        return ActivityType("sitting", 1.3, "Sitting")
    if magnitude < 3.0 or speed_kmh < 5:
        return ACTIVITY_TYPES["walking"]
    if magnitude < 6.0 or speed_kmh < 12:
        return ACTIVITY_TYPES["running"]
    if speed_kmh > 12:
        return ACTIVITY_TYPES["cycling"]
    return ACTIVITY_TYPES["workout"]
