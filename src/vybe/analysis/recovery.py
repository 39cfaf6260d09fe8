"""
Sleep quality and recovery scoring.

Recovery is a WHOOP-style readiness blend:

    recovery = quality × 0.4 + rhr_score × 0.3 + hrv_score × 0.3

Without a wearable, resting HR and HRV stay at population defaults (65 bpm,
45 ms), so recovery is driven by sleep quality alone and is monotonic in it.
"""
from typing import Optional

from vybe.analysis.rounding import clamp, round_half_up

# Manual sleep log: categorical choice -> quality value
SLEEP_QUALITY_VALUES = {
    "poor": 40,
    "fair": 60,
    "good": 75,
    "great": 90,
}
_DEFAULT_QUALITY = 70

DEFAULT_RESTING_HR = 65
DEFAULT_HRV_MS = 45
_HRV_REFERENCE_MS = 80


def quality_from_choice(choice: Optional[str]) -> int:
    """Map a poor/fair/good/great choice to a 0-100 quality; anything else -> 70."""
    return SLEEP_QUALITY_VALUES.get((choice or "").lower(), _DEFAULT_QUALITY)


def recovery_score(
    quality: float,
    resting_hr: float = DEFAULT_RESTING_HR,
    hrv: float = DEFAULT_HRV_MS,
) -> int:
    """
    Recovery score 0-100 from sleep quality (0-100), resting HR and HRV.

    Non-decreasing in quality. Inputs outside their range are clamped.
    """
    quality = clamp(quality or 0)
    rhr_score = clamp((100 - resting_hr) * 1.5)
    hrv_score = clamp(hrv / _HRV_REFERENCE_MS * 100)
    return int(clamp(round_half_up(quality * 0.4 + rhr_score * 0.3 + hrv_score * 0.3)))


def sleep_quality(
    duration_hours: float,
    deep_pct: float,
    rem_pct: float,
    awakenings: int = 0,
) -> int:
    """
    Sleep quality 0-100 from a session breakdown.

    Duration vs 8h (30%), deep sleep vs 25% target (25%), REM vs 25% target
    (25%) and a 15-point penalty per awakening (20%).
    """
    duration_score = min(100, duration_hours / 8 * 100)
    deep_score = min(100, deep_pct / 25 * 100)
    rem_score = min(100, rem_pct / 25 * 100)
    awake_score = max(0, 100 - awakenings * 15)
    return int(clamp(round_half_up(
        duration_score * 0.3
        + deep_score * 0.25
        + rem_score * 0.25
        + awake_score * 0.2
    )))
