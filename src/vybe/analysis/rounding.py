"""Rounding helpers shared by the scoring modules."""
import math


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, ties away from zero for positives.

    Python's round() uses banker's rounding (round(62.5) == 62); scores and
    calorie counts are displayed to users who expect 62.5 -> 63.
    """
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float = 0, high: float = 100) -> float:
    return max(low, min(high, value))
