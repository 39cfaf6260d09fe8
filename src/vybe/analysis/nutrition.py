"""Nutrition scoring: calorie adherence and the detailed macro score."""
from typing import Mapping

from vybe.analysis.rounding import clamp, round_half_up

# Overshoot up to 10% above goal still counts as fully on target
_OVERSHOOT_TOLERANCE = 0.10
# Score reaches 0 at twice the goal
_ZERO_AT_RATIO = 2.0

_SUGAR_LIMIT_G = 50


def nutrition_score(calories: float, goal: float) -> int:
    """
    Calorie adherence score 0-100.

    Rises linearly to 100 at the goal, stays at 100 within 10% overshoot,
    then decays linearly to 0 at 200% of the goal. No intake or no goal -> 0.
    """
    if not calories or calories <= 0 or not goal or goal <= 0:
        return 0
    ratio = calories / goal
    if ratio <= 1:
        return round_half_up(ratio * 100)
    if ratio <= 1 + _OVERSHOOT_TOLERANCE:
        return 100
    span = _ZERO_AT_RATIO - (1 + _OVERSHOOT_TOLERANCE)
    remaining = (_ZERO_AT_RATIO - ratio) / span
    return int(clamp(round_half_up(remaining * 100)))


def detailed_nutrition_score(actual: Mapping[str, float], goals: Mapping[str, float]) -> int:
    """
    Macro-aware nutrition score 0-100.

    Calorie balance (40%): 1 - |actual - goal| / goal.
    Protein (35%): actual/goal capped at 1.2, normalised.
    Sugar compliance (25%): full at <= 50 g, linear to 0 at 100 g.
    """
    calorie_goal = goals.get("calories") or 0
    protein_goal = goals.get("protein") or 0
    calories = actual.get("calories") or 0
    protein = actual.get("protein") or 0
    sugar = actual.get("sugar") or 0

    if calorie_goal > 0:
        calorie_balance = max(0.0, 1 - abs(calories - calorie_goal) / calorie_goal)
    else:
        calorie_balance = 0.0
    protein_ratio = min(protein / protein_goal, 1.2) if protein_goal > 0 else 0.0
    if sugar <= _SUGAR_LIMIT_G:
        sugar_compliance = 1.0
    else:
        sugar_compliance = max(0.0, 1 - (sugar - _SUGAR_LIMIT_G) / _SUGAR_LIMIT_G)

    return int(clamp(round_half_up(
        calorie_balance * 100 * 0.4
        + protein_ratio / 1.2 * 100 * 0.35
        + sugar_compliance * 100 * 0.25
    )))
