"""
Growth Index: the composite 0-100 wellness score.

    growth = activity × 0.30 + sleep × 0.30 + nutrition × 0.20 + hydration × 0.20

Each pillar is itself a 0-100 score:
  - activity consistency: % of the step goal, optionally averaged over the
    trailing week
  - sleep: duration vs goal, scaled by logged quality
  - nutrition: calorie adherence (see analysis.nutrition)
  - hydration: % of the glasses goal

Inputs are duck-typed daily records (the SQLModel rows from vybe.models.daily
or anything with the same attributes). A missing record scores 0.
"""
from dataclasses import dataclass
from datetime import date
from statistics import mean
from typing import Any, List, Optional, Sequence, Tuple

from vybe.analysis.nutrition import nutrition_score
from vybe.analysis.rounding import clamp, round_half_up

ACTIVITY_WEIGHT = 0.30
SLEEP_WEIGHT = 0.30
NUTRITION_WEIGHT = 0.20
HYDRATION_WEIGHT = 0.20

DEFAULT_SLEEP_GOAL = 8.0
# Quality at which meeting the duration goal earns a full sleep score ("good")
_FULL_SCORE_QUALITY_FACTOR = 0.875

_TREND_WINDOW = 6
_TREND_MAX = 999

_DAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

# 60 minutes of logged activity counts as a full day
_ACTIVITY_MINUTES_GOAL = 60


@dataclass
class GrowthIndexResult:
    activity_consistency: int
    sleep_score: int
    nutrition_score: int
    hydration_score: int
    growth_index: int


@dataclass
class GrowthTrend:
    improved: bool
    value: int  # percent change vs. the trailing average


@dataclass
class WeeklyGrowthDay:
    day: str  # "Mon".."Sun"
    date: date
    growth_index: int
    is_today: bool


@dataclass
class DailyPerformance:
    """Per-pillar percentages for the day-review radar chart."""
    steps_pct: float
    calories_pct: float
    sleep_score: float
    hydration_pct: float
    activity_duration_pct: float


# ─── Pillar scores ────────────────────────────────────────────────────────────

def _percent_of_goal(value: float, goal: float) -> int:
    if not value or value <= 0 or not goal or goal <= 0:
        return 0
    return int(min(100, round_half_up(value / goal * 100)))


def activity_consistency(
    steps: int,
    goal: int,
    weekly_percentages: Optional[Sequence[float]] = None,
) -> int:
    """
    Percentage of the step goal reached, capped at 100.

    When the trailing week's daily percentages are supplied (today included),
    the average of those days is used instead of today alone.
    """
    if weekly_percentages:
        return int(clamp(round_half_up(mean(weekly_percentages))))
    return _percent_of_goal(steps, goal)


def sleep_score(duration: float, quality: float = 0, goal: float = DEFAULT_SLEEP_GOAL) -> int:
    """
    Sleep pillar 0-100.

    duration_pct = min(100, duration / goal × 100). With a logged quality the
    percentage is scaled by (0.5 + quality/200), normalised so that meeting
    the goal at quality 75 or above scores 100. No sleep logged -> 0.
    """
    if not duration or duration <= 0 or not goal or goal <= 0:
        return 0
    duration_pct = min(100.0, duration / goal * 100)
    if not quality or quality <= 0:
        return round_half_up(duration_pct)
    quality_factor = 0.5 + clamp(quality) / 200
    return int(min(100, round_half_up(duration_pct * quality_factor / _FULL_SCORE_QUALITY_FACTOR)))


def hydration_score(glasses: int, goal: int) -> int:
    return _percent_of_goal(glasses, goal)


def combine_growth_index(
    activity: float,
    sleep: float,
    nutrition: float,
    hydration: float,
) -> int:
    """Weighted 30/30/20/20 sum of the four pillars, clamped to [0, 100]."""
    weighted = (
        clamp(activity) * ACTIVITY_WEIGHT
        + clamp(sleep) * SLEEP_WEIGHT
        + clamp(nutrition) * NUTRITION_WEIGHT
        + clamp(hydration) * HYDRATION_WEIGHT
    )
    return int(clamp(round_half_up(weighted)))


# ─── Growth Index ─────────────────────────────────────────────────────────────

def calculate_growth_index(
    activity: Any,
    sleep: Any,
    nutrition: Any,
    hydration: Any,
    sleep_goal: float = DEFAULT_SLEEP_GOAL,
    weekly_activity: Optional[Sequence[float]] = None,
) -> GrowthIndexResult:
    """
    Compute the four pillars and the composite index for one day.

    Args:
        activity: step record (count, goal) or None.
        sleep: sleep record (duration, quality) or None.
        nutrition: nutrition record (calories, goal_calories) or None.
        hydration: hydration record (glasses, goal) or None.
        sleep_goal: target hours of sleep from the profile.
        weekly_activity: optional trailing-week daily step-goal percentages.

    Returns:
        GrowthIndexResult with every field an integer in [0, 100].
    """
    activity_pct = activity_consistency(
        getattr(activity, "count", 0),
        getattr(activity, "goal", 0),
        weekly_percentages=weekly_activity,
    )
    sleep_pct = sleep_score(
        getattr(sleep, "duration", 0),
        getattr(sleep, "quality", 0),
        goal=sleep_goal,
    )
    nutrition_pct = nutrition_score(
        getattr(nutrition, "calories", 0),
        getattr(nutrition, "goal_calories", 0),
    )
    hydration_pct = hydration_score(
        getattr(hydration, "glasses", 0),
        getattr(hydration, "goal", 0),
    )
    return GrowthIndexResult(
        activity_consistency=activity_pct,
        sleep_score=sleep_pct,
        nutrition_score=nutrition_pct,
        hydration_score=hydration_pct,
        growth_index=combine_growth_index(activity_pct, sleep_pct, nutrition_pct, hydration_pct),
    )


def growth_trend(history: Sequence[int]) -> GrowthTrend:
    """
    Compare today's index (the last entry of an oldest-first history) with
    the average of up to 6 prior days that have data.

    Days scoring 0 are treated as "no data" and left out of the average.
    With nothing to compare against, the trend is flat and counts as improved.
    """
    if not history:
        return GrowthTrend(improved=True, value=0)

    today = history[-1]
    prior = [g for g in history[:-1][-_TREND_WINDOW:] if g and g > 0]
    if not prior:
        return GrowthTrend(improved=True, value=0)

    prior_avg = mean(prior)
    change = abs(today - prior_avg) / max(1.0, prior_avg) * 100
    return GrowthTrend(
        improved=today >= prior_avg,
        value=int(clamp(round_half_up(change), 0, _TREND_MAX)),
    )


def weekly_growth(days: Sequence[Tuple[date, int]], today: date) -> List[WeeklyGrowthDay]:
    """
    Label a run of (date, growth_index) pairs for the 7-day consistency chart.
    """
    return [
        WeeklyGrowthDay(
            day=_DAY_NAMES[d.weekday()],
            date=d,
            growth_index=index or 0,
            is_today=d == today,
        )
        for d, index in days
    ]


def daily_performance(
    activity: Any,
    sleep: Any,
    nutrition: Any,
    hydration: Any,
    activity_minutes: float = 0,
    sleep_goal: float = DEFAULT_SLEEP_GOAL,
) -> DailyPerformance:
    """
    Uncapped-input, capped-output pillar percentages for a day in review.

    Unlike the Growth Index, nutrition here is plain % of the calorie goal.
    """
    def pct(value, goal):
        if not value or not goal or goal <= 0:
            return 0.0
        return min(100.0, value / goal * 100)

    quality = getattr(sleep, "quality", 0)
    return DailyPerformance(
        steps_pct=pct(getattr(activity, "count", 0), getattr(activity, "goal", 0)),
        calories_pct=pct(getattr(nutrition, "calories", 0), getattr(nutrition, "goal_calories", 0)),
        sleep_score=float(quality) if quality else pct(getattr(sleep, "duration", 0), sleep_goal),
        hydration_pct=pct(getattr(hydration, "glasses", 0), getattr(hydration, "goal", 0)),
        activity_duration_pct=pct(activity_minutes, _ACTIVITY_MINUTES_GOAL),
    )
