"""Growth Index routes."""
from dataclasses import asdict
from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from vybe.analysis.growth import DailyPerformance, GrowthTrend, WeeklyGrowthDay
from vybe.analysis.scores import score_color, score_label
from vybe.api.deps import get_daily_store, resolve_day
from vybe.store.daily import DailyStore

router = APIRouter()


class GrowthResponse(BaseModel):
    activity_consistency: int
    sleep_score: int
    nutrition_score: int
    hydration_score: int
    growth_index: int
    color: str
    label: str


@router.get("/weekly", response_model=List[WeeklyGrowthDay])
def weekly(store: DailyStore = Depends(get_daily_store)):
    """Growth Index for each of the last 7 days, oldest first."""
    return store.weekly_growth()


@router.get("/trend", response_model=GrowthTrend)
def trend(store: DailyStore = Depends(get_daily_store)):
    """Today's index vs. the trailing average."""
    return store.growth_trend()


@router.get("/yesterday", response_model=DailyPerformance)
def yesterday(store: DailyStore = Depends(get_daily_store)):
    """Per-pillar percentages for yesterday's review chart."""
    return store.yesterday_performance()


@router.get("/{day}", response_model=GrowthResponse)
def growth_for_day(
    day: str,
    weekly_consistency: bool = False,
    store: DailyStore = Depends(get_daily_store),
):
    """Growth Index and pillar scores for "today", "yesterday" or an ISO date."""
    result = store.growth_for_day(resolve_day(day, store), weekly_consistency=weekly_consistency)
    return GrowthResponse(
        **asdict(result),
        color=score_color(result.growth_index),
        label=score_label(result.growth_index),
    )
