"""Completed activity routes: finished workouts and manual entries."""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlmodel import Session, select

from vybe.analysis.formatting import format_duration
from vybe.api.deps import get_daily_store, resolve_day
from vybe.db.engine import get_session
from vybe.models.activity import ActivityRecord
from vybe.store.daily import DailyStore

router = APIRouter()


class ActivitySummary(BaseModel):
    """Totals over a list of activities, as shown on the activity tab."""

    count: int
    duration_minutes: int
    duration: str  # "1h 5m"
    calories: int
    distance_km: float


@router.get("/", response_model=List[ActivityRecord])
def list_activities(
    day: Optional[str] = None,
    activity_type: Optional[str] = None,
    limit: int = 20,
    offset: int = 0,
    session: Session = Depends(get_session),
    store: DailyStore = Depends(get_daily_store),
):
    """
    List recorded activities, newest first.

    `day` narrows to one date ("today", "yesterday" or ISO); `activity_type`
    to one kind of workout.
    """
    query = select(ActivityRecord)
    if day is not None:
        query = query.where(ActivityRecord.activity_date == resolve_day(day, store))
    if activity_type is not None:
        query = query.where(ActivityRecord.activity_type == activity_type)
    query = query.order_by(ActivityRecord.created_at.desc(), ActivityRecord.id.desc())
    return session.exec(query.offset(offset).limit(limit)).all()


@router.get("/summary/{day}", response_model=ActivitySummary)
def day_summary(day: str, store: DailyStore = Depends(get_daily_store)):
    """Count, time, calories and distance of everything recorded on one day."""
    activities = store.get_activities(resolve_day(day, store))
    minutes = sum(a.duration_minutes for a in activities)
    return ActivitySummary(
        count=len(activities),
        duration_minutes=minutes,
        duration=format_duration(minutes),
        calories=sum(a.calories for a in activities),
        distance_km=round(sum(a.distance_km for a in activities), 1),
    )


@router.get("/{activity_id}", response_model=ActivityRecord)
def get_activity(activity_id: int, session: Session = Depends(get_session)):
    activity = session.get(ActivityRecord, activity_id)
    if activity is None:
        raise HTTPException(status_code=404, detail=f"Activity {activity_id} not found")
    return activity
