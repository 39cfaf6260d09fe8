"""FastAPI dependencies for the process-wide services."""
from datetime import date, timedelta

from fastapi import HTTPException, Request

from vybe.db.engine import get_engine
from vybe.models.profile import Profile, get_profile
from vybe.store.daily import DailyStore
from vybe.workout.manager import WorkoutSessionManager


def get_current_profile() -> Profile:
    return get_profile()


def get_daily_store() -> DailyStore:
    return DailyStore(engine=get_engine(), profile=get_profile())


def get_workout_manager(request: Request) -> WorkoutSessionManager:
    """The single manager built by the app lifespan."""
    return request.app.state.workout_manager


def resolve_day(day: str, store: DailyStore) -> date:
    """Parse a path segment that is either "today", "yesterday" or an ISO date."""
    if day == "today":
        return store.today()
    if day == "yesterday":
        return store.today() - timedelta(days=1)
    try:
        return date.fromisoformat(day)
    except ValueError:
        raise HTTPException(status_code=422, detail=f"Invalid date: {day}")
