"""Completed activity rows: manual entries and finished workout sessions."""
from datetime import date, datetime, timezone
from typing import Optional

from sqlmodel import Field, SQLModel


def utc_now() -> datetime:
    """Timezone-aware UTC timestamp for row defaults."""
    return datetime.now(timezone.utc)


class ActivityRecord(SQLModel, table=True):
    """One finished activity. Written by the activity store's add_activity."""

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(default=1, index=True)
    activity_date: date = Field(index=True)

    activity_type: str  # "walking", "running", "cycling", "workout", ...
    name: str
    duration_minutes: int
    calories: int
    distance_km: float

    created_at: datetime = Field(default_factory=utc_now)
