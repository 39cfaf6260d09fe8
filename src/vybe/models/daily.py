"""Per-day tracking records: steps, sleep, nutrition (with meals), hydration."""
from datetime import date, datetime
from typing import List, Optional

from sqlmodel import Field, Relationship, SQLModel

from vybe.models.activity import utc_now


class StepRecord(SQLModel, table=True):
    """Daily step total, supplied by the external step-tracking collaborator."""

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(default=1, index=True)
    record_date: date = Field(index=True)

    count: int = 0
    goal: int = 10000
    calories: float = 0.0
    distance: float = 0.0  # km

    updated_at: datetime = Field(default_factory=utc_now)


class SleepRecord(SQLModel, table=True):
    """
    One logged night. recovery_score is always derived from quality,
    never entered directly.
    """

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(default=1, index=True)
    record_date: date = Field(index=True)  # the morning the user woke up

    duration: float = 0.0  # hours, 0-24
    quality: int = 0  # 0-100
    deep_sleep: float = 0.0  # hours
    light_sleep: float = 0.0
    rem: float = 0.0
    awake: float = 0.0
    recovery_score: int = 0  # 0-100
    bedtime: Optional[str] = None  # "HH:MM"
    wake_time: Optional[str] = None  # "HH:MM"

    logged_at: datetime = Field(default_factory=utc_now)


class NutritionRecord(SQLModel, table=True):
    """Running macro totals for a day. Meals are append-only."""

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(default=1, index=True)
    record_date: date = Field(index=True)

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fats: float = 0.0
    sugar: float = 0.0

    goal_calories: float = 2200.0
    goal_protein: float = 130.0
    goal_carbs: float = 275.0
    goal_fats: float = 73.0

    meals: List["Meal"] = Relationship(back_populates="nutrition")


class Meal(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    nutrition_id: int = Field(foreign_key="nutritionrecord.id", index=True)

    name: str
    meal_type: str  # "breakfast", "lunch", "snack", "dinner"
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fats: float = 0.0
    sugar: float = 0.0
    time: datetime = Field(default_factory=utc_now)

    nutrition: Optional[NutritionRecord] = Relationship(back_populates="meals")


class HydrationRecord(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(default=1, index=True)
    record_date: date = Field(index=True)

    glasses: int = 0
    goal: int = 8
    ml: int = 0
    goal_ml: int = 2000
    glass_size: int = 250  # ml
