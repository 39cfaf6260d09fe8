"""Daily logging routes: steps, sleep, meals, water."""
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from vybe.analysis.nutrition import detailed_nutrition_score
from vybe.api.deps import get_daily_store, resolve_day
from vybe.models.activity import ActivityRecord
from vybe.models.daily import HydrationRecord, Meal, NutritionRecord, SleepRecord, StepRecord
from vybe.store.daily import DailyStore

router = APIRouter()


class StepsRequest(BaseModel):
    count: int = Field(ge=0)


class SleepLogRequest(BaseModel):
    duration: float = Field(ge=0, le=24)  # hours
    quality_choice: Optional[str] = None  # "poor", "fair", "good", "great"
    quality: Optional[int] = Field(default=None, ge=0, le=100)
    deep_sleep: float = 0.0
    light_sleep: float = 0.0
    rem: float = 0.0
    awake: float = 0.0
    bedtime: Optional[str] = None
    wake_time: Optional[str] = None


class MealRequest(BaseModel):
    name: str
    meal_type: str = Field(pattern="^(breakfast|lunch|snack|dinner)$")
    calories: float = Field(default=0.0, ge=0)
    protein: float = Field(default=0.0, ge=0)
    carbs: float = Field(default=0.0, ge=0)
    fats: float = Field(default=0.0, ge=0)
    sugar: float = Field(default=0.0, ge=0)


class NutritionResponse(BaseModel):
    totals: NutritionRecord
    meals: List[Meal]
    macro_score: int  # calories, protein and sugar combined, 0-100


class DayResponse(BaseModel):
    steps: StepRecord
    sleep: SleepRecord
    nutrition: NutritionResponse
    hydration: HydrationRecord
    activities: List[ActivityRecord]


def _nutrition_response(record: NutritionRecord) -> NutritionResponse:
    macro_score = detailed_nutrition_score(
        {"calories": record.calories, "protein": record.protein, "sugar": record.sugar},
        {"calories": record.goal_calories, "protein": record.goal_protein},
    )
    return NutritionResponse(totals=record, meals=list(record.meals), macro_score=macro_score)


@router.get("/{day}", response_model=DayResponse)
def read_day(day: str, store: DailyStore = Depends(get_daily_store)):
    """Everything logged on one day ("today", "yesterday" or an ISO date)."""
    d = resolve_day(day, store)
    return DayResponse(
        steps=store.get_steps(d),
        sleep=store.get_sleep(d),
        nutrition=_nutrition_response(store.get_nutrition(d)),
        hydration=store.get_hydration(d),
        activities=store.get_activities(d),
    )


@router.put("/steps", response_model=StepRecord)
def save_steps(request: StepsRequest, store: DailyStore = Depends(get_daily_store)):
    return store.save_steps(request.count)


@router.post("/sleep", response_model=SleepRecord)
def log_sleep(request: SleepLogRequest, store: DailyStore = Depends(get_daily_store)):
    return store.log_sleep(**request.model_dump())


@router.post("/meals", response_model=NutritionResponse)
def add_meal(request: MealRequest, store: DailyStore = Depends(get_daily_store)):
    return _nutrition_response(store.add_meal(**request.model_dump()))


@router.post("/hydration/glass", response_model=HydrationRecord)
def add_glass(store: DailyStore = Depends(get_daily_store)):
    return store.add_glass()
