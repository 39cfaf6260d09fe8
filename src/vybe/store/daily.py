"""
DailyStore: per-day record storage and the scoring queries built on it.

Reads never fail for a day with no data: they return an unsaved record filled
with zeros and the profile's goals. Writes only ever target the store's
current day; past days are read-only.

Also the activity store of the workout timer: add_activity() receives every
CompletedWorkout.
"""
import logging
from datetime import date, timedelta
from typing import Callable, List, Optional

from sqlmodel import Session, select

from vybe.analysis.energy import calories_from_steps, distance_from_steps
from vybe.analysis.growth import (
    DailyPerformance,
    GrowthIndexResult,
    GrowthTrend,
    WeeklyGrowthDay,
    calculate_growth_index,
    daily_performance,
    growth_trend,
    weekly_growth,
)
from vybe.analysis.recovery import quality_from_choice, recovery_score
from vybe.models.activity import ActivityRecord
from vybe.models.daily import HydrationRecord, Meal, NutritionRecord, SleepRecord, StepRecord
from vybe.models.profile import Profile

logger = logging.getLogger(__name__)

_WEEK_DAYS = 7


class DailyStore:
    """SQLModel-backed storage of steps, sleep, nutrition, hydration and activities."""

    def __init__(
        self,
        engine,
        profile: Profile,
        today: Callable[[], date] = date.today,
    ):
        """
        Args:
            engine: SQLAlchemy engine (SQLModel create_engine result).
            profile: body metrics and goals used for defaults and derived values.
            today: returns the current local date.
        """
        self.engine = engine
        self.profile = profile
        self._today = today

    def today(self) -> date:
        return self._today()

    # ── Steps ─────────────────────────────────────────────────────────────────

    def get_steps(self, day: date) -> StepRecord:
        with Session(self.engine) as session:
            record = _find(session, StepRecord, day)
        return record or StepRecord(record_date=day, goal=self.profile.step_goal)

    def save_steps(self, count: int) -> StepRecord:
        """Set today's step total; calories and distance are derived from the profile."""
        day = self.today()
        count = max(0, count)
        with Session(self.engine) as session:
            record = _find(session, StepRecord, day) or StepRecord(record_date=day)
            record.count = count
            record.goal = self.profile.step_goal
            record.calories = calories_from_steps(count, self.profile.weight_kg)
            record.distance = distance_from_steps(count, self.profile.height_cm)
            session.add(record)
            session.commit()
            session.refresh(record)
        return record

    # ── Sleep ─────────────────────────────────────────────────────────────────

    def get_sleep(self, day: date) -> SleepRecord:
        with Session(self.engine) as session:
            record = _find(session, SleepRecord, day)
        return record or SleepRecord(record_date=day)

    def log_sleep(
        self,
        duration: float,
        quality_choice: Optional[str] = None,
        quality: Optional[int] = None,
        deep_sleep: float = 0.0,
        light_sleep: float = 0.0,
        rem: float = 0.0,
        awake: float = 0.0,
        bedtime: Optional[str] = None,
        wake_time: Optional[str] = None,
    ) -> SleepRecord:
        """
        Log last night's sleep against today.

        Quality comes either directly (device/session, 0-100) or from a
        poor/fair/good/great choice. The recovery score is always derived.
        """
        if quality is None:
            quality = quality_from_choice(quality_choice)
        quality = max(0, min(100, quality))
        day = self.today()
        with Session(self.engine) as session:
            record = _find(session, SleepRecord, day) or SleepRecord(record_date=day)
            record.duration = max(0.0, min(24.0, duration))
            record.quality = quality
            record.deep_sleep = deep_sleep
            record.light_sleep = light_sleep
            record.rem = rem
            record.awake = awake
            record.bedtime = bedtime
            record.wake_time = wake_time
            record.recovery_score = recovery_score(quality)
            session.add(record)
            session.commit()
            session.refresh(record)
        return record

    # ── Nutrition ─────────────────────────────────────────────────────────────

    def get_nutrition(self, day: date) -> NutritionRecord:
        with Session(self.engine) as session:
            record = _find(session, NutritionRecord, day)
            if record is not None:
                record.meals  # load before the session closes
                return record
        return self._default_nutrition(day)

    def add_meal(
        self,
        name: str,
        meal_type: str,
        calories: float = 0.0,
        protein: float = 0.0,
        carbs: float = 0.0,
        fats: float = 0.0,
        sugar: float = 0.0,
    ) -> NutritionRecord:
        """Append a meal to today's log and fold it into the day's totals."""
        day = self.today()
        with Session(self.engine) as session:
            record = _find(session, NutritionRecord, day) or self._default_nutrition(day)
            session.add(record)
            session.flush()

            session.add(Meal(
                nutrition_id=record.id,
                name=name,
                meal_type=meal_type,
                calories=calories,
                protein=protein,
                carbs=carbs,
                fats=fats,
                sugar=sugar,
            ))
            record.calories += calories
            record.protein += protein
            record.carbs += carbs
            record.fats += fats
            record.sugar += sugar
            session.commit()
            session.refresh(record)
            record.meals  # load before the session closes
        logger.info("Meal added for %s: %s (%.0f kcal)", day, name, calories)
        return record

    def _default_nutrition(self, day: date) -> NutritionRecord:
        return NutritionRecord(record_date=day, goal_calories=self.profile.calorie_goal)

    # ── Hydration ─────────────────────────────────────────────────────────────

    def get_hydration(self, day: date) -> HydrationRecord:
        with Session(self.engine) as session:
            record = _find(session, HydrationRecord, day)
        return record or self._default_hydration(day)

    def add_glass(self) -> HydrationRecord:
        """Log one glass of water for today."""
        day = self.today()
        with Session(self.engine) as session:
            record = _find(session, HydrationRecord, day) or self._default_hydration(day)
            record.glasses += 1
            record.ml += record.glass_size
            session.add(record)
            session.commit()
            session.refresh(record)
        return record

    def _default_hydration(self, day: date) -> HydrationRecord:
        return HydrationRecord(
            record_date=day,
            goal=self.profile.water_goal,
            goal_ml=self.profile.water_goal_ml,
            glass_size=self.profile.glass_size,
        )

    # ── Activities ────────────────────────────────────────────────────────────

    def add_activity(self, record) -> ActivityRecord:
        """
        Store a finished activity against today.

        Args:
            record: CompletedWorkout or anything with type, name, duration,
                calories and distance.
        """
        row = ActivityRecord(
            activity_date=self.today(),
            activity_type=record.type,
            name=record.name,
            duration_minutes=record.duration,
            calories=record.calories,
            distance_km=record.distance,
        )
        with Session(self.engine) as session:
            session.add(row)
            session.commit()
            session.refresh(row)
        logger.info("Activity stored: %s (%d min)", row.name, row.duration_minutes)
        return row

    def get_activities(self, day: date) -> List[ActivityRecord]:
        with Session(self.engine) as session:
            return list(session.exec(
                select(ActivityRecord)
                .where(ActivityRecord.activity_date == day)
                .order_by(ActivityRecord.created_at)
            ).all())

    # ── Scoring ───────────────────────────────────────────────────────────────

    def growth_for_day(self, day: date, weekly_consistency: bool = False) -> GrowthIndexResult:
        """
        Growth Index for one day.

        With weekly_consistency, the activity pillar averages the step-goal
        percentage of the 7 days ending at `day`.
        """
        steps = self.get_steps(day)
        weekly = None
        if weekly_consistency:
            weekly = [
                _step_pct(self.get_steps(d)) for d in self._week_ending(day)
            ]
        return calculate_growth_index(
            steps,
            self.get_sleep(day),
            self.get_nutrition(day),
            self.get_hydration(day),
            sleep_goal=self.profile.sleep_goal,
            weekly_activity=weekly,
        )

    def weekly_growth(self) -> List[WeeklyGrowthDay]:
        today = self.today()
        days = [(d, self.growth_for_day(d).growth_index) for d in self._week_ending(today)]
        return weekly_growth(days, today=today)

    def growth_trend(self) -> GrowthTrend:
        history = [
            self.growth_for_day(d).growth_index for d in self._week_ending(self.today())
        ]
        return growth_trend(history)

    def yesterday_performance(self) -> DailyPerformance:
        yesterday = self.today() - timedelta(days=1)
        activity_minutes = sum(a.duration_minutes for a in self.get_activities(yesterday))
        return daily_performance(
            self.get_steps(yesterday),
            self.get_sleep(yesterday),
            self.get_nutrition(yesterday),
            self.get_hydration(yesterday),
            activity_minutes=activity_minutes,
            sleep_goal=self.profile.sleep_goal,
        )

    def _week_ending(self, day: date) -> List[date]:
        """The 7 days ending at `day`, oldest first."""
        return [day - timedelta(days=offset) for offset in range(_WEEK_DAYS - 1, -1, -1)]


def _find(session: Session, model, day: date):
    return session.exec(select(model).where(model.record_date == day)).first()


def _step_pct(steps: StepRecord) -> float:
    if not steps.goal or steps.goal <= 0:
        return 0.0
    return min(100.0, steps.count / steps.goal * 100)
