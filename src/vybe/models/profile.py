"""User profile: the settings-derived parameters fed into the scoring engine."""
from typing import Optional

from sqlmodel import SQLModel

from vybe.config import Settings, get_settings


class Profile(SQLModel):
    """Body metrics and daily goals. Not a table; projected from Settings."""

    weight_kg: float = 70.0
    height_cm: float = 170.0
    age: int = 25
    gender: str = "male"
    step_goal: int = 10000
    sleep_goal: float = 8.0
    water_goal: int = 8
    calorie_goal: int = 2200
    glass_size: int = 250
    water_goal_ml: int = 2000


def get_profile(settings: Optional[Settings] = None) -> Profile:
    settings = settings or get_settings()
    return Profile(
        weight_kg=settings.weight_kg,
        height_cm=settings.height_cm,
        age=settings.age,
        gender=settings.gender,
        step_goal=settings.step_goal,
        sleep_goal=settings.sleep_goal,
        water_goal=settings.water_goal,
        calorie_goal=settings.calorie_goal,
        glass_size=settings.glass_size,
        water_goal_ml=settings.water_goal_ml,
    )
