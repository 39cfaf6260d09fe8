from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite:///./vybe.db"
    workout_state_path: Path = Path.home() / ".vybe" / "active_workout.json"

    # Profile: engine parameters
    weight_kg: float = 70.0
    height_cm: float = 170.0
    age: int = 25
    gender: str = "male"

    # Daily goals
    step_goal: int = 10000
    sleep_goal: float = 8.0  # hours
    water_goal: int = 8  # glasses
    calorie_goal: int = 2200
    glass_size: int = 250  # ml per glass
    water_goal_ml: int = 2000

    class Config:
        env_prefix = "VYBE_"
        env_file = ".env"
        env_file_encoding = "utf-8"


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
