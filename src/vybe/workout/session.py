"""Workout session state, its persisted snapshot shape, and the finished-workout record."""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


@dataclass
class WorkoutState:
    """
    In-memory state of the live workout timer.

    Idle: is_running False, elapsed_seconds 0, start_time None.
    Running: is_running True, start_time set, elapsed_seconds ticking.
    """

    is_running: bool = False
    start_time: Optional[int] = None  # epoch ms
    type: str = "walking"
    elapsed_seconds: int = 0


class WorkoutSnapshot(BaseModel):
    """
    On-disk snapshot. Keys are camelCase: this shape must stay readable by
    every client that may resume a session after an unclean shutdown.
    """

    model_config = ConfigDict(populate_by_name=True)

    is_running: bool = Field(default=False, alias="isRunning")
    start_time: Optional[int] = Field(default=None, alias="startTime")
    type: str = "walking"
    elapsed_seconds: int = Field(default=0, ge=0, alias="elapsedSeconds")
    last_updated: Optional[int] = Field(default=None, alias="lastUpdated")

    @classmethod
    def from_state(cls, state: WorkoutState, last_updated: int) -> "WorkoutSnapshot":
        return cls(
            is_running=state.is_running,
            start_time=state.start_time,
            type=state.type,
            elapsed_seconds=state.elapsed_seconds,
            last_updated=last_updated,
        )

    def to_json_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


@dataclass
class CompletedWorkout:
    """Activity record produced by stopping a workout of at least one minute."""

    type: str
    name: str  # e.g. "Running Session"
    duration: int  # minutes
    calories: int
    distance: float  # km, 1 decimal
