"""
Live workout timer routes.

Handlers are async so they run on the event loop, the same thread as the
APScheduler tick: the manager never sees two writers at once.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from vybe.api.deps import get_workout_manager
from vybe.store.snapshot import SnapshotWriteError
from vybe.workout.manager import WorkoutSessionManager
from vybe.workout.session import CompletedWorkout, WorkoutState

router = APIRouter()


class StartRequest(BaseModel):
    type: str = "walking"


class StopResponse(BaseModel):
    recorded: bool
    activity: Optional[CompletedWorkout] = None


def _snapshot_unavailable(exc: SnapshotWriteError) -> HTTPException:
    return HTTPException(status_code=503, detail=str(exc))


@router.get("", response_model=WorkoutState)
async def read_state(manager: WorkoutSessionManager = Depends(get_workout_manager)):
    return manager.get_state()


@router.post("/start", response_model=WorkoutState)
async def start(
    request: StartRequest,
    manager: WorkoutSessionManager = Depends(get_workout_manager),
):
    """Start a workout. Starting while one is running returns the running one."""
    try:
        manager.start(request.type)
    except SnapshotWriteError as exc:
        raise _snapshot_unavailable(exc)
    return manager.get_state()


@router.post("/stop", response_model=StopResponse)
async def stop(manager: WorkoutSessionManager = Depends(get_workout_manager)):
    """Finish the workout; sessions under a minute are not recorded."""
    try:
        completed = manager.stop()
    except SnapshotWriteError as exc:
        raise _snapshot_unavailable(exc)
    return StopResponse(recorded=completed is not None, activity=completed)


@router.post("/reset", response_model=WorkoutState)
async def reset(manager: WorkoutSessionManager = Depends(get_workout_manager)):
    """Abandon the running workout without recording it."""
    try:
        manager.reset()
    except SnapshotWriteError as exc:
        raise _snapshot_unavailable(exc)
    return manager.get_state()
