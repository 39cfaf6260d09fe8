"""
APScheduler wiring for the live workout timer.

The scheduler runs inside the API process (started by the app lifespan). The
only job is the workout tick, added and removed by APSchedulerTicker as
workouts start and stop.
"""
import logging
from typing import Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from vybe.config import Settings, get_settings
from vybe.store.snapshot import JsonSnapshotStore
from vybe.workout.manager import WorkoutSessionManager
from vybe.workout.ticker import APSchedulerTicker

logger = logging.getLogger(__name__)


def build_scheduler() -> AsyncIOScheduler:
    """
    Create the APScheduler used for the workout tick.

    Returns:
        AsyncIOScheduler (not yet started).
    """
    return AsyncIOScheduler(job_defaults={"misfire_grace_time": 5})


def build_workout_manager(
    scheduler: AsyncIOScheduler,
    activity_store,
    settings: Optional[Settings] = None,
) -> WorkoutSessionManager:
    """
    Build the process-wide WorkoutSessionManager.

    Recovers any running workout from the snapshot file, which re-registers
    the tick job on `scheduler` before it is started.

    Args:
        scheduler: scheduler that will own the tick job.
        activity_store: receives finished workouts (DailyStore).
        settings: defaults to get_settings().
    """
    settings = settings or get_settings()
    manager = WorkoutSessionManager(
        snapshot_store=JsonSnapshotStore(settings.workout_state_path),
        activity_store=activity_store,
        ticker=APSchedulerTicker(scheduler),
    )
    logger.info("Workout manager ready (snapshot: %s)", settings.workout_state_path)
    return manager
