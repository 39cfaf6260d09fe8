"""
The once-per-second tick that drives the workout timer.

The manager only sees the Ticker interface; production wires it to an
APScheduler interval job, tests use a ticker they fire by hand.
"""
import logging
from typing import Callable, Protocol

from apscheduler.schedulers.asyncio import AsyncIOScheduler

logger = logging.getLogger(__name__)

TICK_JOB_ID = "workout_tick"


class Ticker(Protocol):
    @property
    def running(self) -> bool: ...

    def start(self, callback: Callable[[], None]) -> None:
        """Begin calling callback once per interval, replacing any previous one."""

    def cancel(self) -> None:
        """Stop ticking. Safe to call when not running."""


class APSchedulerTicker:
    """
    Ticker backed by an AsyncIOScheduler interval job.

    The job never overlaps itself (max_instances=1) and missed runs are
    collapsed into one (coalesce=True), so each tick finishes its persist and
    notify before the next one fires.

    Usage:
        scheduler = AsyncIOScheduler()
        ticker = APSchedulerTicker(scheduler)
        scheduler.start()
    """

    def __init__(
        self,
        scheduler: AsyncIOScheduler,
        interval_seconds: float = 1.0,
        job_id: str = TICK_JOB_ID,
    ):
        self._scheduler = scheduler
        self._interval_seconds = interval_seconds
        self._job_id = job_id

    @property
    def running(self) -> bool:
        return self._scheduler.get_job(self._job_id) is not None

    def start(self, callback: Callable[[], None]) -> None:
        async def tick() -> None:
            # Coroutine jobs run on the event loop itself, not in a worker thread
            callback()

        self._scheduler.add_job(
            tick,
            trigger="interval",
            seconds=self._interval_seconds,
            id=self._job_id,
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )
        logger.debug("Tick job %s scheduled every %ss", self._job_id, self._interval_seconds)

    def cancel(self) -> None:
        if self._scheduler.get_job(self._job_id) is not None:
            self._scheduler.remove_job(self._job_id)
