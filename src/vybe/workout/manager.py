"""
WorkoutSessionManager: the start/stop timer for an in-progress workout.

States:
  Idle     → start(type) → Running
  Running  → stop()      → Idle (+ CompletedWorkout handed to the activity store
                                   when the session lasted at least one minute)
  Running  → reset()     → Idle (progress discarded)

There is no paused state. start() while running and stop() while idle are
silent no-ops.

Durability: every transition and every tick writes a snapshot with a
lastUpdated timestamp. On construction the manager reloads that snapshot; a
session that was running is extrapolated forward by the wall-clock time the
process was away and its tick is resumed.

One instance per process. The host application builds it once and passes it
to whoever needs it.
"""
import logging
import time
from dataclasses import replace
from typing import Callable, Dict, Optional

from pydantic import ValidationError

from vybe.analysis.energy import activity_type_info, workout_calories, workout_distance
from vybe.analysis.rounding import round_half_up
from vybe.store.snapshot import SnapshotReadError, SnapshotWriteError
from vybe.workout.session import CompletedWorkout, WorkoutSnapshot, WorkoutState
from vybe.workout.ticker import Ticker

logger = logging.getLogger(__name__)

Clock = Callable[[], int]
Subscriber = Callable[[WorkoutState], None]

_MIN_RECORDED_SECONDS = 60


def now_ms() -> int:
    """Wall-clock time as epoch milliseconds."""
    return int(time.time() * 1000)


class WorkoutSessionManager:
    """Owns the live workout state, its tick, its snapshot and its observers."""

    def __init__(
        self,
        snapshot_store,
        activity_store,
        ticker: Ticker,
        clock: Clock = now_ms,
    ):
        """
        Args:
            snapshot_store: JsonSnapshotStore (or any object with load()/save()).
            activity_store: DailyStore (or any object with add_activity(record)).
            ticker: drives _tick once per second while running.
            clock: returns epoch milliseconds.
        """
        self._snapshot_store = snapshot_store
        self._activity_store = activity_store
        self._ticker = ticker
        self._clock = clock
        self._state = WorkoutState()
        self._subscribers: Dict[object, Subscriber] = {}

        self._recover()

    # ── Queries ───────────────────────────────────────────────────────────────

    def get_state(self) -> WorkoutState:
        """Return a copy of the current state; mutating it has no effect."""
        return replace(self._state)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register an observer.

        The callback fires immediately with the current state, then after
        every change. Returns a function that removes this registration only.
        """
        token = object()
        self._subscribers[token] = callback
        callback(self.get_state())

        def unsubscribe() -> None:
            self._subscribers.pop(token, None)

        return unsubscribe

    # ── Transitions ───────────────────────────────────────────────────────────

    def start(self, activity_type: str) -> None:
        """
        Begin a workout. No-op if one is already running.

        Raises:
            SnapshotWriteError: if the snapshot could not be written. The
                workout is running regardless.
        """
        if self._state.is_running:
            return

        self._state = WorkoutState(
            is_running=True,
            start_time=self._clock(),
            type=activity_type,
            elapsed_seconds=0,
        )
        self._ticker.start(self._tick)
        logger.info("Workout started: %s", activity_type)
        self._commit()

    def stop(self) -> Optional[CompletedWorkout]:
        """
        Finish the running workout.

        Sessions shorter than one minute are discarded. Otherwise a
        CompletedWorkout is handed to the activity store and returned.

        Returns:
            The recorded workout, or None if nothing was running or the
            session was too short.

        Raises:
            SnapshotWriteError: if the Idle snapshot could not be written.
                The workout has already been recorded and the timer stopped.
        """
        if not self._state.is_running:
            return None

        elapsed = self._state.elapsed_seconds
        activity_type = self._state.type
        completed = None
        if elapsed >= _MIN_RECORDED_SECONDS:
            completed = _build_completed_workout(activity_type, elapsed)
            self._activity_store.add_activity(completed)
            logger.info(
                "Workout recorded: %s, %d min, %d kcal",
                activity_type, completed.duration, completed.calories,
            )
        else:
            logger.info("Workout discarded: %s lasted only %ds", activity_type, elapsed)

        self._ticker.cancel()
        self._state = WorkoutState(type=activity_type)
        self._commit()
        return completed

    def reset(self) -> None:
        """
        Abandon any running workout without recording it.

        Raises:
            SnapshotWriteError: if the Idle snapshot could not be written.
        """
        self._ticker.cancel()
        if self._state.is_running:
            logger.info(
                "Workout reset: %s discarded after %ds",
                self._state.type, self._state.elapsed_seconds,
            )
        self._state = WorkoutState(type=self._state.type)
        self._commit()

    # ── Internals ─────────────────────────────────────────────────────────────

    def _tick(self) -> None:
        if not self._state.is_running:
            return
        self._state.elapsed_seconds += 1
        try:
            self._persist()
        except SnapshotWriteError as exc:
            # In-memory state stays authoritative; the next tick retries.
            logger.error("Workout tick could not persist snapshot: %s", exc)
        self._notify()

    def _commit(self) -> None:
        """Persist then notify; observers hear about the change even if the write fails."""
        try:
            self._persist()
        finally:
            self._notify()

    def _persist(self) -> None:
        snapshot = WorkoutSnapshot.from_state(self._state, last_updated=self._clock())
        self._snapshot_store.save(snapshot.to_json_dict())

    def _notify(self) -> None:
        for callback in list(self._subscribers.values()):
            callback(self.get_state())

    def _recover(self) -> None:
        """Load the last snapshot; resume the tick if a workout was running."""
        try:
            raw = self._snapshot_store.load()
        except SnapshotReadError as exc:
            logger.warning("Ignoring corrupted workout snapshot: %s", exc)
            return
        if raw is None:
            return

        try:
            snapshot = WorkoutSnapshot.model_validate(raw)
        except ValidationError as exc:
            logger.warning("Ignoring invalid workout snapshot: %s", exc)
            return

        if not snapshot.is_running or snapshot.start_time is None:
            self._state = WorkoutState(type=snapshot.type)
            return

        last_updated = snapshot.last_updated
        if last_updated is None:
            last_updated = snapshot.start_time + snapshot.elapsed_seconds * 1000
        away_seconds = max(0, (self._clock() - last_updated) // 1000)

        self._state = WorkoutState(
            is_running=True,
            start_time=snapshot.start_time,
            type=snapshot.type,
            elapsed_seconds=snapshot.elapsed_seconds + away_seconds,
        )
        self._ticker.start(self._tick)
        logger.info(
            "Resumed %s workout at %ds (%ds elapsed while closed)",
            snapshot.type, self._state.elapsed_seconds, away_seconds,
        )


def _build_completed_workout(activity_type: str, elapsed_seconds: int) -> CompletedWorkout:
    duration = round_half_up(elapsed_seconds / 60)
    info = activity_type_info(activity_type)
    return CompletedWorkout(
        type=activity_type,
        name=f"{info.label} Session",
        duration=duration,
        calories=workout_calories(duration, activity_type),
        distance=workout_distance(duration, activity_type),
    )
