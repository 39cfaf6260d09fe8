"""Shared test fixtures."""
from datetime import date
from typing import Callable, Generator, List

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

# Import all models so SQLModel.metadata knows about them
from vybe.models.activity import ActivityRecord  # noqa: F401
from vybe.models.daily import HydrationRecord, Meal, NutritionRecord, SleepRecord, StepRecord  # noqa: F401
from vybe.models.profile import Profile
from vybe.store.daily import DailyStore
from vybe.store.snapshot import JsonSnapshotStore
from vybe.workout.manager import WorkoutSessionManager

TODAY = date(2025, 3, 12)  # a Wednesday
T0 = 1_741_770_000_000  # epoch ms, 2025-03-12 09:00 UTC


class FakeTicker:
    """Ticker fired by hand: fire(n) runs n one-second ticks."""

    def __init__(self):
        self.callback: Callable[[], None] = None
        self.start_calls = 0
        self.cancel_calls = 0

    @property
    def running(self) -> bool:
        return self.callback is not None

    def start(self, callback: Callable[[], None]) -> None:
        self.callback = callback
        self.start_calls += 1

    def cancel(self) -> None:
        self.callback = None
        self.cancel_calls += 1

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            if self.callback is None:
                return
            self.callback()


class FakeClock:
    """Epoch-ms clock that only moves when told to."""

    def __init__(self, now_ms: int = T0):
        self.now_ms = now_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, seconds: float) -> None:
        self.now_ms += int(seconds * 1000)


class RecordingActivityStore:
    def __init__(self):
        self.records: List = []

    def add_activity(self, record) -> None:
        self.records.append(record)


@pytest.fixture(name="engine")
def engine_fixture():
    """In-memory SQLite engine. Tables recreated fresh for each test."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="test_session")
def test_session_fixture(engine) -> Generator[Session, None, None]:
    """Provides a DB session connected to in-memory SQLite."""
    with Session(engine) as session:
        yield session


@pytest.fixture(name="profile")
def profile_fixture() -> Profile:
    return Profile()


@pytest.fixture(name="store")
def store_fixture(engine, profile) -> DailyStore:
    """DailyStore pinned to TODAY."""
    return DailyStore(engine=engine, profile=profile, today=lambda: TODAY)


@pytest.fixture(name="ticker")
def ticker_fixture() -> FakeTicker:
    return FakeTicker()


@pytest.fixture(name="clock")
def clock_fixture() -> FakeClock:
    return FakeClock()


@pytest.fixture(name="activity_store")
def activity_store_fixture() -> RecordingActivityStore:
    return RecordingActivityStore()


@pytest.fixture(name="snapshot_store")
def snapshot_store_fixture(tmp_path) -> JsonSnapshotStore:
    return JsonSnapshotStore(tmp_path / "vybe" / "active_workout.json")


@pytest.fixture(name="manager")
def manager_fixture(snapshot_store, activity_store, ticker, clock) -> WorkoutSessionManager:
    return WorkoutSessionManager(
        snapshot_store=snapshot_store,
        activity_store=activity_store,
        ticker=ticker,
        clock=clock,
    )
