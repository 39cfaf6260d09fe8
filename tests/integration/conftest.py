"""Fixtures for API tests: the app wired to in-memory stores and a hand-fired ticker."""
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from vybe.api import main as api_main
from vybe.api.deps import get_current_profile, get_daily_store
from vybe.db.engine import get_session
from vybe.store.daily import DailyStore
from vybe.workout.manager import WorkoutSessionManager

API_TODAY = date(2025, 3, 12)


@pytest.fixture(name="api_store")
def api_store_fixture(engine, profile) -> DailyStore:
    return DailyStore(engine=engine, profile=profile, today=lambda: API_TODAY)


def _client(engine, profile, api_store, manager, monkeypatch):
    # The lifespan builds the process-wide services; hand it the test doubles
    monkeypatch.setattr(api_main, "get_daily_store", lambda: api_store)
    monkeypatch.setattr(api_main, "build_workout_manager", lambda scheduler, store: manager)
    app = api_main.create_app()

    def override_session():
        with Session(engine) as s:
            yield s

    app.dependency_overrides[get_session] = override_session
    app.dependency_overrides[get_daily_store] = lambda: api_store
    app.dependency_overrides[get_current_profile] = lambda: profile
    return TestClient(app)


@pytest.fixture(name="client")
def client_fixture(engine, profile, api_store, manager, monkeypatch):
    """Workouts finish into a recording activity store."""
    with _client(engine, profile, api_store, manager, monkeypatch) as c:
        yield c


@pytest.fixture(name="stored_client")
def stored_client_fixture(engine, profile, api_store, snapshot_store, ticker, clock, monkeypatch):
    """Workouts finish into the database, as in production."""
    manager = WorkoutSessionManager(
        snapshot_store=snapshot_store,
        activity_store=api_store,
        ticker=ticker,
        clock=clock,
    )
    with _client(engine, profile, api_store, manager, monkeypatch) as c:
        yield c
