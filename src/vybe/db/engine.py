"""SQLModel engine singleton and session dependency."""
from pathlib import Path
from typing import Generator

from sqlalchemy.engine import make_url
from sqlmodel import Session, SQLModel, create_engine

from vybe.config import get_settings

_engine = None


def create_db_engine(database_url: str):
    """
    Create an engine with every VYBE table in place.

    For a file-backed SQLite URL the containing directory is created first,
    so `sqlite:///~/.vybe/vybe.db`-style locations work on a fresh machine.
    """
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False  # sessions cross FastAPI worker threads
        database = make_url(database_url).database
        if database and database != ":memory:":
            Path(database).parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(database_url, connect_args=connect_args)
    # Import all models so metadata is populated before create_all
    from vybe.models.activity import ActivityRecord  # noqa
    from vybe.models.daily import HydrationRecord, Meal, NutritionRecord, SleepRecord, StepRecord  # noqa
    SQLModel.metadata.create_all(engine)
    return engine


def get_engine():
    """Return the module-level engine, creating it on first call."""
    global _engine
    if _engine is None:
        _engine = create_db_engine(get_settings().database_url)
    return _engine


def get_session() -> Generator[Session, None, None]:
    """FastAPI dependency that yields a DB session."""
    with Session(get_engine()) as session:
        yield session
