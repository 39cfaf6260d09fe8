"""FastAPI application factory."""
from contextlib import asynccontextmanager

from fastapi import FastAPI

from vybe.api.deps import get_daily_store
from vybe.api.routes import activities, daily, growth, profile, workout
from vybe.scheduler.jobs import build_scheduler, build_workout_manager


def create_app() -> FastAPI:
    """Build and return the FastAPI app."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # One scheduler and one workout manager per process
        scheduler = build_scheduler()
        app.state.workout_manager = build_workout_manager(scheduler, get_daily_store())
        scheduler.start()
        yield
        scheduler.shutdown(wait=False)

    app = FastAPI(
        title="VYBE API",
        description="Wellness scoring and live workout timer",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(growth.router, prefix="/growth", tags=["growth"])
    app.include_router(daily.router, prefix="/daily", tags=["daily"])
    app.include_router(profile.router, prefix="/profile", tags=["profile"])
    app.include_router(workout.router, prefix="/workout", tags=["workout"])
    app.include_router(activities.router, prefix="/activities", tags=["activities"])

    return app


# Module-level app instance for uvicorn
app = create_app()
