"""
Main entrypoint: serves the VYBE API (scoring + live workout timer).

Usage:
    python -m vybe               # starts the API on 0.0.0.0:8000
    python -m vybe summary       # prints today's Growth Index and exits
    uvicorn vybe.api.main:app --host 0.0.0.0 --port 8000  # same as the default
"""
import logging
import sys

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)
logger = logging.getLogger(__name__)


def _print_summary() -> None:
    from vybe.analysis.scores import score_label
    from vybe.api.deps import get_daily_store

    store = get_daily_store()
    growth = store.growth_for_day(store.today())
    trend = store.growth_trend()
    arrow = "▲" if trend.improved else "▼"
    print(f"Growth Index {growth.growth_index} ({score_label(growth.growth_index)}) {arrow} {trend.value}%")
    print(f"  Activity  {growth.activity_consistency:>3}  (30%)")
    print(f"  Sleep     {growth.sleep_score:>3}  (30%)")
    print(f"  Nutrition {growth.nutrition_score:>3}  (20%)")
    print(f"  Hydration {growth.hydration_score:>3}  (20%)")


def _serve() -> None:
    import uvicorn

    logger.info("Starting VYBE API...")
    uvicorn.run("vybe.api.main:app", host="0.0.0.0", port=8000)


if __name__ == "__main__":
    # Dispatch on first argument: `python -m vybe summary` or just `python -m vybe`
    if len(sys.argv) > 1 and sys.argv[1] == "summary":
        _print_summary()
    else:
        _serve()
