#!/usr/bin/env python3
"""
Print every schedule of the demo vineyard with its derived calendar date.

Usage:
    python scripts/show_schedule_dates.py
"""
import logging
import sys

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s: %(message)s",
    stream=sys.stdout,
)

from vinemanager.db.store import VineyardStore
from vinemanager.services.registry import resolve_plot
from vinemanager.services.schedule_dates import schedule_date
from vinemanager.tasks.seed_mock_data import seed_store


def main() -> None:
    store = seed_store(VineyardStore())
    for schedule in store.schedules:
        plot = resolve_plot(store.plots, schedule.plot_id)
        when = schedule_date(store.plots, schedule)
        print(
            f"{schedule.title:<30} {plot.name if plot else '?':<16} "
            f"{schedule.pruning_type.value} {schedule.days_from_pruning:+d}d -> "
            f"{when.isoformat() if when else 'Not set'}"
        )


if __name__ == "__main__":
    main()
