"""
Schedule date derivation.

A Schedule does not store a calendar date. Its date is derived on every read
from the owning plot's pruning date (winter or summer) plus a day offset.
compute_schedule_date is pure and total: a missing plot or a missing pruning
date yields None, never an exception.
"""
import logging
from datetime import date, timedelta
from typing import Iterable, Optional

from vinemanager.db.store import VineyardStore
from vinemanager.models.plot import Plot, PruningType
from vinemanager.models.schedule import Schedule
from vinemanager.schemas.schedule import ScheduleCreate
from vinemanager.services.registry import resolve_plot

logger = logging.getLogger(__name__)


def compute_schedule_date(
    plots: Iterable[Plot],
    plot_id: str,
    days_from_pruning: int,
    pruning_type: PruningType,
) -> Optional[date]:
    plot = resolve_plot(plots, plot_id)
    if plot is None:
        return None

    pruning_date = plot.pruning_date(pruning_type)
    if pruning_date is None:
        logger.debug("compute_schedule_date: plot %s has no %s pruning date", plot_id, pruning_type)
        return None

    try:
        return pruning_date + timedelta(days=days_from_pruning)
    except OverflowError:
        logger.warning(
            "compute_schedule_date: offset %d from %s is outside the calendar", days_from_pruning, pruning_date
        )
        return None


def schedule_date(plots: Iterable[Plot], schedule: Schedule) -> Optional[date]:
    return compute_schedule_date(
        plots, schedule.plot_id, schedule.days_from_pruning, schedule.pruning_type
    )


def schedules_for_plot(schedules: Iterable[Schedule], plot_id: Optional[str]) -> list[Schedule]:
    """All schedules, or only those of one plot when plot_id is given."""
    if plot_id is None:
        return list(schedules)
    return [s for s in schedules if s.plot_id == plot_id]


def resolve_schedule(schedules: Iterable[Schedule], schedule_id: str) -> Optional[Schedule]:
    for schedule in schedules:
        if schedule.id == schedule_id:
            return schedule
    return None


def add_schedule(store: VineyardStore, data: ScheduleCreate) -> Optional[Schedule]:
    """Create a schedule. Returns None when the owning plot does not exist."""
    if resolve_plot(store.plots, data.plot_id) is None:
        logger.warning("add_schedule: rejected schedule for unknown plot %s", data.plot_id)
        return None

    schedule = Schedule(id=store.next_id("schedules"), **data.model_dump())
    store.schedules.append(schedule)
    logger.info("add_schedule: added schedule %s for plot %s", schedule.id, schedule.plot_id)
    return schedule
