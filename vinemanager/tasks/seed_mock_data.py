"""
Seed a VineyardStore with the demo vineyard.

Three plots (two with pruning dates), three tasks, one fungicide schedule,
the assistant greeting and the canned weather snapshot. Identifiers come
from the store's own sequences, so seeding an empty store yields ids "1",
"2", "3" for plots and tasks alike.
"""
import logging
from datetime import date, datetime, timedelta, timezone
from typing import Optional

from vinemanager.db.store import VineyardStore
from vinemanager.models.plot import Plot, PlotStatus, PruningType
from vinemanager.models.schedule import Schedule, ScheduleType
from vinemanager.models.task import Task, TaskCategory, TaskPriority
from vinemanager.services.assistant import greeting_message
from vinemanager.services.weather import canned_weather

logger = logging.getLogger(__name__)


def _seed_plots(store: VineyardStore) -> None:
    rows = [
        dict(name="North Vineyard", area=2.5, variety="Cabernet Sauvignon",
             planting_date=date(2020, 3, 15), location="North Field",
             notes="Premium grape variety, excellent drainage", status=PlotStatus.active,
             winter_pruning_date=date(2024, 1, 15), summer_pruning_date=date(2024, 6, 15)),
        dict(name="South Plot", area=1.8, variety="Chardonnay",
             planting_date=date(2019, 4, 10), location="South Field",
             notes="White grape variety, morning sun exposure", status=PlotStatus.active,
             winter_pruning_date=date(2024, 1, 20), summer_pruning_date=date(2024, 6, 20)),
        dict(name="East Garden", area=3.2, variety="Pinot Noir",
             planting_date=date(2021, 2, 20), location="East Field",
             notes="Young vines, requires careful monitoring", status=PlotStatus.dormant),
    ]
    for row in rows:
        store.plots.append(Plot(id=store.next_id("plots"), **row))


def _seed_tasks(store: VineyardStore) -> None:
    # Listed newest first, matching the store's ordering
    rows = [
        dict(title="Irrigation System Check",
             description="Inspect and maintain drip irrigation lines in North Vineyard",
             due_date=date(2024, 1, 10), priority=TaskPriority.high,
             category=TaskCategory.irrigation, plot_id="1", completed=False,
             created_at=date(2024, 1, 5)),
        dict(title="Winter Pruning",
             description="Complete dormant season pruning for all mature vines",
             due_date=date(2024, 1, 15), priority=TaskPriority.medium,
             category=TaskCategory.pruning, completed=False,
             created_at=date(2024, 1, 3)),
        dict(title="Soil pH Testing",
             description="Test soil pH levels across all plots",
             due_date=date(2024, 1, 8), priority=TaskPriority.low,
             category=TaskCategory.maintenance, completed=True,
             created_at=date(2024, 1, 1)),
    ]
    for row in rows:
        store.tasks.append(Task(id=store.next_id("tasks"), **row))


def _seed_schedules(store: VineyardStore) -> None:
    store.schedules.append(Schedule(
        id=store.next_id("schedules"),
        plot_id="1",
        schedule_type=ScheduleType.spraying,
        title="Fungicide Application",
        days_from_pruning=30,
        pruning_type=PruningType.winter,
        description="Apply copper-based fungicide",
    ))


def seed_store(store: VineyardStore, now: Optional[datetime] = None) -> VineyardStore:
    now = now or datetime.now(timezone.utc)
    _seed_plots(store)
    _seed_tasks(store)
    _seed_schedules(store)
    store.messages.append(greeting_message(store, now - timedelta(minutes=5)))
    store.weather = canned_weather(now)
    logger.info(
        "seed_store: %d plots, %d tasks, %d schedules",
        len(store.plots), len(store.tasks), len(store.schedules),
    )
    return store
