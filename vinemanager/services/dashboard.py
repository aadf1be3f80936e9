from datetime import date
from typing import Optional

from vinemanager.db.store import VineyardStore
from vinemanager.models.plot import PlotStatus
from vinemanager.schemas.dashboard import DashboardRead
from vinemanager.services.task_lifecycle import overdue_tasks, task_counts
from vinemanager.services.weather import temperature_advice


def get_dashboard(store: VineyardStore, today: Optional[date] = None) -> DashboardRead:
    counts = task_counts(store.tasks)

    temperature_c = None
    advice = None
    if store.weather is not None:
        temperature_c = store.weather.current.temperature_c
        advice = temperature_advice(temperature_c)

    return DashboardRead(
        total_plots=len(store.plots),
        active_plots=sum(1 for p in store.plots if p.status == PlotStatus.active),
        total_area=round(sum(p.area for p in store.plots), 2),
        pending_tasks=counts.pending,
        completed_tasks=counts.completed,
        high_priority_tasks=counts.high_priority,
        overdue_tasks=len(overdue_tasks(store.tasks, today)),
        schedules=len(store.schedules),
        temperature_c=temperature_c,
        temperature_advice=advice,
    )
