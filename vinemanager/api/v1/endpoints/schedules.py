from dataclasses import asdict
from typing import Iterable, Optional

from fastapi import APIRouter, HTTPException, Query, status

from vinemanager.core.deps import CurrentStore
from vinemanager.models.plot import Plot, PruningType
from vinemanager.models.schedule import Schedule
from vinemanager.schemas.display import DisplayRead
from vinemanager.schemas.schedule import ComputedDateRead, ScheduleCreate, ScheduleRead
from vinemanager.services.display import SCHEDULE_TYPE_DISPLAY, describe
from vinemanager.services.registry import resolve_plot
from vinemanager.services.schedule_dates import (
    add_schedule,
    compute_schedule_date,
    resolve_schedule,
    schedule_date,
    schedules_for_plot,
)

router = APIRouter(prefix="/schedules", tags=["schedules"])
plot_schedules_router = APIRouter(prefix="/plots", tags=["schedules"])


# ── Helpers ────────────────────────────────────────────────────────────────────


def _schedule_to_read(plots: Iterable[Plot], schedule: Schedule) -> ScheduleRead:
    return ScheduleRead(
        **asdict(schedule),
        scheduled_date=schedule_date(plots, schedule),
        display=DisplayRead.model_validate(describe(SCHEDULE_TYPE_DISPLAY, schedule.schedule_type)),
    )


# ── Schedule endpoints ─────────────────────────────────────────────────────────


@router.get("", response_model=list[ScheduleRead])
async def list_schedules(
    store: CurrentStore,
    plot_id: Optional[str] = Query(None, description="Only schedules for this plot"),
):
    return [_schedule_to_read(store.plots, s) for s in schedules_for_plot(store.schedules, plot_id)]


@router.post("", response_model=ScheduleRead, status_code=status.HTTP_201_CREATED)
async def create_schedule(data: ScheduleCreate, store: CurrentStore):
    schedule = add_schedule(store, data)
    if schedule is None:
        raise HTTPException(status_code=422, detail="Plot not found")
    return _schedule_to_read(store.plots, schedule)


@router.get("/compute-date", response_model=ComputedDateRead)
async def compute_date(
    store: CurrentStore,
    plot_id: str = Query(...),
    days_from_pruning: int = Query(...),
    pruning_type: PruningType = Query(PruningType.winter),
):
    return ComputedDateRead(
        plot_id=plot_id,
        days_from_pruning=days_from_pruning,
        pruning_type=pruning_type,
        scheduled_date=compute_schedule_date(store.plots, plot_id, days_from_pruning, pruning_type),
    )


@router.get("/{schedule_id}", response_model=ScheduleRead)
async def get_schedule(schedule_id: str, store: CurrentStore):
    schedule = resolve_schedule(store.schedules, schedule_id)
    if schedule is None:
        raise HTTPException(status_code=404, detail="Schedule not found")
    return _schedule_to_read(store.plots, schedule)


# ── Plot schedules (/plots/{id}/schedules) ─────────────────────────────────────


@plot_schedules_router.get("/{plot_id}/schedules", response_model=list[ScheduleRead])
async def list_plot_schedules(plot_id: str, store: CurrentStore):
    if resolve_plot(store.plots, plot_id) is None:
        raise HTTPException(status_code=404, detail="Plot not found")
    return [_schedule_to_read(store.plots, s) for s in schedules_for_plot(store.schedules, plot_id)]
