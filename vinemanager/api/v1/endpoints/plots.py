from dataclasses import asdict

from fastapi import APIRouter, HTTPException, status

from vinemanager.core.deps import CurrentStore
from vinemanager.db.store import VineyardStore
from vinemanager.models.plot import Plot
from vinemanager.schemas.display import DisplayRead
from vinemanager.schemas.plot import PlotCreate, PlotRead, PlotUpdate
from vinemanager.services.display import PLOT_STATUS_DISPLAY, describe
from vinemanager.services.registry import add_plot, resolve_plot, update_plot

router = APIRouter(prefix="/plots", tags=["plots"])


# ── Plots ─────────────────────────────────────────────────────────────────────


@router.get("", response_model=list[PlotRead])
async def list_plots(store: CurrentStore):
    return [_plot_to_read(p) for p in store.plots]


@router.post("", response_model=PlotRead, status_code=status.HTTP_201_CREATED)
async def create_plot(data: PlotCreate, store: CurrentStore):
    return _plot_to_read(add_plot(store, data))


@router.get("/{plot_id}", response_model=PlotRead)
async def get_plot(plot_id: str, store: CurrentStore):
    return _plot_to_read(_get_plot(store, plot_id))


@router.patch("/{plot_id}", response_model=PlotRead)
async def edit_plot(plot_id: str, data: PlotUpdate, store: CurrentStore):
    plot = _get_plot(store, plot_id)
    return _plot_to_read(update_plot(plot, data))


# ── Helpers ───────────────────────────────────────────────────────────────────


def _get_plot(store: VineyardStore, plot_id: str) -> Plot:
    plot = resolve_plot(store.plots, plot_id)
    if plot is None:
        raise HTTPException(status_code=404, detail="Plot not found")
    return plot


def _plot_to_read(plot: Plot) -> PlotRead:
    return PlotRead(
        **asdict(plot),
        display=DisplayRead.model_validate(describe(PLOT_STATUS_DISPLAY, plot.status)),
    )
