"""
Plot/pruning registry.

The registry is the only place that maps a plot identifier to a Plot record.
Lookups never raise: an unknown identifier resolves to None and callers are
expected to check for it.
"""
import logging
from datetime import date
from typing import Iterable, Optional

from vinemanager.db.store import VineyardStore
from vinemanager.models.plot import Plot, PlotStatus, PruningType
from vinemanager.schemas.plot import PlotCreate, PlotUpdate

logger = logging.getLogger(__name__)


def resolve_plot(plots: Iterable[Plot], plot_id: str) -> Optional[Plot]:
    for plot in plots:
        if plot.id == plot_id:
            return plot
    logger.debug("resolve_plot: no plot with id %s", plot_id)
    return None


def add_plot(store: VineyardStore, data: PlotCreate) -> Plot:
    plot = Plot(
        id=store.next_id("plots"),
        status=PlotStatus.active,
        **data.model_dump(),
    )
    store.plots.append(plot)
    logger.info("add_plot: added plot %s (%s)", plot.id, plot.name)
    return plot


def update_plot(plot: Plot, data: PlotUpdate) -> Plot:
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(plot, field, value)
    logger.info("update_plot: updated plot %s", plot.id)
    return plot


def set_pruning_date(plot: Plot, pruning_type: PruningType, value: Optional[date]) -> Plot:
    """Set or clear one pruning date; the other season is left untouched."""
    if pruning_type == PruningType.winter:
        plot.winter_pruning_date = value
    else:
        plot.summer_pruning_date = value
    return plot
