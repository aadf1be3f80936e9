from datetime import date

from vinemanager.db.store import VineyardStore
from vinemanager.models.plot import PlotStatus, PruningType
from vinemanager.schemas.plot import PlotCreate, PlotUpdate
from vinemanager.services.registry import add_plot, resolve_plot, set_pruning_date, update_plot


def test_resolve_known_plot(store):
    plot = resolve_plot(store.plots, "1")
    assert plot is not None
    assert plot.name == "North Vineyard"
    assert plot.winter_pruning_date == date(2024, 1, 15)


def test_resolve_unknown_plot_is_none(store):
    assert resolve_plot(store.plots, "42") is None
    assert resolve_plot([], "1") is None


def test_add_plot_assigns_next_id_and_active_status(store):
    plot = add_plot(store, PlotCreate(name="West Terrace", area=0.9, variety="Syrah"))
    assert plot.id == "4"
    assert plot.status == PlotStatus.active
    assert plot.winter_pruning_date is None
    assert resolve_plot(store.plots, "4") is plot


def test_ids_are_not_reused():
    store = VineyardStore()
    first = add_plot(store, PlotCreate(name="A", area=1, variety="Gamay"))
    store.plots.clear()
    second = add_plot(store, PlotCreate(name="B", area=1, variety="Gamay"))
    assert first.id != second.id


def test_update_plot_is_partial(store):
    plot = resolve_plot(store.plots, "3")
    update_plot(plot, PlotUpdate(status="harvesting", winter_pruning_date=date(2024, 1, 25)))
    assert plot.status == PlotStatus.harvesting
    assert plot.winter_pruning_date == date(2024, 1, 25)
    assert plot.name == "East Garden"
    assert plot.id == "3"


def test_set_pruning_dates_independently(store):
    plot = resolve_plot(store.plots, "2")
    set_pruning_date(plot, PruningType.summer, None)
    assert plot.summer_pruning_date is None
    assert plot.winter_pruning_date == date(2024, 1, 20)

    set_pruning_date(plot, PruningType.winter, date(2024, 1, 28))
    assert plot.winter_pruning_date == date(2024, 1, 28)
    assert plot.summer_pruning_date is None
