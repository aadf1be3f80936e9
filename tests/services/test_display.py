from vinemanager.models.plot import PlotStatus
from vinemanager.models.task import TaskCategory, TaskPriority
from vinemanager.services.display import (
    ALERT_SEVERITY_DISPLAY,
    MUTED,
    PLOT_STATUS_DISPLAY,
    TASK_CATEGORY_DISPLAY,
    TASK_PRIORITY_DISPLAY,
    describe,
)


def test_every_enum_member_has_a_descriptor():
    assert set(TASK_PRIORITY_DISPLAY) == set(TaskPriority)
    assert set(TASK_CATEGORY_DISPLAY) == set(TaskCategory)
    assert set(PLOT_STATUS_DISPLAY) == set(PlotStatus)


def test_lookup_by_member_and_by_value():
    by_member = describe(TASK_CATEGORY_DISPLAY, TaskCategory.pest_control)
    by_value = describe(TASK_CATEGORY_DISPLAY, "pest-control")
    assert by_member == by_value
    assert by_member.icon == "bug"


def test_unknown_key_falls_back_to_muted():
    assert describe(ALERT_SEVERITY_DISPLAY, "apocalyptic") == MUTED
    assert describe(TASK_PRIORITY_DISPLAY, None) == MUTED
