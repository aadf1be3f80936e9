"""
Static display tables.

Every closed enum the UI renders (task priority and category, plot status,
schedule type, assistant category, alert severity) maps to an icon name and
a colour class through a plain dict. Unknown keys get the muted default.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Union

from vinemanager.models.message import AssistantCategory
from vinemanager.models.plot import PlotStatus
from vinemanager.models.schedule import ScheduleType
from vinemanager.models.task import TaskCategory, TaskPriority


@dataclass(frozen=True)
class DisplayDescriptor:
    color: str
    icon: Optional[str] = None


MUTED = DisplayDescriptor("bg-muted text-muted-foreground", "calendar")

# ── Tables ────────────────────────────────────────────────────────────────────

TASK_PRIORITY_DISPLAY: dict[TaskPriority, DisplayDescriptor] = {
    TaskPriority.high: DisplayDescriptor("bg-destructive text-destructive-foreground"),
    TaskPriority.medium: DisplayDescriptor("bg-harvest text-foreground"),
    TaskPriority.low: DisplayDescriptor("bg-forest text-white"),
}

TASK_CATEGORY_DISPLAY: dict[TaskCategory, DisplayDescriptor] = {
    TaskCategory.irrigation: DisplayDescriptor("text-sky", "droplets"),
    TaskCategory.pruning: DisplayDescriptor("text-grape", "scissors"),
    TaskCategory.pest_control: DisplayDescriptor("text-harvest", "bug"),
    TaskCategory.harvesting: DisplayDescriptor("text-forest", "check-circle-2"),
    TaskCategory.maintenance: DisplayDescriptor("text-earth", "alert-triangle"),
    TaskCategory.other: DisplayDescriptor("text-muted-foreground", "calendar"),
}

PLOT_STATUS_DISPLAY: dict[PlotStatus, DisplayDescriptor] = {
    PlotStatus.active: DisplayDescriptor("bg-forest text-white"),
    PlotStatus.dormant: DisplayDescriptor("bg-earth text-white"),
    PlotStatus.harvesting: DisplayDescriptor("bg-harvest text-foreground"),
}

SCHEDULE_TYPE_DISPLAY: dict[ScheduleType, DisplayDescriptor] = {
    ScheduleType.spraying: DisplayDescriptor("bg-harvest text-foreground", "sparkles"),
    ScheduleType.fertigation: DisplayDescriptor("bg-sky text-foreground", "droplets"),
    ScheduleType.tasks: DisplayDescriptor("bg-forest text-white", "clock"),
}

ASSISTANT_CATEGORY_DISPLAY: dict[AssistantCategory, DisplayDescriptor] = {
    AssistantCategory.disease: DisplayDescriptor("bg-destructive/10 text-destructive", "alert-circle"),
    AssistantCategory.irrigation: DisplayDescriptor("bg-sky/10 text-sky", "droplets"),
    AssistantCategory.pest: DisplayDescriptor("bg-harvest/10 text-harvest", "bug"),
    AssistantCategory.nutrition: DisplayDescriptor("bg-forest/10 text-forest", "leaf"),
    AssistantCategory.pruning: DisplayDescriptor("bg-grape/10 text-grape", "grape"),
    AssistantCategory.general: DisplayDescriptor("bg-muted/10 text-muted-foreground", "lightbulb"),
}

ALERT_SEVERITY_DISPLAY: dict[str, DisplayDescriptor] = {
    "severe": DisplayDescriptor("bg-destructive text-destructive-foreground", "alert-triangle"),
    "moderate": DisplayDescriptor("bg-harvest text-foreground", "alert-triangle"),
    "minor": DisplayDescriptor("bg-forest text-white", "alert-triangle"),
}


def describe(
    table: Mapping[str, DisplayDescriptor], key: Optional[Union[str, Enum]]
) -> DisplayDescriptor:
    if key is None:
        return MUTED
    if isinstance(key, Enum):
        return table.get(key, MUTED)
    # Plain strings hash differently from str-valued enum members
    for member, descriptor in table.items():
        if member == key:
            return descriptor
    return MUTED
