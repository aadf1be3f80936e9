from dataclasses import dataclass
from enum import Enum

from vinemanager.models.plot import PruningType


class ScheduleType(str, Enum):
    spraying = "spraying"
    fertigation = "fertigation"
    tasks = "tasks"


@dataclass
class Schedule:
    id: str
    plot_id: str
    schedule_type: ScheduleType
    title: str
    days_from_pruning: int
    pruning_type: PruningType
    description: str = ""
