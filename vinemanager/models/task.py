from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


class TaskPriority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class TaskCategory(str, Enum):
    irrigation = "irrigation"
    pruning = "pruning"
    pest_control = "pest-control"
    harvesting = "harvesting"
    maintenance = "maintenance"
    other = "other"


@dataclass
class Task:
    id: str
    title: str
    due_date: date
    created_at: date
    description: str = ""
    priority: TaskPriority = TaskPriority.medium
    category: TaskCategory = TaskCategory.other
    plot_id: Optional[str] = None   # weak reference, never validated
    completed: bool = False
