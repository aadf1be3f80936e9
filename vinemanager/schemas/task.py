from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from vinemanager.models.task import TaskCategory, TaskPriority
from vinemanager.schemas.display import DisplayRead


class TaskView(str, Enum):
    all = "all"
    pending = "pending"
    completed = "completed"


class TaskCreate(BaseModel):
    title: str = Field(min_length=1)
    due_date: date
    description: str = ""
    priority: TaskPriority = TaskPriority.medium
    category: TaskCategory = TaskCategory.other
    plot_id: Optional[str] = None


class TaskRead(BaseModel):
    id: str
    title: str
    description: str
    due_date: date
    priority: TaskPriority
    category: TaskCategory
    plot_id: Optional[str] = None
    completed: bool
    created_at: date
    overdue: bool
    priority_display: DisplayRead
    category_display: DisplayRead


class TaskStats(BaseModel):
    pending: int
    completed: int
    high_priority: int
    total: int
