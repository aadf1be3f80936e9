from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from vinemanager.models.plot import PruningType
from vinemanager.models.schedule import ScheduleType
from vinemanager.schemas.display import DisplayRead


class ScheduleCreate(BaseModel):
    plot_id: str
    title: str = Field(min_length=1)
    days_from_pruning: int
    schedule_type: ScheduleType = ScheduleType.spraying
    pruning_type: PruningType = PruningType.winter
    description: str = ""


class ScheduleRead(BaseModel):
    id: str
    plot_id: str
    schedule_type: ScheduleType
    title: str
    days_from_pruning: int
    pruning_type: PruningType
    description: str
    scheduled_date: Optional[date] = None   # null when the plot lacks that pruning date
    display: DisplayRead


class ComputedDateRead(BaseModel):
    plot_id: str
    days_from_pruning: int
    pruning_type: PruningType
    scheduled_date: Optional[date] = None
