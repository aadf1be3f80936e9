from typing import Optional

from pydantic import BaseModel


class DashboardRead(BaseModel):
    total_plots: int
    active_plots: int
    total_area: float
    pending_tasks: int
    completed_tasks: int
    high_priority_tasks: int
    overdue_tasks: int
    schedules: int
    temperature_c: Optional[float] = None
    temperature_advice: Optional[str] = None
