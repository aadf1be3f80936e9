from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from vinemanager.models.plot import PlotStatus
from vinemanager.schemas.display import DisplayRead


class PlotCreate(BaseModel):
    name: str = Field(min_length=1)
    area: float = Field(ge=0)
    variety: str = Field(min_length=1)
    planting_date: Optional[date] = None
    location: str = ""
    notes: str = ""
    winter_pruning_date: Optional[date] = None
    summer_pruning_date: Optional[date] = None


class PlotUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    area: Optional[float] = Field(None, ge=0)
    variety: Optional[str] = Field(None, min_length=1)
    planting_date: Optional[date] = None
    location: Optional[str] = None
    notes: Optional[str] = None
    status: Optional[PlotStatus] = None
    winter_pruning_date: Optional[date] = None
    summer_pruning_date: Optional[date] = None

    @model_validator(mode="after")
    def check_required_not_cleared(self) -> "PlotUpdate":
        for field in ("name", "area", "variety", "location", "notes", "status"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self


class PlotRead(BaseModel):
    id: str
    name: str
    area: float
    variety: str
    planting_date: Optional[date] = None
    location: str
    notes: str
    status: PlotStatus
    winter_pruning_date: Optional[date] = None
    summer_pruning_date: Optional[date] = None
    display: DisplayRead

    model_config = {"from_attributes": True}
