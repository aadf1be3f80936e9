from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


class PlotStatus(str, Enum):
    active = "active"
    dormant = "dormant"
    harvesting = "harvesting"


class PruningType(str, Enum):
    winter = "winter"
    summer = "summer"


@dataclass
class Plot:
    id: str
    name: str
    area: float      # hectares
    variety: str
    planting_date: Optional[date] = None
    location: str = ""
    notes: str = ""
    status: PlotStatus = PlotStatus.active

    # At most one of each per season; either may be unset
    winter_pruning_date: Optional[date] = None
    summer_pruning_date: Optional[date] = None

    def pruning_date(self, pruning_type: PruningType) -> Optional[date]:
        if pruning_type == PruningType.winter:
            return self.winter_pruning_date
        return self.summer_pruning_date
