"""
In-memory session store.

One VineyardStore owns every Plot, Task, Schedule and chat Message for a
running application. Nothing is persisted; a restart starts from the seed
data again (see services/seed.py).
"""
from dataclasses import dataclass, field
from typing import Optional

from vinemanager.models.message import Message
from vinemanager.models.plot import Plot
from vinemanager.models.schedule import Schedule
from vinemanager.models.task import Task
from vinemanager.models.weather import WeatherSnapshot


@dataclass
class VineyardStore:
    plots: list[Plot] = field(default_factory=list)
    tasks: list[Task] = field(default_factory=list)          # newest first
    schedules: list[Schedule] = field(default_factory=list)
    messages: list[Message] = field(default_factory=list)
    weather: Optional[WeatherSnapshot] = None

    _sequences: dict[str, int] = field(default_factory=dict, repr=False)

    def next_id(self, collection: str) -> str:
        """Next identifier for a collection. Identifiers are never reused."""
        value = self._sequences.get(collection, 0) + 1
        self._sequences[collection] = value
        return str(value)
