from vinemanager.models.plot import Plot, PlotStatus, PruningType
from vinemanager.models.task import Task, TaskCategory, TaskPriority
from vinemanager.models.schedule import Schedule, ScheduleType
from vinemanager.models.message import AssistantCategory, Message, MessageRole
from vinemanager.models.weather import CurrentConditions, ForecastDay, WeatherAlert, WeatherSnapshot

__all__ = [
    "Plot",
    "PlotStatus",
    "PruningType",
    "Task",
    "TaskCategory",
    "TaskPriority",
    "Schedule",
    "ScheduleType",
    "AssistantCategory",
    "Message",
    "MessageRole",
    "CurrentConditions",
    "ForecastDay",
    "WeatherAlert",
    "WeatherSnapshot",
]
