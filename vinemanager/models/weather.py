from dataclasses import dataclass, field
from datetime import date, datetime


@dataclass
class CurrentConditions:
    temperature_c: float
    humidity_pct: float
    wind_kmh: float
    wind_direction: str
    pressure_hpa: float
    visibility_km: float
    condition: str


@dataclass
class ForecastDay:
    date: date
    high_c: float
    low_c: float
    condition: str
    precipitation_pct: float


@dataclass
class WeatherAlert:
    alert_type: str
    severity: str    # "minor", "moderate", "severe"
    message: str
    valid_until: datetime


@dataclass
class WeatherSnapshot:
    current: CurrentConditions
    last_updated: datetime
    forecast: list[ForecastDay] = field(default_factory=list)
    alerts: list[WeatherAlert] = field(default_factory=list)
