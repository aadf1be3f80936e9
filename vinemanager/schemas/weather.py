from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel

from vinemanager.schemas.display import DisplayRead


class CurrentConditionsRead(BaseModel):
    temperature_c: float
    humidity_pct: float
    wind_kmh: float
    wind_direction: str
    pressure_hpa: float
    visibility_km: float
    condition: str
    icon: str

    model_config = {"from_attributes": True}


class ForecastDayRead(BaseModel):
    date: date
    high_c: float
    low_c: float
    condition: str
    precipitation_pct: float
    icon: str


class WeatherAlertRead(BaseModel):
    alert_type: str
    severity: str
    message: str
    valid_until: datetime
    display: DisplayRead


class WeatherRead(BaseModel):
    current: CurrentConditionsRead
    forecast: list[ForecastDayRead]
    alerts: list[WeatherAlertRead]
    last_updated: datetime
    temperature_advice: str
    disease_risk: str
    irrigation_need: str
    frost_warning: bool
    rain_expected_on: Optional[date] = None
