from fastapi import APIRouter

from vinemanager.core.config import settings
from vinemanager.core.deps import CurrentStore
from vinemanager.models.weather import WeatherSnapshot
from vinemanager.schemas.display import DisplayRead
from vinemanager.schemas.weather import (
    CurrentConditionsRead,
    ForecastDayRead,
    WeatherAlertRead,
    WeatherRead,
)
from vinemanager.services.display import ALERT_SEVERITY_DISPLAY, describe
from vinemanager.services.weather import (
    condition_icon,
    disease_risk,
    frost_warning,
    get_weather,
    irrigation_need,
    rain_expected_on,
    refresh_weather,
    temperature_advice,
)

router = APIRouter(prefix="/weather", tags=["weather"])


def _snapshot_to_read(snapshot: WeatherSnapshot) -> WeatherRead:
    cur = snapshot.current
    return WeatherRead(
        current=CurrentConditionsRead(
            temperature_c=cur.temperature_c,
            humidity_pct=cur.humidity_pct,
            wind_kmh=cur.wind_kmh,
            wind_direction=cur.wind_direction,
            pressure_hpa=cur.pressure_hpa,
            visibility_km=cur.visibility_km,
            condition=cur.condition,
            icon=condition_icon(cur.condition),
        ),
        forecast=[
            ForecastDayRead(
                date=day.date,
                high_c=day.high_c,
                low_c=day.low_c,
                condition=day.condition,
                precipitation_pct=day.precipitation_pct,
                icon=condition_icon(day.condition),
            )
            for day in snapshot.forecast
        ],
        alerts=[
            WeatherAlertRead(
                alert_type=alert.alert_type,
                severity=alert.severity,
                message=alert.message,
                valid_until=alert.valid_until,
                display=DisplayRead.model_validate(describe(ALERT_SEVERITY_DISPLAY, alert.severity)),
            )
            for alert in snapshot.alerts
        ],
        last_updated=snapshot.last_updated,
        temperature_advice=temperature_advice(cur.temperature_c),
        disease_risk=disease_risk(cur.humidity_pct),
        irrigation_need=irrigation_need(cur.humidity_pct),
        frost_warning=frost_warning(snapshot),
        rain_expected_on=rain_expected_on(snapshot),
    )


@router.get("", response_model=WeatherRead)
async def get_vineyard_weather(store: CurrentStore):
    return _snapshot_to_read(get_weather(store))


@router.post("/refresh", response_model=WeatherRead)
async def refresh_vineyard_weather(store: CurrentStore):
    snapshot = await refresh_weather(store, settings.WEATHER_REFRESH_DELAY_SECONDS)
    return _snapshot_to_read(snapshot)
