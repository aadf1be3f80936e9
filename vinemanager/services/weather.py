"""
Canned vineyard weather.

There is no weather provider behind this service: the snapshot is the fixed
data the dashboard was designed against, and "refresh" only waits the
configured delay and bumps last_updated. Everything a client shows besides
the raw numbers (icons, advice, risk badges) is derived here.
"""
import asyncio
import logging
from datetime import date, datetime, timezone
from typing import Optional

from vinemanager.db.store import VineyardStore
from vinemanager.models.weather import CurrentConditions, ForecastDay, WeatherAlert, WeatherSnapshot

logger = logging.getLogger(__name__)

RAIN_LIKELY_PCT = 50.0

# Condition text (lowercased) → emoji
_CONDITION_ICONS: dict[str, str] = {
    "sunny": "☀️", "clear": "☀️",
    "partly-cloudy": "⛅", "partly cloudy": "⛅",
    "cloudy": "☁️", "overcast": "☁️",
    "rainy": "🌧️", "light rain": "🌧️", "rain": "🌧️",
    "snow": "❄️",
    "fog": "🌫️",
}
_DEFAULT_ICON = "🌤️"


def canned_weather(now: Optional[datetime] = None) -> WeatherSnapshot:
    return WeatherSnapshot(
        current=CurrentConditions(
            temperature_c=22,
            humidity_pct=65,
            wind_kmh=12,
            wind_direction="NW",
            pressure_hpa=1013,
            visibility_km=10,
            condition="Partly Cloudy",
        ),
        forecast=[
            ForecastDay(date(2024, 1, 8), high_c=24, low_c=16, condition="Sunny", precipitation_pct=0),
            ForecastDay(date(2024, 1, 9), high_c=26, low_c=18, condition="Partly Cloudy", precipitation_pct=10),
            ForecastDay(date(2024, 1, 10), high_c=20, low_c=14, condition="Light Rain", precipitation_pct=75),
            ForecastDay(date(2024, 1, 11), high_c=23, low_c=15, condition="Cloudy", precipitation_pct=20),
            ForecastDay(date(2024, 1, 12), high_c=25, low_c=17, condition="Sunny", precipitation_pct=5),
        ],
        alerts=[
            WeatherAlert(
                alert_type="Frost Warning",
                severity="moderate",
                message="Temperatures may drop below 0°C overnight. Protect sensitive vines.",
                valid_until=datetime(2024, 1, 9, 8, 0, tzinfo=timezone.utc),
            ),
        ],
        last_updated=now or datetime.now(timezone.utc),
    )


def condition_icon(condition: str) -> str:
    return _CONDITION_ICONS.get(condition.strip().lower(), _DEFAULT_ICON)


def temperature_advice(temp_c: float) -> str:
    if temp_c < 0:
        return "Risk of frost damage - protect vines!"
    if temp_c < 10:
        return "Cold conditions - monitor vine health"
    if temp_c > 35:
        return "High heat - ensure adequate irrigation"
    if 20 <= temp_c <= 30:
        return "Optimal growing conditions"
    return "Monitor vine conditions"


def disease_risk(humidity_pct: float) -> str:
    return "High" if humidity_pct > 80 else "Low"


def irrigation_need(humidity_pct: float) -> str:
    return "High" if humidity_pct < 40 else "Normal"


def frost_warning(snapshot: WeatherSnapshot) -> bool:
    if snapshot.current.temperature_c < 0:
        return True
    return any(day.low_c < 0 for day in snapshot.forecast)


def rain_expected_on(snapshot: WeatherSnapshot) -> Optional[date]:
    """First forecast day where rain is likely, if any."""
    for day in snapshot.forecast:
        if day.precipitation_pct >= RAIN_LIKELY_PCT:
            return day.date
    return None


def get_weather(store: VineyardStore) -> WeatherSnapshot:
    if store.weather is None:
        logger.debug("weather: no snapshot yet, loading canned data")
        store.weather = canned_weather()
    return store.weather


async def _stamp_after(snapshot: WeatherSnapshot, delay: float) -> WeatherSnapshot:
    await asyncio.sleep(delay)
    snapshot.last_updated = datetime.now(timezone.utc)
    logger.info("weather: refreshed at %s", snapshot.last_updated.isoformat())
    return snapshot


async def refresh_weather(store: VineyardStore, delay: float) -> WeatherSnapshot:
    """Simulated refresh: wait, then stamp the snapshot as freshly updated. Not cancellable."""
    snapshot = get_weather(store)
    return await asyncio.shield(_stamp_after(snapshot, delay))
