"""Forecast parser: turns a tianqiapi v9 response body into a ForecastTable."""

import json
import logging
from typing import Any

from weatherview.models.forecast import FORECAST_DAYS, DayForecast, ForecastTable

logger = logging.getLogger(__name__)

# Position of the advisory entry inside each day's ``index`` array.
TIP_INDEX = 3


class ForecastParseError(Exception):
    """Response body is not JSON or its root is not an object."""


def decode_forecast(raw: bytes) -> dict:
    try:
        root = json.loads(raw)
    except (ValueError, TypeError) as e:
        raise ForecastParseError(f"response is not valid JSON: {e}") from e
    if not isinstance(root, dict):
        raise ForecastParseError(
            f"response root is {type(root).__name__}, expected object"
        )
    return root


def parse_forecast(raw: bytes, into: ForecastTable) -> int | None:
    """Parse ``raw`` into the table in place.

    Returns the number of day slots written, or None (table untouched) when
    the body cannot be decoded. Slot 0 city/pm25 are always refreshed; day
    slots are written only when ``data`` is an array, up to seven of them.
    Slots past the number of days received are not cleared.
    """
    try:
        root = decode_forecast(raw)
    except ForecastParseError as e:
        logger.warning("Discarding forecast response: %s", e)
        return None

    into.days[0].city = _text(root.get("city"))
    aqi = root.get("aqi")
    into.days[0].pm25 = _text(aqi.get("pm25")) if isinstance(aqi, dict) else ""

    data = root.get("data")
    if not isinstance(data, list):
        logger.warning("Forecast response for %r has no data array", into.days[0].city)
        return 0

    written = 0
    for i, entry in enumerate(data[:FORECAST_DAYS]):
        _fill_day(into.days[i], entry if isinstance(entry, dict) else {})
        written += 1
    into.valid_through = written

    if written < FORECAST_DAYS:
        logger.info(
            "Forecast for %r has %d of %d days, slots %d+ are stale",
            into.days[0].city, written, FORECAST_DAYS, written,
        )
    return written


def _fill_day(day: DayForecast, obj: dict) -> None:
    day.date = _text(obj.get("date"))
    day.week = _text(obj.get("week"))
    day.weather_type = _text(obj.get("wea"))
    day.temp = _text(obj.get("tem"))
    day.temp_low = _text(obj.get("tem2"))
    day.temp_high = _text(obj.get("tem1"))
    day.wind_direction = _text(_nth(obj.get("win"), 0))
    day.wind_level = _text(obj.get("win_speed"))
    day.air_quality_level = _text(obj.get("air_level"))
    day.humidity = _text(obj.get("humidity"))
    day.tip = _extract_tip(obj.get("index"))


def _extract_tip(index: Any) -> str:
    """``index[3].desc``; empty when the array is short or the entry malformed."""
    entry = _nth(index, TIP_INDEX)
    if not isinstance(entry, dict):
        return ""
    return _text(entry.get("desc"))


def _nth(value: Any, n: int) -> Any:
    if isinstance(value, list) and len(value) > n:
        return value[n]
    return None


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    # bool is an int subclass but never a display value here
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""
