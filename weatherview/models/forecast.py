"""Seven-day forecast data models."""

from dataclasses import dataclass, field
from enum import StrEnum

FORECAST_DAYS = 7


class AirQualityBucket(StrEnum):
    EXCELLENT = "excellent"
    GOOD = "good"
    LIGHT = "light"
    MODERATE = "moderate"
    HEAVY = "heavy"


@dataclass
class DayForecast:
    city: str = ""
    date: str = ""  # YYYY-MM-DD
    week: str = ""
    weather_type: str = ""
    temp: str = ""
    temp_low: str = ""
    temp_high: str = ""
    wind_direction: str = ""
    wind_level: str = ""
    air_quality_level: str = ""
    humidity: str = ""
    pm25: str = ""  # only populated on day 0
    tip: str = ""


@dataclass
class ForecastTable:
    """Fixed seven-slot forecast array.

    ``valid_through`` counts the leading slots written by the last parse that
    carried a ``data`` array. Slots at or past it hold whatever an earlier
    parse left there and must be treated as stale.
    """

    days: list[DayForecast] = field(
        default_factory=lambda: [DayForecast() for _ in range(FORECAST_DAYS)]
    )
    valid_through: int = 0

    def __getitem__(self, index: int) -> DayForecast:
        return self.days[index]

    def __len__(self) -> int:
        return len(self.days)

    def __iter__(self):
        return iter(self.days)

    @property
    def today(self) -> DayForecast:
        return self.days[0]

    def is_stale(self, index: int) -> bool:
        return index >= self.valid_through

    def fresh_days(self) -> list[DayForecast]:
        return self.days[: self.valid_through]
