"""Text derivations for forecast labels."""

from weatherview.models.forecast import DayForecast

RELATIVE_DAY_LABELS = ("今天", "明天", "后天")


def week_label(index: int, week: str) -> str:
    """Today/tomorrow/day-after for the first three slots, else the weekday."""
    if 0 <= index < len(RELATIVE_DAY_LABELS):
        return RELATIVE_DAY_LABELS[index]
    return week


def short_date(date: str) -> str:
    """``YYYY-MM-DD`` -> ``MM-DD``. Anything else is returned unchanged."""
    parts = date.split("-")
    if len(parts) < 3:
        return date
    return f"{parts[1]}-{parts[2]}"


def temp_range(day: DayForecast) -> str:
    return f"{day.temp_low}℃~{day.temp_high}℃"


def city_label(day: DayForecast) -> str:
    return f"{day.city}市" if day.city else ""
