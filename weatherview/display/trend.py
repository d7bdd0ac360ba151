"""Temperature trend chart geometry for the high/low lines."""

from dataclasses import dataclass

from weatherview.models.forecast import ForecastTable

# The charts span the six day columns of the viewer; stale slots are not drawn.
TREND_DAYS = 6
DEFAULT_SCALE = 3


@dataclass(frozen=True)
class TrendPoint:
    index: int
    y: int
    label: str


def _to_int(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        return 0


def temperature_trend(
    values: list[str], middle: int, scale: int = DEFAULT_SCALE
) -> list[TrendPoint]:
    """Offset each value from the mean around the chart's vertical middle.

    Non-numeric values count as 0. The mean is truncated toward zero.
    """
    if not values:
        return []
    temps = [_to_int(v) for v in values]
    average = int(sum(temps) / len(temps))
    return [
        TrendPoint(index=i, y=middle - (t - average) * scale, label=f"{v}°")
        for i, (t, v) in enumerate(zip(temps, values))
    ]


def high_trend(table: ForecastTable, middle: int) -> list[TrendPoint]:
    return temperature_trend([d.temp_high for d in table.fresh_days()[:TREND_DAYS]], middle)


def low_trend(table: ForecastTable, middle: int) -> list[TrendPoint]:
    return temperature_trend([d.temp_low for d in table.fresh_days()[:TREND_DAYS]], middle)
