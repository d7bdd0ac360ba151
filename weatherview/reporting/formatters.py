"""Output formatters for a parsed forecast table."""

import json

from weatherview.display.icons import classify_air_quality, icon_file
from weatherview.display.labels import city_label, short_date, temp_range, week_label
from weatherview.display.trend import high_trend, low_trend
from weatherview.models.forecast import ForecastTable

# Vertical middle used when emitting trend offsets without a real chart.
TREND_MIDDLE = 0


def format_forecast_text(table: ForecastTable) -> str:
    """Plain text view: today's panel followed by one line per fresh day."""
    today = table.today
    lines = [
        f"=== {city_label(today)} | {today.date}  {today.week} ===",
        f"Now: {today.temp}℃  {temp_range(today)}  {today.weather_type}",
        f"Wind: {today.wind_direction} {today.wind_level} | "
        f"Humidity: {today.humidity} | PM2.5: {today.pm25} | "
        f"Air: {today.air_quality_level}",
    ]
    if today.tip:
        lines.append(f"Tip: {today.tip}")
    for i, day in enumerate(table.fresh_days()):
        bucket = classify_air_quality(day.air_quality_level)
        air = f"{day.air_quality_level}({bucket})" if bucket else day.air_quality_level
        lines.append(
            f"{week_label(i, day.week):<4} {short_date(day.date):<6} "
            f"{day.weather_type:<8} {temp_range(day):<12} "
            f"{day.wind_direction} {day.wind_level}  {air}"
        )
    if table.valid_through == 0:
        lines.append("No daily forecast available")
    return "\n".join(lines)


def format_forecast_json(table: ForecastTable) -> str:
    """JSON view for programmatic consumption. Stale slots are omitted."""
    days = []
    for i, day in enumerate(table.fresh_days()):
        bucket = classify_air_quality(day.air_quality_level)
        days.append({
            "label": week_label(i, day.week),
            "date": day.date,
            "week": day.week,
            "weather_type": day.weather_type,
            "icon": icon_file(day.weather_type),
            "temp": day.temp,
            "temp_low": day.temp_low,
            "temp_high": day.temp_high,
            "wind_direction": day.wind_direction,
            "wind_level": day.wind_level,
            "air_quality_level": day.air_quality_level,
            "air_quality_bucket": bucket.value if bucket else None,
            "humidity": day.humidity,
            "tip": day.tip,
        })
    data = {
        "city": table.today.city,
        "pm25": table.today.pm25,
        "valid_through": table.valid_through,
        "days": days,
        "trend": {
            "high": [p.y for p in high_trend(table, TREND_MIDDLE)],
            "low": [p.y for p in low_trend(table, TREND_MIDDLE)],
        },
    }
    return json.dumps(data, ensure_ascii=False, indent=2)
