"""Tests for forecast output formatters."""

import json

from weatherview.ingest.forecast_parser import parse_forecast
from weatherview.models.forecast import ForecastTable
from weatherview.reporting.formatters import format_forecast_json, format_forecast_text


def _parsed(raw: bytes) -> ForecastTable:
    table = ForecastTable()
    parse_forecast(raw, into=table)
    return table


class TestFormatText:
    def test_today_panel(self, beijing_raw: bytes):
        text = format_forecast_text(_parsed(beijing_raw))
        assert "北京市" in text
        assert "18℃~30℃" in text
        assert "PM2.5: 18" in text
        assert "Tip: 建议穿短衫" in text

    def test_relative_labels_and_buckets(self, beijing_raw: bytes):
        lines = format_forecast_text(_parsed(beijing_raw)).splitlines()
        day_lines = lines[-7:]
        assert day_lines[0].startswith("今天")
        assert day_lines[1].startswith("明天")
        assert day_lines[2].startswith("后天")
        assert day_lines[3].startswith("星期三")
        assert "优(excellent)" in day_lines[0]

    def test_no_days(self):
        table = ForecastTable()
        parse_forecast(b'{"city": "x"}', into=table)
        assert "No daily forecast available" in format_forecast_text(table)


class TestFormatJson:
    def test_structure(self, beijing_raw: bytes):
        data = json.loads(format_forecast_json(_parsed(beijing_raw)))
        assert data["valid_through"] == 7
        assert data["pm25"] == "18"
        assert data["days"][0]["label"] == "今天"
        assert data["days"][0]["air_quality_bucket"] == "excellent"
        assert data["days"][4]["air_quality_bucket"] == "heavy"
        assert data["days"][3]["icon"] == "Yin.png"
        assert len(data["trend"]["high"]) == 6

    def test_stale_slots_omitted(self, stale_table: ForecastTable):
        parse_forecast(b'{"data": [{"date": "2025-06-01", "air_level": "?"}]}', into=stale_table)
        data = json.loads(format_forecast_json(stale_table))
        assert len(data["days"]) == 1
        assert data["days"][0]["air_quality_bucket"] is None
