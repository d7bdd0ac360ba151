"""Tests for the seven-slot forecast table."""

from weatherview.models.forecast import FORECAST_DAYS, DayForecast, ForecastTable
from weatherview.models.session import RefreshOutcome, RefreshStatus


class TestForecastTable:
    def test_always_seven_slots(self):
        table = ForecastTable()
        assert len(table) == FORECAST_DAYS == 7
        assert all(isinstance(d, DayForecast) for d in table)

    def test_slots_are_independent(self):
        table = ForecastTable()
        table[0].city = "北京"
        assert table[1].city == ""

    def test_new_table_is_entirely_stale(self):
        table = ForecastTable()
        assert table.valid_through == 0
        assert all(table.is_stale(i) for i in range(7))
        assert table.fresh_days() == []

    def test_fresh_days(self):
        table = ForecastTable()
        table.valid_through = 2
        table[0].date = "2025-06-01"
        assert [d.date for d in table.fresh_days()] == ["2025-06-01", ""]
        assert table.today is table[0]


class TestRefreshOutcome:
    def test_ok_flag(self):
        assert RefreshOutcome(RefreshStatus.OK, "北京", "101010100").ok
        assert not RefreshOutcome(RefreshStatus.PARSE_FAILED, "北京").ok
