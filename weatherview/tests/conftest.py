"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from weatherview.config.schema import AppConfig
from weatherview.models.forecast import ForecastTable


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def beijing_raw(fixtures_dir: Path) -> bytes:
    return (fixtures_dir / "tianqi_forecast_beijing.json").read_bytes()


@pytest.fixture
def city_dataset() -> bytes:
    records = [
        {"city_name": "北京市", "city_code": "101010100"},
        {"city_name": "海淀区", "city_code": "101010200"},
        {"city_name": "密云县", "city_code": "101011300"},
        {"city_name": "香港", "city_code": "101320101"},
    ]
    return json.dumps(records, ensure_ascii=False).encode("utf-8")


@pytest.fixture
def dataset_path(tmp_path: Path, city_dataset: bytes) -> Path:
    path = tmp_path / "citycode.json"
    path.write_bytes(city_dataset)
    return path


@pytest.fixture
def default_config() -> AppConfig:
    return AppConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path, dataset_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {
            "base_url": "https://test-tianqi.example.com/api",
            "app_id": "12345",
            "app_secret": "secret",
        },
        "dataset": {"path": str(dataset_path)},
        "transport": {"max_retries": 1, "retry_base_delay": 0.01},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def stale_table() -> ForecastTable:
    """A table whose every slot carries a recognizable pre-parse marker."""
    table = ForecastTable()
    for i, day in enumerate(table.days):
        day.date = f"1999-01-0{i + 1}"
        day.week = f"old-{i}"
        day.weather_type = "雾"
        day.temp_low = "-1"
        day.temp_high = "1"
    table.valid_through = 7
    return table
