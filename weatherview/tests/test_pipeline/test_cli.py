"""Tests for CLI commands."""

import json
from pathlib import Path

import httpx
import respx

from weatherview.cli import main
from weatherview.config.loader import load_config

BASE_URL = "https://test-tianqi.example.com/api"


class TestCLI:
    def test_no_command_returns_1(self, capsys):
        result = main([])
        assert result == 1

    def test_config_show(self, tmp_path: Path, capsys):
        config_path = tmp_path / "test.yaml"
        config_path.write_text("")
        result = main(["--config", str(config_path), "config", "show"])
        assert result == 0
        captured = capsys.readouterr()
        assert "tianqiapi" in captured.out

    def test_config_set(self, tmp_path: Path, capsys):
        config_path = tmp_path / "test.yaml"
        config_path.write_text("")
        result = main([
            "--config", str(config_path), "config", "set", "transport.max_retries=4"
        ])
        assert result == 0
        assert "Set transport.max_retries = 4" in capsys.readouterr().out
        assert load_config(config_path).transport.max_retries == 4

    def test_config_set_invalid_value_not_written(self, tmp_path: Path, capsys):
        config_path = tmp_path / "test.yaml"
        config_path.write_text("")
        result = main([
            "--config", str(config_path), "config", "set", "transport.timeout_seconds=-1"
        ])
        assert result == 1
        assert config_path.read_text() == ""

    def test_config_set_bad_format(self, tmp_path: Path, capsys):
        result = main(["--config", str(tmp_path / "x.yaml"), "config", "set", "nokey"])
        assert result == 1

    def test_resolve(self, config_yaml_path: Path, capsys):
        result = main(["--config", str(config_yaml_path), "resolve", "北京"])
        assert result == 0
        assert capsys.readouterr().out.strip() == "101010100"

    def test_resolve_not_found(self, config_yaml_path: Path, capsys):
        result = main(["--config", str(config_yaml_path), "resolve", "纽约"])
        assert result == 1
        assert "not found" in capsys.readouterr().out

    @respx.mock
    def test_forecast_text(self, config_yaml_path: Path, beijing_raw: bytes, capsys):
        respx.get(BASE_URL).mock(return_value=httpx.Response(200, content=beijing_raw))

        result = main(["--config", str(config_yaml_path), "forecast", "北京"])
        assert result == 0
        out = capsys.readouterr().out
        assert "北京市" in out
        assert "今天" in out
        assert "多云转晴" in out

    @respx.mock
    def test_forecast_json(self, config_yaml_path: Path, beijing_raw: bytes, capsys):
        respx.get(BASE_URL).mock(return_value=httpx.Response(200, content=beijing_raw))

        result = main([
            "--config", str(config_yaml_path), "forecast", "北京", "--format", "json"
        ])
        assert result == 0
        data = json.loads(capsys.readouterr().out)
        assert data["city"] == "北京"
        assert len(data["days"]) == 7
        assert data["days"][1]["icon"] == "Qing.png"

    @respx.mock
    def test_forecast_transport_error(self, config_yaml_path: Path, capsys):
        respx.get(BASE_URL).mock(return_value=httpx.Response(500))

        result = main(["--config", str(config_yaml_path), "forecast", "北京"])
        assert result == 1
        assert "transport_failed" in capsys.readouterr().out

    def test_forecast_unknown_city(self, config_yaml_path: Path, capsys):
        result = main(["--config", str(config_yaml_path), "forecast", "纽约"])
        assert result == 1
        assert "city_not_found" in capsys.readouterr().out
