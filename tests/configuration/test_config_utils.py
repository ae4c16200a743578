"""
Tests for ConfigManager utility
"""

import json
import os
from unittest.mock import patch, mock_open

import pytest
from pydantic import ValidationError

from models.config import CalculatorConfig, LocationConfig
from models.events import EventClass
from utils.config_utils import ConfigManager


class TestConfigManager:
    """Test cases for ConfigManager utility class"""

    def test_load_environment(self):
        """Test environment loading"""
        with patch("utils.config_utils.load_dotenv") as mock_load_dotenv:
            ConfigManager.load_environment()
            mock_load_dotenv.assert_called_once()

    def test_load_calculator_config_success(self, tmp_path):
        """Test successful configuration loading"""
        config_path = tmp_path / "solar_config.json"
        config_path.write_text(
            json.dumps(
                {
                    "event_mask": "official|civil",
                    "solar_noon_mode": "legacy",
                    "location": {
                        "latitude": 47.61,
                        "longitude": -122.33,
                        "timezone": "America/Los_Angeles",
                    },
                }
            )
        )

        config = ConfigManager.load_calculator_config(str(config_path))

        assert isinstance(config, CalculatorConfig)
        assert config.event_mask == EventClass.OFFICIAL | EventClass.CIVIL
        assert config.solar_noon_mode == "legacy"
        assert config.location.timezone == "America/Los_Angeles"

    def test_load_calculator_config_defaults_without_file(self, tmp_path):
        """Missing default file falls back to defaults"""
        missing = str(tmp_path / "absent.json")
        with patch.object(ConfigManager, "default_config_path", return_value=missing):
            config = ConfigManager.load_calculator_config()

        assert config == CalculatorConfig()
        assert config.event_mask == EventClass.ALL
        assert config.solar_noon_mode == "midpoint"

    def test_load_calculator_config_file_not_found(self, tmp_path):
        """An explicit path that does not exist is an error"""
        with pytest.raises(FileNotFoundError):
            ConfigManager.load_calculator_config(str(tmp_path / "absent.json"))

    def test_load_calculator_config_invalid_json(self):
        """Test configuration loading with invalid JSON"""
        with patch("builtins.open", mock_open(read_data="invalid json {")):
            with pytest.raises(json.JSONDecodeError):
                ConfigManager.load_calculator_config("solar_config.json")

    def test_load_calculator_config_invalid_values(self, tmp_path):
        config_path = tmp_path / "solar_config.json"
        config_path.write_text(json.dumps({"solar_noon_mode": "sometimes"}))

        with pytest.raises(ValidationError):
            ConfigManager.load_calculator_config(str(config_path))

    def test_override_from_environment(self):
        """Test config override with environment variables"""
        config = CalculatorConfig(
            location=LocationConfig(latitude=10.0, longitude=20.0, timezone="UTC")
        )
        env_vars = {
            "SOLAR_EVENT_MASK": "nautical",
            "SOLAR_NOON_MODE": "Legacy",
            "SOLAR_LATITUDE": "37.77",
            "SOLAR_TIMEZONE": "America/Los_Angeles",
        }

        with patch.dict(os.environ, env_vars, clear=True):
            updated_config = ConfigManager.override_from_environment(config)

        assert updated_config.event_mask == EventClass.NAUTICAL
        assert updated_config.solar_noon_mode == "legacy"
        assert updated_config.location.latitude == 37.77
        assert updated_config.location.longitude == 20.0
        assert updated_config.location.timezone == "America/Los_Angeles"

    def test_override_from_environment_no_env_vars(self):
        """Test config override without environment variables"""
        config = CalculatorConfig(event_mask="civil")

        with patch.dict(os.environ, {}, clear=True):
            updated_config = ConfigManager.override_from_environment(config)

        # Should remain unchanged
        assert updated_config is config

    def test_override_from_environment_invalid_mask(self):
        with patch.dict(os.environ, {"SOLAR_EVENT_MASK": "sunrise"}, clear=True):
            with pytest.raises(ValidationError):
                ConfigManager.override_from_environment(CalculatorConfig())

    def test_get_config_summary(self):
        """Test configuration summary generation"""
        config = CalculatorConfig(
            event_mask=EventClass.OFFICIAL | EventClass.ASTRONOMICAL,
            location=LocationConfig(latitude=0.0, longitude=0.0, timezone="Europe/London"),
        )

        summary = ConfigManager.get_config_summary(config)

        assert summary == {
            "event_mask": "OFFICIAL|ASTRONOMICAL",
            "solar_noon_mode": "midpoint",
            "location_configured": True,
            "timezone": "Europe/London",
        }

    def test_get_config_summary_without_location(self):
        summary = ConfigManager.get_config_summary(CalculatorConfig())

        assert summary["event_mask"] == "OFFICIAL|CIVIL|NAUTICAL|ASTRONOMICAL"
        assert summary["location_configured"] is False
        assert summary["timezone"] == "not configured"
