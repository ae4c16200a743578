"""
Configuration management utilities for the solar event calculator
"""

import logging
import os
import json
from typing import Optional

from dotenv import load_dotenv

from models.config import CalculatorConfig, LocationConfig
from models.events import expand_event_mask

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "solar_config.json"


class ConfigManager:
    """Utility class for managing configuration and environment setup"""

    @staticmethod
    def load_environment():
        """Load environment variables from .env file"""
        load_dotenv()

    @staticmethod
    def default_config_path() -> str:
        return os.path.join(
            os.path.dirname(os.path.dirname(os.path.dirname(__file__))),
            CONFIG_FILENAME,
        )

    @staticmethod
    def load_calculator_config(config_path: Optional[str] = None) -> CalculatorConfig:
        """Load calculator configuration from JSON, or defaults if the default file is absent"""
        explicit_path = config_path is not None
        config_path = config_path or ConfigManager.default_config_path()

        if not explicit_path and not os.path.exists(config_path):
            logger.debug(f"No configuration file at {config_path}, using defaults")
            return CalculatorConfig()

        try:
            with open(config_path, "r") as f:
                config_data = json.load(f)
            config = CalculatorConfig(**config_data)
            logger.info(f"Loaded calculator configuration from {config_path}")
            return config
        except Exception as e:
            logger.error(f"Error loading configuration: {e}")
            raise

    @staticmethod
    def override_from_environment(config: CalculatorConfig) -> CalculatorConfig:
        """Override config with SOLAR_* environment variables"""
        updates = {}

        event_mask = os.getenv("SOLAR_EVENT_MASK")
        if event_mask:
            updates["event_mask"] = event_mask

        noon_mode = os.getenv("SOLAR_NOON_MODE")
        if noon_mode:
            updates["solar_noon_mode"] = noon_mode.strip().lower()

        latitude = os.getenv("SOLAR_LATITUDE")
        longitude = os.getenv("SOLAR_LONGITUDE")
        timezone = os.getenv("SOLAR_TIMEZONE")
        if latitude or longitude or timezone:
            location = config.location.model_dump() if config.location else {}
            if latitude:
                location["latitude"] = latitude
            if longitude:
                location["longitude"] = longitude
            if timezone:
                location["timezone"] = timezone
            updates["location"] = LocationConfig(**location)

        if not updates:
            return config

        # Rebuild rather than model_copy so overrides are validated
        merged = config.model_dump()
        merged.update(updates)
        return CalculatorConfig(**merged)

    @staticmethod
    def get_config_summary(config: CalculatorConfig) -> dict:
        """Get a summary of the current configuration for logging/debugging"""
        return {
            "event_mask": "|".join(
                event_class.name for event_class in expand_event_mask(config.event_mask)
            ),
            "solar_noon_mode": config.solar_noon_mode,
            "location_configured": config.location is not None,
            "timezone": (
                config.location.timezone if config.location else "not configured"
            ),
        }
