"""
Utility modules for the solar event calculator
"""

from .solar import SolarCalculator
from .config_utils import ConfigManager

__all__ = [
    "SolarCalculator",
    "ConfigManager",
]
