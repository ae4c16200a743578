"""
Pytest configuration and shared fixtures for the solar calculator tests
"""

import datetime as dt
import os
import sys

import pytest

# Add src to Python path for all tests
tests_dir = os.path.dirname(__file__)
project_root = os.path.dirname(tests_dir)
src_path = os.path.abspath(os.path.join(project_root, "src"))

if src_path not in sys.path:
    sys.path.insert(0, src_path)

from models.requests import Coordinate  # noqa: E402


@pytest.fixture
def san_francisco():
    """San Francisco, used for the near-solstice reference scenario"""
    return Coordinate(latitude=37.77, longitude=-122.42)


@pytest.fixture
def null_island():
    """Equator at the prime meridian"""
    return Coordinate(latitude=0.0, longitude=0.0)


@pytest.fixture
def solstice():
    return dt.date(2024, 6, 20)


@pytest.fixture
def equinox():
    return dt.date(2024, 3, 20)
