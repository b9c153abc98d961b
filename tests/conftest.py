"""Shared pytest fixtures.

Environment variables are set before importing stockscore so cached
settings pick up the test configuration.
"""
import os

os.environ["STOCKSCORE_ENVIRONMENT"] = "test"
os.environ["STOCKSCORE_LOG_LEVEL"] = "WARNING"

import pytest

from stockscore.core.config import Settings, get_settings
from stockscore.utils.structured_logging import configure_structured_logging
from tests.utils.mock_data import flat_bars, random_walk_bars, regime_bars


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """Configure structured logging once for the test session."""
    get_settings.cache_clear()
    settings = get_settings()
    configure_structured_logging(settings.log_level, json_format=settings.log_json)
    yield


@pytest.fixture
def test_settings() -> Settings:
    return Settings(environment="test", log_level="WARNING", debug=True)


@pytest.fixture
def flat_series() -> list[dict]:
    """800 bars of constant close 100 and volume 1000."""
    return flat_bars(800)


@pytest.fixture
def decline_series() -> list[dict]:
    """760 bars: 634 at (close 100, volume 1000) then 126 at (85, 1400)."""
    return regime_bars((634, 100.0, 1000.0), (126, 85.0, 1400.0))


@pytest.fixture
def random_series() -> list[dict]:
    return random_walk_bars(days=800, seed=7)
