"""
Pytest configuration and fixtures for candlestick pattern tests.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Generator

import pytest
from unittest.mock import patch

from candlestick.models import Candle


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def mock_env_vars() -> Generator[dict, None, None]:
    """Mock environment variables for testing."""
    test_env = {
        "CANDLESTICK_LOG_LEVEL": "DEBUG",
        "CANDLESTICK_LOG_MAX_SIZE": "5MB",
        "CANDLESTICK_LOG_BACKUP_COUNT": "3",
        "CANDLESTICK_LOG_CONSOLE": "false",
        "CANDLESTICK_ENABLED_PATTERNS": "hammer, bullish_engulfing",
    }

    with patch.dict(os.environ, test_env, clear=False):
        yield test_env


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Remove candlestick variables from the environment for one test."""
    with patch.dict(os.environ, {}, clear=False):
        for key in [k for k in os.environ if k.startswith("CANDLESTICK_")]:
            del os.environ[key]
        yield


@pytest.fixture
def reset_package_logger() -> Generator[None, None, None]:
    """Restore the package logger after a test reconfigures it."""
    yield
    logger = logging.getLogger("candlestick")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def hammer_candle() -> Candle:
    """Bullish candle with a long lower shadow and no upper shadow."""
    return Candle(open="10", high="10.3", low="5", close="10.3")


@pytest.fixture
def inverted_hammer_candle() -> Candle:
    """Bearish candle with a long upper shadow and no lower shadow."""
    return Candle(open="10.3", high="15", low="10", close="10")


@pytest.fixture
def doji_candle() -> Candle:
    return Candle(open="10", high="11", low="9", close="10")


@pytest.fixture
def plain_bullish_candle() -> Candle:
    """Bullish candle with balanced shadows, matching no single pattern."""
    return Candle(open="10", high="12", low="9", close="11")


@pytest.fixture
def bullish_engulfing_pair() -> tuple:
    previous = Candle(open="10", high="10", low="8", close="8.5")
    current = Candle(open="8", high="11", low="7.5", close="10.8")
    return previous, current


@pytest.fixture
def bearish_engulfing_pair() -> tuple:
    previous = Candle(open="8.5", high="10", low="8", close="10")
    current = Candle(open="10.8", high="11", low="7.5", close="8")
    return previous, current


@pytest.fixture
def bullish_harami_pair() -> tuple:
    previous = Candle(open="11", high="11.5", low="7.5", close="8")
    current = Candle(open="9", high="10.5", low="8.5", close="10")
    return previous, current


@pytest.fixture
def bearish_harami_pair() -> tuple:
    previous = Candle(open="8", high="11.5", low="7.5", close="11")
    current = Candle(open="10", high="10.5", low="8.5", close="9")
    return previous, current


@pytest.fixture
def bullish_kicker_pair() -> tuple:
    previous = Candle(open="10", high="10.2", low="8.8", close="9")
    current = Candle(open="10.5", high="12", low="10.4", close="11.8")
    return previous, current


@pytest.fixture
def bearish_kicker_pair() -> tuple:
    previous = Candle(open="10", high="11.2", low="9.8", close="11")
    current = Candle(open="9.5", high="9.6", low="8", close="8.2")
    return previous, current


@pytest.fixture
def hanging_man_pair() -> tuple:
    previous = Candle(open="10", high="10.6", low="9.9", close="10.5")
    current = Candle(open="11.3", high="11.3", low="9", close="11")
    return previous, current


@pytest.fixture
def shooting_star_pair() -> tuple:
    previous = Candle(open="10", high="10.6", low="9.9", close="10.5")
    current = Candle(open="11.3", high="13", low="11", close="11")
    return previous, current
