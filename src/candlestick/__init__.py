"""
Candlestick: OHLC Candlestick Pattern Recognition

Classifies ordered sequences of open/high/low/close candles into named
candlestick chart patterns (hammer, shooting star, engulfing, harami,
kicker, ...), both as boolean predicates over one or two candles and as
whole-sequence sliding-window scanners.
"""

__version__ = "0.1.0"
__description__ = "OHLC candlestick pattern recognition"

# Package-level imports for convenience
from .config import Config
from .logger import configure_logging
from .models import Candle, PatternType
from .patterns import (
    ArgumentRequiredError,
    CandleValidationError,
    InvalidRangeError,
    PatternRecognizer,
    PropertyRequiredError,
    bearish_engulfing,
    bearish_harami,
    bearish_kicker,
    bullish_engulfing,
    bullish_harami,
    bullish_kicker,
    hammer,
    hanging_man,
    inverted_hammer,
    is_bearish_engulfing,
    is_bearish_harami,
    is_bearish_kicker,
    is_bullish_engulfing,
    is_bullish_harami,
    is_bullish_kicker,
    is_hammer,
    is_hanging_man,
    is_inverted_hammer,
    is_shooting_star,
    scan,
    scan_all,
    shooting_star,
    validate,
)

__all__ = [
    "Config",
    "Candle",
    "PatternType",
    "PatternRecognizer",
    "configure_logging",
    "validate",
    "scan",
    "scan_all",
    "ArgumentRequiredError",
    "CandleValidationError",
    "InvalidRangeError",
    "PropertyRequiredError",
    "is_hammer",
    "is_inverted_hammer",
    "is_hanging_man",
    "is_shooting_star",
    "is_bullish_engulfing",
    "is_bearish_engulfing",
    "is_bullish_harami",
    "is_bearish_harami",
    "is_bullish_kicker",
    "is_bearish_kicker",
    "hammer",
    "inverted_hammer",
    "hanging_man",
    "shooting_star",
    "bullish_engulfing",
    "bearish_engulfing",
    "bullish_harami",
    "bearish_harami",
    "bullish_kicker",
    "bearish_kicker",
    "__version__",
]
