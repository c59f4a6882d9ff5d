"""
Candlestick Pattern Recognition Module

Boolean predicates and sliding-window scanners for candlestick patterns.

Pattern Types:
- Single candlestick patterns (Hammer, Inverted Hammer)
- Two-candlestick patterns (Hanging Man, Shooting Star, Engulfing,
  Harami, Kicker)

Predicates (`is_hammer`, `is_bullish_engulfing`, ...) test one window;
scanners (`hammer`, `bullish_engulfing`, ...) return the last candle of
every matching window in a sequence.
"""

from .validation import (
    ArgumentRequiredError,
    CandleValidationError,
    InvalidRangeError,
    PropertyRequiredError,
    validate,
)
from .single_candlestick import is_hammer, is_inverted_hammer
from .multi_candlestick import (
    is_bearish_engulfing,
    is_bearish_harami,
    is_bearish_kicker,
    is_bullish_engulfing,
    is_bullish_harami,
    is_bullish_kicker,
    is_hanging_man,
    is_shooting_star,
)
from .scanner import (
    PATTERNS,
    PatternDefinition,
    SingleCandlePattern,
    TwoCandlePattern,
    bearish_engulfing,
    bearish_harami,
    bearish_kicker,
    bullish_engulfing,
    bullish_harami,
    bullish_kicker,
    get_pattern,
    hammer,
    hanging_man,
    inverted_hammer,
    scan,
    shooting_star,
)
from .recognizer import PatternRecognizer, scan_all

__all__ = [
    # Validation
    "ArgumentRequiredError",
    "CandleValidationError",
    "InvalidRangeError",
    "PropertyRequiredError",
    "validate",
    # Predicates
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
    # Scanners
    "PATTERNS",
    "PatternDefinition",
    "SingleCandlePattern",
    "TwoCandlePattern",
    "get_pattern",
    "scan",
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
    # Recognizer
    "PatternRecognizer",
    "scan_all",
]
