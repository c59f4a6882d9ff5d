"""
Pattern Type Models

Enumeration of the candlestick patterns recognized by the scanners.
"""

from enum import Enum


class PatternType(str, Enum):
    """Candlestick pattern type enumeration."""
    # Single candle patterns
    HAMMER = "hammer"
    INVERTED_HAMMER = "inverted_hammer"

    # Two candle patterns
    HANGING_MAN = "hanging_man"
    SHOOTING_STAR = "shooting_star"
    BULLISH_ENGULFING = "bullish_engulfing"
    BEARISH_ENGULFING = "bearish_engulfing"
    BULLISH_HARAMI = "bullish_harami"
    BEARISH_HARAMI = "bearish_harami"
    BULLISH_KICKER = "bullish_kicker"
    BEARISH_KICKER = "bearish_kicker"

    @property
    def direction(self) -> str:
        """Expected price direction after the pattern completes."""
        bullish = {
            PatternType.HAMMER,
            PatternType.INVERTED_HAMMER,
            PatternType.BULLISH_ENGULFING,
            PatternType.BULLISH_HARAMI,
            PatternType.BULLISH_KICKER,
        }
        return "bullish" if self in bullish else "bearish"

    @classmethod
    def parse(cls, value: "str | PatternType") -> "PatternType":
        """Resolve a pattern type from its value, case-insensitively."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise KeyError(f"Unknown candlestick pattern: {value!r}") from None
