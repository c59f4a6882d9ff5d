"""
Single Candlestick Pattern Recognition

Boolean predicates for patterns that are read from one candle:

- Hammer: bullish body with a long lower shadow and little upper shadow
- Inverted Hammer: bearish body with a long upper shadow and little lower shadow

Each predicate validates the candle through the geometry primitives.
"""

from typing import Any

from .primitives import is_bearish, is_bullish, is_hammer_like, is_inverted_hammer_like


def is_hammer(candle: Any) -> bool:
    return is_bullish(candle) and is_hammer_like(candle)


def is_inverted_hammer(candle: Any) -> bool:
    return is_bearish(candle) and is_inverted_hammer_like(candle)
