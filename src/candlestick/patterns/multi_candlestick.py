"""
Multi-Candlestick Pattern Recognition

Boolean predicates for patterns read from a pair of consecutive candles,
`previous` followed by `current`:

- Hanging Man / Shooting Star: bullish candle, then a bearish hammer-like
  (or inverted hammer-like) candle gapping up
- Bullish / Bearish Engulfing: direction flips and the current body is
  larger than the previous one
- Bullish / Bearish Harami: direction flips and the current body is
  smaller than the previous one
- Bullish / Bearish Kicker: direction flips with a gap between the bodies

Both candles are validated before the pattern terms are evaluated, so a
malformed record raises even when an earlier term already rules the
pattern out.
"""

from typing import Any

from .primitives import (
    is_bearish,
    is_bullish,
    is_engulfed,
    is_gap_down,
    is_gap_up,
    is_hammer_like,
    is_inverted_hammer_like,
)
from .validation import validate


def _validate_pair(previous: Any, current: Any) -> None:
    validate(previous, name='previous')
    validate(current, name='current')


def is_hanging_man(previous: Any, current: Any) -> bool:
    _validate_pair(previous, current)
    return (
        is_bullish(previous)
        and is_bearish(current)
        and is_gap_up(previous, current)
        and is_hammer_like(current)
    )


def is_shooting_star(previous: Any, current: Any) -> bool:
    _validate_pair(previous, current)
    return (
        is_bullish(previous)
        and is_bearish(current)
        and is_gap_up(previous, current)
        and is_inverted_hammer_like(current)
    )


def is_bullish_engulfing(previous: Any, current: Any) -> bool:
    _validate_pair(previous, current)
    return (
        is_bearish(previous)
        and is_bullish(current)
        and is_engulfed(previous, current)
    )


def is_bearish_engulfing(previous: Any, current: Any) -> bool:
    _validate_pair(previous, current)
    return (
        is_bullish(previous)
        and is_bearish(current)
        and is_engulfed(previous, current)
    )


def is_bullish_harami(previous: Any, current: Any) -> bool:
    _validate_pair(previous, current)
    return (
        is_bearish(previous)
        and is_bullish(current)
        and is_engulfed(current, previous)
    )


def is_bearish_harami(previous: Any, current: Any) -> bool:
    _validate_pair(previous, current)
    return (
        is_bullish(previous)
        and is_bearish(current)
        and is_engulfed(current, previous)
    )


def is_bullish_kicker(previous: Any, current: Any) -> bool:
    _validate_pair(previous, current)
    return (
        is_bearish(previous)
        and is_bullish(current)
        and is_gap_up(previous, current)
    )


def is_bearish_kicker(previous: Any, current: Any) -> bool:
    _validate_pair(previous, current)
    return (
        is_bullish(previous)
        and is_bearish(current)
        and is_gap_down(previous, current)
    )
