"""
Candlestick Geometry Primitives

Pure functions measuring a single candle (body, wick and tail lengths,
direction) and the composite relations built on them (hammer-like shapes,
engulfment, gaps between bodies). Each function validates the candle it
reads before computing anything.
"""

from typing import Any

from .validation import get_price, validate


def body_length(candle: Any):
    """
    Distance between the open and close prices.

    Only `open` and `close` are required on the record.

    Returns:
        A positive number or zero.
    """
    validate(candle, name='candle', properties=('open', 'close'))
    return abs(get_price(candle, 'open') - get_price(candle, 'close'))


def wick_length(candle: Any):
    """
    Upper shadow: distance between the top of the body and the high.

    For a bullish candle the top of the body is the close, for a bearish
    candle it is the open.
    """
    validate(candle)
    return get_price(candle, 'high') - max(get_price(candle, 'open'), get_price(candle, 'close'))


def tail_length(candle: Any):
    """
    Lower shadow: distance between the bottom of the body and the low.

    For a bullish candle the bottom of the body is the open, for a bearish
    candle it is the close.
    """
    validate(candle)
    return min(get_price(candle, 'open'), get_price(candle, 'close')) - get_price(candle, 'low')


def is_bullish(candle: Any) -> bool:
    """Close above open. A doji is not bullish."""
    validate(candle)
    return get_price(candle, 'open') < get_price(candle, 'close')


def is_bearish(candle: Any) -> bool:
    """Close below open. A doji is not bearish."""
    validate(candle)
    return get_price(candle, 'open') > get_price(candle, 'close')


def is_hammer_like(candle: Any) -> bool:
    """Lower shadow longer than twice the body, upper shadow shorter than the body."""
    validate(candle)
    body = body_length(candle)
    return tail_length(candle) > body * 2 and wick_length(candle) < body


def is_inverted_hammer_like(candle: Any) -> bool:
    """Upper shadow longer than twice the body, lower shadow shorter than the body."""
    validate(candle)
    body = body_length(candle)
    return wick_length(candle) > body * 2 and tail_length(candle) < body


def is_engulfed(shortest: Any, longest: Any) -> bool:
    """
    True when the body of `shortest` is smaller than the body of `longest`.

    The comparison is purely relative; argument names state the caller's
    expectation.
    """
    return body_length(shortest) < body_length(longest)


def is_gap(lower: Any, upper: Any) -> bool:
    """True when the whole body of `lower` sits below the body of `upper`."""
    validate(lower, name='lower', properties=('open', 'close'))
    validate(upper, name='upper', properties=('open', 'close'))
    lower_top = max(get_price(lower, 'open'), get_price(lower, 'close'))
    upper_bottom = min(get_price(upper, 'open'), get_price(upper, 'close'))
    return lower_top < upper_bottom


def is_gap_up(previous: Any, current: Any) -> bool:
    return is_gap(previous, current)


def is_gap_down(previous: Any, current: Any) -> bool:
    return is_gap(current, previous)
