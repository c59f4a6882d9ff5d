"""
Unit tests for two-candlestick pattern predicates.
"""

import pytest

from candlestick.models import Candle
from candlestick.patterns import (
    ArgumentRequiredError,
    InvalidRangeError,
    PropertyRequiredError,
    is_bearish_engulfing,
    is_bearish_harami,
    is_bearish_kicker,
    is_bullish_engulfing,
    is_bullish_harami,
    is_bullish_kicker,
    is_hanging_man,
    is_shooting_star,
)


TWO_CANDLE_PREDICATES = [
    is_hanging_man,
    is_shooting_star,
    is_bullish_engulfing,
    is_bearish_engulfing,
    is_bullish_harami,
    is_bearish_harami,
    is_bullish_kicker,
    is_bearish_kicker,
]


class TestEngulfing:
    """Test Bullish and Bearish Engulfing predicates."""

    def test_bullish_engulfing(self, bullish_engulfing_pair):
        previous, current = bullish_engulfing_pair
        assert is_bullish_engulfing(previous, current) is True
        assert is_bearish_engulfing(previous, current) is False

    def test_bullish_engulfing_from_dicts(self):
        previous = {"open": 10, "high": 10, "low": 8, "close": 8.5}
        current = {"open": 8, "high": 11, "low": 7.5, "close": 10.8}
        assert is_bullish_engulfing(previous, current) is True

    def test_bearish_engulfing(self, bearish_engulfing_pair):
        previous, current = bearish_engulfing_pair
        assert is_bearish_engulfing(previous, current) is True
        assert is_bullish_engulfing(previous, current) is False

    def test_smaller_current_body_is_not_engulfing(self, bullish_harami_pair):
        previous, current = bullish_harami_pair
        assert is_bullish_engulfing(previous, current) is False


class TestHarami:
    """Test Bullish and Bearish Harami predicates."""

    def test_bullish_harami(self, bullish_harami_pair):
        previous, current = bullish_harami_pair
        assert is_bullish_harami(previous, current) is True
        assert is_bearish_harami(previous, current) is False

    def test_bearish_harami(self, bearish_harami_pair):
        previous, current = bearish_harami_pair
        assert is_bearish_harami(previous, current) is True
        assert is_bullish_harami(previous, current) is False

    def test_larger_current_body_is_not_harami(self, bullish_engulfing_pair):
        previous, current = bullish_engulfing_pair
        assert is_bullish_harami(previous, current) is False


class TestKicker:
    """Test Bullish and Bearish Kicker predicates."""

    def test_bullish_kicker(self, bullish_kicker_pair):
        previous, current = bullish_kicker_pair
        assert is_bullish_kicker(previous, current) is True
        assert is_bearish_kicker(previous, current) is False

    def test_bearish_kicker(self, bearish_kicker_pair):
        previous, current = bearish_kicker_pair
        assert is_bearish_kicker(previous, current) is True
        assert is_bullish_kicker(previous, current) is False

    def test_no_gap_is_not_kicker(self, bullish_engulfing_pair):
        previous, current = bullish_engulfing_pair
        assert is_bullish_kicker(previous, current) is False


class TestHangingManAndShootingStar:
    """Test Hanging Man and Shooting Star predicates."""

    def test_hanging_man(self, hanging_man_pair):
        previous, current = hanging_man_pair
        assert is_hanging_man(previous, current) is True
        assert is_shooting_star(previous, current) is False

    def test_shooting_star(self, shooting_star_pair):
        previous, current = shooting_star_pair
        assert is_shooting_star(previous, current) is True
        assert is_hanging_man(previous, current) is False

    def test_hanging_man_requires_gap_up(self):
        previous = Candle(open="10", high="11.5", low="9.9", close="11.2")
        current = Candle(open="11.3", high="11.3", low="9", close="11")
        assert is_hanging_man(previous, current) is False

    def test_hanging_man_requires_bullish_previous(self):
        previous = Candle(open="10.5", high="10.6", low="9.9", close="10")
        current = Candle(open="11.3", high="11.3", low="9", close="11")
        assert is_hanging_man(previous, current) is False


class TestPairValidation:
    """Test that both candles are validated by every two-candle predicate."""

    @pytest.mark.parametrize("predicate", TWO_CANDLE_PREDICATES)
    def test_none_previous_raises(self, predicate, plain_bullish_candle):
        with pytest.raises(ArgumentRequiredError) as exc_info:
            predicate(None, plain_bullish_candle)

        assert exc_info.value.argument == "previous"

    @pytest.mark.parametrize("predicate", TWO_CANDLE_PREDICATES)
    def test_none_current_raises(self, predicate, plain_bullish_candle):
        with pytest.raises(ArgumentRequiredError) as exc_info:
            predicate(plain_bullish_candle, None)

        assert exc_info.value.argument == "current"

    @pytest.mark.parametrize("predicate", TWO_CANDLE_PREDICATES)
    def test_missing_close_raises(self, predicate, doji_candle):
        with pytest.raises(PropertyRequiredError) as exc_info:
            predicate(doji_candle, {"open": 10, "high": 11, "low": 9})

        assert exc_info.value.property == "close"

    @pytest.mark.parametrize("predicate", TWO_CANDLE_PREDICATES)
    def test_inverted_range_raises(self, predicate, doji_candle):
        with pytest.raises(InvalidRangeError):
            predicate({"open": 10, "high": 9, "low": 11, "close": 10}, doji_candle)

    @pytest.mark.parametrize("predicate", TWO_CANDLE_PREDICATES)
    def test_doji_pair_matches_nothing(self, predicate, doji_candle):
        assert predicate(doji_candle, doji_candle) is False
