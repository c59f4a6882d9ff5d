"""
Sliding-Window Pattern Scanner

Applies a fixed-size candlestick pattern across an ordered candle sequence
and collects the last candle of every matching window.

Patterns are described by explicit definitions carrying their window size,
one class per arity, so the scanner never has to inspect the predicate's
signature. The named scanners (`hammer`, `bullish_engulfing`, ...) bind the
scanner to one definition each and form the public entry points.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Sequence, Union

from ..logger import get_pattern_adapter
from ..models.patterns import PatternType
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
from .single_candlestick import is_hammer, is_inverted_hammer
from .validation import ArgumentRequiredError, CandleValidationError


logger = logging.getLogger(__name__)


class PatternDefinition(ABC):
    """
    Abstract base class for scannable pattern definitions.

    A definition couples a pattern type with the predicate recognizing it
    and the number of consecutive candles that predicate reads.
    """

    pattern_type: PatternType

    @property
    @abstractmethod
    def window_size(self) -> int:
        """Return the number of candlesticks required for this pattern."""
        pass

    @abstractmethod
    def matches(self, window: Sequence[Any]) -> bool:
        """Evaluate the predicate on one window of `window_size` candles."""
        pass


@dataclass(frozen=True)
class SingleCandlePattern(PatternDefinition):
    """Pattern read from one candle."""

    pattern_type: PatternType
    predicate: Callable[[Any], bool]

    @property
    def window_size(self) -> int:
        return 1

    def matches(self, window: Sequence[Any]) -> bool:
        (candle,) = window
        return self.predicate(candle)


@dataclass(frozen=True)
class TwoCandlePattern(PatternDefinition):
    """Pattern read from a `previous`, `current` pair of candles."""

    pattern_type: PatternType
    predicate: Callable[[Any, Any], bool]

    @property
    def window_size(self) -> int:
        return 2

    def matches(self, window: Sequence[Any]) -> bool:
        previous, current = window
        return self.predicate(previous, current)


PATTERNS: Dict[PatternType, PatternDefinition] = {
    PatternType.HAMMER: SingleCandlePattern(PatternType.HAMMER, is_hammer),
    PatternType.INVERTED_HAMMER: SingleCandlePattern(PatternType.INVERTED_HAMMER, is_inverted_hammer),
    PatternType.HANGING_MAN: TwoCandlePattern(PatternType.HANGING_MAN, is_hanging_man),
    PatternType.SHOOTING_STAR: TwoCandlePattern(PatternType.SHOOTING_STAR, is_shooting_star),
    PatternType.BULLISH_ENGULFING: TwoCandlePattern(PatternType.BULLISH_ENGULFING, is_bullish_engulfing),
    PatternType.BEARISH_ENGULFING: TwoCandlePattern(PatternType.BEARISH_ENGULFING, is_bearish_engulfing),
    PatternType.BULLISH_HARAMI: TwoCandlePattern(PatternType.BULLISH_HARAMI, is_bullish_harami),
    PatternType.BEARISH_HARAMI: TwoCandlePattern(PatternType.BEARISH_HARAMI, is_bearish_harami),
    PatternType.BULLISH_KICKER: TwoCandlePattern(PatternType.BULLISH_KICKER, is_bullish_kicker),
    PatternType.BEARISH_KICKER: TwoCandlePattern(PatternType.BEARISH_KICKER, is_bearish_kicker),
}


def get_pattern(pattern_type: Union[PatternType, str]) -> PatternDefinition:
    """
    Look up the definition of a pattern.

    Args:
        pattern_type: PatternType member or its string value

    Raises:
        KeyError: the name does not match any known pattern
    """
    return PATTERNS[PatternType.parse(pattern_type)]


def scan(sequence: Sequence[Any], pattern: PatternDefinition) -> List[Any]:
    """
    Slide a pattern across a candle sequence.

    Args:
        sequence: Candles in chronological order (index 0 is the earliest)
        pattern: Definition of the pattern to look for

    Returns:
        The last candle of every matching window, in scan order. Sequences
        shorter than the pattern window give an empty list.

    Raises:
        ArgumentRequiredError: sequence is None
        CandleValidationError: any candle in a scanned window is malformed;
            no partial result is returned
    """
    if sequence is None:
        raise ArgumentRequiredError('sequence')

    candles = list(sequence)
    size = pattern.window_size
    window_count = max(0, len(candles) - size + 1)
    matches = []
    log = get_pattern_adapter(pattern.pattern_type.value, logger)

    for i in range(window_count):
        window = candles[i:i + size]
        try:
            matched = pattern.matches(window)
        except CandleValidationError as e:
            log.warning(f"Invalid candle in window at index {i}: {e}")
            raise
        if matched:
            matches.append(window[-1])

    log.debug(f"Scanned {window_count} windows: {len(matches)} matches")
    return matches


def hammer(sequence: Sequence[Any]) -> List[Any]:
    return scan(sequence, PATTERNS[PatternType.HAMMER])


def inverted_hammer(sequence: Sequence[Any]) -> List[Any]:
    return scan(sequence, PATTERNS[PatternType.INVERTED_HAMMER])


def hanging_man(sequence: Sequence[Any]) -> List[Any]:
    return scan(sequence, PATTERNS[PatternType.HANGING_MAN])


def shooting_star(sequence: Sequence[Any]) -> List[Any]:
    return scan(sequence, PATTERNS[PatternType.SHOOTING_STAR])


def bullish_engulfing(sequence: Sequence[Any]) -> List[Any]:
    return scan(sequence, PATTERNS[PatternType.BULLISH_ENGULFING])


def bearish_engulfing(sequence: Sequence[Any]) -> List[Any]:
    return scan(sequence, PATTERNS[PatternType.BEARISH_ENGULFING])


def bullish_harami(sequence: Sequence[Any]) -> List[Any]:
    return scan(sequence, PATTERNS[PatternType.BULLISH_HARAMI])


def bearish_harami(sequence: Sequence[Any]) -> List[Any]:
    return scan(sequence, PATTERNS[PatternType.BEARISH_HARAMI])


def bullish_kicker(sequence: Sequence[Any]) -> List[Any]:
    return scan(sequence, PATTERNS[PatternType.BULLISH_KICKER])


def bearish_kicker(sequence: Sequence[Any]) -> List[Any]:
    return scan(sequence, PATTERNS[PatternType.BEARISH_KICKER])
