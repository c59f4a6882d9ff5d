"""
Pattern Recognizer

Runs several pattern scanners over the same candle sequence and
summarizes what was found.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from ..config import Config
from ..models.patterns import PatternType
from .scanner import get_pattern, scan
from .validation import ArgumentRequiredError


logger = logging.getLogger(__name__)


def scan_all(
    sequence: Sequence[Any],
    patterns: Optional[Iterable[Union[PatternType, str]]] = None
) -> Dict[PatternType, List[Any]]:
    """
    Scan a sequence for several patterns.

    Args:
        sequence: Candles in chronological order
        patterns: Pattern types or names to scan for, defaults to all

    Returns:
        Matches keyed by pattern type, in the order the patterns were given.
        Patterns without matches map to an empty list.
    """
    if patterns is None:
        patterns = list(PatternType)

    if sequence is None:
        raise ArgumentRequiredError('sequence')

    candles = list(sequence)
    results: Dict[PatternType, List[Any]] = {}
    for name in patterns:
        definition = get_pattern(name)
        results[definition.pattern_type] = scan(candles, definition)
    return results


class PatternRecognizer:
    """
    Configurable multi-pattern recognizer.

    Scans candle sequences for the patterns enabled in the scanner
    configuration and reports per-pattern matches and summary statistics.
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize with the patterns enabled in the configuration.

        Args:
            config: Configuration, defaults to Config() (all patterns)
        """
        self.config = config or Config()
        self.enabled_patterns: List[PatternType] = list(self.config.scanner.enabled_patterns)

    def analyze(self, sequence: Sequence[Any]) -> Dict[PatternType, List[Any]]:
        """
        Scan a sequence for all enabled patterns.

        Args:
            sequence: Candles in chronological order

        Returns:
            Matching candles keyed by pattern type
        """
        results = scan_all(sequence, self.enabled_patterns)
        logger.debug(
            f"Analyzed {len(self.enabled_patterns)} patterns: "
            f"{sum(len(m) for m in results.values())} matches"
        )
        return results

    def get_pattern_summary(self, sequence: Sequence[Any]) -> Dict[str, Any]:
        """
        Get summary statistics for all detected patterns.

        Args:
            sequence: Candles in chronological order

        Returns:
            Summary dictionary with pattern statistics
        """
        if sequence is None:
            raise ArgumentRequiredError('sequence')

        candles = list(sequence)
        results = self.analyze(candles)
        found = {pattern: matches for pattern, matches in results.items() if matches}

        return {
            "total_candles": len(candles),
            "total_matches": sum(len(m) for m in found.values()),
            "bullish_matches": sum(len(m) for p, m in found.items() if p.direction == "bullish"),
            "bearish_matches": sum(len(m) for p, m in found.items() if p.direction == "bearish"),
            "pattern_counts": {p.value: len(m) for p, m in found.items()},
            "pattern_types": [p.value for p in found],
        }
