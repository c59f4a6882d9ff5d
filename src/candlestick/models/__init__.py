"""
Candlestick Models Package

Data models shared by the pattern recognition modules: the OHLC candle
record and the enumeration of supported pattern types.
"""

from .market_data import Candle
from .patterns import PatternType

__all__ = [
    "Candle",
    "PatternType",
]
