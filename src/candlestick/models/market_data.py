"""
Core Market Data Models

This module contains the Pydantic model for the OHLC candle consumed by
the pattern recognition modules.

Prices are stored as Decimal so that body, wick and tail lengths are
computed without binary floating point drift. Any record exposing
`open`, `high`, `low` and `close` (a dict, a namedtuple, an ORM row) is
accepted by the pattern functions as well; this model is the canonical
immutable form.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Candle(BaseModel):
    """
    OHLC candlestick record.

    Validates on construction that the high price is not below the low
    price. Missing or zero prices are reported later, by the validation
    performed inside every pattern function.
    """

    model_config = ConfigDict(frozen=True)

    open: Decimal = Field(..., description="Opening price")
    high: Decimal = Field(..., description="Highest price")
    low: Decimal = Field(..., description="Lowest price")
    close: Decimal = Field(..., description="Closing price")

    @field_validator('open', 'high', 'low', 'close', mode='before')
    @classmethod
    def validate_price_fields(cls, v) -> Decimal:
        """Convert price fields to Decimal."""
        if isinstance(v, Decimal):
            return v
        if isinstance(v, str):
            v = v.strip()
        try:
            return Decimal(str(v))
        except InvalidOperation:
            raise ValueError(f"Invalid price: {v!r}") from None

    @model_validator(mode='after')
    def validate_high_low(self):
        """Reject candles whose high is below their low."""
        if self.high < self.low:
            raise ValueError(f"High price {self.high} must be >= low price {self.low}")
        return self

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Candle':
        """
        Create a Candle from a mapping.

        Accepts either full keys ({'open', 'high', 'low', 'close'}) or the
        short exchange form ({'o', 'h', 'l', 'c'}).
        """
        if 'o' in data:
            return cls(open=data['o'], high=data['h'], low=data['l'], close=data['c'])
        return cls(open=data['open'], high=data['high'], low=data['low'], close=data['close'])

    def to_dict(self) -> Dict[str, str]:
        """Convert to a plain dictionary with string prices."""
        return {
            'open': str(self.open),
            'high': str(self.high),
            'low': str(self.low),
            'close': str(self.close),
        }

    @property
    def body_size(self) -> Decimal:
        """Absolute difference between open and close."""
        return abs(self.close - self.open)

    @property
    def upper_shadow(self) -> Decimal:
        """Distance from the top of the body up to the high."""
        return self.high - max(self.open, self.close)

    @property
    def lower_shadow(self) -> Decimal:
        """Distance from the bottom of the body down to the low."""
        return min(self.open, self.close) - self.low

    @property
    def is_bullish(self) -> bool:
        return self.close > self.open

    @property
    def is_bearish(self) -> bool:
        return self.close < self.open

    @property
    def is_doji(self) -> bool:
        return self.close == self.open
