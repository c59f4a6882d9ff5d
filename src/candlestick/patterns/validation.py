"""
Candle Validation

Check-and-raise validation applied to every candle record before any
pattern geometry is computed. Records may be Candle models, mappings or
any object exposing the price fields as attributes.

Errors carry the offending argument name, property and record so that
callers can report exactly which input was rejected.
"""

from collections.abc import Mapping
from typing import Any, Iterable, Optional

OHLC_PROPERTIES = ('open', 'high', 'low', 'close')


class CandleValidationError(ValueError):
    """Base class for candle validation failures."""

    def __init__(self, message: str, argument: Optional[str] = None, record: Any = None):
        super().__init__(message)
        self.argument = argument
        self.record = record


class ArgumentRequiredError(CandleValidationError):
    """The candle argument itself is absent."""

    def __init__(self, argument: Optional[str]):
        super().__init__(f"Argument {argument} is required.", argument=argument)


class PropertyRequiredError(CandleValidationError):
    """A required price is missing from the record, or is zero."""

    def __init__(self, property: str, argument: Optional[str], record: Any):
        super().__init__(
            f"{property} is required in {argument or 'argument'}. Value: {record!r}",
            argument=argument,
            record=record,
        )
        self.property = property


class InvalidRangeError(CandleValidationError):
    """The high price of the record is below its low price."""

    def __init__(self, argument: Optional[str], high: Any, low: Any, record: Any):
        super().__init__(
            "Low price cannot be greater than high price.",
            argument=argument,
            record=record,
        )
        self.high = high
        self.low = low


def get_price(record: Any, field: str) -> Any:
    """Read a price from a mapping key or an attribute; None when absent."""
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


def validate(
    candle: Any,
    name: Optional[str] = "candle",
    properties: Iterable[str] = OHLC_PROPERTIES,
) -> None:
    """
    Validate a candle record.

    Args:
        candle: Candle model, mapping or attribute record to check
        name: Logical argument name used in error messages
        properties: Price properties that must be present and non-zero

    Raises:
        ArgumentRequiredError: candle is None
        PropertyRequiredError: a required price is missing or zero
        InvalidRangeError: both high and low are checked and high < low
    """
    if candle is None:
        raise ArgumentRequiredError(name)

    properties = tuple(properties)

    for field in properties:
        # Zero prices count as missing
        if not get_price(candle, field):
            raise PropertyRequiredError(field, name, candle)

    if 'high' in properties and 'low' in properties:
        high = get_price(candle, 'high')
        low = get_price(candle, 'low')
        if high < low:
            raise InvalidRangeError(name, high, low, candle)
