"""
Exception taxonomy for TokenUnit.

Every error is a ``ValueError`` subclass: they all describe a malformed
caller-supplied value, never an internal failure.  They are raised
synchronously and never retried or coerced inside the engine.
"""

from __future__ import annotations


class NumberConversionError(ValueError):
    """Base class for all numeral-parsing and scaling errors."""

    def __init__(self, value: object, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(
            f"[number] while converting number {value!r}, {reason}"
        )


class InvalidNumberError(NumberConversionError):
    """Input is not a numeral (bare ``.``, bad characters, bad type)."""

    def __init__(self, value: object, reason: str = "invalid value"):
        super().__init__(value, reason)


class TooManyDecimalPointsError(NumberConversionError):
    """Input contains more than one decimal point."""

    def __init__(self, value: object):
        super().__init__(value, "too many decimal points")


class TooManyDecimalPlacesError(NumberConversionError):
    """Fractional digits exceed the asset's decimal count."""

    def __init__(self, value: object, decimals: int):
        self.decimals = decimals
        super().__init__(value, f"too many decimal places (max {decimals})")


class InvalidDecimalsError(NumberConversionError):
    """Decimal count is negative or not an integer."""

    def __init__(self, value: object):
        super().__init__(value, "decimal count must be a non-negative integer")


class UnknownUnitError(NumberConversionError):
    """Unit name is not in the named-unit table."""

    def __init__(self, unit: object):
        super().__init__(unit, "unknown unit")
