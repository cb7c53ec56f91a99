"""
Precision constants and numeric helpers for TokenUnit.

Amounts are plain Python ``int`` values counted in base units (the
smallest indivisible subunit of an asset).  Most tokens and the network
currency use 18 decimal places:

    1 ether = 10**18 wei

Floats appear only at the display edge, after rounding with
``round_half_up``.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any

from tokenunit_core.errors import (
    InvalidDecimalsError,
    InvalidNumberError,
    UnknownUnitError,
)

# Decimal places of the network currency (wei per ether).
NATIVE_DECIMALS: int = 18

# Fractional digits kept when rounding for display.
DISPLAY_PRECISION: int = 5

# Named units, expressed as their decimal count relative to wei.
UNITS: dict[str, int] = {
    "wei": 0,
    "kwei": 3,
    "babbage": 3,
    "femtoether": 3,
    "mwei": 6,
    "lovelace": 6,
    "picoether": 6,
    "gwei": 9,
    "shannon": 9,
    "nanoether": 9,
    "nano": 9,
    "szabo": 12,
    "microether": 12,
    "micro": 12,
    "finney": 15,
    "milliether": 15,
    "milli": 15,
    "ether": 18,
    "kether": 21,
    "grand": 21,
    "mether": 24,
    "gether": 27,
    "tether": 30,
}

# Patterns are applied with fullmatch and spell out ASCII digits.
_DECIMAL_RE = re.compile(r"[0-9]+(\.[0-9]+)?|\.[0-9]+")
_NUMERAL_RE = re.compile(r"-?[0-9.]+")
_INTEGER_RE = re.compile(r"[0-9]+")
_HEX_RE = re.compile(r"[0-9a-f]+")


def unit_decimals(unit: str) -> int:
    """Return the decimal count of a named unit (case-insensitive)."""
    key = unit.lower() if isinstance(unit, str) else unit
    if key not in UNITS:
        raise UnknownUnitError(unit)
    return UNITS[key]


def decimals_base(decimals: Any) -> tuple[int, int]:
    """Validate a decimal count and return ``(decimals, 10**decimals)``.

    Accepts anything ``int()`` understands without loss, e.g. ``"18"``.
    """
    if isinstance(decimals, bool):
        raise InvalidDecimalsError(decimals)
    try:
        count = int(decimals)
    except (TypeError, ValueError) as exc:
        raise InvalidDecimalsError(decimals) from exc
    if count < 0 or count != decimals and not isinstance(decimals, str):
        raise InvalidDecimalsError(decimals)
    return count, 10 ** count


def is_big_int(value: Any) -> bool:
    """True for an exact integer amount.  A type check, never a parse."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_decimal(value: Any) -> bool:
    """True for an unsigned decimal numeral such as ``"12"``, ``"0.5"`` or ``".5"``.

    Signs, exponents and a trailing bare point (``"1."``) are rejected.
    """
    return isinstance(value, str) and _DECIMAL_RE.fullmatch(value) is not None


def number_to_string(value: Any) -> str:
    """Normalise *value* to a plain ``[-]digits[.digits]`` string.

    Strings must already look like a numeral; floats are written out
    without exponent notation using their shortest repr.

    >>> number_to_string(1e-7)
    '0.0000001'
    >>> number_to_string("-1.5")
    '-1.5'
    """
    if isinstance(value, str):
        if not _NUMERAL_RE.fullmatch(value):
            raise InvalidNumberError(value, "should be a number matching ^-?[0-9.]+$")
        return value
    if isinstance(value, bool):
        raise InvalidNumberError(value, "booleans are not numbers")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidNumberError(value, "not a finite number")
        return format(Decimal(repr(value)), "f")
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidNumberError(value, "not a finite number")
        return format(value, "f")
    raise InvalidNumberError(value, f"unsupported type {type(value).__name__}")


def to_big_int(value: Any) -> int:
    """Convert *value* to an exact ``int`` amount.

    Accepts ints, integral floats and Decimals, decimal strings and
    ``0x``-prefixed hex strings (optionally negative, ``-0x..``).
    Fractional values are rejected rather than truncated.
    """
    if is_big_int(value):
        return value
    if isinstance(value, (float, Decimal)):
        if isinstance(value, float) and not math.isfinite(value):
            raise InvalidNumberError(value, "not a finite number")
        if isinstance(value, Decimal) and not value.is_finite():
            raise InvalidNumberError(value, "not a finite number")
        if value != int(value):
            raise InvalidNumberError(value, "decimals are not supported")
        return int(value)
    if not isinstance(value, str):
        raise InvalidNumberError(value, "value must be an integer, hex string or decimal string")

    text = value.strip().lower()
    negative = text.startswith("-")
    if negative:
        text = text[1:]
    if text.startswith("0x"):
        digits = text[2:] or "0"
        if not _HEX_RE.fullmatch(digits):
            raise InvalidNumberError(value, "invalid hex string")
        amount = int(digits, 16)
    else:
        digits = text
        if not digits:
            raise InvalidNumberError(value, "no digits")
        if not _INTEGER_RE.fullmatch(digits):
            raise InvalidNumberError(value, "decimals are not supported")
        amount = int(digits, 10)
    return -amount if negative else amount


def to_float(value: Any) -> float:
    """Coerce a rate or balance to float; non-numeric input becomes NaN."""
    if value is None or isinstance(value, bool):
        return math.nan
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def round_half_up(value: float, places: int = DISPLAY_PRECISION) -> float:
    """Round *value* to *places* decimals, halves away from zero.

    NaN becomes ``0.0`` so display layers never see it.

    >>> round_half_up(0.125, 2)
    0.13
    >>> round_half_up(float("nan"))
    0.0
    """
    if math.isnan(value):
        return 0.0
    if math.isinf(value):
        return value
    base = 10 ** places
    scaled = value * base
    if math.isinf(scaled):
        return value
    magnitude = abs(scaled)
    # floor(x + 0.5) misrounds odd integers in [2**52, 2**53)
    whole = math.floor(magnitude)
    rounded = whole + (1 if magnitude - whole >= 0.5 else 0)
    if scaled < 0:
        rounded = -rounded
    return rounded / base
