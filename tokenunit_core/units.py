"""
Exact conversions between base-unit amounts and decimal strings.

The two core directions are:

    from_token_minimal_unit(1234567890000000000, 18)  ->  "1.23456789"
    to_token_minimal_unit("1.5", 18)                  ->  1500000000000000000

Both are pure integer arithmetic on Python ``int``; no float ever carries
an amount.  Named units (wei, gwei, ether, ...) are thin wrappers that
look up a decimal count in ``precision.UNITS``.

The ``render_*`` helpers are the only lossy functions here and exist for
presentation only.
"""

from __future__ import annotations

import logging
from typing import Any

from tokenunit_core.errors import (
    InvalidNumberError,
    TooManyDecimalPlacesError,
    TooManyDecimalPointsError,
)
from tokenunit_core.precision import (
    DISPLAY_PRECISION,
    decimals_base,
    number_to_string,
    round_half_up,
    to_big_int,
    unit_decimals,
)

logger = logging.getLogger("tokenunit_units")


# ---------------------------------------------------------------------------
# Base units <-> decimal strings
# ---------------------------------------------------------------------------

def from_token_minimal_unit(minimal_input: Any, decimals: Any) -> str:
    """Convert a base-unit amount into its decimal string.

    Trailing zeros of the fraction are trimmed and a zero fraction is
    dropped entirely, so ``from_token_minimal_unit(10**18, 18) == "1"``.
    """
    minimal = to_big_int(minimal_input)
    count, base = decimals_base(decimals)
    negative = minimal < 0

    whole, remainder = divmod(abs(minimal), base)
    fraction = str(remainder).rjust(count, "0").rstrip("0") or "0"

    value = str(whole) if fraction == "0" else f"{whole}.{fraction}"
    if negative:
        value = "-" + value
    return value


def to_token_minimal_unit(token_value: Any, decimals: Any) -> int:
    """Convert a decimal value into an exact base-unit amount.

    Raises ``TooManyDecimalPlacesError`` rather than truncating when the
    value carries more fractional digits than the asset supports.
    """
    count, base = decimals_base(decimals)
    value = number_to_string(token_value)
    negative = value.startswith("-")
    if negative:
        value = value[1:]
    if value == ".":
        logger.debug("Rejected bare decimal point %r", token_value)
        raise InvalidNumberError(token_value)

    comps = value.split(".")
    if len(comps) > 2:
        logger.debug("Rejected %r: more than one decimal point", token_value)
        raise TooManyDecimalPointsError(token_value)

    whole = comps[0] or "0"
    # a missing fraction counts as zero digits so integers pass at 0 decimals
    fraction = comps[1] if len(comps) == 2 else ""
    if len(fraction) > count:
        logger.debug("Rejected %r: more than %d decimal places", token_value, count)
        raise TooManyDecimalPlacesError(token_value, count)
    fraction = fraction.ljust(count, "0") or "0"

    amount = int(whole) * base + int(fraction)
    return -amount if negative else amount


# ---------------------------------------------------------------------------
# Named units (wei / gwei / ether ...)
# ---------------------------------------------------------------------------

def from_wei(value: Any = 0, unit: str = "ether") -> str:
    """Convert a wei amount into a decimal string of *unit*."""
    return from_token_minimal_unit(value, unit_decimals(unit))


def to_wei(value: Any, unit: str = "ether") -> int:
    """Convert a decimal value of *unit* into wei."""
    return to_token_minimal_unit(value, unit_decimals(unit))


def to_gwei(value: Any, unit: str = "ether") -> float:
    """Express a wei amount, read as *unit*, multiplied into gwei (float)."""
    return float(from_wei(value, unit)) * 10 ** 9


# ---------------------------------------------------------------------------
# Display rendering
# ---------------------------------------------------------------------------

def render_from_token_minimal_unit(
    token_value: Any, decimals: Any, decimals_to_show: int = DISPLAY_PRECISION,
) -> float:
    """Base-unit amount rounded to *decimals_to_show* places for display."""
    return round_half_up(float(from_token_minimal_unit(token_value, decimals)), decimals_to_show)


def render_from_wei(value: Any, decimals_to_show: int = DISPLAY_PRECISION) -> float:
    """Wei amount as ether, rounded for display."""
    return round_half_up(float(from_wei(value)), decimals_to_show)


# ---------------------------------------------------------------------------
# Hex helpers
# ---------------------------------------------------------------------------

def calc_token_value_to_send(value: Any, decimals: Any) -> str:
    """Hex string (no prefix) of the base units for a display *value*.

    A falsy value (``None``, ``0``, ``""``) yields ``"0"``.
    """
    if not value:
        return "0"
    return format(to_token_minimal_unit(value, decimals), "x")


def bn_to_hex(value: int) -> str:
    """Format an integer amount as a ``0x``-prefixed hex string."""
    return "0x" + format(to_big_int(value), "x")


def hex_to_bn(value: str) -> int:
    """Parse a hex string, with or without ``0x`` prefix, into an ``int``."""
    if not isinstance(value, str):
        raise InvalidNumberError(value, "expected a hex string")
    text = value.strip()
    negative = text.startswith("-")
    if negative:
        text = text[1:]
    if not text.lower().startswith("0x"):
        text = "0x" + text
    return to_big_int(("-" if negative else "") + text)
