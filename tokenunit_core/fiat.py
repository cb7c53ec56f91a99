"""
Fiat display conversions for TokenUnit.

Two flows:

  - **network currency** – a wei amount times an ether→fiat rate
    (``wei_to_fiat``).  A missing amount renders as ``"0.00 <code>"``.
  - **asset balance** – a whole-unit token balance times the ether→fiat
    rate times the token→ether rate (``balance_to_fiat``).  A missing
    balance or exchange rate yields ``UNAVAILABLE`` so callers can tell
    "cannot compute yet" apart from a computed zero.

Rates come from an external price feed.  Non-numeric rates never raise:
the arithmetic degrades to NaN, which rounding turns into ``0.0``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Union

from tokenunit_core.precision import (
    DISPLAY_PRECISION,
    NATIVE_DECIMALS,
    is_big_int,
    round_half_up,
    to_float,
)
from tokenunit_core.units import from_token_minimal_unit

logger = logging.getLogger("tokenunit_fiat")


@dataclass(frozen=True)
class Ok:
    """A computed fiat display string."""
    value: str

    @property
    def available(self) -> bool:
        return True

    def unwrap(self) -> str:
        return self.value


class Unavailable:
    """Marker for a fiat value that cannot be computed from the inputs."""

    _instance: "Unavailable | None" = None

    def __new__(cls) -> "Unavailable":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def available(self) -> bool:
        return False

    def unwrap(self) -> str:
        raise ValueError("fiat value is unavailable")

    def __repr__(self) -> str:
        return "UNAVAILABLE"

    def __bool__(self) -> bool:
        return False


UNAVAILABLE = Unavailable()

FiatResult = Union[Ok, Unavailable]


def wei_to_fiat_number(
    wei: Any,
    conversion_rate: Any,
    decimals_to_show: int = DISPLAY_PRECISION,
    native_decimals: int = NATIVE_DECIMALS,
) -> float:
    """Fiat value of a wei amount, rounded to *decimals_to_show* places."""
    eth = float(from_token_minimal_unit(wei, native_decimals))
    return round_half_up(eth * to_float(conversion_rate), decimals_to_show)


def wei_to_fiat(
    wei: Any,
    conversion_rate: Any,
    currency_code: str,
    decimals_to_show: int = DISPLAY_PRECISION,
    native_decimals: int = NATIVE_DECIMALS,
) -> str:
    """Render a wei amount as ``"<value> <currency_code>"``.

    Anything that is not an exact integer amount (``None``, floats,
    strings) short-circuits to ``"0.00 <currency_code>"``.
    """
    if wei is None or not is_big_int(wei):
        logger.debug("No usable wei amount (%r); rendering zero %s", wei, currency_code)
        return f"0.00 {currency_code}"
    value = wei_to_fiat_number(wei, conversion_rate, decimals_to_show, native_decimals)
    return f"{value} {currency_code}"


def balance_to_fiat_number(
    balance: Any,
    conversion_rate: Any,
    exchange_rate: Any,
    decimals_to_show: int = DISPLAY_PRECISION,
) -> float:
    """Fiat value of a whole-unit asset balance, rounded for display."""
    product = to_float(balance) * to_float(conversion_rate) * to_float(exchange_rate)
    return round_half_up(product, decimals_to_show)


def balance_to_fiat(
    balance: Any,
    conversion_rate: Any,
    exchange_rate: Any,
    currency_code: str,
    decimals_to_show: int = DISPLAY_PRECISION,
) -> FiatResult:
    """Render an asset balance as ``Ok("<value> <CODE>")`` or ``UNAVAILABLE``."""
    if balance is None or exchange_rate is None:
        logger.debug("Balance or exchange rate not loaded; fiat value unavailable")
        return UNAVAILABLE
    value = balance_to_fiat_number(balance, conversion_rate, exchange_rate, decimals_to_show)
    return Ok(f"{value} {currency_code.upper()}")
