"""
Configured conversion engine.

``UnitConverter`` binds the module-level conversion functions to an
explicit ``ConversionConfig`` so the network decimal count and display
precision are chosen by the caller instead of baked-in constants.  It
never mutates its config and may be shared between threads.
"""

from __future__ import annotations

from typing import Any

from tokenunit_core import fiat, units
from tokenunit_core.config import ConversionConfig
from tokenunit_core.errors import InvalidDecimalsError
from tokenunit_core.precision import is_big_int, is_decimal, round_half_up


class UnitConverter:
    """Conversion engine for one network / display configuration."""

    def __init__(self, config: ConversionConfig | None = None):
        self.config = config if config is not None else ConversionConfig()
        for name in ("native_decimals", "display_precision"):
            value = getattr(self.config, name)
            if not is_big_int(value) or value < 0:
                raise InvalidDecimalsError(value)

    @property
    def native_decimals(self) -> int:
        return self.config.native_decimals

    @property
    def display_precision(self) -> int:
        return self.config.display_precision

    # ── exact scaling ────────────────────────────────────────────

    def from_minimal_unit(self, amount: Any, decimals: Any) -> str:
        return units.from_token_minimal_unit(amount, decimals)

    def to_minimal_unit(self, value: Any, decimals: Any) -> int:
        return units.to_token_minimal_unit(value, decimals)

    def from_native(self, amount: Any) -> str:
        """Base units of the network currency as a whole-unit string."""
        return units.from_token_minimal_unit(amount, self.native_decimals)

    def to_native(self, value: Any) -> int:
        return units.to_token_minimal_unit(value, self.native_decimals)

    # ── display ──────────────────────────────────────────────────

    def round(self, value: float) -> float:
        return round_half_up(value, self.display_precision)

    def render(self, amount: Any, decimals: Any) -> float:
        return units.render_from_token_minimal_unit(amount, decimals, self.display_precision)

    def render_native(self, amount: Any) -> float:
        return units.render_from_token_minimal_unit(
            amount, self.native_decimals, self.display_precision,
        )

    def wei_to_fiat(self, wei: Any, conversion_rate: Any, currency_code: str | None = None) -> str:
        return fiat.wei_to_fiat(
            wei,
            conversion_rate,
            currency_code if currency_code is not None else self.config.currency_code,
            decimals_to_show=self.display_precision,
            native_decimals=self.native_decimals,
        )

    def balance_to_fiat(
        self,
        balance: Any,
        conversion_rate: Any,
        exchange_rate: Any,
        currency_code: str | None = None,
    ) -> fiat.FiatResult:
        return fiat.balance_to_fiat(
            balance,
            conversion_rate,
            exchange_rate,
            currency_code if currency_code is not None else self.config.currency_code,
            decimals_to_show=self.display_precision,
        )

    # ── predicates ───────────────────────────────────────────────

    @staticmethod
    def is_big_int(value: Any) -> bool:
        return is_big_int(value)

    @staticmethod
    def is_decimal(value: Any) -> bool:
        return is_decimal(value)
