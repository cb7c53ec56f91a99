"""
TokenUnit - exact conversions between token base units, decimal strings
and fiat display values.

Key features:
- Arbitrary-precision base-unit <-> decimal string scaling (no floats)
- Named network units (wei, gwei, ether, ...)
- Reproducible half-up rounding for display
- Fiat conversions with an explicit "unavailable" result
- TOML / environment configuration and structured logging
"""

from tokenunit_core.converter import UnitConverter
from tokenunit_core.errors import (
    InvalidDecimalsError,
    InvalidNumberError,
    NumberConversionError,
    TooManyDecimalPlacesError,
    TooManyDecimalPointsError,
    UnknownUnitError,
)
from tokenunit_core.fiat import (
    UNAVAILABLE,
    FiatResult,
    Ok,
    Unavailable,
    balance_to_fiat,
    balance_to_fiat_number,
    wei_to_fiat,
    wei_to_fiat_number,
)
from tokenunit_core.precision import (
    DISPLAY_PRECISION,
    NATIVE_DECIMALS,
    UNITS,
    is_big_int,
    is_decimal,
    number_to_string,
    round_half_up,
    to_big_int,
    unit_decimals,
)
from tokenunit_core.units import (
    bn_to_hex,
    calc_token_value_to_send,
    from_token_minimal_unit,
    from_wei,
    hex_to_bn,
    render_from_token_minimal_unit,
    render_from_wei,
    to_gwei,
    to_token_minimal_unit,
    to_wei,
)

__version__ = "1.0.0"
__all__ = [
    "UnitConverter",
    "NumberConversionError",
    "InvalidNumberError",
    "TooManyDecimalPointsError",
    "TooManyDecimalPlacesError",
    "InvalidDecimalsError",
    "UnknownUnitError",
    "UNAVAILABLE",
    "FiatResult",
    "Ok",
    "Unavailable",
    "balance_to_fiat",
    "balance_to_fiat_number",
    "wei_to_fiat",
    "wei_to_fiat_number",
    "DISPLAY_PRECISION",
    "NATIVE_DECIMALS",
    "UNITS",
    "is_big_int",
    "is_decimal",
    "number_to_string",
    "round_half_up",
    "to_big_int",
    "unit_decimals",
    "bn_to_hex",
    "calc_token_value_to_send",
    "from_token_minimal_unit",
    "from_wei",
    "hex_to_bn",
    "render_from_token_minimal_unit",
    "render_from_wei",
    "to_gwei",
    "to_token_minimal_unit",
    "to_wei",
]
