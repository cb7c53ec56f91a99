#!/usr/bin/env python3
"""
TokenUnit command line: convert between base units, decimal strings and
fiat display values.

Usage:
    python run_convert.py from-minimal 1234567890000000000 18
    python run_convert.py to-minimal 1.5 18 --hex
    python run_convert.py render 1234567890000000000 18 --show 3
    python run_convert.py wei-to-fiat 1000000000000000000 300.5 USD
    python run_convert.py balance-to-fiat 10 300 0.01 usd
    python run_convert.py is-decimal .5

Environment variables (alternative to a config file):
    TOKENUNIT_NATIVE_DECIMALS, TOKENUNIT_DISPLAY_PRECISION, TOKENUNIT_CURRENCY,
    TOKENUNIT_LOG_LEVEL, TOKENUNIT_LOG_FMT, TOKENUNIT_LOG_FILE

Exit codes:
    0  success (is-decimal: true)
    1  balance-to-fiat result unavailable, or is-decimal: false
    2  invalid number, decimal count or unit
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from tokenunit_core.config import load_config
from tokenunit_core.converter import UnitConverter
from tokenunit_core.errors import NumberConversionError
from tokenunit_core.logging_config import setup_logging_from_config
from tokenunit_core.precision import is_decimal, to_big_int
from tokenunit_core.units import render_from_token_minimal_unit

logger = logging.getLogger("tokenunit_cli")

EXIT_OK = 0
EXIT_UNAVAILABLE = 1
EXIT_FALSE = 1
EXIT_INVALID = 2


def _optional(text: str) -> str | None:
    """CLI spelling of a value that has not loaded yet."""
    return None if text.strip().lower() in ("", "none", "null") else text


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tokenunit", description="Token unit conversions")
    p.add_argument("--config", default=None, help="Path to tokenunit.toml config file")
    p.add_argument("--log-level", default=None, help="Override logging level")
    sub = p.add_subparsers(dest="command", required=True)

    s = sub.add_parser("from-minimal", help="base units -> decimal string")
    s.add_argument("amount", help="integer amount (decimal or 0x-hex)")
    s.add_argument("decimals", type=int)

    s = sub.add_parser("to-minimal", help="decimal string -> base units")
    s.add_argument("value")
    s.add_argument("decimals", type=int)
    s.add_argument("--hex", action="store_true", help="print as 0x-prefixed hex")

    s = sub.add_parser("render", help="base units -> rounded display number")
    s.add_argument("amount")
    s.add_argument("decimals", type=int)
    s.add_argument("--show", type=int, default=None, help="decimals to show")

    s = sub.add_parser("wei-to-fiat", help="network currency amount -> fiat string")
    s.add_argument("wei")
    s.add_argument("rate")
    s.add_argument("currency", nargs="?", default=None)

    s = sub.add_parser("balance-to-fiat", help="asset balance -> fiat string")
    s.add_argument("balance", type=_optional, help="'none' when not loaded")
    s.add_argument("rate")
    s.add_argument("exchange_rate", type=_optional)
    s.add_argument("currency", nargs="?", default=None)

    s = sub.add_parser("is-decimal", help="check an unsigned decimal numeral")
    s.add_argument("value")
    return p


def run(args: argparse.Namespace, converter: UnitConverter) -> int:
    cmd = args.command
    if cmd == "from-minimal":
        print(converter.from_minimal_unit(args.amount, args.decimals))
    elif cmd == "to-minimal":
        amount = converter.to_minimal_unit(args.value, args.decimals)
        print(hex(amount) if args.hex else amount)
    elif cmd == "render":
        show = args.show if args.show is not None else converter.display_precision
        print(render_from_token_minimal_unit(args.amount, args.decimals, show))
    elif cmd == "wei-to-fiat":
        print(converter.wei_to_fiat(to_big_int(args.wei), args.rate, args.currency))
    elif cmd == "balance-to-fiat":
        result = converter.balance_to_fiat(args.balance, args.rate, args.exchange_rate, args.currency)
        if not result.available:
            print("unavailable")
            return EXIT_UNAVAILABLE
        print(result.unwrap())
    elif cmd == "is-decimal":
        ok = is_decimal(args.value)
        print("true" if ok else "false")
        return EXIT_OK if ok else EXIT_FALSE
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = load_config(args.config)
    if args.log_level:
        cfg.logging.level = args.log_level.upper()
    setup_logging_from_config(cfg.logging)

    try:
        converter = UnitConverter(cfg.conversion)
        return run(args, converter)
    except NumberConversionError as exc:
        logger.error("%s", exc)
        return EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
