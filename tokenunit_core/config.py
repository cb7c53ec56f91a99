"""
TOML-based configuration for TokenUnit.

Loads settings from a TOML file and/or environment variables.
Environment variables take precedence over file values.

Usage:
    from tokenunit_core.config import load_config
    cfg = load_config("tokenunit.toml")
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import,no-redef]

from tokenunit_core.precision import DISPLAY_PRECISION, NATIVE_DECIMALS


@dataclass
class ConversionConfig:
    """Numeric parameters handed to the conversion engine."""
    native_decimals: int = NATIVE_DECIMALS      # wei per ether = 10**18
    display_precision: int = DISPLAY_PRECISION  # fractional digits kept for display
    currency_code: str = "usd"                  # default fiat label


@dataclass
class LoggingConfig:
    """Logging settings."""
    level: str = "INFO"
    format: str = "human"   # "human" or "json"
    file: str | None = None


@dataclass
class TokenUnitConfig:
    """Top-level configuration container."""
    conversion: ConversionConfig = field(default_factory=ConversionConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _merge(dc: Any, raw: dict[str, Any]) -> None:
    """Merge a raw dict into a dataclass instance (in-place)."""
    for key, value in raw.items():
        key_under = key.replace("-", "_")
        if hasattr(dc, key_under):
            setattr(dc, key_under, value)


def load_config(path: str | None = None) -> TokenUnitConfig:
    """
    Load configuration from a TOML file, then overlay environment variables.

    Env-var mapping:
        TOKENUNIT_NATIVE_DECIMALS   -> conversion.native_decimals
        TOKENUNIT_DISPLAY_PRECISION -> conversion.display_precision
        TOKENUNIT_CURRENCY          -> conversion.currency_code
        TOKENUNIT_LOG_LEVEL         -> logging.level
        TOKENUNIT_LOG_FMT           -> logging.format
        TOKENUNIT_LOG_FILE          -> logging.file
    """
    cfg = TokenUnitConfig()

    # ── TOML file ────────────────────────────────────────────────
    if path is not None:
        p = Path(path)
        if p.exists():
            with open(p, "rb") as f:
                data = tomllib.load(f)
            for section_name, section_dc in [
                ("conversion", cfg.conversion),
                ("logging", cfg.logging),
            ]:
                if section_name in data:
                    _merge(section_dc, data[section_name])

    # ── Environment variable overrides ───────────────────────────
    if v := os.environ.get("TOKENUNIT_NATIVE_DECIMALS"):
        cfg.conversion.native_decimals = int(v)
    if v := os.environ.get("TOKENUNIT_DISPLAY_PRECISION"):
        cfg.conversion.display_precision = int(v)
    if v := os.environ.get("TOKENUNIT_CURRENCY"):
        cfg.conversion.currency_code = v
    if v := os.environ.get("TOKENUNIT_LOG_LEVEL"):
        cfg.logging.level = v.upper()
    if v := os.environ.get("TOKENUNIT_LOG_FMT"):
        cfg.logging.format = v
    if v := os.environ.get("TOKENUNIT_LOG_FILE"):
        cfg.logging.file = v

    return cfg
