"""
Logging configuration for TokenUnit front ends.

The library modules only create named loggers (``tokenunit_units``,
``tokenunit_fiat``, ...); handlers are installed here, by the CLI or by
an embedding application.

Two output formats:
  - **human** – single-line, coloured when writing to a terminal
  - **json**  – newline-delimited JSON for log aggregators

Usage:
    from tokenunit_core.logging_config import setup_logging
    setup_logging(level="DEBUG", fmt="json", log_file="logs/tokenunit.log")
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import IO, Optional

from tokenunit_core.config import LoggingConfig

# LogRecord attributes that are not user-supplied ``extra=`` fields.
_RESERVED = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {
    "message", "asctime",
}


class JSONFormatter(logging.Formatter):
    """One JSON object per record; ``extra=`` fields are copied through."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED and not key.startswith("_"):
                log_obj[key] = value
        if record.exc_info and record.exc_info[1]:
            log_obj["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_obj, default=str)


class HumanFormatter(logging.Formatter):
    """Concise single-line format, optionally coloured by level."""

    COLOURS = {
        "DEBUG": "\033[36m",     # cyan
        "INFO": "\033[32m",      # green
        "WARNING": "\033[33m",   # yellow
        "ERROR": "\033[31m",     # red
        "CRITICAL": "\033[1;31m",  # bold red
    }
    RESET = "\033[0m"

    def __init__(self, colour: bool = True):
        super().__init__()
        self.colour = colour

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        level = f"[{record.levelname:<7}]"
        if self.colour:
            level = f"{self.COLOURS.get(record.levelname, '')}{level}{self.RESET}"
        line = f"{ts} {level} {record.name}: {record.getMessage()}"
        if record.exc_info and record.exc_info[1]:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(
    level: str = "INFO",
    fmt: str = "human",
    log_file: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """
    Configure the root logger and return it.

    Parameters
    ----------
    level : str
        One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
    fmt : str
        ``"human"`` or ``"json"``.
    log_file : str, optional
        Also write to this file, always as JSON.
    stream : file-like, optional
        Console stream, ``sys.stderr`` by default.  Colour is only used
        when it is a TTY.
    """
    if fmt not in ("human", "json"):
        raise ValueError(f"Unknown log format {fmt!r} (expected 'human' or 'json')")

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    stream = stream if stream is not None else sys.stderr
    console = logging.StreamHandler(stream)
    if fmt == "json":
        console.setFormatter(JSONFormatter())
    else:
        console.setFormatter(HumanFormatter(colour=getattr(stream, "isatty", lambda: False)()))
    root.addHandler(console)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(path))
        fh.setFormatter(JSONFormatter())
        root.addHandler(fh)
    return root


def setup_logging_from_config(cfg: LoggingConfig, stream: Optional[IO[str]] = None) -> logging.Logger:
    """Apply a ``[logging]`` config section."""
    return setup_logging(level=cfg.level, fmt=cfg.format, log_file=cfg.file, stream=stream)
