"""
Shared pytest fixtures for the TokenUnit test suite.
"""

import logging
import os
import sys

import pytest

# Make run_convert importable before pip install
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from tokenunit_core.config import ConversionConfig
from tokenunit_core.converter import UnitConverter


@pytest.fixture
def converter():
    """Engine with the default 18-decimal network and 5-digit display."""
    return UnitConverter()


@pytest.fixture
def satoshi_converter():
    """Engine for an 8-decimal network displaying 2 digits."""
    return UnitConverter(ConversionConfig(native_decimals=8, display_precision=2, currency_code="eur"))


@pytest.fixture
def restore_root_logger():
    """Undo any handler/level changes made through setup_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)
