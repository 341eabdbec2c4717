"""
Pytest configuration for tinyfft tests.

Ensures proper import paths are set before test collection.
"""

import sys
from pathlib import Path

import pytest

# Ensure src directory is in path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


SCENARIO = [0.2, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8]


@pytest.fixture
def scenario():
    """The eight-sample reference signal."""
    return list(SCENARIO)


def fmt_complex(z, decimals=2):
    """Format like '3.70+0.00i'. Rounds first so -0.00 never appears."""
    re = round(z.real, decimals) + 0.0
    im = round(z.imag, decimals) + 0.0
    return f"{re:.{decimals}f}{im:+.{decimals}f}i"


@pytest.fixture
def fmt():
    return fmt_complex
