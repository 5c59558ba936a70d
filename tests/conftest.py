"""
Root test configuration and fixtures for the boarding project.

Note: sys.path manipulation is handled here so tests run from a checkout
without installing the package.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add project root to path to allow imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def sample_booking_text():
    """A small, fully valid booking file."""
    return "B1 A1,A2\nB2 C10,D10\nB3 B5\n"


@pytest.fixture
def full_bus_labels():
    """All 80 valid labels, row by row."""
    return [f"{column}{row}" for row in range(1, 21) for column in "ABCD"]
