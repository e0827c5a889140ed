"""
Pytest configuration and shared fixtures for sweid tests.
"""

from datetime import date

import pytest


@pytest.fixture
def today() -> date:
    """Fixed reading date so century inference is deterministic."""
    return date(2024, 1, 1)
