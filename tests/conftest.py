"""
Pytest configuration for the lead qualification tests.

Adds the project root to the Python path so tests can import domain,
services, api and scripts, and provides deterministic id/clock sources.
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

FIXED_LEAD_ID = "abcd1234-0000-4000-8000-000000000000"
FIXED_NOW = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_id():
    return lambda: FIXED_LEAD_ID


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW
