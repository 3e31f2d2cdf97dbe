"""Shared test fixtures for aoc2020.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
day-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import pytest

from aoc2020 import samples
from aoc2020.toboggan import TobogganMap


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def sample_forest() -> TobogganMap:
    """The 11x11 example map from the day 3 puzzle."""
    return TobogganMap.from_text(samples.DAY_03)
