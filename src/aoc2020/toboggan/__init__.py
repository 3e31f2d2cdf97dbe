"""Day 3: toboggan trajectory.

Exports the map engine, the sweep helpers, and their error types.
"""
from __future__ import annotations

from aoc2020.toboggan.errors import MalformedMapError, OutOfBoundsError
from aoc2020.toboggan.grid import Cell, Position, Toboggan, TobogganMap
from aoc2020.toboggan.sweep import (
    DEFAULT_SLOPES,
    Slope,
    SurveyReport,
    SweepResult,
    count_trees,
    survey,
    sweep,
)

__all__ = [
    "Cell",
    "Position",
    "Toboggan",
    "TobogganMap",
    "Slope",
    "SweepResult",
    "SurveyReport",
    "DEFAULT_SLOPES",
    "sweep",
    "count_trees",
    "survey",
    "OutOfBoundsError",
    "MalformedMapError",
]
