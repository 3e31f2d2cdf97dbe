"""Slope sweeps over a toboggan map.

A sweep starts a fresh ``Toboggan`` at the top-left corner and keeps
moving by one slope until the next move would leave the bottom of the
map, summing the trees it lands on.  A survey runs one sweep per slope
and multiplies the tree counts together.
"""
from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final

from aoc2020.toboggan.errors import OutOfBoundsError
from aoc2020.toboggan.grid import Toboggan, TobogganMap

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Slope:
    """A ``(dx, dy)`` step pattern.  ``dy`` must be at least 1."""

    dx: int
    dy: int

    def __post_init__(self) -> None:
        if self.dy < 1:
            raise ValueError(f"Slope dy must be >= 1, got {self.dy}")

    def __str__(self) -> str:
        return f"right {self.dx}, down {self.dy}"


DEFAULT_SLOPES: Final[tuple[Slope, ...]] = (
    Slope(1, 1),
    Slope(3, 1),
    Slope(5, 1),
    Slope(7, 1),
    Slope(1, 2),
)


@dataclass(frozen=True, slots=True)
class SweepResult:
    """Outcome of one sweep.

    Parameters
    ----------
    slope:
        The slope that was followed.
    trees:
        Number of trees landed on.
    moves:
        Number of successful moves before reaching the bottom.
    """

    slope: Slope
    trees: int
    moves: int


@dataclass(frozen=True, slots=True)
class SurveyReport:
    """Per-slope sweep results plus the product of their tree counts."""

    results: tuple[SweepResult, ...]

    @property
    def product(self) -> int:
        return math.prod(result.trees for result in self.results)

    def trees_for(self, slope: Slope) -> int:
        """Return the tree count recorded for ``slope``.

        Raises
        ------
        KeyError
            If ``slope`` was not part of the survey.
        """
        for result in self.results:
            if result.slope == slope:
                return result.trees
        raise KeyError(slope)


def sweep(forest: TobogganMap, slope: Slope) -> SweepResult:
    """Ride ``forest`` from the top-left corner along ``slope``."""
    toboggan = Toboggan(forest)
    trees = 0
    moves = 0
    while True:
        try:
            trees += toboggan.move_by(slope.dx, slope.dy)
        except OutOfBoundsError:
            break
        moves += 1
    logger.debug("Sweep %s finished after %d moves with %d trees", slope, moves, trees)
    return SweepResult(slope=slope, trees=trees, moves=moves)


def count_trees(forest: TobogganMap, slope: Slope) -> int:
    """Return the number of trees hit along ``slope``."""
    return sweep(forest, slope).trees


def survey(
    forest: TobogganMap, slopes: Iterable[Slope] = DEFAULT_SLOPES
) -> SurveyReport:
    """Sweep ``forest`` once per slope, in order.

    Parameters
    ----------
    forest:
        The map to survey.
    slopes:
        Slopes to follow.  Defaults to ``DEFAULT_SLOPES``.

    Returns
    -------
    SurveyReport
        One ``SweepResult`` per slope; ``product`` is the puzzle answer.
    """
    return SurveyReport(results=tuple(sweep(forest, slope) for slope in slopes))
