"""aoc2020 — Advent of Code 2020 solvers for days 1 through 5.

Public API
----------
The stable public surface is everything exported from this module.
Each day also has its own subpackage (``aoc2020.expenses``,
``aoc2020.passwords``, ``aoc2020.toboggan``, ``aoc2020.passports``,
``aoc2020.boarding``) for callers that want the intermediate
structures rather than just the answers.

Example
-------
::

    import aoc2020

    # Solve a day from puzzle input text
    solution = aoc2020.solve(3, text)
    solution.part_one, solution.part_two

    # Without text, the published example input is used
    aoc2020.solve(3).part_two
    336

    aoc2020.available_days()
    [1, 2, 3, 4, 5]
"""
from __future__ import annotations

from typing import TYPE_CHECKING

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from aoc2020.solvers.base import Solution


def solve(day: int, text: str | None = None) -> "Solution":
    """Solve both parts of ``day``.

    Parameters
    ----------
    day:
        Puzzle day number.
        Solvers published by other packages under the "aoc2020.solvers"
        entry-point group are loaded before lookup.
    text:
        Raw puzzle input.  When ``None``, the day's example input from
        ``aoc2020.samples`` is used.

    Returns
    -------
    Solution
        The day number and both answers.

    Raises
    ------
    aoc2020.solvers.SolverNotFoundError
        If no solver is registered for ``day``.
    KeyError
        If ``text`` is ``None`` and there is no example input for ``day``.
    """
    from aoc2020.samples import SAMPLES
    from aoc2020.solvers import solver_registry

    solver_registry.load_entrypoints()
    solver = solver_registry.for_day(day)
    return solver.solve(SAMPLES[day] if text is None else text)


def available_days() -> list[int]:
    """Return the day numbers of all registered solvers, ascending.

    Includes solvers installed through the "aoc2020.solvers" entry-point
    group.
    """
    from aoc2020.solvers import solver_registry

    solver_registry.load_entrypoints()
    return sorted(solver_registry.get(name).day for name in solver_registry.list_solvers())


__all__ = [
    "__version__",
    "solve",
    "available_days",
]
