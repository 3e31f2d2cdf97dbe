"""Solver subsystem for aoc2020.

Importing this package registers the built-in solvers for days 1-5 in
``solver_registry``.  Third-party solvers register through the
"aoc2020.solvers" entry-point group.
"""
from __future__ import annotations

from aoc2020.solvers.base import Solution, Solver
from aoc2020.solvers.registry import (
    ENTRYPOINT_GROUP,
    SolverAlreadyRegisteredError,
    SolverNotFoundError,
    SolverRegistry,
    solver_name,
    solver_registry,
)
from aoc2020.solvers import builtin as _builtin  # noqa: F401

__all__ = [
    "Solution",
    "Solver",
    "SolverRegistry",
    "SolverNotFoundError",
    "SolverAlreadyRegisteredError",
    "ENTRYPOINT_GROUP",
    "solver_name",
    "solver_registry",
]
