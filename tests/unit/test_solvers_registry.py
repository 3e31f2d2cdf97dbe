"""Unit tests for aoc2020.solvers.registry — SolverRegistry, error types,
and entry-point loading.
"""
from __future__ import annotations

import logging
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from aoc2020.solvers.base import Solution, Solver
from aoc2020.solvers.registry import (
    ENTRYPOINT_GROUP,
    SolverAlreadyRegisteredError,
    SolverNotFoundError,
    SolverRegistry,
    solver_name,
)

# ---------------------------------------------------------------------------
# Test fixtures — concrete solvers
# ---------------------------------------------------------------------------


class LineCountSolver(Solver):
    day = 6
    title = "Line Count"

    def parse(self, text: str) -> list[str]:
        return [line for line in text.splitlines() if line.strip()]

    def part_one(self, data: Any) -> int:
        return len(data)

    def part_two(self, data: Any) -> int | None:
        return None


class CharCountSolver(Solver):
    day = 7
    title = "Char Count"

    def parse(self, text: str) -> str:
        return text

    def part_one(self, data: Any) -> int:
        return len(data)

    def part_two(self, data: Any) -> int:
        return len(data.split())


class NotASolver:
    """Does NOT subclass Solver — used for error path testing."""


def _fresh_registry(name: str = "test") -> SolverRegistry:
    return SolverRegistry(name)


class TestSolverName:
    @pytest.mark.parametrize("day, expected", [(1, "day01"), (5, "day05"), (25, "day25")])
    def test_zero_padded(self, day: int, expected: str) -> None:
        assert solver_name(day) == expected


class TestErrors:
    def test_not_found_is_key_error(self) -> None:
        error = SolverNotFoundError("day09", "solvers")
        assert isinstance(error, KeyError)
        assert error.solver_name == "day09"
        assert error.registry_name == "solvers"
        assert "day09" in str(error)

    def test_already_registered_is_value_error(self) -> None:
        error = SolverAlreadyRegisteredError("day01", "solvers")
        assert isinstance(error, ValueError)
        assert "day01" in str(error)


class TestRegistration:
    def test_empty_registry(self) -> None:
        registry = _fresh_registry("empty")
        assert len(registry) == 0
        assert registry.list_solvers() == []
        assert repr(registry) == "SolverRegistry(name='empty', solvers=[])"

    def test_decorator_registers_and_returns_class(self) -> None:
        registry = _fresh_registry()

        @registry.register("day08")
        class LocalSolver(LineCountSolver):
            day = 8

        assert registry.get("day08") is LocalSolver
        assert "day08" in registry

    def test_decorator_duplicate_name_raises(self) -> None:
        registry = _fresh_registry()
        registry.register_class("day06", LineCountSolver)

        with pytest.raises(SolverAlreadyRegisteredError):
            @registry.register("day06")
            class Duplicate(LineCountSolver):
                pass

    def test_wrong_type_raises_type_error(self) -> None:
        registry = _fresh_registry()
        with pytest.raises(TypeError):
            registry.register_class("bad", NotASolver)  # type: ignore[arg-type]

    def test_non_class_raises_type_error(self) -> None:
        registry = _fresh_registry()
        with pytest.raises(TypeError):
            registry.register_class("bad", "not_a_class")  # type: ignore[arg-type]

    def test_register_logs_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = _fresh_registry()
        with caplog.at_level(logging.DEBUG, logger="aoc2020.solvers.registry"):
            registry.register_class("logged-solver", LineCountSolver)
        assert "logged-solver" in caplog.text

    def test_deregister(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = _fresh_registry()
        registry.register_class("day06", LineCountSolver)
        with caplog.at_level(logging.DEBUG, logger="aoc2020.solvers.registry"):
            registry.deregister("day06")
        assert "day06" not in registry
        assert "day06" in caplog.text

    def test_deregister_unknown_raises(self) -> None:
        with pytest.raises(SolverNotFoundError):
            _fresh_registry().deregister("ghost")


class TestLookup:
    def test_get_unknown_raises(self) -> None:
        with pytest.raises(SolverNotFoundError):
            _fresh_registry().get("ghost")

    def test_list_solvers_sorted(self) -> None:
        registry = _fresh_registry()
        registry.register_class("day07", CharCountSolver)
        registry.register_class("day06", LineCountSolver)
        assert registry.list_solvers() == ["day06", "day07"]

    def test_for_day_returns_fresh_instances(self) -> None:
        registry = _fresh_registry()
        registry.register_class("day06", LineCountSolver)
        first = registry.for_day(6)
        second = registry.for_day(6)
        assert isinstance(first, LineCountSolver)
        assert first is not second

    def test_for_day_unknown_raises(self) -> None:
        with pytest.raises(SolverNotFoundError):
            _fresh_registry().for_day(6)


class TestSolverBase:
    def test_solve_runs_both_parts(self) -> None:
        solution = CharCountSolver().solve("ab cd")
        assert solution == Solution(day=7, part_one=5, part_two=2)

    def test_part_two_may_be_none(self) -> None:
        assert LineCountSolver().solve("a\nb\n").part_two is None

    def test_solution_str(self) -> None:
        assert str(Solution(day=3, part_one=7, part_two=336)) == "Day 03: 7 / 336"

    def test_repr(self) -> None:
        assert repr(LineCountSolver()) == "LineCountSolver(day=6, title='Line Count')"

    def test_abstract_solver_cannot_be_instantiated(self) -> None:
        with pytest.raises(TypeError):
            Solver()  # type: ignore[abstract]


# ===========================================================================
# load_entrypoints
# ===========================================================================


class TestLoadEntrypoints:
    def test_default_group(self) -> None:
        registry = _fresh_registry()
        with patch(
            "aoc2020.solvers.registry.importlib.metadata.entry_points",
            return_value=[],
        ) as entry_points:
            registry.load_entrypoints()
        entry_points.assert_called_once_with(group=ENTRYPOINT_GROUP)
        assert len(registry) == 0

    def test_registers_valid_solver(self) -> None:
        registry = _fresh_registry()
        mock_ep = MagicMock()
        mock_ep.name = "day06"
        mock_ep.load.return_value = LineCountSolver

        with patch(
            "aoc2020.solvers.registry.importlib.metadata.entry_points",
            return_value=[mock_ep],
        ):
            registry.load_entrypoints()

        assert registry.get("day06") is LineCountSolver

    def test_repeated_load_is_idempotent(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = _fresh_registry()
        registry.register_class("day06", LineCountSolver)
        mock_ep = MagicMock()
        mock_ep.name = "day06"

        with patch(
            "aoc2020.solvers.registry.importlib.metadata.entry_points",
            return_value=[mock_ep],
        ):
            with caplog.at_level(logging.DEBUG, logger="aoc2020.solvers.registry"):
                registry.load_entrypoints()

        mock_ep.load.assert_not_called()
        assert len(registry) == 1
        assert "already registered" in caplog.text

    def test_import_failure_is_logged_and_skipped(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        registry = _fresh_registry()
        mock_ep = MagicMock()
        mock_ep.name = "day09"
        mock_ep.load.side_effect = ImportError("no module named day09")

        with patch(
            "aoc2020.solvers.registry.importlib.metadata.entry_points",
            return_value=[mock_ep],
        ):
            with caplog.at_level(logging.ERROR, logger="aoc2020.solvers.registry"):
                registry.load_entrypoints()

        assert len(registry) == 0
        assert "day09" in caplog.text

    def test_wrong_type_is_logged_and_skipped(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        registry = _fresh_registry()
        mock_ep = MagicMock()
        mock_ep.name = "day10"
        mock_ep.load.return_value = NotASolver

        with patch(
            "aoc2020.solvers.registry.importlib.metadata.entry_points",
            return_value=[mock_ep],
        ):
            with caplog.at_level(logging.WARNING, logger="aoc2020.solvers.registry"):
                registry.load_entrypoints()

        assert len(registry) == 0
        assert "day10" in caplog.text
