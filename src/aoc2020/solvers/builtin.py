"""Built-in solvers for days 1 through 5."""
from __future__ import annotations

from aoc2020.boarding import (
    Seat,
    decode_passes,
    find_missing_seat,
    highest_seat_id,
)
from aoc2020.expenses import parse_entries as parse_expenses
from aoc2020.expenses import repair_product
from aoc2020.passports import count_complete, count_valid as count_valid_passports, parse_batch
from aoc2020.passwords import (
    COUNT_RULE,
    POSITION_RULE,
    PasswordEntry,
    count_valid as count_valid_passwords,
    parse_entries as parse_passwords,
)
from aoc2020.solvers.base import Solver
from aoc2020.solvers.registry import solver_registry
from aoc2020.toboggan import Slope, TobogganMap, count_trees, survey


@solver_registry.register("day01")
class ReportRepairSolver(Solver):
    day = 1
    title = "Report Repair"

    def parse(self, text: str) -> list[int]:
        return parse_expenses(text)

    def part_one(self, data: list[int]) -> int:
        return repair_product(data, count=2)

    def part_two(self, data: list[int]) -> int:
        return repair_product(data, count=3)


@solver_registry.register("day02")
class PasswordPhilosophySolver(Solver):
    day = 2
    title = "Password Philosophy"

    def parse(self, text: str) -> list[PasswordEntry]:
        return parse_passwords(text)

    def part_one(self, data: list[PasswordEntry]) -> int:
        return count_valid_passwords(data, COUNT_RULE)

    def part_two(self, data: list[PasswordEntry]) -> int:
        return count_valid_passwords(data, POSITION_RULE)


@solver_registry.register("day03")
class TobogganTrajectorySolver(Solver):
    day = 3
    title = "Toboggan Trajectory"

    def parse(self, text: str) -> TobogganMap:
        return TobogganMap.from_text(text)

    def part_one(self, data: TobogganMap) -> int:
        return count_trees(data, Slope(3, 1))

    def part_two(self, data: TobogganMap) -> int:
        return survey(data).product


@solver_registry.register("day04")
class PassportProcessingSolver(Solver):
    day = 4
    title = "Passport Processing"

    def parse(self, text: str) -> list[dict[str, str]]:
        return parse_batch(text)

    def part_one(self, data: list[dict[str, str]]) -> int:
        return count_complete(data)

    def part_two(self, data: list[dict[str, str]]) -> int:
        return count_valid_passports(data)


@solver_registry.register("day05")
class BinaryBoardingSolver(Solver):
    """Malformed boarding passes abort the solve instead of being skipped."""

    day = 5
    title = "Binary Boarding"

    def parse(self, text: str) -> list[Seat]:
        seats: list[Seat] = []
        for decoding in decode_passes(text):
            if decoding.error is not None:
                raise decoding.error
            seats.append(decoding.seat)
        return seats

    def part_one(self, data: list[Seat]) -> int:
        return highest_seat_id(data)

    def part_two(self, data: list[Seat]) -> int | None:
        seat = find_missing_seat(data)
        return seat.seat_id if seat is not None else None
