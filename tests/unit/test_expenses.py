"""Unit tests for aoc2020.expenses — report parsing and entry search."""
from __future__ import annotations

import pytest

from aoc2020 import samples
from aoc2020.expenses import (
    ExpenseReportError,
    NoMatchingEntriesError,
    find_entries,
    parse_entries,
    repair_product,
)


@pytest.fixture()
def sample_entries() -> list[int]:
    return parse_entries(samples.DAY_01)


class TestParseEntries:
    def test_sample(self, sample_entries: list[int]) -> None:
        assert sample_entries == [1721, 979, 366, 299, 675, 1456]

    def test_blank_lines_skipped(self) -> None:
        assert parse_entries("\n 1 \n\n2\n") == [1, 2]

    def test_non_integer_line_raises_with_line_number(self) -> None:
        with pytest.raises(ExpenseReportError) as excinfo:
            parse_entries("1\n2\nthree\n")
        assert excinfo.value.line == 3
        assert excinfo.value.text == "three"

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_entries("1.5")


class TestFindEntries:
    def test_sample_pair(self, sample_entries: list[int]) -> None:
        assert find_entries(sample_entries) == (1721, 299)

    def test_sample_triple(self, sample_entries: list[int]) -> None:
        assert find_entries(sample_entries, count=3) == (979, 366, 675)

    def test_entry_is_not_paired_with_itself(self) -> None:
        with pytest.raises(NoMatchingEntriesError):
            find_entries([1010, 5, 7])

    def test_duplicate_values_at_distinct_positions_pair(self) -> None:
        assert find_entries([1010, 5, 1010]) == (1010, 1010)

    def test_custom_target(self) -> None:
        assert find_entries([1, 2, 3, 4], target=7) == (3, 4)

    def test_no_match_raises(self) -> None:
        with pytest.raises(NoMatchingEntriesError) as excinfo:
            find_entries([1, 2, 3], count=2)
        assert excinfo.value.target == 2020
        assert excinfo.value.count == 2

    def test_count_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            find_entries([2020], count=0)


class TestRepairProduct:
    def test_sample_part_one(self, sample_entries: list[int]) -> None:
        assert repair_product(sample_entries) == 514579

    def test_sample_part_two(self, sample_entries: list[int]) -> None:
        assert repair_product(sample_entries, count=3) == 241861950
