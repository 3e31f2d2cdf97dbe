"""Day 1: report repair."""
from __future__ import annotations

from aoc2020.expenses.report import (
    TARGET_SUM,
    ExpenseReportError,
    NoMatchingEntriesError,
    find_entries,
    parse_entries,
    repair_product,
)

__all__ = [
    "TARGET_SUM",
    "parse_entries",
    "find_entries",
    "repair_product",
    "ExpenseReportError",
    "NoMatchingEntriesError",
]
