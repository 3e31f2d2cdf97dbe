"""Expense report repair.

Find the entries that add up to a target sum (2020 in the puzzle) and
multiply them together.
"""
from __future__ import annotations

import itertools
import logging
import math
from collections.abc import Sequence
from typing import Final

logger = logging.getLogger(__name__)

TARGET_SUM: Final[int] = 2020


class ExpenseReportError(ValueError):
    """Raised when a report line is not an integer.

    Parameters
    ----------
    line:
        1-based line number of the offending line.
    text:
        The trimmed line content.
    """

    def __init__(self, line: int, text: str) -> None:
        super().__init__(f"ExpenseReportError at line {line}: {text!r} is not an integer")
        self.line = line
        self.text = text


class NoMatchingEntriesError(LookupError):
    """Raised when no combination of entries reaches the target."""

    def __init__(self, target: int, count: int) -> None:
        super().__init__(f"No {count} entries sum to {target}")
        self.target = target
        self.count = count


def parse_entries(text: str) -> list[int]:
    """Parse one integer per non-blank line.

    Raises
    ------
    ExpenseReportError
        On the first line that is not an integer.
    """
    entries: list[int] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped:
            continue
        try:
            entries.append(int(stripped))
        except ValueError:
            raise ExpenseReportError(lineno, stripped) from None
    return entries


def find_entries(
    entries: Sequence[int], target: int = TARGET_SUM, count: int = 2
) -> tuple[int, ...]:
    """Return the first ``count`` entries, at distinct positions, summing to ``target``.

    Combinations are tried in input order, so the earliest matching
    group wins.

    Raises
    ------
    ValueError
        If ``count`` is less than 1.
    NoMatchingEntriesError
        If no such group exists.
    """
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")
    for group in itertools.combinations(entries, count):
        if sum(group) == target:
            logger.debug("Entries %s sum to %d", group, target)
            return group
    raise NoMatchingEntriesError(target, count)


def repair_product(
    entries: Sequence[int], target: int = TARGET_SUM, count: int = 2
) -> int:
    """Return the product of the entries found by ``find_entries``."""
    return math.prod(find_entries(entries, target=target, count=count))
