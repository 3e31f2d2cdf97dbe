"""Base class and result type shared by all puzzle solvers."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar


@dataclass(frozen=True, slots=True)
class Solution:
    """Both answers for one puzzle day."""

    day: int
    part_one: int
    part_two: int | None

    def __str__(self) -> str:
        return f"Day {self.day:02d}: {self.part_one} / {self.part_two}"


class Solver(ABC):
    """One puzzle day: parse the input once, then answer both parts.

    Subclasses set ``day`` and ``title`` and implement the three hooks.
    ``part_two`` may return ``None`` when the day has no second answer
    for the given input.
    """

    day: ClassVar[int]
    title: ClassVar[str]

    @abstractmethod
    def parse(self, text: str) -> Any:
        """Turn raw puzzle text into the day's data structure."""

    @abstractmethod
    def part_one(self, data: Any) -> int: ...

    @abstractmethod
    def part_two(self, data: Any) -> int | None: ...

    def solve(self, text: str) -> Solution:
        """Parse ``text`` and compute both parts."""
        data = self.parse(text)
        return Solution(day=self.day, part_one=self.part_one(data), part_two=self.part_two(data))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(day={self.day}, title={self.title!r})"
