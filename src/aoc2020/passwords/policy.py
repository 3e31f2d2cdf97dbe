"""Password policy checking.

Each input line carries a policy and a password::

    1-3 a: abcde

The two numbers are read in two ways.  The sled rental shop treats them
as the allowed range for how often the letter occurs; the toboggan
corporate policy treats them as 1-based positions of which exactly one
must hold the letter.
"""
from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Final

_LINE: Final[re.Pattern[str]] = re.compile(
    r"^(?P<low>\d+)-(?P<high>\d+)\s+(?P<letter>\S):\s*(?P<password>\S*)$"
)


class PasswordFormatError(ValueError):
    """Raised when a line does not follow ``low-high letter: password``."""

    def __init__(self, text: str, line: int | None = None) -> None:
        where = f" at line {line}" if line is not None else ""
        super().__init__(f"PasswordFormatError{where}: cannot parse {text!r}")
        self.text = text
        self.line = line


@dataclass(frozen=True, slots=True)
class PasswordPolicy:
    """A letter plus two numbers whose meaning depends on the rule used."""

    low: int
    high: int
    letter: str

    def allows_by_count(self, password: str) -> bool:
        """Letter occurs between ``low`` and ``high`` times, inclusive."""
        return self.low <= password.count(self.letter) <= self.high

    def allows_by_position(self, password: str) -> bool:
        """Exactly one of positions ``low`` and ``high`` (1-based) holds the letter.

        Positions past the end of the password never match.
        """
        return self._letter_at(password, self.low) != self._letter_at(password, self.high)

    def _letter_at(self, password: str, position: int) -> bool:
        return 1 <= position <= len(password) and password[position - 1] == self.letter


@dataclass(frozen=True, slots=True)
class PasswordEntry:
    policy: PasswordPolicy
    password: str


Rule = Callable[[PasswordPolicy, str], bool]

COUNT_RULE: Final[Rule] = PasswordPolicy.allows_by_count
POSITION_RULE: Final[Rule] = PasswordPolicy.allows_by_position


def parse_entry(line: str) -> PasswordEntry:
    """Parse a single ``low-high letter: password`` line.

    Raises
    ------
    PasswordFormatError
        If the line does not match the expected layout.
    """
    match = _LINE.match(line.strip())
    if match is None:
        raise PasswordFormatError(line.strip())
    policy = PasswordPolicy(
        low=int(match["low"]),
        high=int(match["high"]),
        letter=match["letter"],
    )
    return PasswordEntry(policy=policy, password=match["password"])


def parse_entries(text: str) -> list[PasswordEntry]:
    """Parse every non-blank line of ``text``."""
    entries: list[PasswordEntry] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            entries.append(parse_entry(line))
        except PasswordFormatError as exc:
            raise PasswordFormatError(exc.text, line=lineno) from None
    return entries


def count_valid(entries: Iterable[PasswordEntry], rule: Rule = COUNT_RULE) -> int:
    """Count entries whose password satisfies ``rule``."""
    return sum(1 for entry in entries if rule(entry.policy, entry.password))
