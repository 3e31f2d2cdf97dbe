"""Day 2: password philosophy."""
from __future__ import annotations

from aoc2020.passwords.policy import (
    COUNT_RULE,
    POSITION_RULE,
    PasswordEntry,
    PasswordFormatError,
    PasswordPolicy,
    count_valid,
    parse_entries,
    parse_entry,
)

__all__ = [
    "PasswordPolicy",
    "PasswordEntry",
    "COUNT_RULE",
    "POSITION_RULE",
    "parse_entry",
    "parse_entries",
    "count_valid",
    "PasswordFormatError",
]
