"""Day 4: passport processing."""
from __future__ import annotations

from aoc2020.passports.passport import (
    REQUIRED_FIELDS,
    Height,
    Passport,
    PassportFormatError,
    PassportValidationError,
    count_complete,
    count_valid,
    has_required_fields,
    parse_batch,
    parse_fields,
    valid_passports,
    validate_passport,
)

__all__ = [
    "REQUIRED_FIELDS",
    "Height",
    "Passport",
    "parse_fields",
    "parse_batch",
    "has_required_fields",
    "validate_passport",
    "valid_passports",
    "count_complete",
    "count_valid",
    "PassportFormatError",
    "PassportValidationError",
]
