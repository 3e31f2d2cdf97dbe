"""Passport batch parsing and validation.

A batch file holds passports separated by blank lines.  Each passport is
a run of ``key:value`` fields separated by spaces or newlines::

    ecl:gry pid:860033327 eyr:2020 hcl:#fffffd
    byr:1937 iyr:2017 cid:147 hgt:183cm

Field rules
-----------
byr  four digits, 1920..2002
iyr  four digits, 2010..2020
eyr  four digits, 2020..2030
hgt  a number followed by ``cm`` (150..193) or ``in`` (59..76)
hcl  ``#`` followed by exactly six characters 0-9 or a-f
ecl  one of amb blu brn gry grn hzl oth
pid  nine digits, leading zeroes included
cid  optional, ignored
"""
from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Final

logger = logging.getLogger(__name__)

REQUIRED_FIELDS: Final[frozenset[str]] = frozenset(
    {"byr", "iyr", "eyr", "hgt", "hcl", "ecl", "pid"}
)
EYE_COLORS: Final[frozenset[str]] = frozenset(
    {"amb", "blu", "brn", "gry", "grn", "hzl", "oth"}
)
HEIGHT_RANGES: Final[dict[str, tuple[int, int]]] = {
    "cm": (150, 193),
    "in": (59, 76),
}

_BLANK_LINE: Final[re.Pattern[str]] = re.compile(r"^\s*$", re.MULTILINE)
_YEAR: Final[re.Pattern[str]] = re.compile(r"^\d{4}$")
_HEIGHT: Final[re.Pattern[str]] = re.compile(r"^(?P<value>\d+)(?P<unit>[a-z]*)$")
_HAIR_COLOR: Final[re.Pattern[str]] = re.compile(r"^#[0-9a-f]{6}$")
_PASSPORT_ID: Final[re.Pattern[str]] = re.compile(r"^\d{9}$")


class PassportFormatError(ValueError):
    """Raised when a field token is not of the form ``key:value``."""

    def __init__(self, token: str) -> None:
        super().__init__(f"PassportFormatError: {token!r} is not a key:value field")
        self.token = token


class PassportValidationError(ValueError):
    """Raised when a passport field is missing or breaks its rule.

    Parameters
    ----------
    field:
        The three-letter field key.
    reason:
        Why the field was rejected.
    """

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"Invalid {field}: {reason}")
        self.field = field
        self.reason = reason


@dataclass(frozen=True, slots=True)
class Height:
    value: int
    unit: str

    def __str__(self) -> str:
        return f"{self.value}{self.unit}"


@dataclass(frozen=True, slots=True)
class Passport:
    """A passport whose fields have all passed validation."""

    birth_year: int
    issue_year: int
    expiration_year: int
    height: Height
    hair_color: str
    eye_color: str
    passport_id: str
    country_id: str | None = None


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_fields(block: str) -> dict[str, str]:
    """Split one passport block into a field dict.

    Raises
    ------
    PassportFormatError
        If a whitespace-separated token has no ``:``.
    """
    fields: dict[str, str] = {}
    for token in block.split():
        key, sep, value = token.partition(":")
        if not sep:
            raise PassportFormatError(token)
        fields[key] = value
    return fields


def parse_batch(text: str) -> list[dict[str, str]]:
    """Split a batch file into one field dict per passport."""
    return [
        parse_fields(block)
        for block in _BLANK_LINE.split(text)
        if block.strip()
    ]


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def has_required_fields(fields: Mapping[str, str]) -> bool:
    """Return True if every field but ``cid`` is present."""
    return REQUIRED_FIELDS <= fields.keys()


def _require(fields: Mapping[str, str], key: str) -> str:
    try:
        return fields[key]
    except KeyError:
        raise PassportValidationError(key, "missing") from None


def _validate_year(fields: Mapping[str, str], key: str, low: int, high: int) -> int:
    raw = _require(fields, key)
    if not _YEAR.match(raw):
        raise PassportValidationError(key, f"{raw!r} is not a four-digit year")
    year = int(raw)
    if not low <= year <= high:
        raise PassportValidationError(key, f"{year} outside {low}..{high}")
    return year


def _validate_height(fields: Mapping[str, str]) -> Height:
    raw = _require(fields, "hgt")
    match = _HEIGHT.match(raw)
    if match is None:
        raise PassportValidationError("hgt", f"malformed height {raw!r}")
    unit = match["unit"]
    if unit not in HEIGHT_RANGES:
        raise PassportValidationError("hgt", f"unknown unit {unit!r}" if unit else "no unit")
    value = int(match["value"])
    low, high = HEIGHT_RANGES[unit]
    if not low <= value <= high:
        raise PassportValidationError("hgt", f"{value}{unit} outside {low}..{high}{unit}")
    return Height(value=value, unit=unit)


def _validate_pattern(fields: Mapping[str, str], key: str, pattern: re.Pattern[str]) -> str:
    raw = _require(fields, key)
    if not pattern.match(raw):
        raise PassportValidationError(key, f"{raw!r} does not match {pattern.pattern}")
    return raw


def _validate_eye_color(fields: Mapping[str, str]) -> str:
    raw = _require(fields, "ecl")
    if raw not in EYE_COLORS:
        raise PassportValidationError("ecl", f"unknown eye color {raw!r}")
    return raw


def validate_passport(fields: Mapping[str, str]) -> Passport:
    """Validate a field dict and build a ``Passport``.

    Raises
    ------
    PassportValidationError
        On the first missing or invalid field.
    """
    return Passport(
        birth_year=_validate_year(fields, "byr", 1920, 2002),
        issue_year=_validate_year(fields, "iyr", 2010, 2020),
        expiration_year=_validate_year(fields, "eyr", 2020, 2030),
        height=_validate_height(fields),
        hair_color=_validate_pattern(fields, "hcl", _HAIR_COLOR),
        eye_color=_validate_eye_color(fields),
        passport_id=_validate_pattern(fields, "pid", _PASSPORT_ID),
        country_id=fields.get("cid"),
    )


def valid_passports(batch: Iterable[Mapping[str, str]]) -> list[Passport]:
    """Return the passports in ``batch`` that pass validation."""
    passports: list[Passport] = []
    for index, fields in enumerate(batch):
        try:
            passports.append(validate_passport(fields))
        except PassportValidationError as exc:
            logger.debug("Skipping passport #%d: %s", index, exc)
    return passports


def count_complete(batch: Iterable[Mapping[str, str]]) -> int:
    return sum(1 for fields in batch if has_required_fields(fields))


def count_valid(batch: Iterable[Mapping[str, str]]) -> int:
    return len(valid_passports(batch))
