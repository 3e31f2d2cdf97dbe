"""Binary space partitioned boarding passes.

A boarding pass such as ``FBFBBFFRLR`` is a 10-bit number in disguise:
the first seven characters pick one of 128 rows (``F`` keeps the lower
half and is a 0 bit, ``B`` keeps the upper half and is a 1 bit), the
last three pick one of 8 columns (``L`` is 0, ``R`` is 1).  The seat ID
is ``row * 8 + column``.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final

logger = logging.getLogger(__name__)

ROW_BITS: Final[int] = 7
COLUMN_BITS: Final[int] = 3
PASS_LENGTH: Final[int] = ROW_BITS + COLUMN_BITS

_ROW_CHARS: Final[dict[str, int]] = {"F": 0, "B": 1}
_COLUMN_CHARS: Final[dict[str, int]] = {"L": 0, "R": 1}


class BoardingPassError(ValueError):
    """Raised when a boarding pass cannot be decoded.

    Parameters
    ----------
    code:
        The offending boarding pass text.
    message:
        Human-readable description of the problem.
    index:
        0-based index of the offending character, if any.
    """

    def __init__(self, code: str, message: str, index: int | None = None) -> None:
        super().__init__(f"BoardingPassError for {code!r}: {message}")
        self.code = code
        self.pass_message = message
        self.index = index


@dataclass(frozen=True, slots=True, order=True)
class Seat:
    row: int
    column: int

    @property
    def seat_id(self) -> int:
        return self.row * 8 + self.column

    @classmethod
    def from_id(cls, seat_id: int) -> "Seat":
        return cls(row=seat_id // 8, column=seat_id % 8)


@dataclass(frozen=True, slots=True)
class SeatDecoding:
    """Outcome of decoding one boarding pass: either ``seat`` or ``error``."""

    code: str
    seat: Seat | None = None
    error: BoardingPassError | None = None

    @property
    def ok(self) -> bool:
        return self.seat is not None


def decode_seat(code: str) -> Seat:
    """Decode a 10-character boarding pass into a ``Seat``.

    Raises
    ------
    BoardingPassError
        If the pass has the wrong length or a character that does not
        belong at its position.
    """
    if len(code) != PASS_LENGTH:
        raise BoardingPassError(code, f"expected {PASS_LENGTH} characters, got {len(code)}")
    value = 0
    for index, char in enumerate(code):
        table = _ROW_CHARS if index < ROW_BITS else _COLUMN_CHARS
        if char not in table:
            raise BoardingPassError(
                code,
                f"character {char!r} at {index} is not one of {'/'.join(table)}",
                index=index,
            )
        value = (value << 1) | table[char]
    return Seat(row=value >> COLUMN_BITS, column=value & ((1 << COLUMN_BITS) - 1))


def decode_passes(text: str) -> list[SeatDecoding]:
    """Decode every non-blank line of ``text``, keeping failures as results."""
    results: list[SeatDecoding] = []
    for line in text.splitlines():
        code = line.strip()
        if not code:
            continue
        try:
            results.append(SeatDecoding(code=code, seat=decode_seat(code)))
        except BoardingPassError as exc:
            logger.debug("Could not decode boarding pass: %s", exc)
            results.append(SeatDecoding(code=code, error=exc))
    return results


def highest_seat_id(seats: Iterable[Seat]) -> int:
    """Return the largest seat ID.

    Raises
    ------
    ValueError
        If ``seats`` is empty.
    """
    ids = [seat.seat_id for seat in seats]
    if not ids:
        raise ValueError("highest_seat_id() needs at least one seat")
    return max(ids)


def find_missing_seat(seats: Iterable[Seat]) -> Seat | None:
    """Return the free seat whose neighbours by ID are both taken.

    Seats at the very front and back of the plane are missing too, so
    only a gap of exactly one ID between two occupied seats counts.
    Returns ``None`` when there is no such gap.
    """
    ids = sorted({seat.seat_id for seat in seats})
    for previous, current in zip(ids, ids[1:]):
        if current - previous == 2:
            return Seat.from_id(previous + 1)
    return None
