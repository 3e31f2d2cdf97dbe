"""Day 5: binary boarding."""
from __future__ import annotations

from aoc2020.boarding.seat import (
    PASS_LENGTH,
    BoardingPassError,
    Seat,
    SeatDecoding,
    decode_passes,
    decode_seat,
    find_missing_seat,
    highest_seat_id,
)

__all__ = [
    "PASS_LENGTH",
    "Seat",
    "SeatDecoding",
    "decode_seat",
    "decode_passes",
    "highest_seat_id",
    "find_missing_seat",
    "BoardingPassError",
]
