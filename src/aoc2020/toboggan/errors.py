"""Error types for the toboggan map engine.

``OutOfBoundsError`` is the normal end-of-sweep signal and never leaves
``sweep``/``survey``.  ``MalformedMapError`` is raised while building a
map from text.
"""
from __future__ import annotations


class OutOfBoundsError(Exception):
    """Raised when a move would leave the map vertically.

    Parameters
    ----------
    x, y:
        Cursor position before the attempted move.
    dx, dy:
        The rejected step.
    max_y:
        Index of the last row of the map.
    """

    def __init__(self, x: int, y: int, dx: int, dy: int, max_y: int) -> None:
        super().__init__(
            f"Move ({dx:+d}, {dy:+d}) from ({x}, {y}) leaves rows 0..{max_y}"
        )
        self.x = x
        self.y = y
        self.dx = dx
        self.dy = dy
        self.max_y = max_y


class MalformedMapError(ValueError):
    """Raised when map text cannot be turned into a ``TobogganMap``.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    row:
        0-based row of the offending character, if any.
    col:
        0-based column of the offending character, if any.
    """

    def __init__(self, message: str, row: int | None = None, col: int | None = None) -> None:
        if row is not None and col is not None:
            super().__init__(f"MalformedMapError at {row}:{col}: {message}")
        else:
            super().__init__(f"MalformedMapError: {message}")
        self.map_message = message
        self.row = row
        self.col = col
