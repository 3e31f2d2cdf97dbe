"""Toboggan map and the cursor that rides over it.

The map is an immutable grid of ``Cell`` values built once from the
puzzle text.  It repeats infinitely to the right, so horizontal
positions wrap around the width of the first row, while the vertical
extent is fixed: moving above the first row or below the last one is
rejected with ``OutOfBoundsError``.

A ``Toboggan`` owns its own ``Position``.  Several toboggans may share a
map; the map itself is never mutated after construction.

Usage
-----
::

    from aoc2020.toboggan import TobogganMap, Toboggan

    forest = TobogganMap.from_text(text)
    ride = Toboggan(forest)
    hit = ride.move_by(3, 1)
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Final

from aoc2020.toboggan.errors import MalformedMapError, OutOfBoundsError

TREE_MARKER: Final[str] = "#"
OPEN_MARKER: Final[str] = "."


class Cell(IntEnum):
    """Content of one map square; the integer value is the tree count."""

    OPEN = 0
    TREE = 1

    @classmethod
    def from_char(cls, char: str, strict: bool = False) -> "Cell | None":
        """Map a map character to a cell.

        Returns ``None`` for an unrecognised character in strict mode so
        the caller can report its position.
        """
        if char == TREE_MARKER:
            return cls.TREE
        if char == OPEN_MARKER or not strict:
            return cls.OPEN
        return None


@dataclass(frozen=True, slots=True)
class Position:
    """Zero-based cursor location: ``x`` is the column, ``y`` the row."""

    x: int = 0
    y: int = 0


ORIGIN: Final[Position] = Position(0, 0)


class TobogganMap:
    """Immutable grid of open squares and trees.

    Parameters
    ----------
    rows:
        Grid rows, top to bottom.  Rows are kept as given, so a jagged
        input stays jagged; the width of the first row is used for
        wraparound.

    Raises
    ------
    MalformedMapError
        If ``rows`` is empty or its first row is empty.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: list[list[Cell]] | tuple[tuple[Cell, ...], ...]) -> None:
        frozen = tuple(tuple(row) for row in rows)
        if not frozen or not frozen[0]:
            raise MalformedMapError("map has no squares")
        self._rows: tuple[tuple[Cell, ...], ...] = frozen

    @classmethod
    def from_text(cls, text: str, strict: bool = False) -> "TobogganMap":
        """Build a map from puzzle text, one row per line.

        Lines are trimmed of surrounding whitespace and blank lines are
        skipped.  ``#`` is a tree; any other character is an open square
        unless ``strict`` is set, in which case only ``.`` is accepted.

        Raises
        ------
        MalformedMapError
            If the text has no rows, or in strict mode on the first
            unrecognised character.
        """
        rows: list[list[Cell]] = []
        for line in text.splitlines():
            stripped = line.strip()
            if not stripped:
                continue
            row: list[Cell] = []
            for col, char in enumerate(stripped):
                cell = Cell.from_char(char, strict=strict)
                if cell is None:
                    raise MalformedMapError(
                        f"unexpected character {char!r}", row=len(rows), col=col
                    )
                row.append(cell)
            rows.append(row)
        return cls(rows)

    @property
    def width(self) -> int:
        """Length of the first row, i.e. the horizontal repeat period."""
        return len(self._rows[0])

    @property
    def height(self) -> int:
        return len(self._rows)

    @property
    def max_x(self) -> int:
        return self.width - 1

    @property
    def max_y(self) -> int:
        return self.height - 1

    def cell(self, x: int, y: int) -> Cell:
        """Return the cell at column ``x`` of row ``y``.

        ``x`` wraps around the map width; ``y`` must be a valid row.
        Squares past the end of a row shorter than the first are open.
        """
        if not 0 <= y <= self.max_y:
            raise IndexError(f"row {y} outside 0..{self.max_y}")
        row = self._rows[y]
        col = x % self.width
        return row[col] if col < len(row) else Cell.OPEN

    def is_tree(self, x: int, y: int) -> bool:
        return self.cell(x, y) is Cell.TREE

    def __len__(self) -> int:
        return self.height

    def __repr__(self) -> str:
        return f"TobogganMap(width={self.width}, height={self.height})"


class Toboggan:
    """A cursor travelling over a ``TobogganMap``.

    Parameters
    ----------
    forest:
        The map to ride over.
    start:
        Starting position, the top-left corner by default.  ``x`` is
        wrapped into the map width.

    Raises
    ------
    OutOfBoundsError
        If ``start.y`` is not a row of ``forest``.
    """

    __slots__ = ("_map", "_position")

    def __init__(self, forest: TobogganMap, start: Position = ORIGIN) -> None:
        if not 0 <= start.y <= forest.max_y:
            raise OutOfBoundsError(start.x, start.y, 0, 0, forest.max_y)
        self._map = forest
        self._position = Position(start.x % forest.width, start.y)

    @property
    def forest(self) -> TobogganMap:
        return self._map

    @property
    def position(self) -> Position:
        return self._position

    def move_by(self, dx: int, dy: int) -> int:
        """Step by ``(dx, dy)`` and return the value of the landing cell.

        The horizontal coordinate wraps modulo the map width.  The
        vertical coordinate must stay within the map; both are checked
        before the cursor changes, so a rejected move leaves it in place.

        Returns
        -------
        int
            ``1`` when landing on a tree, otherwise ``0``.

        Raises
        ------
        OutOfBoundsError
            If the move would go above the first or below the last row.
        """
        current = self._position
        new_y = current.y + dy
        if not 0 <= new_y <= self._map.max_y:
            raise OutOfBoundsError(current.x, current.y, dx, dy, self._map.max_y)
        new_x = (current.x + dx) % self._map.width
        self._position = Position(new_x, new_y)
        return int(self._map.cell(new_x, new_y))

    def reset_position(self) -> None:
        """Return the cursor to the top-left corner."""
        self._position = ORIGIN

    def __repr__(self) -> str:
        return f"Toboggan(x={self._position.x}, y={self._position.y}, map={self._map!r})"
