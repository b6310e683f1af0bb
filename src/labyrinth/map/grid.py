from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generator, Iterator, List, Optional, Sequence

from labyrinth.errors import InvalidMap

from .cells import FLOOR, is_valid_cell

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class Position:
    """A (row, col) cell address. Both coordinates are 0-based.

    Ordering follows row-major scan order.
    """

    row: int
    col: int

    def offset(self, drow: int, dcol: int) -> "Position":
        return Position(self.row + drow, self.col + dcol)


# Deterministic neighbour order: up, down, left, right.
NEIGHBOR_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Grid:
    """A rectangular, bounds-checked character grid.

    All cell access goes through this class. Rows are stored top to bottom and
    every row holds exactly ``cols`` characters drawn from the map alphabet
    (``#``, ``.`` and the digits ``0``-``9``). Callers that might address a
    cell outside the grid should use is_within/safe_get rather than get.
    """

    __slots__ = ("_rows", "_cols", "_cells")

    def __init__(self, rows: int, cols: int, fill: str = FLOOR) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError("Grid dimensions must be positive")
        if not is_valid_cell(fill):
            raise ValueError(f"Invalid fill character: {fill!r}")
        self._rows = int(rows)
        self._cols = int(cols)
        # cells[row][col]
        self._cells: List[List[str]] = [[fill for _ in range(self._cols)] for _ in range(self._rows)]

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def is_within(self, pos: Position) -> bool:
        """Check if a position is inside the grid. Never raises."""
        return 0 <= pos.row < self._rows and 0 <= pos.col < self._cols

    def get(self, pos: Position) -> str:
        """Return the character at pos.

        Raises IndexError if out of bounds to make misuse obvious.
        """
        if not self.is_within(pos):
            raise IndexError(f"Position out of bounds: {pos} for grid {self._rows}x{self._cols}")
        return self._cells[pos.row][pos.col]

    def safe_get(self, pos: Position) -> Optional[str]:
        """Return the character at pos, or None when out of bounds."""
        if not self.is_within(pos):
            return None
        return self._cells[pos.row][pos.col]

    def set(self, pos: Position, ch: str) -> None:
        """Set the character at pos.

        Raises ValueError for a character outside the map alphabet and
        IndexError for an out-of-bounds position.
        """
        if not is_valid_cell(ch):
            raise ValueError(f"Invalid cell character: {ch!r}")
        if not self.is_within(pos):
            raise IndexError(f"Position out of bounds: {pos} for grid {self._rows}x{self._cols}")
        self._cells[pos.row][pos.col] = ch

    def swap(self, a: Position, b: Position) -> None:
        """Exchange the contents of two in-bounds cells."""
        first = self.get(a)
        second = self.get(b)
        self._cells[a.row][a.col] = second
        self._cells[b.row][b.col] = first

    def neighbors(self, pos: Position) -> Generator[Position, None, None]:
        """Yield the 4-directional neighbours of pos that lie inside the grid."""
        for drow, dcol in NEIGHBOR_OFFSETS:
            n = pos.offset(drow, dcol)
            if self.is_within(n):
                yield n

    def positions(self) -> Iterator[Position]:
        """Iterate every position in row-major order."""
        for r in range(self._rows):
            for c in range(self._cols):
                yield Position(r, c)

    def find(self, ch: str) -> Optional[Position]:
        """Return the first position holding ch in row-major order, or None."""
        for r, row in enumerate(self._cells):
            for c, cell in enumerate(row):
                if cell == ch:
                    return Position(r, c)
        return None

    def copy(self) -> "Grid":
        clone = Grid(self._rows, self._cols)
        clone._cells = [list(row) for row in self._cells]
        return clone

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> "Grid":
        """Create a Grid from rows of map characters.

        Args:
            lines: Each string is a row. All rows must have the same, non-zero
                length and contain only map characters.

        Raises:
            InvalidMap: on empty input, ragged rows or a disallowed character.
        """
        if not lines:
            raise InvalidMap("map has no rows")
        width = len(lines[0])
        if width == 0:
            raise InvalidMap("first row is empty")
        for i, row in enumerate(lines):
            if len(row) != width:
                raise InvalidMap(f"row {i + 1} has {len(row)} columns, expected {width}")
            for ch in row:
                if not is_valid_cell(ch):
                    raise InvalidMap(f"row {i + 1} contains invalid character {ch!r}")

        grid = cls(len(lines), width)
        grid._cells = [list(row) for row in lines]
        logger.debug("Built Grid %dx%d from lines", grid.rows, grid.cols)
        return grid

    def to_lines(self) -> List[str]:
        return ["".join(row) for row in self._cells]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Grid(rows={self._rows}, cols={self._cols})"


__all__ = ["Position", "Grid", "NEIGHBOR_OFFSETS"]
