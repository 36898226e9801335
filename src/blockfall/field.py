"""Playfield representation.

The field is a fixed ``height x width`` grid stored as a read-only
``numpy.uint8`` array.  ``0`` marks an empty cell; any other value is the grid
code of the piece kind whose colour fills it (see
:data:`blockfall.shapes.PIECE_VALUES`).  Row ``0`` is the top of the field.

Every operation that changes the grid returns a new :class:`Field`, so a
snapshot handed to a renderer stays valid after later transitions.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from .config import HEIGHT, WIDTH
from .piece import Piece
from .shapes import CELL_COLORS, PIECE_VALUES

Grid = NDArray[np.uint8]


def _freeze(grid: Grid) -> Grid:
    grid.flags.writeable = False
    return grid


class Field:
    """Immutable grid of empty and coloured cells."""

    __slots__ = ("grid",)

    def __init__(self, grid: Grid) -> None:
        if grid.ndim != 2:
            raise ValueError("Field grid must be two-dimensional")
        self.grid: Grid = _freeze(np.array(grid, dtype=np.uint8, copy=True))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Field":
        """Build a field from nested sequences of grid codes."""

        return cls(np.asarray(rows, dtype=np.uint8))

    @property
    def height(self) -> int:
        return int(self.grid.shape[0])

    @property
    def width(self) -> int:
        return int(self.grid.shape[1])

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_cell(self, x: int, y: int) -> int:
        """Return the grid code at column ``x``, row ``y``.

        Raises:
            IndexError: If the coordinates are outside the field.
        """

        if self.in_bounds(x, y):
            return int(self.grid[y, x])
        raise IndexError("Cell out of bounds")

    def is_empty(self, x: int, y: int) -> bool:
        """Return ``True`` if the cell at ``(x, y)`` is empty.

        Coordinates outside the field are treated as occupied.
        """

        return self.in_bounds(x, y) and bool(self.grid[y, x] == 0)

    def color_at(self, x: int, y: int) -> Optional[str]:
        """Return the colour filling ``(x, y)`` or ``None`` when empty."""

        return CELL_COLORS.get(self.get_cell(x, y))

    def rows(self) -> List[List[int]]:
        """Return the grid as plain nested lists."""

        return self.grid.tolist()

    def filled_count(self) -> int:
        return int(np.count_nonzero(self.grid))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Field):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    def __hash__(self) -> int:
        return hash((self.grid.shape, self.grid.tobytes()))

    def __repr__(self) -> str:
        return f"Field(width={self.width}, height={self.height}, filled={self.filled_count()})"


def create_empty(width: int = WIDTH, height: int = HEIGHT) -> Field:
    """Return a new field with every cell empty."""

    return Field(np.zeros((height, width), dtype=np.uint8))


def collides(piece: Piece, field: Field, offset: Tuple[int, int] = (0, 0)) -> bool:
    """Return ``True`` if ``piece`` shifted by ``offset`` overlaps anything.

    A filled bitmap cell collides when it lands left or right of the field,
    below the floor, or on an occupied cell.  Cells above the top edge
    (negative ``y``) are allowed so that pieces may enter from above.
    """

    ox, oy = offset
    for x, y in piece.cells():
        x += ox
        y += oy
        if x < 0 or x >= field.width or y >= field.height:
            return True
        if y >= 0 and field.grid[y, x] != 0:
            return True
    return False


def merge(piece: Piece, field: Field) -> Field:
    """Return a copy of ``field`` with ``piece`` written into it.

    Cells that fall outside the grid are skipped.
    """

    grid = field.grid.copy()
    value = np.uint8(PIECE_VALUES[piece.kind])
    for x, y in piece.cells():
        if field.in_bounds(x, y):
            grid[y, x] = value
    return Field(grid)


def clear_full_rows(field: Field) -> Tuple[Field, int]:
    """Remove completed rows and return the compacted field and the count.

    Surviving rows keep their relative order and drop down; the same number
    of empty rows is added at the top so the height is unchanged.
    """

    full_rows = np.all(field.grid != 0, axis=1)
    cleared = int(np.count_nonzero(full_rows))
    if not cleared:
        return field, 0
    remaining = field.grid[~full_rows]
    new_rows = np.zeros((cleared, field.width), dtype=field.grid.dtype)
    return Field(np.vstack((new_rows, remaining))), cleared
