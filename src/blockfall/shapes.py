"""Static catalogue of the seven piece kinds.

Every kind has one canonical square bitmap in its spawn orientation and one
display colour.  The tables are built once at import time and never change;
lookups by kind are total.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

Bitmap = Tuple[Tuple[int, ...], ...]


class PieceKind(str, Enum):
    """Enumeration of the seven standard piece shapes."""

    I = "I"
    J = "J"
    L = "L"
    O = "O"
    S = "S"
    T = "T"
    Z = "Z"


SHAPES: Dict[PieceKind, Bitmap] = {
    PieceKind.I: (
        (0, 0, 0, 0),
        (1, 1, 1, 1),
        (0, 0, 0, 0),
        (0, 0, 0, 0),
    ),
    PieceKind.J: (
        (1, 0, 0),
        (1, 1, 1),
        (0, 0, 0),
    ),
    PieceKind.L: (
        (0, 0, 1),
        (1, 1, 1),
        (0, 0, 0),
    ),
    PieceKind.O: (
        (1, 1),
        (1, 1),
    ),
    PieceKind.S: (
        (0, 1, 1),
        (1, 1, 0),
        (0, 0, 0),
    ),
    PieceKind.T: (
        (0, 1, 0),
        (1, 1, 1),
        (0, 0, 0),
    ),
    PieceKind.Z: (
        (1, 1, 0),
        (0, 1, 1),
        (0, 0, 0),
    ),
}

COLORS: Dict[PieceKind, str] = {
    PieceKind.I: "#00f0f0",
    PieceKind.J: "#0000f0",
    PieceKind.L: "#f0a000",
    PieceKind.O: "#f0f000",
    PieceKind.S: "#00f000",
    PieceKind.T: "#a000f0",
    PieceKind.Z: "#f00000",
}

# Mapping from ``PieceKind`` to the integer stored in the field grid.  ``0``
# always means an empty cell.
PIECE_VALUES: Dict[PieceKind, int] = {k: i + 1 for i, k in enumerate(PieceKind)}

# Reverse lookup used by renderers: grid code -> colour.
CELL_COLORS: Dict[int, str] = {PIECE_VALUES[k]: COLORS[k] for k in PieceKind}


def shape_bitmap(kind: PieceKind) -> Bitmap:
    """Return the canonical spawn bitmap for ``kind``."""

    return SHAPES[kind]


def shape_color(kind: PieceKind) -> str:
    """Return the display colour for ``kind``."""

    return COLORS[kind]
