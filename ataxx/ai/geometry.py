"""
Linearized-index geometry for the Ataxx board.

Squares are named by column ('a'..'g') and row ('1'..'7'). Internally the
7x7 board sits inside an 11x11 grid whose outer two rings are always
blocked, and every square is addressed by its row-major index in that
grid. Looking two squares away from any playable square therefore never
leaves the array, and the blocked border stops moves without bounds checks.
"""
from typing import List, Tuple

from .constants import COLUMNS, EXTENDED_SIDE, BOARD_CELLS, ROWS

CENTER = (BOARD_CELLS - 1) // 2


def index(col: str, row: str) -> int:
    """Return the linearized index of square COL ROW.

    Args:
        col: Column character, 'a' - 2 through 'g' + 2
        row: Row character, '1' - 2 through '7' + 2

    Returns:
        int: Index into the extended grid
    """
    return (ord(row) - ord('1') + 2) * EXTENDED_SIDE + (ord(col) - ord('a') + 2)


def to_coords(sq: int) -> Tuple[str, str]:
    """Return the (column, row) characters of linearized index SQ."""
    return chr(ord('a') - 2 + sq % EXTENDED_SIDE), chr(ord('1') - 2 + sq // EXTENDED_SIDE)


def in_bounds(col: str, row: str) -> bool:
    """True iff COL ROW names one of the 49 playable squares."""
    return (isinstance(col, str) and isinstance(row, str)
            and len(col) == 1 and len(row) == 1
            and col in COLUMNS and row in ROWS)


def neighbor(sq: int, dc: int, dr: int) -> int:
    """Return the index DC columns and DR rows away from SQ."""
    return sq + dc + dr * EXTENDED_SIDE


def square_indices(sq: int, radius: int) -> List[int]:
    """All indices in the (2 * RADIUS + 1) square centered at SQ, SQ included.

    Column offsets vary slowest, each running from -RADIUS to RADIUS.
    """
    return [neighbor(sq, dc, dr)
            for dc in range(-radius, radius + 1)
            for dr in range(-radius, radius + 1)]


def distance(sq0: int, sq1: int) -> int:
    """Chebyshev distance between two indices."""
    return max(abs(sq0 % EXTENDED_SIDE - sq1 % EXTENDED_SIDE),
               abs(sq0 // EXTENDED_SIDE - sq1 // EXTENDED_SIDE))


def reflections(sq: int) -> Tuple[int, int, int]:
    """Mirror images of SQ used for symmetric block placement.

    Returns:
        tuple: (180 degree rotation, reflection across the middle row,
                reflection across the middle column)
    """
    rotated = 2 * CENTER - sq
    flipped_rows = 2 * (sq % EXTENDED_SIDE) + EXTENDED_SIDE * (EXTENDED_SIDE - 1) - sq
    flipped_cols = 2 * CENTER - flipped_rows
    return rotated, flipped_rows, flipped_cols


def playable_squares() -> List[int]:
    """Indices of the playable squares, column 'a' first, rows ascending."""
    return [index(c, r) for c in COLUMNS for r in ROWS]


PLAYABLE = playable_squares()
CORNERS = frozenset(index(c, r) for c in "ag" for r in "17")
