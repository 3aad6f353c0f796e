"""
Move values for Ataxx.

A move either passes or carries a piece from one square to another. Moves to
an adjacent square are extends (the origin keeps its piece); moves to a
square two away are jumps (the origin is vacated). A move is denoted
``a7-b7``; a pass is denoted ``-``.
"""
import re
from dataclasses import dataclass

from .constants import PASS_COLUMN
from .exceptions import GameError
from .geometry import distance, index, to_coords

_MOVE_RE = re.compile(r"^\s*([a-g][1-7])\s*(?:-|\s)\s*([a-g][1-7])\s*$")
_PASS_RE = re.compile(r"^\s*(?:-|pass)\s*$")


@dataclass(frozen=True)
class Move:
    """A move from square col0 row0 to col1 row1, or a pass."""
    col0: str
    row0: str
    col1: str
    row1: str

    @classmethod
    def pass_move(cls) -> 'Move':
        return PASS

    @classmethod
    def move(cls, col0: str, row0: str, col1: str, row1: str) -> 'Move':
        """Return the move C0R0-C1R1, or a pass if COL0 is '-'."""
        if col0 == PASS_COLUMN:
            return PASS
        return cls(col0, row0, col1, row1)

    @classmethod
    def between(cls, from_sq: int, to_sq: int) -> 'Move':
        """Return the move between two linearized indices."""
        c0, r0 = to_coords(from_sq)
        c1, r1 = to_coords(to_sq)
        return cls(c0, r0, c1, r1)

    @classmethod
    def parse(cls, text: str) -> 'Move':
        """Parse ``a7-b7``, ``a7 b7``, ``-`` or ``pass``.

        Raises:
            GameError: If TEXT is not a move
        """
        if _PASS_RE.match(text):
            return PASS
        m = _MOVE_RE.match(text)
        if m is None:
            raise GameError("Bad move: %s", text.strip())
        (c0, r0), (c1, r1) = m.group(1), m.group(2)
        return cls(c0, r0, c1, r1)

    @property
    def is_pass(self) -> bool:
        return self.col0 == PASS_COLUMN

    @property
    def from_index(self) -> int:
        return index(self.col0, self.row0)

    @property
    def to_index(self) -> int:
        return index(self.col1, self.row1)

    @property
    def distance(self) -> int:
        if self.is_pass:
            return 0
        return distance(self.from_index, self.to_index)

    @property
    def is_extend(self) -> bool:
        return not self.is_pass and self.distance == 1

    @property
    def is_jump(self) -> bool:
        return not self.is_pass and self.distance == 2

    def __str__(self):
        if self.is_pass:
            return PASS_COLUMN
        return f"{self.col0}{self.row0}-{self.col1}{self.row1}"


PASS = Move(PASS_COLUMN, PASS_COLUMN, PASS_COLUMN, PASS_COLUMN)
