#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Board module for Ataxx.

The board keeps the 7x7 playing area inside an 11x11 array whose two outer
rings are permanently blocked, so neighbourhood scans never need edge tests.
Every applied move or pass pushes an undo record holding only the cells the
move changed, which lets search make and unmake moves on a single board.
"""
import logging
from typing import Callable, List, Optional, Sequence, Tuple, Union

import numpy as np

from .constants import BOARD_CELLS, COLUMNS, JUMP_LIMIT, ROWS, SIDE
from .exceptions import IllegalBlockPlacement, IllegalMove
from .geometry import CORNERS, PLAYABLE, in_bounds, index, reflections, square_indices
from .move import Move
from .pieces import PieceColor, BLOCKED, BLUE, EMPTY, RED

logger = logging.getLogger(__name__)

BoardListener = Callable[['Board'], None]

_TOKENS = {EMPTY: '-', RED: 'r', BLUE: 'b', BLOCKED: 'X'}


class UndoRecord:
    """What a single move or pass changed.

    Attributes:
        changes: (index, previous contents) for every cell the move wrote
        whose_move: Side to move before the move
        jump_count: Non-extending streak before the move
    """
    __slots__ = ('changes', 'whose_move', 'jump_count')

    def __init__(self, whose_move: PieceColor, jump_count: int):
        self.changes: List[Tuple[int, int]] = []
        self.whose_move = whose_move
        self.jump_count = jump_count


class Board:
    """An Ataxx board.

    Squares are named by column ('a'..'g') and row ('1'..'7') or by their
    linearized index (see ``ataxx.ai.geometry``). Listeners registered with
    ``add_listener`` are called with the board after every change.
    """

    def __init__(self):
        """Create a board cleared to the starting position."""
        self._cells = np.full(BOARD_CELLS, BLOCKED, dtype=np.int8)
        self._whose_move = RED
        self._jump_count = 0
        self._history: List[UndoRecord] = []
        self._listeners: List[BoardListener] = []
        self.clear()

    @classmethod
    def from_layout(cls, rows: Sequence[Sequence[PieceColor]],
                    whose_move: PieceColor = RED, jump_count: int = 0) -> 'Board':
        """Build a board from seven rows of seven cells.

        Args:
            rows: Row 7 first, each row listed from column 'a' to 'g'
            whose_move: Side to move
            jump_count: Consecutive non-extending moves so far

        Returns:
            Board: A board with empty history
        """
        if len(rows) != SIDE or any(len(row) != SIDE for row in rows):
            raise ValueError(f"Layout must be {SIDE}x{SIDE}")
        if whose_move not in (RED, BLUE):
            raise ValueError("Side to move must be red or blue")
        board = cls()
        for r, row in enumerate(rows):
            row_char = ROWS[SIDE - 1 - r]
            for c, cell in enumerate(row):
                board._cells[index(COLUMNS[c], row_char)] = PieceColor(cell)
        board._whose_move = PieceColor(whose_move)
        board._jump_count = jump_count
        return board

    def to_layout(self) -> List[List[PieceColor]]:
        """Inverse of ``from_layout``: row 7 first, columns 'a' to 'g'."""
        return [[self.get(c, r) for c in COLUMNS] for r in reversed(ROWS)]

    def copy(self) -> 'Board':
        """Return an independent copy of this board, history included.

        Listeners are not copied.
        """
        other = Board.__new__(Board)
        other._cells = self._cells.copy()
        other._whose_move = self._whose_move
        other._jump_count = self._jump_count
        other._history = []
        for rec in self._history:
            dup = UndoRecord(rec.whose_move, rec.jump_count)
            dup.changes = list(rec.changes)
            other._history.append(dup)
        other._listeners = []
        return other

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def clear(self) -> None:
        """Reset to the starting position with no blocks and no history."""
        self._cells[:] = BLOCKED
        self._cells[PLAYABLE] = EMPTY
        self._cells[index('a', '7')] = RED
        self._cells[index('g', '1')] = RED
        self._cells[index('a', '1')] = BLUE
        self._cells[index('g', '7')] = BLUE
        self._whose_move = RED
        self._jump_count = 0
        self._history = []
        self._notify()

    # Listeners

    def add_listener(self, callback: BoardListener) -> None:
        if callback not in self._listeners:
            self._listeners.append(callback)

    def remove_listener(self, callback: BoardListener) -> bool:
        if callback in self._listeners:
            self._listeners.remove(callback)
            return True
        return False

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # Queries

    @property
    def whose_move(self) -> PieceColor:
        """Color of the player to move; arbitrary once the game is over."""
        return self._whose_move

    @property
    def jump_count(self) -> int:
        """Moves since the last extend (or since the start of the game)."""
        return self._jump_count

    def num_moves(self) -> int:
        """Number of moves and passes since the last clear."""
        return len(self._history)

    def get(self, col: Union[str, int], row: Optional[str] = None) -> PieceColor:
        """Contents of square COL ROW, or of linearized index COL if ROW is None.

        Coordinates outside a1-g7 read as BLOCKED.
        """
        if row is None:
            return PieceColor(int(self._cells[col]))
        if not in_bounds(col, row):
            return BLOCKED
        return PieceColor(int(self._cells[index(col, row)]))

    def num_pieces(self, color: PieceColor) -> int:
        return int(np.count_nonzero(self._cells == color))

    def red_pieces(self) -> int:
        return self.num_pieces(RED)

    def blue_pieces(self) -> int:
        return self.num_pieces(BLUE)

    def leading(self) -> PieceColor:
        """RED if red has more pieces, otherwise BLUE (including ties)."""
        return RED if self.red_pieces() > self.blue_pieces() else BLUE

    def check_movable(self, from_sq: int, to_sq: int,
                      color: Optional[PieceColor] = None) -> bool:
        """True iff FROM_SQ holds COLOR (default: side to move) and TO_SQ is empty."""
        if color is None:
            color = self._whose_move
        return self._cells[from_sq] == color and self._cells[to_sq] == EMPTY

    def can_move(self, color: PieceColor) -> bool:
        """True iff COLOR has a move, ignoring whose turn it is."""
        for sq in PLAYABLE:
            if self._cells[sq] != color:
                continue
            for nb in square_indices(sq, 2):
                if self._cells[nb] == EMPTY:
                    return True
        return False

    def legal_move(self, move: Optional[Move]) -> bool:
        """True iff MOVE may be made on the current board."""
        if move is None:
            return False
        if move.is_pass:
            return not self.can_move(self._whose_move)
        if self.get(move.col0, move.row0) != self._whose_move:
            return False
        if self.get(move.col1, move.row1) != EMPTY:
            return False
        return move.is_extend or move.is_jump

    def game_over(self) -> bool:
        """True iff neither side can move or the jump limit is reached."""
        if self._jump_count >= JUMP_LIMIT:
            return True
        return not self.can_move(RED) and not self.can_move(BLUE)

    def all_positions(self, color: PieceColor) -> List[int]:
        """Indices of COLOR's pieces, column 'a' first, rows ascending."""
        return [sq for sq in PLAYABLE if self._cells[sq] == color]

    def all_legal_moves(self, color: PieceColor) -> List[Move]:
        """Every non-pass move available to COLOR."""
        result = []
        for sq in self.all_positions(color):
            for nb in square_indices(sq, 2):
                if self._cells[nb] == EMPTY:
                    result.append(Move.between(sq, nb))
        return result

    # Mutators

    def make_move(self, move: Optional[Move]) -> None:
        """Make MOVE on this board.

        Raises:
            IllegalMove: If MOVE is None or not legal here
        """
        if not self.legal_move(move):
            raise IllegalMove()
        record = UndoRecord(self._whose_move, self._jump_count)
        self._history.append(record)
        if move.is_pass:
            self._whose_move = self._whose_move.opposite()
            self._notify()
            return
        mover = self._whose_move
        dest = move.to_index
        if move.is_jump:
            self._set(record, move.from_index, EMPTY)
            self._jump_count += 1
        else:
            self._jump_count = 0
        self._set(record, dest, mover)
        for sq in square_indices(dest, 1):
            cell = self.get(sq)
            if cell.is_piece and cell != mover:
                self._set(record, sq, mover)
        self._whose_move = mover.opposite()
        self._notify()

    def _set(self, record: UndoRecord, sq: int, value: PieceColor) -> None:
        record.changes.append((sq, int(self._cells[sq])))
        self._cells[sq] = value

    def pass_turn(self) -> None:
        """Pass; only legal when the side to move has no moves."""
        self.make_move(Move.pass_move())

    def undo(self) -> None:
        """Take back the last move or pass.

        With no history this logs a warning and leaves the board unchanged.
        """
        if not self._history:
            logger.warning("Aborted. Attempt to undo with empty history.")
        else:
            record = self._history.pop()
            for sq, old in reversed(record.changes):
                self._cells[sq] = old
            self._whose_move = record.whose_move
            self._jump_count = record.jump_count
        self._notify()

    def legal_block(self, col: str, row: Optional[str] = None) -> bool:
        """True iff a block may be placed at COL ROW (or at the string COL)."""
        if row is None:
            col, row = _split_square(col)
        return in_bounds(col, row) and self.get(col, row) == EMPTY

    def set_block(self, col: str, row: Optional[str] = None) -> None:
        """Block COL ROW (or the square named by the string COL) and its mirrors.

        The reflections across the middle row, the middle column and both
        are blocked too, unless they are corners or not empty. Blocking an
        already blocked square does nothing.

        Raises:
            IllegalBlockPlacement: If the square is off the board or holds a piece
        """
        if row is None:
            col, row = _split_square(col)
        if not in_bounds(col, row):
            raise IllegalBlockPlacement()
        sq = index(col, row)
        if self._cells[sq] == BLOCKED:
            return
        if self._cells[sq] != EMPTY:
            raise IllegalBlockPlacement()
        self._cells[sq] = BLOCKED
        for mirror in reflections(sq):
            if mirror not in CORNERS and self._cells[mirror] == EMPTY:
                self._cells[mirror] = BLOCKED
        self._notify()

    # Display

    def to_string(self, legend: bool = False) -> str:
        """Text picture of the board, row 7 at the top.

        Args:
            legend: Label rows and columns around the edges
        """
        lines = []
        for r in reversed(ROWS):
            tokens = ''.join(' ' + _TOKENS[self.get(c, r)] for c in COLUMNS)
            lines.append((r if legend else '') + tokens)
        if legend:
            lines.append('  ' + ' '.join(COLUMNS))
        return '\n'.join(lines) + '\n'

    def __str__(self):
        return self.to_string(False)

    def __repr__(self):
        return f"Board(whose_move={self._whose_move}, jump_count={self._jump_count}, " \
               f"moves={len(self._history)})"

    def __eq__(self, other):
        """Boards are equal when every cell matches; side to move is ignored."""
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    __hash__ = None


def _split_square(square: str) -> Tuple[str, str]:
    # Malformed names come back as ('', ''), which in_bounds rejects.
    square = square.strip() if isinstance(square, str) else ''
    if len(square) != 2:
        return '', ''
    return square[0], square[1]
