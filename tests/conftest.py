import pytest

from ataxx.ai.board import Board
from ataxx.ai.constants import COLUMNS, ROWS, SIDE
from ataxx.ai.pieces import BLOCKED, BLUE, EMPTY, RED


def _layout(red=(), blue=(), blocked=()):
    rows = [[EMPTY] * SIDE for _ in range(SIDE)]
    for color, squares in ((RED, red), (BLUE, blue), (BLOCKED, blocked)):
        for square in squares:
            col, row = square
            rows[SIDE - 1 - ROWS.index(row)][COLUMNS.index(col)] = color
    return rows


@pytest.fixture
def make_board():
    """Build a board from square names, e.g. make_board(red=["d4"], blue=["e5"])."""
    def factory(red=(), blue=(), blocked=(), whose_move=RED, jump_count=0):
        return Board.from_layout(_layout(red, blue, blocked), whose_move, jump_count)
    return factory
