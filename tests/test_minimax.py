import pytest

from ataxx.ai.board import Board
from ataxx.ai.constants import INFINITY, JUMP_LIMIT, WINNING_VALUE
from ataxx.ai.minimax import AlphaBetaSearch, static_value
from ataxx.ai.move import Move, PASS
from ataxx.ai.pieces import BLUE, RED


def test_same_seed_same_move():
    b = Board()
    first = AlphaBetaSearch(depth=3, seed=42).find_move(b)
    second = AlphaBetaSearch(depth=3, seed=42).find_move(b)
    assert first == second
    assert b.legal_move(first)


def test_find_move_leaves_board_untouched():
    b = Board()
    b.make_move(Move.parse("a7-b6"))
    before = b.copy()
    move = AlphaBetaSearch(depth=2, seed=1).find_move(b)
    assert b == before
    assert b.whose_move == BLUE
    assert b.num_moves() == 1
    assert b.legal_move(move)


def test_search_restores_working_board():
    b = Board()
    b.set_block("c3")
    work = b.copy()
    searcher = AlphaBetaSearch(depth=2, seed=5)
    searcher.search(work, 2, False, 1, -INFINITY, INFINITY)
    assert work == b
    assert work.num_moves() == 0
    assert work.whose_move == RED
    assert searcher.nodes > 1


def test_stuck_side_passes(make_board):
    walls = ["a2", "a3", "b1", "b2", "b3", "c1", "c2", "c3"]
    b = make_board(red=["a1"], blue=["g7"], blocked=walls)
    assert AlphaBetaSearch(depth=2).find_move(b) is PASS


def test_search_through_forced_pass(make_board):
    walls = ["a2", "a3", "b1", "b2", "b3", "c1", "c2", "c3"]
    b = make_board(red=["a1"], blue=["g7"], blocked=walls, whose_move=BLUE)
    move = AlphaBetaSearch(depth=3, seed=2).find_move(b)
    assert b.legal_move(move)
    assert not move.is_pass


def test_depth_one_prefers_biggest_capture(make_board):
    b = make_board(red=["d4"], blue=["f5", "f6", "g5", "g6"])
    assert str(AlphaBetaSearch(depth=1, seed=0).find_move(b)) == "d4-e5"


def test_blue_minimizes(make_board):
    b = make_board(red=["f5", "f6", "g5", "g6"], blue=["d4"], whose_move=BLUE)
    assert str(AlphaBetaSearch(depth=1, seed=0).find_move(b)) == "d4-e5"


def test_winning_terminal_move_is_recorded(make_board):
    # Any jump ends the game with red ahead; extends only add a piece.
    b = make_board(red=["c4", "d4", "e4"], blue=["a7"], jump_count=JUMP_LIMIT - 1)
    searcher = AlphaBetaSearch(depth=1, seed=0)
    move = searcher.find_move(b)
    assert move.is_jump
    assert searcher.last_found_move == move
    b.make_move(move)
    assert b.game_over()
    assert b.leading() == RED


def test_game_ending_move_replaces_better_score(make_board):
    # Every jump from a1 ends the game lost; the last one scanned is kept.
    b = make_board(red=["a1"], blue=["e7", "f6", "f7", "g6", "g7"],
                   jump_count=JUMP_LIMIT - 1)
    searcher = AlphaBetaSearch(depth=1, seed=0)
    assert str(searcher.find_move(b)) == "a1-c3"
    assert searcher.last_found_move == Move.parse("a1-c3")


def test_game_ending_move_replaces_better_score_for_blue(make_board):
    b = make_board(red=["e7", "f6", "f7", "g6", "g7"], blue=["a1"],
                   whose_move=BLUE, jump_count=JUMP_LIMIT - 1)
    assert str(AlphaBetaSearch(depth=1, seed=0).find_move(b)) == "a1-c3"


def test_static_value(make_board):
    assert static_value(Board()) == 0
    b = Board()
    b.make_move(Move.parse("a7-b7"))
    assert static_value(b) == 1
    over = make_board(red=["a7", "b7"], blue=["g1"], jump_count=JUMP_LIMIT)
    assert static_value(over) == WINNING_VALUE
    over = make_board(red=["a7"], blue=["g1"], jump_count=JUMP_LIMIT)
    assert static_value(over) == -WINNING_VALUE


def test_depth_must_be_positive():
    with pytest.raises(ValueError):
        AlphaBetaSearch(depth=0)
