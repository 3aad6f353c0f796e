from ataxx.ai.board import Board
from ataxx.ai.move import Move, PASS
from ataxx.ai.pieces import BLUE, RED
from ataxx.ai.players import AIPlayer, ManualPlayer
from ataxx.reporter import RecordingReporter


def test_manual_player_asks_its_move_source():
    prompts = []

    def source(prompt):
        prompts.append(prompt)
        return Move.parse("a7-b7")

    player = ManualPlayer(Board(), RED, source)
    assert player.my_move() == Move.parse("a7-b7")
    assert prompts == ["Red: "]


def test_ai_player_reports_its_move():
    board = Board()
    reporter = RecordingReporter()
    player = AIPlayer(board, RED, depth=2, seed=9, reporter=reporter)
    move = player.my_move()
    assert board.legal_move(move)
    assert reporter.moves == [f"Red moves {move}."]


def test_ai_player_reports_pass(make_board):
    walls = ["a2", "a3", "b1", "b2", "b3", "c1", "c2", "c3"]
    board = make_board(red=["g7"], blue=["a1"], blocked=walls, whose_move=BLUE)
    reporter = RecordingReporter()
    assert AIPlayer(board, BLUE, depth=2, reporter=reporter).my_move() is PASS
    assert reporter.moves == ["Blue passes."]


def test_set_seed_controls_search():
    board = Board()
    player = AIPlayer(board, RED, depth=2)
    player.set_seed(17)
    assert player.search.seed == 17
    assert player.my_move() == AIPlayer(board, RED, depth=2, seed=17).my_move()
