from ataxx.ai.game_simulation import GameRecord, main, play_game
from ataxx.ai.move import Move


def test_seeded_games_repeat_exactly():
    first = play_game(red_depth=2, blue_depth=2, seed=7, max_moves=8)
    second = play_game(red_depth=2, blue_depth=2, seed=7, max_moves=8)
    assert first.moves == second.moves
    assert len(first.moves) == 8
    for text in first.moves:
        assert Move.parse(text)


def test_blocks_are_placed_before_play():
    record = play_game(red_depth=1, blue_depth=1, seed=3, blocks=["c3", "d4"], max_moves=4)
    assert all("c3" not in mv and "d4" not in mv for mv in record.moves)


def test_winner_from_counts():
    assert GameRecord([], 30, 19, 0.0).winner == "red"
    assert GameRecord([], 10, 39, 0.0).winner == "blue"
    assert GameRecord([], 20, 20, 0.0).winner == "draw"


def test_main_prints_summary(capsys):
    records = main(["--number-games", "2", "--red-depth", "1", "--blue-depth", "1",
                    "--seed", "11", "--max-moves", "6"])
    assert len(records) == 2
    assert records[0].moves == records[1].moves
    out = capsys.readouterr().out
    assert "=== Ataxx Game Simulation ===" in out
    assert "Game 2/2" in out
