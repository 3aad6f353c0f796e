#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Self-play simulation: computer against computer from the starting position.
"""
import argparse
import logging
import time
from typing import List, Optional, Sequence

from .board import Board
from .constants import MAX_DEPTH
from .players import AIPlayer
from .pieces import BLUE, RED
from ataxx.config import configure_logging

logger = logging.getLogger(__name__)


class GameRecord:
    """Result of one simulated game."""

    def __init__(self, moves: List[str], red: int, blue: int, seconds: float):
        self.moves = moves
        self.red = red
        self.blue = blue
        self.seconds = seconds

    @property
    def winner(self) -> str:
        if self.red > self.blue:
            return "red"
        if self.blue > self.red:
            return "blue"
        return "draw"

    def __repr__(self):
        return (f"GameRecord(winner={self.winner}, red={self.red}, blue={self.blue}, "
                f"moves={len(self.moves)})")


def play_game(red_depth: int = MAX_DEPTH, blue_depth: int = MAX_DEPTH,
              seed: Optional[int] = None, blocks: Sequence[str] = (),
              max_moves: Optional[int] = None) -> GameRecord:
    """Play one game between two AIPlayers.

    Args:
        red_depth: Search depth for red
        blue_depth: Search depth for blue
        seed: Move-ordering seed for both players; None for random play
        blocks: Squares (e.g. "c3") to block before play starts
        max_moves: Stop after this many moves even if the game is not over

    Returns:
        GameRecord: Moves in notation, final piece counts and time taken
    """
    board = Board()
    for square in blocks:
        board.set_block(square)
    red = AIPlayer(board, RED, depth=red_depth, seed=seed)
    blue = AIPlayer(board, BLUE, depth=blue_depth, seed=seed)

    moves = []
    begin = time.time()
    while not board.game_over():
        if max_moves is not None and len(moves) >= max_moves:
            break
        player = red if board.whose_move == RED else blue
        move = player.my_move()
        board.make_move(move)
        moves.append(str(move))
    record = GameRecord(moves, board.red_pieces(), board.blue_pieces(), time.time() - begin)
    logger.info("Game over: %s", record)
    return record


def main(argv: Optional[List[str]] = None) -> List[GameRecord]:
    """Run simulated games from the command line and print a summary."""
    parser = argparse.ArgumentParser(description='Run Ataxx self-play simulation')
    parser.add_argument('--number-games', type=int, default=1,
                        help='Number of games to play')
    parser.add_argument('--red-depth', type=int, default=2,
                        help='Search depth for red')
    parser.add_argument('--blue-depth', type=int, default=2,
                        help='Search depth for blue')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for move ordering (same seed, same games)')
    parser.add_argument('--block', action='append', default=[],
                        help='Square to block before play, e.g. c3 (repeatable)')
    parser.add_argument('--max-moves', type=int, default=None,
                        help='Stop each game after this many moves')
    parser.add_argument('--log-file', default=None,
                        help='Write a DEBUG log to this file')
    args = parser.parse_args(argv)

    if args.log_file:
        configure_logging("DEBUG", args.log_file)

    print("\n=== Ataxx Game Simulation ===")
    print(f"- Number of games: {args.number_games}")
    print(f"- Red depth: {args.red_depth}")
    print(f"- Blue depth: {args.blue_depth}\n")

    records = []
    wins = {"red": 0, "blue": 0, "draw": 0}
    for i in range(args.number_games):
        record = play_game(args.red_depth, args.blue_depth, seed=args.seed,
                           blocks=args.block, max_moves=args.max_moves)
        records.append(record)
        wins[record.winner] += 1
        print(f"Game {i + 1}/{args.number_games}: {record.winner} "
              f"({record.red}-{record.blue}) in {len(record.moves)} moves, "
              f"{record.seconds:.2f}s")

    print(f"\nRed wins: {wins['red']}, Blue wins: {wins['blue']}, Draws: {wins['draw']}")
    return records


if __name__ == "__main__":
    main()
