"""
Alpha-beta minimax search for the Ataxx computer player.

Scores are always from red's point of view: positive values favour red,
negative values favour blue. The search makes and unmakes moves on a private
copy of the game board, so the caller's board is never touched.
"""
import logging
import random
from typing import List, Optional

from .board import Board
from .constants import INFINITY, MAX_DEPTH, WINNING_VALUE
from .geometry import square_indices
from .move import Move, PASS
from .pieces import BLUE, RED

logger = logging.getLogger(__name__)


def static_value(board: Board) -> int:
    """Value of BOARD without lookahead.

    A finished game scores +/-WINNING_VALUE for the leading side; otherwise
    the score is red's piece count minus blue's.
    """
    if board.game_over():
        return WINNING_VALUE if board.leading() == RED else -WINNING_VALUE
    return board.red_pieces() - board.blue_pieces()


class AlphaBetaSearch:
    """Depth-bounded minimax search with alpha-beta pruning.

    Move ordering is randomized by shuffling the mover's pieces at each node.
    With a seed the shuffle is reproducible, so the same position always
    yields the same move.
    """

    def __init__(self, depth: int = MAX_DEPTH, seed: Optional[int] = None):
        """
        Args:
            depth: Plies to search before falling back to the static value
            seed: Seed for move ordering; None for nondeterministic ordering
        """
        if depth < 1:
            raise ValueError("Depth must be positive")
        self.depth = depth
        self.seed = seed
        self.last_found_move: Optional[Move] = None
        self.nodes = 0
        self._random = random.Random()

    def find_move(self, board: Board) -> Move:
        """Return a move for the side to move on BOARD, or a pass if it has none."""
        if not board.can_move(board.whose_move):
            return PASS
        work = board.copy()
        sense = 1 if board.whose_move == RED else -1
        self.last_found_move = None
        self.nodes = 0
        score = self.search(work, self.depth, True, sense, -INFINITY, INFINITY)
        logger.debug("Searched %d nodes to depth %d, score %s, move %s",
                     self.nodes, self.depth, score, self.last_found_move)
        return self.last_found_move

    def search(self, board: Board, depth: int, save_move: bool, sense: int,
               alpha: float, beta: float) -> float:
        """Find a move from BOARD and return its value.

        The move found is recorded in ``last_found_move`` iff SAVE_MOVE. The
        move should have maximal value or value >= BETA if SENSE is 1, and
        minimal value or value <= ALPHA if SENSE is -1. BOARD is restored to
        its original contents before returning.
        """
        self.nodes += 1
        if depth == 0 or board.game_over():
            return static_value(board)

        mover = RED if sense == 1 else BLUE
        best_so_far = -INFINITY if sense == 1 else INFINITY
        found = False
        for sq in self._ordered(board.all_positions(mover)):
            for nb in square_indices(sq, 2):
                if not board.check_movable(sq, nb, mover):
                    continue
                found = True
                move = Move.between(sq, nb)
                board.make_move(move)
                score = self.search(board, depth - 1, False, -sense, alpha, beta)
                ended = board.game_over()
                board.undo()
                # A move that ends the game always replaces the best so far.
                if sense == 1:
                    if score >= best_so_far or ended:
                        if save_move:
                            self.last_found_move = move
                        best_so_far = score
                        alpha = max(alpha, score)
                        if beta <= alpha:
                            return best_so_far
                else:
                    if score <= best_so_far or ended:
                        if save_move:
                            self.last_found_move = move
                        best_so_far = score
                        beta = min(beta, score)
                        if beta <= alpha:
                            return best_so_far

        if not found:
            # The mover is stuck but the game goes on: pass and keep searching.
            board.make_move(PASS)
            best_so_far = self.search(board, depth - 1, False, -sense, alpha, beta)
            board.undo()
        return best_so_far

    def _ordered(self, positions: List[int]) -> List[int]:
        if self.seed is not None:
            random.Random(self.seed).shuffle(positions)
        else:
            self._random.shuffle(positions)
        return positions
