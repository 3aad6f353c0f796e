#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Player implementations for Ataxx.

A player produces the next move for its color on the board it plays on.
ManualPlayer asks an outside move source (normally the command loop);
AIPlayer runs the alpha-beta search.
"""
import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

from .board import Board
from .constants import MAX_DEPTH
from .minimax import AlphaBetaSearch
from .move import Move
from .pieces import PieceColor

logger = logging.getLogger(__name__)

MoveSource = Callable[[str], Optional[Move]]


class Player(ABC):
    """A generic Ataxx player."""

    def __init__(self, board: Board, color: PieceColor):
        """
        Args:
            board: The board this player moves on
            color: The color of this player's pieces
        """
        self.board = board
        self.color = color

    def set_seed(self, seed: Optional[int]) -> None:
        """Seed this player's choices. Unused by manual players."""

    @abstractmethod
    def my_move(self) -> Optional[Move]:
        """Return a move for me, or None if play was interrupted.

        Assumes board.whose_move == color and the game is not over.
        """


class ManualPlayer(Player):
    """A player whose moves come from MOVE_SOURCE(prompt)."""

    def __init__(self, board: Board, color: PieceColor, move_source: MoveSource):
        super().__init__(board, color)
        self.move_source = move_source

    def my_move(self) -> Optional[Move]:
        return self.move_source(f"{self.color}: ")


class AIPlayer(Player):
    """A player that computes its own moves with alpha-beta search."""

    def __init__(self, board: Board, color: PieceColor, depth: int = MAX_DEPTH,
                 seed: Optional[int] = None, reporter=None):
        """
        Args:
            board: The board this player moves on
            color: The color of this player's pieces
            depth: Search depth in plies
            seed: Seed for move ordering
            reporter: Optional Reporter told about every move made
        """
        super().__init__(board, color)
        self.search = AlphaBetaSearch(depth=depth, seed=seed)
        self.reporter = reporter

    def set_seed(self, seed: Optional[int]) -> None:
        self.search.seed = seed

    def my_move(self) -> Move:
        move = self.search.find_move(self.board)
        if move.is_pass:
            msg = f"{self.color} passes."
        else:
            msg = f"{self.color} moves {move}."
        logger.info(msg)
        if self.reporter is not None:
            self.reporter.move_msg(msg)
        return move
