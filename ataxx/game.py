#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Game controller for Ataxx.

Reads commands from a stack of input sources, sets up the board, alternates
between the red and blue players until the game ends, and reports results.
"""
import logging
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from ataxx.ai.board import Board
from ataxx.ai.constants import MAX_DEPTH
from ataxx.ai.exceptions import GameError
from ataxx.ai.move import Move, PASS
from ataxx.ai.pieces import BLUE, RED
from ataxx.ai.players import AIPlayer, ManualPlayer, Player
from ataxx.command import Command, CommandSources, CommandType, ReaderSource

logger = logging.getLogger(__name__)

HELP_TEXT = """\
Commands:
  start            Start playing from the current position.
  a7-b7            Move the piece at a7 to b7 (also allowed during setup).
  pass  or  -      Pass (only when you have no moves).
  block c3         Block c3 and its reflections (setup only).
  auto red|blue    Let the computer play that color (setup only).
  manual red|blue  Let a person play that color (setup only).
  seed N           Seed the computer players' move ordering.
  clear            Abandon the game and return to setup.
  dump             Print the board.
  load FILE        Read commands from FILE.
  help             Print this message.
  quit             Leave the program.
"""


class State(Enum):
    """States of play."""
    SETUP = "setup"
    PLAYING = "playing"
    FINISHED = "finished"


class Game:
    """Controls the play of the game."""

    def __init__(self, board: Board, base_source: ReaderSource, reporter,
                 depth: int = MAX_DEPTH, out=None):
        """
        Args:
            board: Board to play on
            base_source: Initial source of commands
            reporter: Receives error, move and outcome messages
            depth: Search depth for computer players
            out: Stream for 'dump' and 'help' output (default: reporter.out)
        """
        self._inputs = CommandSources()
        self._inputs.add_source(base_source)
        self._board = board
        self._reporter = reporter
        self._depth = depth
        self._out = out if out is not None else getattr(reporter, 'out', None)
        self._state = State.SETUP
        self._red_auto = False
        self._blue_auto = True
        self._seed: Optional[int] = None
        self._quit = False
        self._commands: Dict[CommandType, Callable[[Tuple[str, ...]], None]] = {
            CommandType.AUTO: self.do_auto,
            CommandType.MANUAL: self.do_manual,
            CommandType.BLOCK: self.do_block,
            CommandType.CLEAR: self.do_clear,
            CommandType.DUMP: self.do_dump,
            CommandType.HELP: self.do_help,
            CommandType.LOAD: self.do_load,
            CommandType.QUIT: self.do_quit,
            CommandType.EOF: self.do_quit,
            CommandType.START: self.do_start,
            CommandType.SEED: self.do_seed,
            CommandType.PASS: self.do_pass,
            CommandType.PIECEMOVE: self.do_move,
            CommandType.ERROR: self.do_error,
        }

    @property
    def board(self) -> Board:
        """The game board; callers should not modify it."""
        return self._board

    @property
    def state(self) -> State:
        return self._state

    def process(self) -> None:
        """Run sessions of Ataxx until the input ends or 'quit'.

        Sources still open when play stops (a loaded file cut short by
        'quit', for instance) are closed before returning.
        """
        try:
            self._run()
        finally:
            self._inputs.close()

    def _run(self) -> None:
        while not self._quit:
            self.do_clear(())
            while self._state == State.SETUP and not self._quit:
                self.do_command()
            if self._quit:
                break

            red = self._make_player(RED, self._red_auto)
            blue = self._make_player(BLUE, self._blue_auto)
            logger.debug("Game started: red %s, blue %s",
                         type(red).__name__, type(blue).__name__)

            while (self._state == State.PLAYING and not self._quit
                   and not self._board.game_over()):
                player = red if self._board.whose_move == RED else blue
                move = player.my_move()
                if self._state == State.PLAYING and move is not None:
                    try:
                        self._board.make_move(move)
                    except GameError as excp:
                        self._reporter.err_msg(str(excp))

            if self._state == State.PLAYING and not self._quit:
                self.report_winner()
                self._state = State.FINISHED
                logger.debug("Game finished after %d moves", self._board.num_moves())

            while self._state == State.FINISHED and not self._quit:
                self.do_command()

    def _make_player(self, color, auto: bool) -> Player:
        if auto:
            player = AIPlayer(self._board, color, depth=self._depth,
                              reporter=self._reporter)
        else:
            player = ManualPlayer(self._board, color, self.get_move)
        if self._seed is not None:
            player.set_seed(self._seed)
        return player

    def do_command(self) -> None:
        """Perform the next command from the input."""
        try:
            cmnd = Command.parse(self._inputs.get_line("ataxx: "))
            self._commands[cmnd.command_type](cmnd.operands)
        except GameError as excp:
            self._reporter.err_msg(str(excp))

    def get_move(self, prompt: str) -> Optional[Move]:
        """Read and execute commands until one is a move or play stops.

        Returns:
            The move read, or None if the game left the playing state first
        """
        while self._state == State.PLAYING and not self._quit:
            try:
                cmnd = Command.parse(self._inputs.get_line(prompt))
                if cmnd.command_type == CommandType.PIECEMOVE:
                    return Move.move(*cmnd.operands)
                if cmnd.command_type == CommandType.PASS:
                    return PASS
                self._commands[cmnd.command_type](cmnd.operands)
            except GameError as excp:
                self._reporter.err_msg(str(excp))
        return None

    # Command processors

    def do_auto(self, operands) -> None:
        self._check_state("auto", State.SETUP)
        if operands[0] == "red":
            self._red_auto = True
        else:
            self._blue_auto = True

    def do_manual(self, operands) -> None:
        self._check_state("manual", State.SETUP)
        if operands[0] == "red":
            self._red_auto = False
        else:
            self._blue_auto = False

    def do_block(self, operands) -> None:
        self._check_state("block", State.SETUP)
        self._board.set_block(operands[0])

    def do_clear(self, operands) -> None:
        """Abandon any game and return to setup with default players."""
        self._board.clear()
        self._state = State.SETUP
        self._red_auto = False
        self._blue_auto = True
        self._seed = None

    def do_dump(self, operands) -> None:
        self._print("===\n" + self._board.to_string(False) + "===")

    def do_help(self, operands) -> None:
        self._print(HELP_TEXT.rstrip("\n"))

    def do_load(self, operands) -> None:
        try:
            stream = open(operands[0], 'r', encoding='utf-8')
        except OSError:
            raise GameError("Cannot open file %s", operands[0]) from None
        self._inputs.add_source(ReaderSource(stream, close=True))

    def do_quit(self, operands) -> None:
        self._quit = True

    def do_start(self, operands) -> None:
        self._check_state("start", State.SETUP)
        self._state = State.PLAYING

    def do_seed(self, operands) -> None:
        self._seed = int(operands[0])

    def do_move(self, operands) -> None:
        self._check_state("move", State.PLAYING, State.SETUP)
        self._board.make_move(Move.move(*operands))

    def do_pass(self, operands) -> None:
        self._check_state("pass", State.PLAYING)
        self._board.make_move(PASS)

    def do_error(self, operands) -> None:
        raise GameError("Command not understood")

    def report_winner(self) -> None:
        """Report the outcome of the current game."""
        red, blue = self._board.red_pieces(), self._board.blue_pieces()
        if red > blue:
            msg = "Red wins."
        elif red < blue:
            msg = "Blue wins."
        else:
            msg = "Draw."
        self._reporter.outcome_msg(msg)

    def _check_state(self, cmnd: str, *states: State) -> None:
        if self._state not in states:
            raise GameError("'%s' command is not allowed now.", cmnd)

    def _print(self, text: str) -> None:
        print(text, file=self._out, flush=True)
