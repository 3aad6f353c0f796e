"""Channels for messages to the people playing."""
import sys
from typing import List, TextIO


class TextReporter:
    """Reports errors on ERR and outcomes and moves on OUT."""

    def __init__(self, out: TextIO = None, err: TextIO = None):
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr

    def err_msg(self, msg: str) -> None:
        print(msg, file=self.err, flush=True)

    def outcome_msg(self, msg: str) -> None:
        print(msg, file=self.out, flush=True)

    def move_msg(self, msg: str) -> None:
        print(msg, file=self.out, flush=True)


class RecordingReporter:
    """Keeps every message in memory; used by simulations and tests."""

    def __init__(self):
        self.errors: List[str] = []
        self.outcomes: List[str] = []
        self.moves: List[str] = []

    def err_msg(self, msg: str) -> None:
        self.errors.append(msg)

    def outcome_msg(self, msg: str) -> None:
        self.outcomes.append(msg)

    def move_msg(self, msg: str) -> None:
        self.moves.append(msg)
