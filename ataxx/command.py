"""
Commands read by the Ataxx command loop and the sources they come from.
"""
import re
import sys
from enum import Enum
from typing import List, Optional, TextIO, Tuple


class CommandType(Enum):
    AUTO = (r"auto\s+(red|blue)",)
    MANUAL = (r"manual\s+(red|blue)",)
    BLOCK = (r"block\s+([a-g][1-7])",)
    CLEAR = (r"clear",)
    DUMP = (r"dump",)
    HELP = (r"help|\?",)
    LOAD = (r"load\s+(\S+)",)
    QUIT = (r"quit",)
    START = (r"start",)
    SEED = (r"seed\s+(\d+)",)
    PASS = (r"pass|-",)
    PIECEMOVE = (r"([a-g])([1-7])\s*[-\s]\s*([a-g])([1-7])",)
    ERROR = (r".*",)
    EOF = (None,)

    def __init__(self, pattern: Optional[str]):
        self.regex = re.compile(pattern) if pattern is not None else None

    def __str__(self):
        return self.name.lower()


class Command:
    """A parsed command: its type and its operand strings."""

    def __init__(self, command_type: CommandType, operands: Tuple[str, ...] = ()):
        self.command_type = command_type
        self.operands = operands

    @classmethod
    def parse(cls, line: Optional[str]) -> 'Command':
        """Parse LINE; None (end of input) gives an EOF command."""
        if line is None:
            return cls(CommandType.EOF)
        line = line.strip()
        for command_type in CommandType:
            if command_type.regex is None:
                continue
            m = command_type.regex.fullmatch(line)
            if m is not None:
                return cls(command_type, m.groups())
        return cls(CommandType.ERROR)

    def __repr__(self):
        return f"Command({self.command_type.name}, {self.operands})"


class ReaderSource:
    """Lines from a text stream.

    Args:
        stream: Where lines come from
        interactive: Whether to write prompts before reading
        close: Whether to close STREAM when it is exhausted
        prompt_out: Where prompts go
    """

    def __init__(self, stream: TextIO, interactive: bool = False, close: bool = False,
                 prompt_out: TextIO = None):
        self.stream = stream
        self.interactive = interactive
        self.close = close
        self.prompt_out = prompt_out if prompt_out is not None else sys.stdout

    def get_line(self, prompt: str) -> Optional[str]:
        """Return the next line without its newline, or None at end of input."""
        if self.interactive and prompt:
            self.prompt_out.write(prompt)
            self.prompt_out.flush()
        line = self.stream.readline()
        if not line:
            if self.close:
                self.stream.close()
            return None
        return line.rstrip('\r\n')


class CommandSources:
    """A stack of line sources; 'load' pushes, exhausted sources pop."""

    def __init__(self):
        self._sources: List[ReaderSource] = []

    def add_source(self, source: ReaderSource) -> None:
        self._sources.append(source)

    def get_line(self, prompt: str) -> Optional[str]:
        """Next non-blank, non-comment line, or None once every source is done."""
        while self._sources:
            line = self._sources[-1].get_line(prompt)
            if line is None:
                self._sources.pop()
                continue
            stripped = line.strip()
            if not stripped or stripped.startswith('#'):
                continue
            return stripped
        return None

    def close(self) -> None:
        """Drop every remaining source, closing the streams marked to be closed."""
        while self._sources:
            source = self._sources.pop()
            if source.close and not source.stream.closed:
                source.stream.close()
