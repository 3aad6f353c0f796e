"""Console entry point: play Ataxx from the terminal or a command script."""
import argparse
import sys
from typing import List, Optional

from ataxx.ai.board import Board
from ataxx.ai.game_simulation import main as run_simulation
from ataxx.command import ReaderSource
from ataxx.config import configure_logging, get_settings
from ataxx.game import Game
from ataxx.reporter import TextReporter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Play Ataxx')
    parser.add_argument('script', nargs='?', default=None,
                        help='File of commands to read instead of standard input')
    parser.add_argument('--depth', type=int, default=None,
                        help='Search depth for computer players')
    parser.add_argument('--log-level', default=None,
                        help='Logging level (DEBUG, INFO, WARNING, ...)')
    parser.add_argument('--log-file', default=None,
                        help='Write log records to this file')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(args.log_level or settings.log_level,
                      args.log_file or settings.log_file)

    if args.script:
        try:
            stream = open(args.script, 'r', encoding='utf-8')
        except OSError as excp:
            print(f"Cannot open {args.script}: {excp}", file=sys.stderr)
            return 1
        source = ReaderSource(stream, interactive=False, close=True)
    else:
        source = ReaderSource(sys.stdin, interactive=sys.stdin.isatty())

    depth = args.depth or settings.search_depth
    game = Game(Board(), source, TextReporter(), depth=depth)
    game.process()
    return 0


def simulate(argv: Optional[List[str]] = None) -> int:
    """Entry point for the self-play runner."""
    run_simulation(argv)
    return 0


if __name__ == "__main__":
    sys.exit(main())
