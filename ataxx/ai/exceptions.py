"""Errors raised by the Ataxx engine."""


class GameError(Exception):
    """A user-visible error; the message is reported and play continues.

    The message may be a %-format string followed by its arguments.
    """

    def __init__(self, msg: str, *args):
        super().__init__(msg % args if args else msg)


class IllegalMove(GameError):
    """An attempt to make a move that is not legal on the current board."""

    def __init__(self, msg: str = "That move is illegal.", *args):
        super().__init__(msg, *args)


class IllegalBlockPlacement(GameError):
    """An attempt to place a block on an occupied or off-board square."""

    def __init__(self, msg: str = "Illegal block placement", *args):
        super().__init__(msg, *args)
