from enum import IntEnum


class PieceColor(IntEnum):
    """Contents of a board square."""
    EMPTY = 0
    RED = 1
    BLUE = 2
    BLOCKED = 3

    def opposite(self) -> 'PieceColor':
        """Return the other player's color; EMPTY and BLOCKED map to themselves."""
        if self is PieceColor.RED:
            return PieceColor.BLUE
        if self is PieceColor.BLUE:
            return PieceColor.RED
        return self

    @property
    def is_piece(self) -> bool:
        return self is PieceColor.RED or self is PieceColor.BLUE

    def __str__(self):
        return self.name.capitalize()


EMPTY = PieceColor.EMPTY
RED = PieceColor.RED
BLUE = PieceColor.BLUE
BLOCKED = PieceColor.BLOCKED
