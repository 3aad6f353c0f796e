from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from ataxx.ai.board import Board
from ataxx.ai.constants import JUMP_LIMIT, SIDE
from ataxx.ai.pieces import PieceColor, BLOCKED, BLUE, EMPTY, RED

CellName = Optional[Literal["red", "blue", "block", "empty"]]
PlayerName = Literal["red", "blue"]

CELL_TO_PIECE: Dict[Optional[str], PieceColor] = {
    "red": RED, "blue": BLUE, "block": BLOCKED, "empty": EMPTY, None: EMPTY,
}
PIECE_TO_CELL: Dict[PieceColor, str] = {
    RED: "red", BLUE: "blue", BLOCKED: "block", EMPTY: "empty",
}
PLAYER_TO_PIECE: Dict[str, PieceColor] = {"red": RED, "blue": BLUE}


class BoardRequest(BaseModel):
    """A position sent by a client.

    ``board`` lists seven rows, row 7 first; each row lists columns a..g.
    """
    board: List[List[CellName]]
    current_player: PlayerName
    jump_count: int = Field(0, ge=0, le=JUMP_LIMIT)
    depth: Optional[int] = Field(None, ge=1, le=6)
    seed: Optional[int] = None

    @field_validator("board")
    @classmethod
    def check_shape(cls, board):
        if len(board) != SIDE or any(len(row) != SIDE for row in board):
            raise ValueError(f"board must be {SIDE}x{SIDE}")
        return board

    def to_board(self) -> Board:
        rows = [[CELL_TO_PIECE[cell] for cell in row] for row in self.board]
        return Board.from_layout(rows, PLAYER_TO_PIECE[self.current_player], self.jump_count)


class ApplyMoveRequest(BoardRequest):
    move: str


class MoveResponse(BaseModel):
    move: str
    from_pos: Optional[str] = None
    to_pos: Optional[str] = None
    is_pass: bool
    execution_time: float


class LegalMovesResponse(BaseModel):
    legal_moves: List[str]


class PieceCounts(BaseModel):
    red: int
    blue: int


class EvaluationResponse(BaseModel):
    piece_counts: PieceCounts
    game_over: bool
    winner: Optional[Literal["red", "blue", "draw"]] = None


class BoardResponse(BaseModel):
    board: List[List[str]]
    current_player: PlayerName
    jump_count: int
    piece_counts: PieceCounts
    game_over: bool

    @classmethod
    def from_board(cls, board: Board) -> 'BoardResponse':
        return cls(
            board=[[PIECE_TO_CELL[cell] for cell in row] for row in board.to_layout()],
            current_player="red" if board.whose_move == RED else "blue",
            jump_count=board.jump_count,
            piece_counts=PieceCounts(red=board.red_pieces(), blue=board.blue_pieces()),
            game_over=board.game_over(),
        )
