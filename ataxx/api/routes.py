import logging
import time

from fastapi import APIRouter, HTTPException

from ataxx.ai.exceptions import GameError
from ataxx.ai.minimax import AlphaBetaSearch
from ataxx.ai.move import Move
from ataxx.config import get_settings
from ataxx.models.game import (
    ApplyMoveRequest, BoardRequest, BoardResponse, EvaluationResponse,
    LegalMovesResponse, MoveResponse, PieceCounts,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/bot-move/", response_model=MoveResponse)
def get_bot_move(request: BoardRequest):
    """Search the given position and return the computer's move."""
    board = request.to_board()
    if board.game_over():
        raise HTTPException(status_code=400, detail="The game is over")
    settings = get_settings()
    depth = request.depth or settings.search_depth
    seed = request.seed if request.seed is not None else settings.seed
    start_time = time.time()
    move = AlphaBetaSearch(depth=depth, seed=seed).find_move(board)
    execution_time = time.time() - start_time
    logger.info("bot-move %s depth=%d -> %s (%.3fs)", request.current_player,
                depth, move, execution_time)
    return MoveResponse(
        move=str(move),
        from_pos=None if move.is_pass else f"{move.col0}{move.row0}",
        to_pos=None if move.is_pass else f"{move.col1}{move.row1}",
        is_pass=move.is_pass,
        execution_time=execution_time,
    )


@router.post("/legal-moves/", response_model=LegalMovesResponse)
def get_legal_moves(request: BoardRequest):
    board = request.to_board()
    return LegalMovesResponse(
        legal_moves=[str(mv) for mv in board.all_legal_moves(board.whose_move)])


@router.post("/apply-move/", response_model=BoardResponse)
def apply_move(request: ApplyMoveRequest):
    """Apply a move in notation (``a7-b7`` or ``-``) and return the new position."""
    board = request.to_board()
    try:
        board.make_move(Move.parse(request.move))
    except GameError as excp:
        raise HTTPException(status_code=400, detail=str(excp))
    return BoardResponse.from_board(board)


@router.post("/evaluate/", response_model=EvaluationResponse)
def evaluate_state(request: BoardRequest):
    board = request.to_board()
    red, blue = board.red_pieces(), board.blue_pieces()
    game_over = board.game_over()
    winner = None
    if game_over:
        winner = "draw" if red == blue else ("red" if red > blue else "blue")
    return EvaluationResponse(
        piece_counts=PieceCounts(red=red, blue=blue),
        game_over=game_over,
        winner=winner,
    )
