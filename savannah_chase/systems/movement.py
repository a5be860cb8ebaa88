"""Piece movement system.

Moves one piece a single step if the destination is legal. Returns the
original ``GameState`` object when the move is rejected, otherwise a new
state with the origin square vacated, the destination square occupied and the
piece position updated. The rift flag of the destination is reported so the
turn controller can keep the turn with the mover.
"""

from dataclasses import replace
from typing import Tuple

from savannah_chase.components import Position
from savannah_chase.moves import legal_moves
from savannah_chase.state import GameState
from savannah_chase.types import PieceID


def apply_move(
    state: GameState, piece_id: PieceID, destination: Position
) -> Tuple[GameState, bool]:
    """Move ``piece_id`` to ``destination`` if allowed.

    Args:
        state (GameState): Current state.
        piece_id (PieceID): Piece to move.
        destination (Position): Desired square.

    Returns:
        Tuple[GameState, bool]: The next state and whether the piece landed on
            the rift. A rejected move yields ``(state, False)`` with the same
            state object.
    """
    if piece_id not in state.pieces:
        return state, False
    if destination not in legal_moves(state, piece_id):
        return state, False

    piece = state.pieces[piece_id]
    origin = piece.position

    board = state.board
    origin_square = board[origin.row][origin.col]
    board = board.set(
        origin.row, board[origin.row].set(origin.col, replace(origin_square, occupant=None))
    )
    target_square = board[destination.row][destination.col]
    board = board.set(
        destination.row,
        board[destination.row].set(
            destination.col, replace(target_square, occupant=piece_id)
        ),
    )

    next_state = replace(
        state,
        board=board,
        pieces=state.pieces.set(piece_id, piece.moved_to(destination)),
    )
    return next_state, target_square.is_rift
