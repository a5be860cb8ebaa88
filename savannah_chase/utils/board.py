"""Board geometry and consistency helpers.

Pure predicates shared by move generation, the movement system and tests.
"""

from typing import Optional

from savannah_chase.components import Position
from savannah_chase.state import GameState
from savannah_chase.types import PieceID


def is_in_bounds(state: GameState, pos: Position) -> bool:
    """Return True if ``pos`` lies on the board."""
    return 0 <= pos.row < state.board_size and 0 <= pos.col < state.board_size


def occupant_at(state: GameState, pos: Position) -> Optional[PieceID]:
    """Piece id on ``pos`` or ``None`` (also ``None`` when off the board)."""
    if not is_in_bounds(state, pos):
        return None
    return state.square_at(pos).occupant


def is_empty_at(state: GameState, pos: Position) -> bool:
    return is_in_bounds(state, pos) and state.square_at(pos).is_empty


def is_consistent_state(state: GameState) -> bool:
    """Check the board/piece occupancy invariant.

    Every piece must be referenced by exactly the square at its position and
    every occupied square must point at a piece standing on it.
    """
    seen: set[PieceID] = set()
    for row in state.board:
        for square in row:
            if square.occupant is None:
                continue
            piece = state.pieces.get(square.occupant)
            if piece is None or square.occupant in seen:
                return False
            if piece.position != Position(square.row, square.col):
                return False
            seen.add(square.occupant)
    return seen == set(state.pieces.keys())
