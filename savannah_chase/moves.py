"""Legal-move generation.

Every animal moves the same way: one orthogonal step into an empty square.
There are no jumps, no captures and no animal-specific rules; the rift is a
legal destination like any other empty square.

Contract:

* Pure; never mutates ``GameState``.
* Returned positions are always in bounds, unoccupied and orthogonally
  adjacent to the piece.
"""

from typing import Dict, List, Tuple

from pyrsistent import PSet, pset

from savannah_chase.components import Position
from savannah_chase.state import GameState
from savannah_chase.types import PieceID, Player
from savannah_chase.utils.board import is_empty_at

ORTHOGONAL_STEPS: Dict[str, Tuple[int, int]] = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}
"""Step offsets in the order candidates are generated (and ties broken)."""


def candidate_moves(state: GameState, piece_id: PieceID) -> List[Position]:
    """Legal destinations of ``piece_id`` in ``ORTHOGONAL_STEPS`` order.

    Raises:
        KeyError: If ``piece_id`` is not on the board.
    """
    origin = state.pieces[piece_id].position
    moves: List[Position] = []
    for d_row, d_col in ORTHOGONAL_STEPS.values():
        target = origin.offset(d_row, d_col)
        if is_empty_at(state, target):
            moves.append(target)
    return moves


def legal_moves(state: GameState, piece_id: PieceID) -> PSet[Position]:
    """Set of squares ``piece_id`` may move to this turn."""
    return pset(candidate_moves(state, piece_id))


def has_any_legal_move(state: GameState, player: Player) -> bool:
    """True if at least one piece of ``player`` can move."""
    return any(candidate_moves(state, piece.id) for piece in state.pieces_of(player))
