"""Greedy heuristic mover for the non-human side.

The policy is deliberately simple and single-ply:

1. Walk the side's pieces in ascending id order and take the first one that
   has any legal move.
2. Among that piece's legal destinations, pick the one closest to the side's
   goal row; ties go to the first candidate in
   :data:`savannah_chase.moves.ORTHOGONAL_STEPS` order.

There is no evaluation of opponent threats and no lookahead.
"""

from typing import Optional, Tuple

from savannah_chase.components import Position
from savannah_chase.moves import candidate_moves
from savannah_chase.state import GameState
from savannah_chase.types import PieceID, Player


def goal_distance(state: GameState, player: Player, pos: Position) -> int:
    """Rows left between ``pos`` and ``player``'s goal row."""
    return abs(state.goal_rows[player] - pos.row)


def choose_heuristic_move(
    state: GameState, player: Player
) -> Optional[Tuple[PieceID, Position]]:
    """Return ``(piece_id, destination)`` or ``None`` if ``player`` cannot move."""
    for piece in state.pieces_of(player):
        moves = candidate_moves(state, piece.id)
        if not moves:
            continue
        best = min(moves, key=lambda pos: goal_distance(state, player, pos))
        return piece.id, best
    return None
