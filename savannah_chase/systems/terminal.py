"""Terminal condition system.

A side wins as soon as one of its pieces stands on its goal row (row 0 for
the human side, the last row for the AI side, as recorded in
``GameState.goal_rows``). Players are checked in ``Player`` declaration order,
so the human side wins the (unreachable) case of both conditions holding at
once.
"""

from dataclasses import replace
from typing import Optional

from pyrsistent import pset

from savannah_chase.state import GameState
from savannah_chase.types import Player, TurnPhase


def has_reached_goal(state: GameState, player: Player) -> bool:
    goal_row = state.goal_rows[player]
    return any(piece.position.row == goal_row for piece in state.pieces_of(player))


def check_winner(state: GameState) -> Optional[Player]:
    """Return the winning side or ``None``."""
    for player in Player:
        if has_reached_goal(state, player):
            return player
    return None


def win_system(state: GameState) -> GameState:
    """Set ``winner`` and the ``GAME_OVER`` phase once a side has won (idempotent)."""
    if state.is_game_over:
        return state
    winner = check_winner(state)
    if winner is None:
        return state
    return replace(
        state,
        winner=winner,
        phase=TurnPhase.GAME_OVER,
        selected_piece_id=None,
        valid_moves=pset(),
        message=f"{state.name_of(winner)} wins!",
    )
