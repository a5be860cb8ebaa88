"""State reducer.

The exported :func:`step` is the only entry point the UI uses to advance the
game. It is pure: it returns a *new* :class:`savannah_chase.state.GameState`
(or the same object when the input is ignored).

Human clicks are resolved the way a board UI expects:

1. With a piece selected, clicking one of its highlighted destinations moves it.
2. Clicking one of your own pieces selects it and highlights its legal moves;
   clicking the selected piece again deselects it.
3. Anything else clears the selection. Illegal requests never raise and never
   touch the board.
4. If the human side has no legal move at all, any click forfeits the turn.
"""

import logging
from dataclasses import replace
from typing import Optional

from pyrsistent import pset

from savannah_chase.actions import Action
from savannah_chase.components import Position
from savannah_chase.moves import has_any_legal_move, legal_moves
from savannah_chase.state import GameState
from savannah_chase.systems.movement import apply_move
from savannah_chase.systems.turn import (
    begin_ai_turn,
    end_turn,
    forfeit_turn,
    play_ai_turn,
)
from savannah_chase.types import PieceID, Player, TurnPhase
from savannah_chase.utils.board import occupant_at

logger = logging.getLogger(__name__)


def step(
    state: GameState, action: Action, position: Optional[Position] = None
) -> GameState:
    """Advance the game by one input.

    Args:
        state (GameState): Previous immutable state.
        action (Action): Input to apply.
        position (Position | None): Clicked square, required for ``Action.CLICK``.

    Returns:
        GameState: Next state. Ignored inputs return ``state`` unchanged.

    Raises:
        ValueError: If the action is not recognized or ``CLICK`` lacks a position.
    """
    if action == Action.CLICK:
        if position is None:
            raise ValueError("CLICK requires a position")
        return _step_click(state, position)
    elif action == Action.BEGIN_AI_TURN:
        return begin_ai_turn(state)
    elif action == Action.AI_MOVE:
        return play_ai_turn(state)
    raise ValueError("Action is not valid")


def _deselect(state: GameState, message: str) -> GameState:
    return replace(state, selected_piece_id=None, valid_moves=pset(), message=message)


def _step_click(state: GameState, position: Position) -> GameState:
    if state.is_game_over or state.phase != TurnPhase.HUMAN_TURN:
        return state

    # a side that was handed the turn back without any move passes it on
    if not has_any_legal_move(state, Player.HUMAN):
        return forfeit_turn(state)

    human_name = state.name_of(Player.HUMAN)
    clicked_id = occupant_at(state, position)
    clicked = state.pieces[clicked_id] if clicked_id is not None else None

    if state.selected_piece_id is not None and position in state.valid_moves:
        return _step_move(state, state.selected_piece_id, position)

    if clicked is not None and clicked.owner == Player.HUMAN:
        if clicked.id == state.selected_piece_id:
            return _deselect(state, f"{human_name}'s turn. Select a piece.")
        moves = legal_moves(state, clicked.id)
        if moves:
            message = f"Selected {clicked.animal.value}. Choose a destination."
        else:
            message = f"This {clicked.animal.value} has no valid moves. Select another piece."
        return replace(
            state, selected_piece_id=clicked.id, valid_moves=moves, message=message
        )

    if state.selected_piece_id is not None:
        return _deselect(state, f"Invalid move. {human_name}'s turn. Select a piece.")
    return replace(state, message=f"{human_name}'s turn. Select one of your pieces.")


def _step_move(
    state: GameState, piece_id: PieceID, destination: Position
) -> GameState:
    moved, landed_on_rift = apply_move(state, piece_id, destination)
    if moved is state:
        return _deselect(state, "Invalid move. Select a piece.")
    logger.debug("Human move %s -> %s", piece_id, destination)
    return end_turn(moved, Player.HUMAN, landed_on_rift)
