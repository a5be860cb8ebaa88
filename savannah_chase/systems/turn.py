"""Turn controller.

Implements the turn state machine over :class:`savannah_chase.types.TurnPhase`:

* After a successful move the game either ends (a side reached its goal row),
  stays with the mover (the piece landed on the rift) or passes to the other
  side.
* A side without any legal move forfeits its turn; board and pieces are left
  untouched.
* The AI side moves in two transitions: :func:`begin_ai_turn` claims the turn
  (``AI_TURN -> AI_TURN_IN_PROGRESS``) and :func:`play_ai_turn` applies the
  heuristic move. A second claim while a turn is in progress is ignored and
  an unclaimed turn is never played.
"""

import logging
from dataclasses import replace

from pyrsistent import pset

from savannah_chase.components import Position
from savannah_chase.heuristic import choose_heuristic_move
from savannah_chase.moves import has_any_legal_move
from savannah_chase.state import GameState
from savannah_chase.systems.movement import apply_move
from savannah_chase.systems.terminal import win_system
from savannah_chase.types import PieceID, Player, TurnPhase, opponent

logger = logging.getLogger(__name__)

def phase_for(player: Player) -> TurnPhase:
    return TurnPhase.HUMAN_TURN if player == Player.HUMAN else TurnPhase.AI_TURN


def hand_over(state: GameState, player: Player, message: str) -> GameState:
    """Give the turn to ``player`` and clear any selection."""
    return replace(
        state,
        current_player=player,
        phase=phase_for(player),
        selected_piece_id=None,
        valid_moves=pset(),
        message=message,
    )


def describe_move(
    state: GameState, piece_id: PieceID, origin: Position, destination: Position
) -> str:
    piece = state.pieces[piece_id]
    return (
        f"{state.name_of(piece.owner)} {piece.animal.value} from "
        f"({origin.row},{origin.col}) to ({destination.row},{destination.col})."
    )


def forfeit_turn(state: GameState) -> GameState:
    """Pass the turn of a side that cannot move. Board and pieces are unchanged."""
    player = state.current_player
    next_player = opponent(player)
    logger.info("%s has no legal move, turn passes to %s", player, next_player)
    return hand_over(
        replace(state, turn=state.turn + 1),
        next_player,
        f"{state.name_of(player)} has no valid moves. "
        f"{state.name_of(next_player)}'s turn.",
    )


def end_turn(state: GameState, mover: Player, landed_on_rift: bool) -> GameState:
    """Decide what happens after ``mover`` made a move.

    Args:
        state (GameState): State right after the move was applied.
        mover (Player): Side that moved.
        landed_on_rift (bool): Whether the moved piece stands on the rift.

    Returns:
        GameState: ``GAME_OVER`` state if the move won, otherwise the state
            with the next side to move. If that side has no legal move the
            turn is passed back once.
    """
    state = win_system(replace(state, turn=state.turn + 1))
    if state.is_game_over:
        logger.info("Game over after %d turns, winner: %s", state.turn, state.winner)
        return state

    if landed_on_rift:
        logger.debug("%s landed on the rift at %s, turn stays", mover, state.rift)
        return hand_over(
            state,
            mover,
            f"{state.name_of(mover)} landed on the Rift! "
            f"The turn stays with {state.name_of(mover)}.",
        )

    next_player = opponent(mover)
    state = hand_over(state, next_player, f"{state.name_of(next_player)}'s turn.")
    if not has_any_legal_move(state, next_player):
        state = forfeit_turn(state)
    return state


def begin_ai_turn(state: GameState) -> GameState:
    """Claim the AI turn. Any phase other than ``AI_TURN`` is returned unchanged."""
    if state.phase != TurnPhase.AI_TURN:
        return state
    return replace(
        state,
        phase=TurnPhase.AI_TURN_IN_PROGRESS,
        message=f"{state.name_of(state.current_player)} is thinking...",
    )


def play_ai_turn(state: GameState) -> GameState:
    """Apply the heuristic move for the side to move.

    Only acts on a turn claimed by :func:`begin_ai_turn`
    (``AI_TURN_IN_PROGRESS``); otherwise the state is returned unchanged.
    """
    if state.phase != TurnPhase.AI_TURN_IN_PROGRESS:
        return state

    player = state.current_player
    choice = choose_heuristic_move(state, player)
    if choice is None:
        return forfeit_turn(state)

    piece_id, destination = choice
    origin = state.pieces[piece_id].position
    moved, landed_on_rift = apply_move(state, piece_id, destination)
    logger.debug("Heuristic move %s: %s -> %s", piece_id, origin, destination)

    next_state = end_turn(moved, player, landed_on_rift)
    if next_state.is_game_over:
        return next_state
    description = describe_move(moved, piece_id, origin, destination)
    return replace(next_state, message=f"{description} {next_state.message}")


def abort_ai_turn(state: GameState, reason: str) -> GameState:
    """Force control back to the human side after a failed AI turn."""
    if state.is_game_over:
        return state
    logger.error("AI turn aborted: %s", reason)
    return hand_over(
        state,
        Player.HUMAN,
        f"{state.name_of(state.current_player)} could not move ({reason}). "
        f"{state.name_of(Player.HUMAN)}'s turn.",
    )
