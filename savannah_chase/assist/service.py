"""Board analysis and move suggestion through the assist client.

Both calls are informational: they read the current ``GameState``, send its
text encoding to the remote model and return an :data:`AssistResult`. They
never change the game. :func:`apply_analysis` and :func:`apply_suggestion`
fold a result into the advisory fields of a new state; a failure leaves an
empty placeholder and an error message, and the turn stays where it was.

The heuristic mover does not read the suggestion.
"""

import logging
from dataclasses import replace

from savannah_chase.assist.client import AssistClient
from savannah_chase.assist.exceptions import AssistError
from savannah_chase.assist.prompts import get_analysis_prompt, get_suggestion_prompt
from savannah_chase.assist.results import AssistFailure, AssistResult, AssistSuccess
from savannah_chase.assist.schemas import (
    AnalyzeGameStateInput,
    AnalyzeGameStateOutput,
    SuggestMoveInput,
    SuggestMoveOutput,
)
from savannah_chase.codec import encode_board
from savannah_chase.state import GameState
from savannah_chase.types import Player

logger = logging.getLogger(__name__)

SIDE_LABELS = {Player.AI: "AI, top", Player.HUMAN: "Human, bottom"}


def player_label(state: GameState, player: Player) -> str:
    return f"{state.name_of(player)} ({SIDE_LABELS[player]})"


async def analyze_game_state(
    state: GameState, client: AssistClient
) -> AssistResult[AnalyzeGameStateOutput]:
    """Ask the model for a short per-side assessment of the board."""
    data = AnalyzeGameStateInput(
        board_state=encode_board(state),
        player_one_name=state.name_of(Player.AI),
        player_two_name=state.name_of(Player.HUMAN),
    )
    try:
        output = await client.generate(get_analysis_prompt(data), AnalyzeGameStateOutput)
    except AssistError as e:
        logger.warning("Game analysis failed: %s", e)
        return AssistFailure(reason=str(e))
    except Exception as e:
        logger.exception("Unexpected error during game analysis")
        return AssistFailure(reason=f"Unexpected error: {e}")
    return AssistSuccess(output)


async def suggest_move(
    state: GameState, client: AssistClient
) -> AssistResult[SuggestMoveOutput]:
    """Ask the model for a move suggestion for the side to move."""
    data = SuggestMoveInput(
        board_state=encode_board(state),
        player_turn=player_label(state, state.current_player),
    )
    try:
        output = await client.generate(get_suggestion_prompt(data), SuggestMoveOutput)
    except AssistError as e:
        logger.warning("Move suggestion failed: %s", e)
        return AssistFailure(reason=str(e))
    except Exception as e:
        logger.exception("Unexpected error during move suggestion")
        return AssistFailure(reason=f"Unexpected error: {e}")
    return AssistSuccess(output)


def apply_analysis(
    state: GameState, result: AssistResult[AnalyzeGameStateOutput]
) -> GameState:
    if isinstance(result, AssistSuccess):
        return replace(state, analysis=result.payload)
    return replace(
        state, analysis=None, message=f"Could not analyze game state: {result.reason}"
    )


def apply_suggestion(
    state: GameState, result: AssistResult[SuggestMoveOutput]
) -> GameState:
    if isinstance(result, AssistSuccess):
        return replace(state, suggestion=result.payload.suggested_move)
    return replace(
        state, suggestion=None, message=f"Could not get a move suggestion: {result.reason}"
    )
