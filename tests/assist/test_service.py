# tests/assist/test_service.py

import asyncio

import pytest

from savannah_chase.assist import (
    AssistFailure,
    AssistRequestError,
    AssistSuccess,
    analyze_game_state,
    apply_analysis,
    apply_suggestion,
    suggest_move,
)
from savannah_chase.assist.schemas import AnalyzeGameStateOutput, SuggestMoveOutput
from savannah_chase.codec import encode_board
from savannah_chase.levels.standard import create_initial_state
from tests.test_utils import FakeAssistClient

ANALYSIS = AnalyzeGameStateOutput(
    player_one_summary="Cheetah is closer to the goal.",
    player_two_summary="Elephant controls the left file.",
    overall_assessment="Even.",
)
SUGGESTION = SuggestMoveOutput(suggested_move="Move Elephant from (4,1) to (3,1)")


def test_analyze_game_state_success() -> None:
    state = create_initial_state()
    client = FakeAssistClient(analysis=ANALYSIS)
    result = asyncio.run(analyze_game_state(state, client))
    assert isinstance(result, AssistSuccess)
    assert result.payload == ANALYSIS

    prompt = client.prompts[0]
    assert set(prompt) == {"system_prompt", "user_prompt"}
    assert encode_board(state).strip() in prompt["user_prompt"]
    assert state.name_of(state.current_player) in prompt["user_prompt"]


def test_suggest_move_success() -> None:
    state = create_initial_state()
    client = FakeAssistClient(suggestion=SUGGESTION)
    result = asyncio.run(suggest_move(state, client))
    assert isinstance(result, AssistSuccess)
    assert result.payload.suggested_move == SUGGESTION.suggested_move
    assert "Human, bottom" in client.prompts[0]["user_prompt"]


@pytest.mark.parametrize(
    "error", [AssistRequestError("quota exceeded"), RuntimeError("socket closed")]
)
def test_failures_become_assist_failure(error: Exception) -> None:
    state = create_initial_state()
    client = FakeAssistClient(error=error)
    analysis = asyncio.run(analyze_game_state(state, client))
    suggestion = asyncio.run(suggest_move(state, client))
    assert isinstance(analysis, AssistFailure)
    assert isinstance(suggestion, AssistFailure)
    assert str(error) in analysis.reason
    assert str(error) in suggestion.reason


def test_assist_calls_do_not_touch_state() -> None:
    state = create_initial_state()
    client = FakeAssistClient(analysis=ANALYSIS, suggestion=SUGGESTION)
    asyncio.run(analyze_game_state(state, client))
    asyncio.run(suggest_move(state, client))
    assert state == create_initial_state()


def test_apply_analysis() -> None:
    state = create_initial_state()
    applied = apply_analysis(state, AssistSuccess(ANALYSIS))
    assert applied.analysis == ANALYSIS
    assert applied.pieces is state.pieces
    assert applied.current_player == state.current_player

    failed = apply_analysis(applied, AssistFailure(reason="offline"))
    assert failed.analysis is None
    assert failed.message == "Could not analyze game state: offline"
    assert failed.phase == state.phase


def test_apply_suggestion() -> None:
    state = create_initial_state()
    applied = apply_suggestion(state, AssistSuccess(SUGGESTION))
    assert applied.suggestion == SUGGESTION.suggested_move

    failed = apply_suggestion(applied, AssistFailure(reason="offline"))
    assert failed.suggestion is None
    assert failed.message == "Could not get a move suggestion: offline"
    assert failed.board is state.board
