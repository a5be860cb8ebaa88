# tests/systems/test_terminal_system.py

import pytest
from typing import Optional, Sequence, Tuple

from savannah_chase.systems.terminal import check_winner, win_system
from savannah_chase.types import Player, TurnPhase
from tests.test_utils import make_state


@pytest.mark.parametrize(
    "human, ai, expected",
    [
        ([(4, 1), (4, 3)], [(0, 1), (0, 3)], None),
        ([(0, 2), (4, 3)], [(0, 1), (0, 3)], Player.HUMAN),
        ([(4, 1), (1, 0)], [(0, 1), (0, 3)], None),
        ([(3, 1), (3, 3)], [(4, 0), (0, 3)], Player.AI),
        ([(3, 1), (3, 3)], [(1, 1), (4, 4)], Player.AI),
        # ai pieces on row 0 and human pieces on row 4 are home rows, not goals
        ([(4, 0), (4, 4)], [(0, 0), (0, 4)], None),
        # both at once: human is checked first
        ([(0, 0), (3, 3)], [(4, 4), (1, 1)], Player.HUMAN),
    ],
)
def test_check_winner(
    human: Sequence[Tuple[int, int]],
    ai: Sequence[Tuple[int, int]],
    expected: Optional[Player],
) -> None:
    state = make_state(human=human, ai=ai)
    assert check_winner(state) == expected


def test_win_system_sets_game_over() -> None:
    state = make_state(human=[(0, 2), (4, 3)])
    won = win_system(state)
    assert won.winner == Player.HUMAN
    assert won.is_game_over
    assert won.phase == TurnPhase.GAME_OVER
    assert won.message == f"{state.name_of(Player.HUMAN)} wins!"


def test_win_system_is_idempotent() -> None:
    won = win_system(make_state(human=[(0, 2), (4, 3)]))
    assert win_system(won) is won


def test_win_system_without_winner_returns_same_state() -> None:
    state = make_state()
    assert win_system(state) is state
