# tests/unit/test_levels.py

import pytest

from savannah_chase.components import Position
from savannah_chase.levels.standard import (
    DEFAULT_PLAYER_ONE_NAME,
    DEFAULT_PLAYER_TWO_NAME,
    center_of,
    create_initial_state,
)
from savannah_chase.types import Animal, Player, TurnPhase
from savannah_chase.utils.board import is_consistent_state


def test_initial_state_layout() -> None:
    state = create_initial_state()
    assert state.board_size == 5
    assert state.rift == Position(2, 2)
    assert state.square_at(Position(2, 2)).is_rift
    assert sum(square.is_rift for row in state.board for square in row) == 1

    expected = {
        "h_elephant": (Animal.ELEPHANT, Player.HUMAN, Position(4, 1)),
        "h_lion": (Animal.LION, Player.HUMAN, Position(4, 3)),
        "ai_zebra": (Animal.ZEBRA, Player.AI, Position(0, 1)),
        "ai_cheetah": (Animal.CHEETAH, Player.AI, Position(0, 3)),
    }
    assert set(state.pieces) == set(expected)
    for piece_id, (animal, owner, pos) in expected.items():
        piece = state.pieces[piece_id]
        assert (piece.animal, piece.owner, piece.position) == (animal, owner, pos)
        assert state.square_at(pos).occupant == piece_id
    assert is_consistent_state(state)


def test_initial_turn_and_names() -> None:
    state = create_initial_state()
    assert state.current_player == Player.HUMAN
    assert state.phase == TurnPhase.HUMAN_TURN
    assert state.winner is None and not state.is_game_over
    assert state.turn == 0
    assert state.name_of(Player.AI) == DEFAULT_PLAYER_ONE_NAME
    assert state.name_of(Player.HUMAN) == DEFAULT_PLAYER_TWO_NAME
    assert state.goal_rows[Player.HUMAN] == 0
    assert state.goal_rows[Player.AI] == 4


def test_custom_names() -> None:
    state = create_initial_state(player_one_name="Sable", player_two_name="Ana")
    assert state.name_of(Player.AI) == "Sable"
    assert state.name_of(Player.HUMAN) == "Ana"
    assert "Ana" in state.message


@pytest.mark.parametrize("size, center", [(5, (2, 2)), (7, (3, 3)), (3, (1, 1))])
def test_rift_at_center(size: int, center: tuple[int, int]) -> None:
    assert center_of(size) == Position(*center)


def test_reset_builds_independent_state() -> None:
    first = create_initial_state()
    second = create_initial_state()
    assert first == second
    assert first is not second


def test_duplicate_ids_rejected() -> None:
    pieces = [
        ("x", Animal.LION, Player.HUMAN, (4, 0)),
        ("x", Animal.ZEBRA, Player.AI, (0, 0)),
    ]
    with pytest.raises(ValueError):
        create_initial_state(pieces=pieces)


def test_shared_square_rejected() -> None:
    pieces = [
        ("a", Animal.LION, Player.HUMAN, (4, 0)),
        ("b", Animal.ZEBRA, Player.AI, (4, 0)),
    ]
    with pytest.raises(ValueError):
        create_initial_state(pieces=pieces)


def test_off_board_piece_rejected() -> None:
    pieces = [("a", Animal.LION, Player.HUMAN, (5, 0))]
    with pytest.raises(ValueError):
        create_initial_state(pieces=pieces)
