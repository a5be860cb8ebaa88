# tests/unit/test_moves.py

import pytest
from typing import Set, Tuple

from savannah_chase.components import Position
from savannah_chase.moves import candidate_moves, has_any_legal_move, legal_moves
from savannah_chase.types import Player
from savannah_chase.utils.board import is_in_bounds
from tests.test_utils import AI_CHEETAH, H_ELEPHANT, make_state


@pytest.mark.parametrize(
    "start, expected",
    [
        # open board, all four neighbours
        ((2, 1), {(1, 1), (3, 1), (2, 0), (2, 2)}),
        # corners never produce off-board squares
        ((0, 0), {(0, 1), (1, 0)}),
        ((4, 4), {(3, 4), (4, 3)}),
        ((0, 4), {(1, 4), (0, 3)}),
        # edges
        ((4, 2), {(3, 2), (4, 1), (4, 3)}),
    ],
)
def test_legal_moves_on_open_board(
    start: Tuple[int, int], expected: Set[Tuple[int, int]]
) -> None:
    # AI pieces parked far from the squares under test
    state = make_state(human=[start], ai=[(0, 2)])
    moves = legal_moves(state, H_ELEPHANT)
    assert moves == {Position(*pos) for pos in expected}


def test_corner_piece_only_moves_to_empty_neighbours() -> None:
    state = make_state(human=[(0, 0)], ai=[(0, 1), (3, 3)])
    assert legal_moves(state, H_ELEPHANT) == {Position(1, 0)}


def test_start_position_moves() -> None:
    state = make_state()
    assert legal_moves(state, H_ELEPHANT) == {
        Position(3, 1),
        Position(4, 0),
        Position(4, 2),
    }
    assert legal_moves(state, AI_CHEETAH) == {
        Position(1, 3),
        Position(0, 2),
        Position(0, 4),
    }


def test_occupied_squares_are_excluded_regardless_of_owner() -> None:
    # elephant at (2,2) surrounded by friend (1,2), enemy (3,2) and enemy (2,1)
    state = make_state(human=[(2, 2), (1, 2)], ai=[(3, 2), (2, 1)])
    assert legal_moves(state, H_ELEPHANT) == {Position(2, 3)}


def test_rift_is_a_legal_destination() -> None:
    state = make_state(human=[(3, 2), (4, 3)])
    assert state.rift == Position(2, 2)
    assert Position(2, 2) in legal_moves(state, H_ELEPHANT)


def test_candidate_moves_follow_step_order() -> None:
    state = make_state(human=[(2, 1), (4, 3)])
    assert candidate_moves(state, H_ELEPHANT) == [
        Position(1, 1),
        Position(3, 1),
        Position(2, 0),
        Position(2, 2),
    ]


def test_legal_moves_are_in_bounds_adjacent_and_empty_everywhere() -> None:
    for row in range(5):
        for col in range(5):
            if (row, col) in {(0, 1), (0, 3), (4, 3)}:
                continue
            state = make_state(human=[(row, col), (4, 3)])
            origin = Position(row, col)
            for pos in legal_moves(state, H_ELEPHANT):
                assert is_in_bounds(state, pos)
                assert state.square_at(pos).is_empty
                assert abs(pos.row - origin.row) + abs(pos.col - origin.col) == 1


def test_has_any_legal_move() -> None:
    state = make_state()
    assert has_any_legal_move(state, Player.HUMAN)
    assert has_any_legal_move(state, Player.AI)

    # 2x2 board filled with four pieces: nobody can move
    blocked = make_state(human=[(1, 0), (1, 1)], ai=[(0, 0), (0, 1)], board_size=2)
    assert not has_any_legal_move(blocked, Player.HUMAN)
    assert not has_any_legal_move(blocked, Player.AI)


def test_missing_piece_raises() -> None:
    state = make_state()
    with pytest.raises(KeyError):
        legal_moves(state, "h_giraffe")
