"""Standard starting position and board construction.

``create_initial_state`` is also the reset path: a reset simply builds a fresh
state and the caller drops the old one.

Starting layout on the default 5x5 board (``HE`` human elephant, ``HL`` human
lion, ``AZ`` AI zebra, ``AC`` AI cheetah, ``RF`` rift)::

    ..AZ..AC..
    ..........
    ....RF....
    ..........
    ..HE..HL..
"""

from typing import Iterable, Sequence, Tuple

from pyrsistent import pmap, pvector

from savannah_chase.components import Piece, Position, Square
from savannah_chase.state import GameState
from savannah_chase.types import BOARD_SIZE, Animal, PieceID, Player

PieceSpec = Tuple[PieceID, Animal, Player, Tuple[int, int]]

DEFAULT_PIECES: Sequence[PieceSpec] = [
    ("h_elephant", Animal.ELEPHANT, Player.HUMAN, (4, 1)),
    ("h_lion", Animal.LION, Player.HUMAN, (4, 3)),
    ("ai_zebra", Animal.ZEBRA, Player.AI, (0, 1)),
    ("ai_cheetah", Animal.CHEETAH, Player.AI, (0, 3)),
]

DEFAULT_PLAYER_ONE_NAME = "AI Opponent"
DEFAULT_PLAYER_TWO_NAME = "Human Player"


def center_of(board_size: int) -> Position:
    """Rift square for a board of ``board_size``."""
    return Position(board_size // 2, board_size // 2)


def create_pieces(specs: Iterable[PieceSpec]) -> dict[PieceID, Piece]:
    pieces: dict[PieceID, Piece] = {}
    for piece_id, animal, owner, (row, col) in specs:
        if piece_id in pieces:
            raise ValueError(f"Duplicate piece id: {piece_id}")
        pieces[piece_id] = Piece(piece_id, animal, owner, Position(row, col))
    return pieces


def create_board(board_size: int, rift: Position, pieces: Iterable[Piece]):
    """Build the board rows with every piece placed on its square.

    Raises:
        ValueError: If a piece is off the board or two pieces share a square.
    """
    occupants: dict[Position, PieceID] = {}
    for piece in pieces:
        pos = piece.position
        if not (0 <= pos.row < board_size and 0 <= pos.col < board_size):
            raise ValueError(f"Piece {piece.id} is off the board at {pos}")
        if pos in occupants:
            raise ValueError(f"Pieces {occupants[pos]} and {piece.id} share {pos}")
        occupants[pos] = piece.id

    return pvector(
        pvector(
            Square(
                row=row,
                col=col,
                is_rift=Position(row, col) == rift,
                occupant=occupants.get(Position(row, col)),
            )
            for col in range(board_size)
        )
        for row in range(board_size)
    )


def create_initial_state(
    player_one_name: str = DEFAULT_PLAYER_ONE_NAME,
    player_two_name: str = DEFAULT_PLAYER_TWO_NAME,
    board_size: int = BOARD_SIZE,
    pieces: Sequence[PieceSpec] = DEFAULT_PIECES,
) -> GameState:
    """Return a new game with the human side to move.

    Args:
        player_one_name (str): Display name of the AI side (top).
        player_two_name (str): Display name of the human side (bottom).
        board_size (int): Board width and height.
        pieces (Sequence[PieceSpec]): Starting pieces.
    """
    piece_map = create_pieces(pieces)
    rift = center_of(board_size)
    human_name = player_two_name
    return GameState(
        board_size=board_size,
        rift=rift,
        board=create_board(board_size, rift, piece_map.values()),
        pieces=pmap(piece_map),
        goal_rows=pmap({Player.HUMAN: 0, Player.AI: board_size - 1}),
        player_names=pmap({Player.AI: player_one_name, Player.HUMAN: human_name}),
        message=f"{human_name}'s turn. Select a piece.",
    )
