"""Board text encoding for the remote assist prompts.

One line per row, each cell a 2-character token with no separator:

* ``<owner><animal>`` for an occupied square, e.g. ``HE`` (human elephant),
  ``AC`` (AI cheetah);
* ``RF`` for the empty rift;
* ``..`` for any other empty square.

The encoding is one way; nothing parses it back.
"""

from savannah_chase.components import Piece, Square
from savannah_chase.state import GameState

EMPTY_TOKEN = ".."
RIFT_TOKEN = "RF"


def piece_token(piece: Piece) -> str:
    return f"{piece.owner.value[0].upper()}{piece.animal.value[0].upper()}"


def square_token(state: GameState, square: Square) -> str:
    if square.occupant is not None:
        return piece_token(state.pieces[square.occupant])
    if square.is_rift:
        return RIFT_TOKEN
    return EMPTY_TOKEN


def encode_board(state: GameState) -> str:
    """Render ``state`` as the fixed-width text grid."""
    return "\n".join(
        "".join(square_token(state, square) for square in row) for row in state.board
    )
