"""Immutable game ``GameState`` dataclass.

This module defines the frozen :class:`GameState` that represents the whole
game at a single decision point. Every transition (a human move, a heuristic
move, a forfeited turn) is a pure function taking the previous ``GameState``
and returning a *new* one; nothing is mutated in place. The Streamlit session
holds the only reference and swaps it wholesale after each transition.

Design notes:

* ``board`` is a persistent vector of rows (``PVector[PVector[Square]]``) and
    ``pieces`` a persistent map keyed by piece id. Both are kept in sync by
    :func:`savannah_chase.systems.movement.apply_move`: every piece appears on
    exactly one square and no square holds two pieces.
* ``goal_rows`` records which edge each side has to reach. The heuristic mover
    and the win check read it instead of hard-coding a direction.
* ``selected_piece_id`` and ``valid_moves`` are UI selection state only.
* ``analysis`` and ``suggestion`` are advisory output of the remote assist
    calls and never influence a transition.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from pyrsistent import PMap, PSet, PVector, pmap, pset

from savannah_chase.components import Piece, Position, Square
from savannah_chase.types import PieceID, Player, TurnPhase

if TYPE_CHECKING:
    from savannah_chase.assist.schemas import AnalyzeGameStateOutput


@dataclass(frozen=True)
class GameState:
    """Immutable game snapshot.

    Attributes:
        board_size (int): Width and height of the square board.
        rift (Position): The single rift square, fixed for the game.
        board (PVector[PVector[Square]]): Board rows, ``board[row][col]``.
        pieces (PMap[PieceID, Piece]): All pieces keyed by id.
        goal_rows (PMap[Player, int]): Row each side must reach to win.
        player_names (PMap[Player, str]): Display names per side.
        current_player (Player): Side to move.
        phase (TurnPhase): Turn controller state.
        selected_piece_id (PieceID | None): Piece selected in the UI.
        valid_moves (PSet[Position]): Cached legal destinations of the selection.
        winner (Player | None): Winning side once the game is over.
        turn (int): Number of applied moves and forfeits (0-based).
        message (str): Status line shown to the player.
        analysis (AnalyzeGameStateOutput | None): Last board analysis.
        suggestion (str | None): Last suggested move text.
    """

    board_size: int
    rift: Position
    board: PVector[PVector[Square]]
    pieces: PMap[PieceID, Piece]
    goal_rows: PMap[Player, int]
    player_names: PMap[Player, str] = pmap()

    current_player: Player = Player.HUMAN
    phase: TurnPhase = TurnPhase.HUMAN_TURN
    selected_piece_id: Optional[PieceID] = None
    valid_moves: PSet[Position] = pset()
    winner: Optional[Player] = None
    turn: int = 0
    message: str = ""

    analysis: Optional["AnalyzeGameStateOutput"] = None
    suggestion: Optional[str] = None

    @property
    def is_game_over(self) -> bool:
        return self.winner is not None

    def square_at(self, pos: Position) -> Square:
        return self.board[pos.row][pos.col]

    def name_of(self, player: Player) -> str:
        """Display name of ``player``, falling back to the enum value."""
        return self.player_names.get(player, player.value)

    def pieces_of(self, player: Player) -> list[Piece]:
        """Pieces owned by ``player`` in ascending id order."""
        return sorted(
            (piece for piece in self.pieces.values() if piece.owner == player),
            key=lambda piece: piece.id,
        )

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of populated fields for the debug view.

        The board itself is summarised by the piece map and the rift, so it
        is left out.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            if field == "board":
                continue
            value = getattr(self, field)
            if value is None or (isinstance(value, (PMap, PSet)) and len(value) == 0):
                continue
            description = description.set(field, value)
        return description
