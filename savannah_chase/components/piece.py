"""Piece component.

A piece never changes identity, kind or owner; moving it produces a new
``Piece`` with an updated ``position``.
"""

from dataclasses import dataclass, replace

from savannah_chase.components.position import Position
from savannah_chase.types import Animal, PieceID, Player


@dataclass(frozen=True)
class Piece:
    """A single animal on the board.

    Attributes:
        id: Unique identifier (e.g. ``"h_elephant"``).
        animal: Animal kind.
        owner: Controlling side.
        position: Current square.
    """

    id: PieceID
    animal: Animal
    owner: Player
    position: Position

    def moved_to(self, position: Position) -> "Piece":
        return replace(self, position=position)
