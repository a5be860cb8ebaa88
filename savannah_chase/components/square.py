"""Square component.

Squares are derived board cells. ``occupant`` is a weak reference to a piece
id held in ``GameState.pieces``; ``is_rift`` is fixed for the whole game.
"""

from dataclasses import dataclass
from typing import Optional

from savannah_chase.types import PieceID


@dataclass(frozen=True)
class Square:
    row: int
    col: int
    is_rift: bool = False
    occupant: Optional[PieceID] = None

    @property
    def is_empty(self) -> bool:
        return self.occupant is None
