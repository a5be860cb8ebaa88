"""savannah_chase.components
=================================

Aggregate import surface for the board value objects.

All component classes are frozen ``@dataclass`` value objects; a transition
replaces them instead of mutating them::

    from savannah_chase.components import Piece, Position, Square
"""

from .piece import Piece
from .position import Position
from .square import Square

__all__ = [
    "Piece",
    "Position",
    "Square",
]
