"""Position component.

Immutable integer board coordinates. Row 0 is the top edge (the AI side's
home row), column 0 the left edge.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Board coordinate.

    Attributes:
        row: Row index (0 at top).
        col: Column index (0 at left).
    """

    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> "Position":
        return Position(self.row + d_row, self.col + d_col)
