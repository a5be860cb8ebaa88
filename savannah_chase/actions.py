"""Action enumeration.

``Action`` values are the only inputs accepted by
:func:`savannah_chase.step.step`. ``CLICK`` carries a board position; the AI
actions carry nothing.
"""

from enum import StrEnum, auto


class Action(StrEnum):
    """String enum of game inputs.

    Members:
        CLICK: Human clicked a board square (select, deselect or move).
        BEGIN_AI_TURN: Claim a pending AI turn.
        AI_MOVE: Apply the heuristic move for the AI side.
    """

    CLICK = auto()
    BEGIN_AI_TURN = auto()
    AI_MOVE = auto()
