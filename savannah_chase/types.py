"""Common type aliases and enumerations.

``Player`` and ``Animal`` values double as the lower-case names shown to the
remote assist prompts, so they are string enums. ``TurnPhase`` is the explicit
turn state machine driven by :mod:`savannah_chase.systems.turn`.
"""

from enum import StrEnum, auto

PieceID = str

BOARD_SIZE = 5


class Player(StrEnum):
    """The two sides. ``HUMAN`` plays from the bottom edge, ``AI`` from the top."""

    HUMAN = auto()
    AI = auto()


class Animal(StrEnum):
    """Piece kinds. All animals share the same single-step movement rule."""

    ELEPHANT = auto()
    LION = auto()
    ZEBRA = auto()
    CHEETAH = auto()


class TurnPhase(StrEnum):
    """Turn controller states.

    ``AI_TURN_IN_PROGRESS`` marks a heuristic move that has been started but
    not yet applied; new AI turns are refused while it is set.
    """

    HUMAN_TURN = auto()
    AI_TURN = auto()
    AI_TURN_IN_PROGRESS = auto()
    GAME_OVER = auto()


def opponent(player: Player) -> Player:
    """Return the other side."""
    return Player.AI if player == Player.HUMAN else Player.HUMAN
