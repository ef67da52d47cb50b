from enum import StrEnum, auto
from typing import Dict

from pushbox.components import DOWN, LEFT, RIGHT, UP, Direction


class Action(StrEnum):
    """String enum of player actions.

    Enum Members:
        UP: Move up.
        DOWN: Move down.
        LEFT: Move left.
        RIGHT: Move right.
        RESET: Put every entity back at its spawn.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    RESET = auto()


MOVE_ACTIONS = [Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT]

ACTION_DIRECTIONS: Dict[Action, Direction] = {
    Action.UP: UP,
    Action.DOWN: DOWN,
    Action.LEFT: LEFT,
    Action.RIGHT: RIGHT,
}
"""Unit step taken by each movement action."""
