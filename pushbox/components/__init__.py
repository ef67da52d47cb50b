from .kind import EntityKind, is_moveable, is_tangible
from .position import (
    CARDINAL_DIRECTIONS,
    DOWN,
    LEFT,
    RIGHT,
    UP,
    Direction,
    Position,
)

__all__ = [
    "CARDINAL_DIRECTIONS",
    "DOWN",
    "Direction",
    "EntityKind",
    "LEFT",
    "Position",
    "RIGHT",
    "UP",
    "is_moveable",
    "is_tangible",
]
