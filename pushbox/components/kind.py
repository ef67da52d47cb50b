from enum import StrEnum, auto


class EntityKind(StrEnum):
    """
    Kind of tile occupant. Every movement rule switches on this value.

    Enum Members:
        WALL: Immovable obstacle.
        TARGET_SPOT: Goal cell for boxes; intangible, stacks under anything.
        BOX: Pushable crate.
        PLAYER: Input-controlled pusher.
    """

    WALL = auto()
    TARGET_SPOT = auto()
    BOX = auto()
    PLAYER = auto()


MOVEABLE_KINDS = frozenset({EntityKind.BOX, EntityKind.PLAYER})
TANGIBLE_KINDS = frozenset({EntityKind.BOX, EntityKind.PLAYER, EntityKind.WALL})


def is_moveable(kind: EntityKind) -> bool:
    """Boxes and players can be relocated."""
    return kind in MOVEABLE_KINDS


def is_tangible(kind: EntityKind) -> bool:
    """Boxes, players and walls block movement; target spots do not."""
    return kind in TANGIBLE_KINDS
