from __future__ import annotations

from dataclasses import dataclass

from pushbox.components import EntityKind


@dataclass
class Entity:
    """
    Mutable level blueprint entity.

    Blueprints carry no position or ID: the cell a blueprint is placed in
    becomes its spawn, and the ID is derived from kind and spawn when the
    level is converted to a ``State``.
    """

    kind: EntityKind

    def __post_init__(self) -> None:
        validate_entity(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value})"


def validate_entity(obj: Entity) -> None:
    """
    Validate the blueprint's kind field.
    """
    if not isinstance(obj.kind, EntityKind):
        raise TypeError(
            f"Invalid type for 'kind': expected EntityKind, got {type(obj.kind).__name__}"
        )
