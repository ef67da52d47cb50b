"""Render bridge protocol.

The session never draws anything itself. It reports what changed to a
bridge: single entity moves, full redraws on map switches and the one
victory announcement per win.
"""

from typing import List, Protocol, Sequence, Tuple

from pushbox.components import EntityKind, Position
from pushbox.state import State
from pushbox.types import EntityID

EntityView = Tuple[EntityID, EntityKind, Position]
"""What a bridge needs to draw one entity."""


def state_entities(state: State) -> List[EntityView]:
    """List ``(id, kind, position)`` for every positioned entity, sorted by ID."""
    return [
        (eid, state.kind[eid], state.position[eid])
        for eid in sorted(state.position.keys())
    ]


class RenderBridge(Protocol):
    """Presentation layer fed by `pushbox.session.Session`."""

    def position_entity(self, eid: EntityID, x: int, y: int) -> None:
        """Place ``eid`` at ``(x, y)`` after a move or reset."""
        ...

    def request_full_redraw(
        self, width: int, height: int, entities: Sequence[EntityView]
    ) -> None:
        """Rebuild the whole view for a new board."""
        ...

    def announce_victory(self) -> None:
        """Show the victory message."""
        ...

    def clear_victory(self) -> None:
        """Remove a victory message shown earlier, if any."""
        ...


class NullBridge:
    """Bridge that ignores every notification (headless play)."""

    def position_entity(self, eid: EntityID, x: int, y: int) -> None:
        pass

    def request_full_redraw(
        self, width: int, height: int, entities: Sequence[EntityView]
    ) -> None:
        pass

    def announce_victory(self) -> None:
        pass

    def clear_victory(self) -> None:
        pass
