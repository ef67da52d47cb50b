"""Board queries.

Spatial lookup (entities at a coordinate) and type lookup (entities
grouped by kind) over a ``State``.

The position index is cached per position store; since stores are
persistent maps, a new map is built whenever anything moves and stale
entries are never served.
"""

from functools import lru_cache
from typing import Dict, FrozenSet, Iterable, List, Mapping

from pushbox.components import EntityKind, Position
from pushbox.state import State
from pushbox.types import EntityID


@lru_cache(maxsize=4096)
def _position_index(
    position_store: Mapping[EntityID, Position],
) -> Mapping[Position, FrozenSet[EntityID]]:
    """Build a reverse index from position to entity IDs.

    Args:
        position_store (Mapping[EntityID, Position]): Mapping of entity IDs to positions.
    Returns:
        Mapping[Position, FrozenSet[EntityID]]: Mapping from positions to sets of entity IDs.
    """
    index: Dict[Position, set[EntityID]] = {}
    for eid, pos in position_store.items():
        index.setdefault(pos, set()).add(eid)
    return {pos: frozenset(eids) for pos, eids in index.items()}


def entities_at(state: State, pos: Position) -> List[EntityID]:
    """Return entity IDs at the given position, sorted for determinism."""
    idx = _position_index(state.position)
    return sorted(idx.get(pos, ()))


def entities_by_kind(
    state: State, kinds: Iterable[EntityKind]
) -> Dict[EntityKind, List[EntityID]]:
    """Group entity IDs by kind, restricted to ``kinds``.

    Kinds without any entity on the board get no entry.
    """
    wanted = set(kinds)
    result: Dict[EntityKind, List[EntityID]] = {}
    for eid, kind in sorted(state.kind.items()):
        if kind in wanted:
            result.setdefault(kind, []).append(eid)
    return result


def positions_of_kind(state: State, kind: EntityKind) -> FrozenSet[Position]:
    """Return the set of coordinates occupied by entities of ``kind``."""
    return frozenset(
        state.position[eid]
        for eid in entities_by_kind(state, [kind]).get(kind, [])
        if eid in state.position
    )
