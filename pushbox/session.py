"""Interactive play session.

A ``Session`` owns the active board and the long-lived player. Input
handlers run synchronously: each one resolves completely, notifies the
render bridge and only then returns, so one input never observes another
half-applied. Hosts with several threads must funnel input through one
queue into a single session.
"""

import logging
from dataclasses import replace
from typing import List, Optional

from pyrsistent import pvector

from pushbox.components import Direction, EntityKind, Position
from pushbox.entity import new_player_id
from pushbox.levels.loader import MapSource
from pushbox.levels.text import load_from_text
from pushbox.objectives import default_objective_fn
from pushbox.renderer.bridge import NullBridge, RenderBridge, state_entities
from pushbox.state import State
from pushbox.step import move_player
from pushbox.systems.reset import reset_system
from pushbox.systems.spawn import spawn_player
from pushbox.systems.terminal import win_system
from pushbox.types import EntityID, ObjectiveFn

logger = logging.getLogger(__name__)


class Session:
    """Current board, persistent player and win state.

    Attributes:
        state (State | None): Active board; ``None`` until a map is switched in.
        player_id (EntityID): ID of the player, shared by every board.
        won (bool): True once the active board has been solved.
        bridge (RenderBridge): Presentation layer receiving notifications.
    """

    def __init__(self, bridge: Optional[RenderBridge] = None):
        self.bridge: RenderBridge = bridge if bridge is not None else NullBridge()
        self.player_id: EntityID = new_player_id()
        self.state: Optional[State] = None
        self.won = False

    # -------- Map handling --------

    def switch_map(self, state: State) -> None:
        """Make ``state`` the active board and spawn the player into it."""
        self.state = replace(
            reset_system(spawn_player(state, self.player_id)), moved=pvector()
        )
        self.won = False
        self.bridge.clear_victory()
        logger.info(
            "Switched to %dx%d map with %d entities",
            self.state.width,
            self.state.height,
            len(self.state.kind),
        )
        self.bridge.request_full_redraw(
            self.state.width, self.state.height, state_entities(self.state)
        )

    def load_map(
        self,
        name: str,
        source: MapSource,
        objective_fn: ObjectiveFn = default_objective_fn,
    ) -> None:
        """Resolve ``name`` through ``source`` and switch to the parsed board.

        Raises:
            OSError: If the source cannot provide the map text.
        """
        text = source.load(name)
        self.switch_map(load_from_text(text, objective_fn=objective_fn))

    # -------- Input handlers --------

    def reset(self) -> None:
        """Clear the win state and put every entity back at its spawn."""
        state = self._require_state()
        self.bridge.clear_victory()
        self.won = False
        self.state = reset_system(replace(state, moved=pvector()))
        self._notify_moved()

    def handle_directional_input(self, direction: Direction) -> bool:
        """Move the player towards ``direction``.

        Returns:
            bool: True if the player moved.

        Raises:
            ValueError: If ``direction`` is not a cardinal unit step.
        """
        state = replace(self._require_state(), moved=pvector())
        self.state, moved = move_player(state, self.player_id, direction)
        self._notify_moved()
        if not self.won:
            self.check_win()
        return moved

    def handle_reset_input(self) -> None:
        self.reset()

    # -------- Win state --------

    def check_win(self) -> bool:
        """Evaluate the objective; announce victory on the first win only."""
        state = self._require_state()
        if self.won:
            return True
        self.state = win_system(state)
        if self.state.win:
            self.won = True
            self.bridge.announce_victory()
        return self.won

    # -------- Queries --------

    @property
    def player_position(self) -> Position:
        return self._require_state().position[self.player_id]

    def positions_of(self, kind: EntityKind) -> List[Position]:
        """Current positions of every entity of ``kind``, sorted by entity ID."""
        state = self._require_state()
        return [
            state.position[eid]
            for eid in sorted(state.kind.keys())
            if state.kind[eid] == kind
        ]

    # -------- Internal helpers --------

    def _require_state(self) -> State:
        if self.state is None:
            raise RuntimeError("No map loaded; call switch_map first")
        return self.state

    def _notify_moved(self) -> None:
        state = self._require_state()
        for eid in state.moved:
            pos = state.position[eid]
            self.bridge.position_entity(eid, pos.x, pos.y)
