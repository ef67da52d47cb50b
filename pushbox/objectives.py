"""
Built-in objective functions for determining the win condition of a board.

Each function adheres to the ``ObjectiveFn`` signature, accepting the
current ``State`` and returning whether the board is solved.
"""

from typing import Dict
from pushbox.components import EntityKind
from pushbox.state import State
from pushbox.types import ObjectiveFn
from pushbox.utils.ecs import positions_of_kind


def all_boxes_on_targets_objective_fn(state: State) -> bool:
    """Every box position is also a target spot position.

    A board without boxes satisfies this vacuously.
    """
    boxes = positions_of_kind(state, EntityKind.BOX)
    spots = positions_of_kind(state, EntityKind.TARGET_SPOT)
    return boxes <= spots


def boxes_on_targets_objective_fn(state: State) -> bool:
    """At least one box exists and every box sits on a target spot."""
    if not positions_of_kind(state, EntityKind.BOX):
        return False
    return all_boxes_on_targets_objective_fn(state)


default_objective_fn: ObjectiveFn = boxes_on_targets_objective_fn
"""Default objective function if none is specified at load time."""


OBJECTIVE_FN_REGISTRY: Dict[str, ObjectiveFn] = {
    "default": default_objective_fn,
    "boxes": boxes_on_targets_objective_fn,
    "vacuous": all_boxes_on_targets_objective_fn,
}
"""Registry of built-in objective functions by name."""
