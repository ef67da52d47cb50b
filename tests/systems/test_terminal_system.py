from dataclasses import replace

from pushbox.entity import new_player_id
from pushbox.levels.text import load_from_text
from pushbox.objectives import (
    OBJECTIVE_FN_REGISTRY,
    all_boxes_on_targets_objective_fn,
    boxes_on_targets_objective_fn,
    default_objective_fn,
)
from pushbox.state import State
from pushbox.systems.spawn import spawn_player
from pushbox.systems.terminal import win_system


def make_terminal_state(text: str) -> State:
    return spawn_player(load_from_text(text), new_player_id())


def test_win_when_every_box_on_target() -> None:
    state = make_terminal_state("XXXXX\nXP8 X\nXXXXX")
    assert boxes_on_targets_objective_fn(state)
    next_state = win_system(state)
    assert next_state.win
    assert next_state.message == "You win"


def test_no_win_with_box_off_target() -> None:
    state = make_terminal_state("XXXXXX\nXP8BOX\nXXXXXX")
    assert not boxes_on_targets_objective_fn(state)
    assert not win_system(state).win


def test_spare_target_spots_do_not_matter() -> None:
    state = make_terminal_state("XXXXXX\nXP8OOX\nXXXXXX")
    assert win_system(state).win


def test_zero_boxes_is_not_a_win_by_default() -> None:
    state = make_terminal_state("XXXXX\nXP OX\nXXXXX")
    assert not default_objective_fn(state)
    assert not win_system(state).win


def test_zero_boxes_is_a_vacuous_win() -> None:
    state = make_terminal_state("XXXXX\nXP OX\nXXXXX")
    state = replace(state, objective_fn=all_boxes_on_targets_objective_fn)
    assert win_system(state).win


def test_win_system_is_idempotent() -> None:
    state = win_system(make_terminal_state("XXXXX\nXP8 X\nXXXXX"))
    assert win_system(state) is state


def test_objective_registry() -> None:
    assert OBJECTIVE_FN_REGISTRY["default"] is default_objective_fn
    assert OBJECTIVE_FN_REGISTRY["boxes"] is boxes_on_targets_objective_fn
    assert OBJECTIVE_FN_REGISTRY["vacuous"] is all_boxes_on_targets_objective_fn
