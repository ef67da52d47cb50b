import pytest

from pushbox.actions import ACTION_DIRECTIONS, Action, MOVE_ACTIONS
from pushbox.components import LEFT, Position
from pushbox.entity import new_player_id
from pushbox.levels.text import load_from_text
from pushbox.state import State
from pushbox.step import move_player, step
from pushbox.systems.spawn import spawn_player

MAP = "XXXXXXX\nX     X\nXP B OX\nX     X\nXXXXXXX"
PLAYER = new_player_id()


def make_state(text: str = MAP) -> State:
    return spawn_player(load_from_text(text), PLAYER)


def test_every_move_action_has_a_direction() -> None:
    assert set(ACTION_DIRECTIONS) == set(MOVE_ACTIONS)


def test_move_advances_turn_and_records_moved() -> None:
    state = step(make_state(), Action.RIGHT)
    assert state.position[PLAYER] == Position(2, 2)
    assert state.turn == 1
    assert list(state.moved) == [PLAYER]


def test_moved_only_covers_latest_action() -> None:
    state = step(make_state(), Action.RIGHT)
    state = step(state, Action.RIGHT)
    assert list(state.moved) == ["box-3_2", PLAYER]


def test_blocked_move_consumes_turn_without_moving() -> None:
    state = step(make_state(), Action.LEFT)
    assert state.position[PLAYER] == Position(1, 2)
    assert state.turn == 1
    assert len(state.moved) == 0


def test_pushing_box_onto_target_wins() -> None:
    state = make_state()
    for _ in range(3):
        state = step(state, Action.RIGHT)
    assert state.position["box-3_2"] == Position(5, 2)
    assert state.win
    assert state.turn == 3


def test_turns_stop_counting_after_win() -> None:
    state = make_state()
    for _ in range(3):
        state = step(state, Action.RIGHT)
    state = step(state, Action.DOWN)
    assert state.win
    assert state.turn == 3


def test_reset_action_restores_spawns() -> None:
    state = make_state()
    for _ in range(3):
        state = step(state, Action.RIGHT)
    state = step(state, Action.RESET)
    assert not state.win
    assert state.position == state.spawn


def test_step_finds_player_when_not_given() -> None:
    state = step(make_state(), Action.DOWN, player_id=None)
    assert state.position[PLAYER] == Position(1, 3)


def test_step_without_player_raises() -> None:
    with pytest.raises(ValueError):
        step(load_from_text(MAP), Action.UP)


def test_unknown_action_raises() -> None:
    with pytest.raises(ValueError):
        step(make_state(), "jump")  # type: ignore[arg-type]


def test_move_player_reports_refusal_and_counts_turn() -> None:
    state, moved = move_player(make_state(), PLAYER, LEFT)
    assert not moved
    assert state.turn == 1
    assert state.position[PLAYER] == Position(1, 2)
