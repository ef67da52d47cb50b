from dataclasses import replace

from pyrsistent import pvector

from pushbox.components import RIGHT, EntityKind, Position
from pushbox.entity import new_player_id
from pushbox.levels.text import load_from_text
from pushbox.state import State
from pushbox.systems.push import attempt_move
from pushbox.systems.reset import reset_entity, reset_system
from pushbox.systems.spawn import spawn_player


MAP = "XXXXXXX\nX     X\nXP B OX\nX     X\nXXXXXXX"


def make_spawned_state() -> State:
    return spawn_player(load_from_text(MAP), new_player_id())


def test_spawn_player_places_player_at_map_spawn() -> None:
    player_id = new_player_id()
    state = spawn_player(load_from_text(MAP), player_id)
    assert state.kind[player_id] == EntityKind.PLAYER
    assert state.position[player_id] == Position(1, 2)
    assert state.spawn[player_id] == Position(1, 2)


def test_spawn_player_uses_default_spawn_without_p() -> None:
    player_id = new_player_id()
    state = spawn_player(load_from_text("XXX\nX X\nXXX"), player_id)
    assert state.position[player_id] == Position(1, 1)


def test_reset_restores_spawns_after_moves() -> None:
    state = make_spawned_state()
    player_id = new_player_id()
    for _ in range(3):
        next_state = attempt_move(state, player_id, RIGHT)
        if next_state is not None:
            state = next_state
    assert state.position[player_id] != state.spawn[player_id]

    reset = reset_system(state)
    for eid in reset.kind:
        assert reset.position[eid] == reset.spawn[eid]


def test_reset_is_idempotent() -> None:
    state = make_spawned_state()
    moved = attempt_move(state, new_player_id(), RIGHT)
    assert moved is not None
    once = reset_system(moved)
    twice = reset_system(once)
    assert twice.position == once.position
    assert len(twice.moved) == len(once.moved)


def test_reset_ignores_collisions() -> None:
    state = make_spawned_state()
    player_id = new_player_id()
    box_id = "box-3_2"
    # Player and box overlapping is unreachable by play but must still reset.
    state = replace(state, position=state.position.set(player_id, Position(3, 2)))
    reset = reset_system(state)
    assert reset.position[player_id] == Position(1, 2)
    assert reset.position[box_id] == Position(3, 2)


def test_reset_clears_win() -> None:
    state = replace(make_spawned_state(), win=True, message="You win")
    reset = reset_system(state)
    assert reset.win is False
    assert reset.message is None


def test_reset_entity_records_move_only_when_displaced() -> None:
    state = make_spawned_state()
    state = replace(state, moved=pvector())
    assert len(reset_entity(state, "box-3_2").moved) == 0
