from dataclasses import replace

from pushbox.components import EntityKind, Position
from pushbox.levels.text import load_from_text
from pushbox.utils.ecs import entities_at, entities_by_kind, positions_of_kind


MAP = "XXXXX\nX8 BX\nX O X\nXXXXX"


def test_entities_at_empty_single_and_stacked() -> None:
    state = load_from_text(MAP)
    assert entities_at(state, Position(2, 1)) == []
    assert entities_at(state, Position(0, 0)) == ["wall-0_0"]
    assert entities_at(state, Position(1, 1)) == ["box-1_1", "target_spot-1_1"]


def test_entities_at_follows_moves() -> None:
    state = load_from_text(MAP)
    moved = replace(state, position=state.position.set("box-3_1", Position(2, 1)))
    assert entities_at(moved, Position(2, 1)) == ["box-3_1"]
    assert entities_at(moved, Position(3, 1)) == []
    # The earlier state keeps answering from its own positions.
    assert entities_at(state, Position(3, 1)) == ["box-3_1"]


def test_entities_by_kind_groups_requested_kinds_only() -> None:
    state = load_from_text(MAP)
    grouped = entities_by_kind(state, [EntityKind.BOX, EntityKind.TARGET_SPOT])
    assert set(grouped) == {EntityKind.BOX, EntityKind.TARGET_SPOT}
    assert grouped[EntityKind.BOX] == ["box-1_1", "box-3_1"]
    assert grouped[EntityKind.TARGET_SPOT] == ["target_spot-1_1", "target_spot-2_2"]


def test_entities_by_kind_omits_absent_kinds() -> None:
    state = load_from_text(MAP)
    assert entities_by_kind(state, [EntityKind.PLAYER]) == {}


def test_positions_of_kind() -> None:
    state = load_from_text(MAP)
    assert positions_of_kind(state, EntityKind.BOX) == {Position(1, 1), Position(3, 1)}
