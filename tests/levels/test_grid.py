import pytest

from pushbox.components import EntityKind
from pushbox.levels.entity import Entity
from pushbox.levels.factories import create_box, create_target_spot, create_wall
from pushbox.levels.grid import Level


def test_add_and_objects_at() -> None:
    level = Level(width=3, height=2)
    wall = create_wall()
    level.add((2, 1), wall)
    assert level.objects_at((2, 1)) == [wall]
    assert level.objects_at((0, 0)) == []


def test_add_box_records_box_spawn() -> None:
    level = Level(width=3, height=1)
    level.add_many([((0, 0), create_target_spot()), ((1, 0), create_box())])
    assert level.box_spawns == [(1, 0)]


def test_add_out_of_bounds_raises() -> None:
    level = Level(width=2, height=2)
    with pytest.raises(IndexError):
        level.add((2, 0), create_wall())


def test_players_cannot_be_placed() -> None:
    level = Level(width=2, height=2)
    with pytest.raises(ValueError):
        level.add((0, 0), Entity(kind=EntityKind.PLAYER))


def test_entity_kind_is_validated() -> None:
    with pytest.raises(TypeError):
        Entity(kind="box")  # type: ignore[arg-type]


def test_remove_and_move_obj() -> None:
    level = Level(width=3, height=1)
    box = create_box()
    level.add((0, 0), box)
    assert level.move_obj((0, 0), box, (2, 0))
    assert level.objects_at((0, 0)) == []
    assert level.objects_at((2, 0)) == [box]
    assert level.box_spawns == [(2, 0)]
    assert not level.remove((0, 0), box)


def test_remove_if_and_clear_cell() -> None:
    level = Level(width=1, height=1)
    level.add_many([((0, 0), create_target_spot()), ((0, 0), create_box())])
    assert level.remove_if((0, 0), lambda obj: obj.kind == EntityKind.BOX) == 1
    assert level.box_spawns == []
    assert level.clear_cell((0, 0)) == 1
    assert level.objects_at((0, 0)) == []
