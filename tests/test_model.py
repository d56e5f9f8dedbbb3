import pytest

from marioterm.model import (
    Collisionable,
    Coord,
    GameMap,
    MapMovable,
    Movable,
    Rect,
    RectMapMovableAdapter,
    Speed,
)


class Body(RectMapMovableAdapter, Movable, Collisionable):
    @property
    def speed(self):
        return Speed(self.vspeed, self.hspeed)

    def process_horizontal_static_collision(self, obstacle):
        pass

    def process_mario_collision(self, mario):
        pass

    def process_vertical_static_collision(self, obstacle):
        pass


class Field(GameMap):
    def clear(self):
        pass

    def refresh(self):
        pass

    def remove_objs(self):
        pass

    def show(self):
        pass


def test_rect_accepts_pair_as_corner():
    rect = Rect((3, 4), 5, 6)
    assert (rect.x, rect.y) == (3, 4)
    assert (rect.width, rect.height) == (5, 6)


def test_rect_copies_corner():
    corner = Coord(1, 2)
    rect = Rect(corner, 2, 2)
    corner.x = 10
    assert rect.x == 1


def test_rect_edges_span_size():
    rect = Rect(Coord(10, 20), 5, 3)
    assert rect.left == 10
    assert rect.top == 20
    assert rect.right - rect.left == rect.width
    assert rect.bottom - rect.top == rect.height


def test_rect_rounds_half_away_from_zero():
    rect = Rect(Coord(2.5, -2.5), 1, 1)
    assert rect.left == 3
    assert rect.top == -3


def test_map_scroll_moves_two_cells():
    box = RectMapMovableAdapter(Coord(10, 0), 4, 1)
    box.move_map_left()
    assert box.x == 8
    box.move_map_right()
    box.move_map_right()
    assert box.x == 12


def test_adapter_scrolls_by_map_step():
    box = RectMapMovableAdapter(Coord(10, 0), 4, 1)
    box.move_map_left()
    assert box.x == 10 - MapMovable.MAP_STEP
    box.move_map_right()
    assert box.x == 10


def test_jump_only_from_rest():
    body = Body(Coord(0, 0), 2, 2)
    body.jump()
    assert body.vspeed == Movable.JUMP_SPEED
    body.move_vertically()
    changed = body.vspeed
    body.jump()
    assert body.vspeed == changed


def test_move_vertically_applies_gravity():
    body = Body(Coord(0, 5), 2, 2)
    body.move_vertically()
    assert body.vspeed == Movable.V_ACCELERATION
    assert body.y == pytest.approx(5 + Movable.V_ACCELERATION)


def test_vertical_speed_is_capped():
    body = Body(Coord(0, 0), 2, 2)
    for _ in range(100):
        body.move_vertically()
    assert body.vspeed >= Movable.MAX_V_SPEED
    assert body.vspeed < Movable.MAX_V_SPEED + Movable.V_ACCELERATION


def test_move_horizontally_uses_hspeed():
    body = Movable(Coord(1, 1), 2, 2, vspeed=0.0, hspeed=0.5)
    body.move_horizontally()
    assert body.x == pytest.approx(1.5)


def test_offsets_move_corner():
    body = Body(Coord(1, 1), 2, 2)
    body.move_horizontal_offset(2.0)
    body.move_vertical_offset(-1.0)
    assert (body.x, body.y) == (3.0, 0.0)


def test_touching_edges_do_not_collide():
    body = Body(Coord(0, 0), 2, 2)
    assert not body.has_collision(Rect(Coord(2, 0), 2, 2))
    assert not body.has_collision(Rect(Coord(0, 2), 2, 2))


def test_overlap_collides():
    body = Body(Coord(0, 0), 2, 2)
    assert body.has_collision(Rect(Coord(1, 1), 2, 2))


def test_kill_deactivates():
    body = Body(Coord(0, 0), 2, 2)
    assert body.is_active
    body.kill()
    assert not body.is_active


def test_speed_reports_current_speeds():
    body = Body(Coord(0, 0), 2, 2)
    body.jump()
    assert body.speed == Speed(Movable.JUMP_SPEED, 0.0)


def test_game_map_bounds():
    field = Field(30, 200)
    assert not GameMap.is_below_map(field, 30)
    assert GameMap.is_below_map(field, 31)
    assert GameMap.is_on_map(field, 0, 0)
    assert GameMap.is_on_map(field, 199, 29)
    assert not GameMap.is_on_map(field, 200, 0)
    assert not GameMap.is_on_map(field, 0, 30)
    assert not GameMap.is_on_map(field, -1, 0)


def test_abstract_classes_cannot_be_built():
    with pytest.raises(TypeError):
        GameMap(30, 200)

    class Partial(Movable, Collisionable):
        pass

    with pytest.raises(TypeError):
        Partial(Coord(0, 0), 1, 1)