"""The game controller: moves objects and resolves their collisions."""

from __future__ import annotations

from typing import List, Optional, TypeVar

from .model import Collisionable, MapMovable, Movable, Rect

_T = TypeVar("_T")


def _remove_all(container: List[_T], obj: _T) -> None:
    container[:] = [item for item in container if item is not obj]


class Game:
    """Holds the objects of the current level and runs one tick at a time."""

    def __init__(self) -> None:
        self._map_movable_objs: List[MapMovable] = []
        self._static_objs: List[Rect] = []
        self._collisionable_objs: List[Collisionable] = []
        self._movable_objs: List[Movable] = []
        self.mario: Optional[Collisionable] = None
        self._is_finished = False
        self._is_level_end = False

    def add_collisionable(self, obj: Collisionable) -> None:
        self._collisionable_objs.append(obj)

    def add_map_movable(self, obj: MapMovable) -> None:
        self._map_movable_objs.append(obj)

    def add_mario(self, obj: Collisionable) -> None:
        self.mario = obj

    def add_movable(self, obj: Movable) -> None:
        self._movable_objs.append(obj)

    def add_static_obj(self, obj: Rect) -> None:
        self._static_objs.append(obj)

    def _first_static_hit(self, obj: Collisionable) -> Optional[Rect]:
        return next(
            (static for static in self._static_objs if obj.has_collision(static)),
            None,
        )

    def check_horizontally_static_collisions(self) -> None:
        for obj in self._collisionable_objs:
            obstacle = self._first_static_hit(obj)
            if obstacle is not None:
                obj.process_horizontal_static_collision(obstacle)

    def check_mario_collision(self) -> None:
        """Let every object touching the player react; drop those that die."""
        mario = self.mario
        if mario is None:
            return
        objs = self._collisionable_objs
        # Dead objects are replaced by the last one, which is then checked
        # in the same position.
        i = 0
        while i < len(objs):
            obj = objs[i]
            if obj.has_collision(mario):
                obj.process_mario_collision(mario)
                if not mario.is_active:
                    break
                if not obj.is_active:
                    objs[i] = objs[-1]
                    objs.pop()
                    continue
            i += 1

    def check_static_collisions(self, obj: Collisionable) -> bool:
        return self._first_static_hit(obj) is not None

    def check_vertically_static_collisions(self) -> None:
        """Mark the level end when the player reaches the last static object."""
        if (
            self.mario is not None
            and self._static_objs
            and self.mario.has_collision(self._static_objs[-1])
        ):
            self._is_level_end = True

        for obj in self._collisionable_objs:
            obstacle = self._first_static_hit(obj)
            if obstacle is not None:
                obj.process_vertical_static_collision(obstacle)

    def finish(self) -> None:
        self._is_finished = True

    @property
    def is_finished(self) -> bool:
        return self._is_finished

    @property
    def is_level_end(self) -> bool:
        return self._is_level_end

    def move_map_left(self) -> None:
        for obj in self._map_movable_objs:
            obj.move_map_left()

    def move_map_right(self) -> None:
        for obj in self._map_movable_objs:
            obj.move_map_right()

    def move_objs_horizontally(self) -> None:
        for obj in self._movable_objs:
            obj.move_horizontally()

    def move_objs_vertically(self) -> None:
        for obj in self._movable_objs:
            obj.move_vertically()

    def remove_collisionable(self, obj: Collisionable) -> None:
        _remove_all(self._collisionable_objs, obj)

    def remove_map_movable(self, obj: MapMovable) -> None:
        _remove_all(self._map_movable_objs, obj)

    def remove_mario(self) -> None:
        self.mario = None

    def remove_movable(self, obj: Movable) -> None:
        _remove_all(self._movable_objs, obj)

    def remove_objs(self) -> None:
        self._collisionable_objs.clear()
        self._map_movable_objs.clear()
        self._movable_objs.clear()
        self._static_objs.clear()
        self.remove_mario()

    def remove_static_obj(self, obj: Rect) -> None:
        _remove_all(self._static_objs, obj)

    def start_level(self) -> None:
        self._is_level_end = False