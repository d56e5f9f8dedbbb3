"""Factory that builds terminal-drawn objects and registers them with a game."""

from __future__ import annotations

from typing import List, Optional

from .console_map import ConsoleGameMap
from .console_objects import (
    ConsoleBox,
    ConsoleEnemy,
    ConsoleFlyingEnemy,
    ConsoleFullBox,
    ConsoleJumpingEnemy,
    ConsoleMario,
    ConsoleMoney,
    ConsoleShip,
)
from .game import Game
from .model import CoordLike
from .ui_factory import UIFactory

MAP_HEIGHT = 30
MAP_WIDTH = 200


class ConsoleUIFactory(UIFactory):
    """Creates console objects, adds them to the game and to the map."""

    def __init__(self, game: Game):
        super().__init__(game)
        self._game_map: Optional[ConsoleGameMap] = None
        self._mario: Optional[ConsoleMario] = None
        self._boxes: List[ConsoleBox] = []
        self._full_boxes: List[ConsoleFullBox] = []
        self._ships: List[ConsoleShip] = []
        self._enemies: List[ConsoleEnemy] = []
        self._moneys: List[ConsoleMoney] = []
        self._flying_enemies: List[ConsoleFlyingEnemy] = []
        self._jumping_enemies: List[ConsoleJumpingEnemy] = []
        self._create_game_map()

    def _create_game_map(self) -> None:
        self._game_map = ConsoleGameMap(MAP_HEIGHT, MAP_WIDTH)

    def _discard_mario(self) -> None:
        if self._mario is None:
            return
        self.game.remove_collisionable(self._mario)
        self.game.remove_movable(self._mario)
        self.game.remove_mario()
        if self._game_map is not None:
            self._game_map.remove_obj(self._mario)
        self._mario = None

    def _show(self, obj) -> None:
        if self._game_map is not None:
            self._game_map.add_obj(obj)

    def clear_data(self) -> None:
        self.game.remove_objs()
        if self._game_map is not None:
            self._game_map.remove_objs()
        self._discard_mario()
        for store in (
            self._boxes,
            self._full_boxes,
            self._ships,
            self._enemies,
            self._moneys,
            self._flying_enemies,
            self._jumping_enemies,
        ):
            store.clear()

    def create_box(self, top_left: CoordLike, width: int, height: int) -> None:
        box = ConsoleBox(top_left, width, height)
        self._boxes.append(box)
        self.game.add_map_movable(box)
        self.game.add_static_obj(box)
        self._show(box)

    def create_enemy(self, top_left: CoordLike, width: int, height: int) -> None:
        enemy = ConsoleEnemy(top_left, width, height)
        self._enemies.append(enemy)
        self.game.add_map_movable(enemy)
        self.game.add_movable(enemy)
        self.game.add_collisionable(enemy)
        self._show(enemy)

    def create_full_box(self, top_left: CoordLike, width: int, height: int) -> None:
        full_box = ConsoleFullBox(top_left, width, height, self)
        self._full_boxes.append(full_box)
        self.game.add_collisionable(full_box)
        self.game.add_map_movable(full_box)
        self.game.add_static_obj(full_box)
        self._show(full_box)

    def create_mario(self, top_left: CoordLike, width: int, height: int) -> None:
        self._discard_mario()
        mario = ConsoleMario(top_left, width, height)
        self._mario = mario
        self.game.add_collisionable(mario)
        self.game.add_movable(mario)
        self.game.add_mario(mario)
        self._show(mario)

    def create_money(self, top_left: CoordLike, width: int, height: int) -> None:
        money = ConsoleMoney(top_left, width, height)
        self._moneys.append(money)
        self.game.add_map_movable(money)
        self.game.add_movable(money)
        self.game.add_collisionable(money)
        self._show(money)

    def create_ship(self, top_left: CoordLike, width: int, height: int) -> None:
        ship = ConsoleShip(top_left, width, height)
        self._ships.append(ship)
        self.game.add_map_movable(ship)
        self.game.add_static_obj(ship)
        self._show(ship)

    def create_flying_enemy(self, top_left: CoordLike, width: int, height: int) -> None:
        enemy = ConsoleFlyingEnemy(top_left, width, height)
        self._flying_enemies.append(enemy)
        self.game.add_map_movable(enemy)
        self.game.add_movable(enemy)
        self.game.add_collisionable(enemy)
        self._show(enemy)

    def create_jumping_enemy(self, top_left: CoordLike, width: int, height: int) -> None:
        enemy = ConsoleJumpingEnemy(top_left, width, height)
        self._jumping_enemies.append(enemy)
        self.game.add_map_movable(enemy)
        self.game.add_movable(enemy)
        self.game.add_collisionable(enemy)
        self._show(enemy)

    @property
    def game_map(self) -> ConsoleGameMap:
        return self._game_map

    @property
    def mario(self) -> Optional[ConsoleMario]:
        return self._mario