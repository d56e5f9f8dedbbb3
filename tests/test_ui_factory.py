import pytest

from marioterm.enemies import FlyingEnemy, JumpingEnemy
from marioterm.game import Game
from marioterm.model import GameMap
from marioterm.objects import Box, Enemy, FullBox, Mario, Money, Ship
from marioterm.ui_factory import UIFactory


class _NullMap(GameMap):
    def clear(self):
        pass

    def refresh(self):
        pass

    def remove_objs(self):
        pass

    def show(self):
        pass


class _ListFactory(UIFactory):
    def __init__(self, game):
        super().__init__(game)
        self._map = _NullMap(30, 200)
        self._mario = None
        self.objects = []

    def clear_data(self):
        self.game.remove_objs()
        self.objects.clear()
        self._mario = None

    def _add_static(self, obj):
        self.objects.append(obj)
        self.game.add_map_movable(obj)
        self.game.add_static_obj(obj)
        return obj

    def _add_moving(self, obj):
        self.objects.append(obj)
        self.game.add_map_movable(obj)
        self.game.add_movable(obj)
        self.game.add_collisionable(obj)
        return obj

    def create_box(self, top_left, width, height):
        self._add_static(Box(top_left, width, height))

    def create_ship(self, top_left, width, height):
        self._add_static(Ship(top_left, width, height))

    def create_full_box(self, top_left, width, height):
        box = self._add_static(FullBox(top_left, width, height, self))
        self.game.add_collisionable(box)

    def create_enemy(self, top_left, width, height):
        self._add_moving(Enemy(top_left, width, height))

    def create_money(self, top_left, width, height):
        self._add_moving(Money(top_left, width, height))

    def create_flying_enemy(self, top_left, width, height):
        self._add_moving(FlyingEnemy(top_left, width, height))

    def create_jumping_enemy(self, top_left, width, height):
        self._add_moving(JumpingEnemy(top_left, width, height))

    def create_mario(self, top_left, width, height):
        if self._mario is not None:
            self.game.remove_collisionable(self._mario)
            self.game.remove_movable(self._mario)
        self._mario = Mario(top_left, width, height)
        self.game.add_collisionable(self._mario)
        self.game.add_movable(self._mario)
        self.game.add_mario(self._mario)

    @property
    def game_map(self):
        return self._map

    @property
    def mario(self):
        return self._mario


def test_abstract_factory_cannot_be_instantiated():
    with pytest.raises(TypeError):
        UIFactory(Game())


def test_incomplete_factory_cannot_be_instantiated():
    class Partial(UIFactory):
        def clear_data(self):
            pass

    with pytest.raises(TypeError):
        Partial(Game())


def test_factory_keeps_its_game():
    game = Game()
    factory = _ListFactory(game)
    assert factory.game is game
    assert factory.game_map.is_on_map(0, 0)


def test_create_mario_registers_player():
    game = Game()
    factory = _ListFactory(game)
    factory.create_mario((39, 10), 3, 3)
    first = factory.mario
    assert game.mario is first
    factory.create_mario((20, 10), 3, 3)
    assert factory.mario is not first
    assert game.mario is factory.mario
    assert factory.mario.x == 20


def test_full_box_hit_from_below_spawns_money_through_factory():
    game = Game()
    factory = _ListFactory(game)
    factory.create_full_box((30, 15), 5, 3)
    box = factory.objects[0]
    factory.create_mario((31, 17), 3, 3)
    factory.mario.jump()
    game.check_mario_collision()
    assert not box.is_active
    coins = [obj for obj in factory.objects if isinstance(obj, Money)]
    assert len(coins) == 1
    assert coins[0].left == box.left
    assert coins[0].bottom < box.top


def test_clear_data_empties_the_game():
    game = Game()
    factory = _ListFactory(game)
    factory.create_ship((20, 25), 40, 2)
    factory.create_mario((25, 24), 3, 3)
    assert game.check_static_collisions(factory.mario)
    mario = factory.mario
    factory.clear_data()
    assert factory.mario is None
    assert game.mario is None
    assert not game.check_static_collisions(mario)