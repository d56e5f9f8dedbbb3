"""Enemies with their own movement patterns: hovering and jumping."""

from __future__ import annotations

import math

from .model import (
    Collisionable,
    CoordLike,
    MapMovable,
    Movable,
    Rect,
    RectMapMovableAdapter,
    Speed,
)

_OFF_MAP = -10000.0


def _is_stomp(speed: Speed) -> bool:
    return speed.v > 0 and speed.v != Movable.V_ACCELERATION


class FlyingEnemy(RectMapMovableAdapter, Movable, Collisionable):
    """An enemy hovering on a sine wave, patrolling a fixed stretch of map."""

    MAX_VERTICAL_STEP = 0.7
    MAP_WIDTH = 200
    MAP_HEIGHT = 30
    PATROL_RANGE = 40.0

    def __init__(self, top_left: CoordLike, width: int, height: int):
        super().__init__(top_left, width, height, vspeed=0.0, hspeed=0.1)
        self.base_y = self.top_left.y
        self.amplitude = 2.0
        self.freq = 0.12
        self.phase = 0.0
        self.left_bound = self.top_left.x - self.PATROL_RANGE
        self.right_bound = self.top_left.x + self.PATROL_RANGE

    @property
    def speed(self) -> Speed:
        return Speed(self.vspeed, self.hspeed)

    def move_horizontally(self) -> None:
        if not self.is_active:
            self.top_left.x = _OFF_MAP
            return

        next_x = self.top_left.x + self.hspeed
        if next_x < self.left_bound:
            self.top_left.x = self.left_bound
            self.hspeed = -self.hspeed
        elif next_x + self.width > self.right_bound:
            self.top_left.x = self.right_bound - self.width
            self.hspeed = -self.hspeed
        else:
            self.top_left.x = next_x

        if self.top_left.x < 0:
            self.top_left.x = 0.0
        if self.top_left.x + self.width > self.MAP_WIDTH:
            self.top_left.x = float(self.MAP_WIDTH - self.width)

    def move_vertically(self) -> None:
        if not self.is_active:
            self.top_left.y = _OFF_MAP
            return

        self.phase += self.freq
        desired_y = self.base_y + self.amplitude * math.sin(self.phase)
        step = self.MAX_VERTICAL_STEP
        dy = max(-step, min(step, desired_y - self.top_left.y))
        self.vspeed = dy
        self.move_vertical_offset(dy)

        if self.top_left.y < 0:
            self.top_left.y = 0.0
            self.base_y = self.top_left.y - self.amplitude * math.sin(self.phase)
        if self.top_left.y + self.height > self.MAP_HEIGHT:
            self.top_left.y = float(self.MAP_HEIGHT - self.height)

    def process_horizontal_static_collision(self, obstacle: Rect) -> None:
        self.hspeed = -self.hspeed
        self.move_horizontally()

    def process_mario_collision(self, mario: Collisionable) -> None:
        if _is_stomp(mario.speed):
            self.kill()
            if isinstance(mario, Movable):
                mario.jump()
        else:
            mario.kill()

    def process_vertical_static_collision(self, obstacle: Rect) -> None:
        self.top_left.x += self.hspeed
        if not self.has_collision(obstacle):
            self.process_horizontal_static_collision(obstacle)
        else:
            self.top_left.x -= self.hspeed

        if self.vspeed > 0:
            self.top_left.y = float(obstacle.top - self.height)
            self.vspeed = 0.0

        self.base_y = self.top_left.y

    def move_map_left(self) -> None:
        super().move_map_left()
        self.left_bound -= MapMovable.MAP_STEP
        self.right_bound -= MapMovable.MAP_STEP

    def move_map_right(self) -> None:
        super().move_map_right()
        self.left_bound += MapMovable.MAP_STEP
        self.right_bound += MapMovable.MAP_STEP


class JumpingEnemy(RectMapMovableAdapter, Movable, Collisionable):
    """An enemy that jumps at regular intervals and stays on its platform."""

    MAP_WIDTH = 200
    MAP_HEIGHT = 30
    JUMP_SPEED_ENEMY = -0.7

    def __init__(self, top_left: CoordLike, width: int, height: int):
        super().__init__(top_left, width, height, vspeed=0.0, hspeed=0.2)
        self.jump_interval = 60
        self.timer = self.jump_interval // 2
        self.on_ground = False
        self.ground_left = -1
        self.ground_right = -1

    @property
    def speed(self) -> Speed:
        return Speed(self.vspeed, self.hspeed)

    def move_horizontally(self) -> None:
        if not self.is_active:
            self.top_left.x = _OFF_MAP
            return

        next_x = self.top_left.x + self.hspeed
        if self.on_ground:
            if next_x < self.ground_left or next_x + self.width > self.ground_right:
                self.hspeed = -self.hspeed
                return
            self.top_left.x = next_x
        else:
            super().move_horizontally()

        if self.top_left.x < 0:
            self.top_left.x = 0.0
        if self.top_left.x + self.width > self.MAP_WIDTH:
            self.top_left.x = float(self.MAP_WIDTH - self.width)

    def move_vertically(self) -> None:
        if not self.is_active:
            self.top_left.y = _OFF_MAP
            return

        if self.timer <= 0:
            self.vspeed = self.JUMP_SPEED_ENEMY
            self.timer = self.jump_interval
        else:
            self.timer -= 1
        super().move_vertically()

        if self.top_left.y < 0:
            self.top_left.y = 0.0
        if self.top_left.y + self.height > self.MAP_HEIGHT:
            self.top_left.y = float(self.MAP_HEIGHT - self.height)

    def process_horizontal_static_collision(self, obstacle: Rect) -> None:
        self.hspeed = -self.hspeed
        self.move_horizontally()

    def process_mario_collision(self, mario: Collisionable) -> None:
        if _is_stomp(mario.speed):
            self.kill()
        else:
            mario.kill()

    def process_vertical_static_collision(self, obstacle: Rect) -> None:
        self.top_left.x += self.hspeed
        if not self.has_collision(obstacle):
            self.process_horizontal_static_collision(obstacle)
        else:
            self.top_left.x -= self.hspeed

        if self.vspeed > 0:
            self.top_left.y = float(obstacle.top - self.height)
            self.vspeed = 0.0

        self.ground_left = obstacle.left
        self.ground_right = obstacle.right
        self.on_ground = True