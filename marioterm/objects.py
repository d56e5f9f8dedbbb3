"""Static blocks, the player, walking enemies and coins."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .model import (
    Collisionable,
    Coord,
    CoordLike,
    MapMovable,
    Movable,
    Rect,
    RectMapMovableAdapter,
    Speed,
)

if TYPE_CHECKING:
    from .ui_factory import UIFactory


def _is_stomp(speed: Speed) -> bool:
    """True when the player is falling onto something rather than standing."""
    return speed.v > 0 and speed.v != Movable.V_ACCELERATION


class Box(RectMapMovableAdapter):
    """A solid block."""


class Ship(RectMapMovableAdapter):
    """A platform to stand on."""


class Mario(Movable, Collisionable):
    """The player."""

    def __init__(self, top_left: CoordLike, width: int, height: int):
        super().__init__(top_left, width, height, vspeed=0.0, hspeed=0.0)

    @property
    def speed(self) -> Speed:
        return Speed(self.vspeed, self.hspeed)

    def move_map_left(self) -> None:
        """Counter-shift so the player keeps its place on screen."""
        self.move_horizontal_offset(MapMovable.MAP_STEP)

    def move_map_right(self) -> None:
        self.move_horizontal_offset(-MapMovable.MAP_STEP)

    def process_horizontal_static_collision(self, obstacle: Rect) -> None:
        self.hspeed = -self.hspeed
        self.move_horizontally()

    def process_mario_collision(self, mario: Collisionable) -> None:
        pass

    def process_vertical_static_collision(self, obstacle: Rect) -> None:
        # Landing on a platform or bumping the head: undo the last step.
        if self.vspeed != 0:
            self.top_left.y -= self.vspeed
        self.vspeed = 0.0


class Enemy(RectMapMovableAdapter, Movable, Collisionable):
    """An enemy that walks along a platform and turns at its edges."""

    def __init__(self, top_left: CoordLike, width: int, height: int):
        super().__init__(top_left, width, height, vspeed=0.0, hspeed=0.2)

    @property
    def speed(self) -> Speed:
        return Speed(self.vspeed, self.hspeed)

    def process_horizontal_static_collision(self, obstacle: Rect) -> None:
        self.hspeed = -self.hspeed
        self.move_horizontally()

    def process_mario_collision(self, mario: Collisionable) -> None:
        if _is_stomp(mario.speed):
            self.kill()
        else:
            mario.kill()

    def process_vertical_static_collision(self, obstacle: Rect) -> None:
        # Turn around instead of walking off the edge.
        self.top_left.x += self.hspeed
        if not self.has_collision(obstacle):
            self.process_horizontal_static_collision(obstacle)
        else:
            self.top_left.x -= self.hspeed

        if self.vspeed > 0:
            self.top_left.y -= self.vspeed
            self.vspeed = 0.0


class Money(RectMapMovableAdapter, Movable, Collisionable):
    """A coin that slides along and may fall off a platform."""

    def __init__(self, top_left: CoordLike, width: int, height: int):
        super().__init__(top_left, width, height, vspeed=0.0, hspeed=0.2)

    @property
    def speed(self) -> Speed:
        return Speed(self.vspeed, self.hspeed)

    def process_horizontal_static_collision(self, obstacle: Rect) -> None:
        self.hspeed = -self.hspeed
        self.move_horizontally()

    def process_mario_collision(self, mario: Collisionable) -> None:
        self.kill()

    def process_vertical_static_collision(self, obstacle: Rect) -> None:
        if self.vspeed > 0:
            self.top_left.y -= self.vspeed
            self.vspeed = 0.0


class FullBox(Box, Collisionable):
    """A box that releases a coin when the player hits it from below."""

    def __init__(
        self, top_left: CoordLike, width: int, height: int, ui_factory: "UIFactory"
    ):
        super().__init__(top_left, width, height)
        self.ui_factory = ui_factory

    @property
    def speed(self) -> Speed:
        return Speed(0.0, 0.0)

    def process_horizontal_static_collision(self, obstacle: Rect) -> None:
        pass

    def process_mario_collision(self, mario: Collisionable) -> None:
        if mario.speed.v < 0:
            self.kill()
            self.ui_factory.create_money(
                Coord(self.top_left.x, self.top_left.y - 3), 3, 2
            )

    def process_vertical_static_collision(self, obstacle: Rect) -> None:
        pass