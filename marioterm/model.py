"""Geometry and physics primitives shared by every game object."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple, Union


@dataclass
class Coord:
    """A point on the map; ``y`` grows downwards."""

    x: float
    y: float


@dataclass(frozen=True)
class Speed:
    """Vertical and horizontal speed of an object."""

    v: float
    h: float


CoordLike = Union[Coord, Tuple[float, float]]


def _round(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _to_coord(point: CoordLike) -> Coord:
    if isinstance(point, Coord):
        return Coord(float(point.x), float(point.y))
    x, y = point
    return Coord(float(x), float(y))


class Rect:
    """An axis-aligned rectangle anchored at its top-left corner."""

    def __init__(self, top_left: CoordLike, width: int, height: int, **kwargs):
        super().__init__(**kwargs)
        self.top_left = _to_coord(top_left)
        self.width = int(width)
        self.height = int(height)

    @property
    def x(self) -> float:
        return self.top_left.x

    @property
    def y(self) -> float:
        return self.top_left.y

    @property
    def left(self) -> int:
        return _round(self.top_left.x)

    @property
    def right(self) -> int:
        return _round(self.top_left.x + self.width)

    @property
    def top(self) -> int:
        return _round(self.top_left.y)

    @property
    def bottom(self) -> int:
        return _round(self.top_left.y + self.height)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(x={self.top_left.x!r}, y={self.top_left.y!r}, "
            f"width={self.width}, height={self.height})"
        )


class MapMovable(ABC):
    """Something that shifts when the visible map scrolls."""

    MAP_STEP = 2

    @abstractmethod
    def move_map_left(self) -> None:
        """Shift one step as the map scrolls left."""

    @abstractmethod
    def move_map_right(self) -> None:
        """Shift one step as the map scrolls right."""


class RectMapMovableAdapter(Rect, MapMovable):
    """A rectangle that follows map scrolling."""

    def move_map_left(self) -> None:
        self.top_left.x -= MapMovable.MAP_STEP

    def move_map_right(self) -> None:
        self.top_left.x += MapMovable.MAP_STEP


class Movable(Rect):
    """A rectangle with its own speed and gravity."""

    JUMP_SPEED = -1.5
    MAX_V_SPEED = 0.98
    V_ACCELERATION = 0.05

    def __init__(
        self,
        top_left: CoordLike,
        width: int,
        height: int,
        vspeed: float = 0.0,
        hspeed: float = 0.0,
        **kwargs,
    ):
        super().__init__(top_left, width, height, **kwargs)
        self.vspeed = float(vspeed)
        self.hspeed = float(hspeed)

    def jump(self) -> None:
        """Start a jump, but only when not already moving vertically."""
        if self.vspeed == 0:
            self.vspeed = self.JUMP_SPEED

    def move_horizontal_offset(self, offset: float) -> None:
        self.top_left.x += offset

    def move_vertical_offset(self, offset: float) -> None:
        self.top_left.y += offset

    def move_horizontally(self) -> None:
        self.top_left.x += self.hspeed

    def move_vertically(self) -> None:
        if self.vspeed < self.MAX_V_SPEED:
            self.vspeed += self.V_ACCELERATION
        self.top_left.y += self.vspeed


class Collisionable(ABC):
    """A rectangle that reacts to collisions; mixed into Rect subclasses."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._active = True

    def has_collision(self, other: Rect) -> bool:
        """True when this object's rectangle overlaps ``other``."""
        return (
            self.right > other.left
            and self.left < other.right
            and self.bottom > other.top
            and self.top < other.bottom
        )

    @property
    def is_active(self) -> bool:
        return self._active

    def kill(self) -> None:
        self._active = False

    @property
    @abstractmethod
    def speed(self) -> Speed:
        """Current speed of the object."""

    @abstractmethod
    def process_horizontal_static_collision(self, obstacle: Rect) -> None:
        """React to running into a static obstacle sideways."""

    @abstractmethod
    def process_mario_collision(self, mario: "Collisionable") -> None:
        """React to touching the player."""

    @abstractmethod
    def process_vertical_static_collision(self, obstacle: Rect) -> None:
        """React to landing on or hitting a static obstacle vertically."""


class GameMap(ABC):
    """The playing field of a fixed size."""

    def __init__(self, height: int, width: int):
        self.height = int(height)
        self.width = int(width)

    def is_below_map(self, y: int) -> bool:
        return y > self.height

    def is_on_map(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    @abstractmethod
    def clear(self) -> None:
        """Reset the drawing surface."""

    @abstractmethod
    def refresh(self) -> None:
        """Redraw every object onto the surface."""

    @abstractmethod
    def remove_objs(self) -> None:
        """Forget every object on the map."""

    @abstractmethod
    def show(self) -> None:
        """Present the surface to the player."""