"""Abstract factory that builds level objects and registers them with a game."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from .game import Game
from .model import CoordLike, GameMap

if TYPE_CHECKING:
    from .objects import Mario


class UIFactory(ABC):
    """Creates game objects for one front end and wires them into a game."""

    def __init__(self, game: Game):
        self.game = game

    @abstractmethod
    def clear_data(self) -> None:
        """Forget every object created for the current level."""

    @abstractmethod
    def create_box(self, top_left: CoordLike, width: int, height: int) -> None:
        """Create a plain box."""

    @abstractmethod
    def create_enemy(self, top_left: CoordLike, width: int, height: int) -> None:
        """Create a walking enemy."""

    @abstractmethod
    def create_full_box(self, top_left: CoordLike, width: int, height: int) -> None:
        """Create a box that releases money when hit from below."""

    @abstractmethod
    def create_mario(self, top_left: CoordLike, width: int, height: int) -> None:
        """Create the player, replacing any previous one."""

    @abstractmethod
    def create_money(self, top_left: CoordLike, width: int, height: int) -> None:
        """Create a coin."""

    @abstractmethod
    def create_ship(self, top_left: CoordLike, width: int, height: int) -> None:
        """Create a platform."""

    @abstractmethod
    def create_flying_enemy(self, top_left: CoordLike, width: int, height: int) -> None:
        """Create an enemy that hovers back and forth."""

    @abstractmethod
    def create_jumping_enemy(self, top_left: CoordLike, width: int, height: int) -> None:
        """Create an enemy that jumps periodically."""

    @property
    @abstractmethod
    def game_map(self) -> GameMap:
        """The map the objects are drawn on."""

    @property
    @abstractmethod
    def mario(self) -> Optional["Mario"]:
        """The current player object, if any."""