"""Game objects drawn as characters on a text terminal."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .enemies import FlyingEnemy, JumpingEnemy
from .objects import Box, Enemy, FullBox, Mario, Money, Ship


class ConsoleUIObject(ABC):
    """A rectangle that paints itself with a single character."""

    @property
    @abstractmethod
    def brush(self) -> str:
        """The character used to fill the object's rectangle."""


class ConsoleBox(Box, ConsoleUIObject):
    @property
    def brush(self) -> str:
        return "-"


class ConsoleEnemy(Enemy, ConsoleUIObject):
    @property
    def brush(self) -> str:
        return "e"


class ConsoleFlyingEnemy(FlyingEnemy, ConsoleUIObject):
    @property
    def brush(self) -> str:
        return "f"


class ConsoleFullBox(FullBox, ConsoleUIObject):
    @property
    def brush(self) -> str:
        """A question mark while it still holds a coin, a plain box after."""
        return "?" if self.is_active else "-"


class ConsoleJumpingEnemy(JumpingEnemy, ConsoleUIObject):
    @property
    def brush(self) -> str:
        return "j"


class ConsoleMario(Mario, ConsoleUIObject):
    @property
    def brush(self) -> str:
        return "@"


class ConsoleMoney(Money, ConsoleUIObject):
    @property
    def brush(self) -> str:
        return "$"


class ConsoleShip(Ship, ConsoleUIObject):
    @property
    def brush(self) -> str:
        return "#"