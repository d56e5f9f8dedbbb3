"""Level layouts and the chain that leads from one level to the next."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from .ui_factory import UIFactory

# (object kind, x, y, width, height); the kind names a factory create_* method.
_Layout = Tuple[Tuple[str, float, float, int, int], ...]


class GameLevel(ABC):
    """A level: a fixed set of objects built through a UI factory."""

    LAYOUT: _Layout = ()

    def __init__(self, ui_factory: UIFactory):
        self.ui_factory = ui_factory
        self._next: Optional[GameLevel] = None
        self._init_data()

    def restart(self) -> None:
        """Throw away the current objects and build the level afresh."""
        self._clear_data()
        self._init_data()

    def is_final(self) -> bool:
        return False

    @abstractmethod
    def get_next(self) -> Optional["GameLevel"]:
        """The level that follows this one, or None after the last."""

    def _clear_data(self) -> None:
        self.ui_factory.clear_data()

    def _init_data(self) -> None:
        for kind, x, y, width, height in self.LAYOUT:
            create = getattr(self.ui_factory, f"create_{kind}")
            create((x, y), width, height)


class FirstLevel(GameLevel):
    LAYOUT: _Layout = (
        ("mario", 39, 10, 3, 3),
        ("ship", 20, 25, 40, 2),
        ("full_box", 30, 15, 5, 3),
        ("full_box", 50, 15, 5, 3),
        ("ship", 60, 20, 40, 7),
        ("box", 60, 10, 10, 3),
        ("full_box", 70, 10, 5, 3),
        ("box", 75, 10, 5, 3),
        ("full_box", 80, 10, 5, 3),
        ("box", 85, 10, 10, 3),
        ("ship", 100, 25, 20, 2),
        ("ship", 120, 20, 10, 7),
        ("ship", 150, 25, 40, 2),
        ("ship", 210, 20, 15, 7),
        ("enemy", 25, 5, 3, 2),
        ("enemy", 70, 15, 3, 2),
        ("enemy", 80, 5, 3, 2),
        ("enemy", 125, 5, 3, 2),
        ("enemy", 160, 5, 3, 2),
    )

    def get_next(self) -> GameLevel:
        if self._next is None:
            self._clear_data()
            self._next = SecondLevel(self.ui_factory)
        return self._next


class SecondLevel(GameLevel):
    LAYOUT: _Layout = (
        ("mario", 39, 10, 3, 3),
        ("ship", 10, 25, 30, 2),
        ("ship", 60, 22, 50, 3),
        ("box", 30, 12, 8, 3),
        ("full_box", 70, 12, 5, 3),
        ("box", 80, 12, 6, 3),
        ("enemy", 20, 5, 3, 2),
        ("enemy", 40, 5, 3, 2),
        ("enemy", 90, 5, 3, 2),
        ("flying_enemy", 75, 6, 3, 2),
        ("ship", 120, 22, 30, 3),
        # The last platform is the goal of the level.
        ("ship", 170, 22, 20, 3),
        ("jumping_enemy", 135, 20, 3, 2),
    )

    def get_next(self) -> GameLevel:
        if self._next is None:
            self._clear_data()
            self._next = ThirdLevel(self.ui_factory)
        return self._next

    def is_final(self) -> bool:
        return False


class ThirdLevel(GameLevel):
    LAYOUT: _Layout = (
        ("mario", 20, 10, 3, 3),
        ("ship", 10, 25, 30, 2),
        ("ship", 50, 20, 20, 2),
        ("enemy", 60, 15, 3, 2),
        ("box", 80, 15, 5, 3),
        ("box", 90, 10, 5, 3),
        ("box", 100, 15, 5, 3),
        ("flying_enemy", 90, 5, 3, 2),
        ("ship", 120, 22, 40, 3),
        ("jumping_enemy", 140, 15, 3, 2),
        ("full_box", 130, 10, 5, 3),
        ("full_box", 150, 10, 5, 3),
        ("ship", 180, 25, 20, 5),
        ("enemy", 185, 20, 3, 2),
    )

    def get_next(self) -> None:
        return None

    def is_final(self) -> bool:
        return True