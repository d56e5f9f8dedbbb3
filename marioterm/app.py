"""The game loop: reads input, advances the game and draws each frame."""

from __future__ import annotations

import argparse
import time
from typing import Optional

from .console_factory import ConsoleUIFactory
from .game import Game
from .levels import FirstLevel, GameLevel
from .model import GameMap
from .terminal import (
    UserInput,
    get_user_input,
    init_settings,
    set_cursor_start_position,
)
from .ui_factory import UIFactory

FRAME_DELAY = 0.016  # about 60 frames per second


class GameSession:
    """One playthrough, from the first level to the end of the last."""

    def __init__(self, ui_factory: Optional[UIFactory] = None):
        if ui_factory is None:
            ui_factory = ConsoleUIFactory(Game())
        self.ui_factory = ui_factory
        self.game: Game = ui_factory.game
        self.level: GameLevel = FirstLevel(ui_factory)

    @property
    def mario(self):
        return self.ui_factory.mario

    @property
    def game_map(self) -> GameMap:
        return self.ui_factory.game_map

    def _apply_input(self, user_input: UserInput) -> None:
        game, mario = self.game, self.mario
        if user_input is UserInput.MAP_LEFT:
            # Try the move first; scroll only when the player fits there.
            mario.move_map_right()
            if not game.check_static_collisions(mario):
                game.move_map_right()
            mario.move_map_left()
        elif user_input is UserInput.MAP_RIGHT:
            mario.move_map_left()
            if not game.check_static_collisions(mario):
                game.move_map_left()
            mario.move_map_right()
        elif user_input is UserInput.MARIO_JUMP:
            mario.jump()
        elif user_input is UserInput.EXIT:
            game.finish()

    def step(self, user_input: UserInput) -> bool:
        """Advance the game by one tick; False once the game is over."""
        game = self.game
        self._apply_input(user_input)

        game.move_objs_horizontally()
        game.check_horizontally_static_collisions()

        game.move_objs_vertically()
        game.check_mario_collision()
        game.check_vertically_static_collisions()

        mario = self.mario
        if self.game_map.is_below_map(mario.top) or not mario.is_active:
            self.level.restart()
            game.start_level()

        if game.is_level_end:
            if not self.level.is_final():
                self.level = self.level.get_next()
                game.start_level()
            else:
                game.finish()

        self.game_map.refresh()
        return not game.is_finished


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="marioterm",
        description="A side-scrolling platformer played in the terminal.",
    )
    parser.parse_args(argv)

    restore = init_settings()
    try:
        session = GameSession()
        running = True
        while running:
            running = session.step(get_user_input())
            set_cursor_start_position()
            session.game_map.show()
            time.sleep(FRAME_DELAY)
    except KeyboardInterrupt:
        pass
    finally:
        restore()
    return 0