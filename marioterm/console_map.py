"""A character-grid map that renders the game to a text terminal."""

from __future__ import annotations

import os
import sys
from typing import List, Optional, Tuple

from .console_objects import ConsoleUIObject
from .model import Collisionable, GameMap

_SEA_ROWS = 3


class ConsoleGameMap(GameMap):
    """A grid of characters with a strip of sea along the bottom."""

    def __init__(self, height: int, width: int):
        super().__init__(height, width)
        self._objs: List[ConsoleUIObject] = []
        self._cells: List[List[str]] = []
        self.clear()
        self.needs_draw = True

    def add_obj(self, obj: ConsoleUIObject) -> None:
        """Add an object to be drawn; adding it twice has no effect."""
        if not any(existing is obj for existing in self._objs):
            self._objs.append(obj)

    def clear(self) -> None:
        sea_start = max(0, self.height - _SEA_ROWS)
        self._cells = [
            [("~" if row >= sea_start else " ")] * self.width
            for row in range(self.height)
        ]

    def refresh(self) -> None:
        """Redraw every object onto a freshly cleared grid."""
        self.clear()
        for obj in self._objs:
            left, top, right, bottom = obj.left, obj.top, obj.right, obj.bottom
            if left >= right or top >= bottom:
                continue
            if right <= 0 or bottom <= 0:
                continue
            if left >= self.width or top >= self.height:
                continue

            brush = obj.brush
            cols = range(max(0, left), min(self.width, right))
            for row in range(max(0, top), min(self.height, bottom)):
                line = self._cells[row]
                for col in cols:
                    line[col] = brush
        self.needs_draw = True

    def remove_obj(self, obj: ConsoleUIObject) -> None:
        self._objs = [existing for existing in self._objs if existing is not obj]

    def remove_objs(self) -> None:
        self._objs.clear()

    def rows(self) -> List[str]:
        """The current grid, one string per row."""
        return ["".join(line) for line in self._cells]

    def _mario_position(self) -> Tuple[int, int]:
        for obj in self._objs:
            if obj.brush != "@":
                continue
            if isinstance(obj, Collisionable) and not obj.is_active:
                continue
            return obj.top, obj.left
        return -1, -1

    @staticmethod
    def _window_start(focus: int, visible: int, total: int) -> int:
        if focus < 0:
            return 0
        start = max(0, focus - visible // 2)
        if start + visible > total:
            start = max(0, total - visible)
        return start

    def frame(self, term_rows: Optional[int] = None, term_cols: Optional[int] = None) -> str:
        """The text shown on a terminal of the given size, centred on the player.

        A size that is missing or not positive means the whole map fits.
        """
        rows_known = term_rows is not None and term_rows > 0
        cols_known = term_cols is not None and term_cols > 0
        rows_to_print = min(term_rows, self.height) if rows_known else self.height
        cols_to_print = min(term_cols, self.width) if cols_known else self.width

        mario_top, mario_left = self._mario_position()
        row_start = self._window_start(mario_top, rows_to_print, self.height)
        col_start = self._window_start(mario_left, cols_to_print, self.width)

        lines = [
            "".join(self._cells[row][col_start:col_start + cols_to_print])
            for row in range(row_start, row_start + rows_to_print)
        ]
        text = "\n".join(lines)
        # A full-height frame must not scroll the terminal by one line.
        if not (rows_known and rows_to_print == term_rows):
            text += "\n"
        return text

    def show(self) -> None:
        """Write the current frame to standard output."""
        if not self.needs_draw:
            return
        term_rows: Optional[int] = None
        term_cols: Optional[int] = None
        stdout = sys.stdout
        try:
            if stdout.isatty():
                size = os.get_terminal_size(stdout.fileno())
                term_rows, term_cols = size.lines, size.columns
        except (OSError, ValueError, AttributeError):
            pass
        stdout.write(self.frame(term_rows, term_cols))
        stdout.flush()