"""Terminal setup and non-blocking keyboard input."""

from __future__ import annotations

import os
import sys
from enum import Enum, auto
from typing import Callable, Union

try:
    import termios
except ImportError:  # not a POSIX system
    termios = None  # type: ignore[assignment]

try:
    import msvcrt
except ImportError:  # not Windows
    msvcrt = None  # type: ignore[assignment]


class UserInput(Enum):
    """What the player asked for during one tick."""

    EXIT = auto()
    MAP_LEFT = auto()
    MAP_RIGHT = auto()
    MARIO_JUMP = auto()
    NO_INPUT = auto()


_HIDE_CURSOR = "\033[?25l"
_SHOW_CURSOR = "\033[?25h"
_CURSOR_HOME = "\033[H"

_ESC = 0x1B

_PLAIN_KEYS = {
    ord("a"): UserInput.MAP_RIGHT,
    ord("A"): UserInput.MAP_RIGHT,
    ord("d"): UserInput.MAP_LEFT,
    ord("D"): UserInput.MAP_LEFT,
    ord("w"): UserInput.MARIO_JUMP,
    ord("W"): UserInput.MARIO_JUMP,
    ord(" "): UserInput.MARIO_JUMP,
    ord("q"): UserInput.EXIT,
    ord("Q"): UserInput.EXIT,
}

_ANSI_ARROWS = {
    ord("A"): UserInput.MARIO_JUMP,
    ord("B"): UserInput.MAP_RIGHT,
    ord("D"): UserInput.MAP_RIGHT,
    ord("C"): UserInput.MAP_LEFT,
}

_WINDOWS_ARROW_PREFIXES = (0, 224)
_WINDOWS_ARROWS = {
    75: UserInput.MAP_LEFT,
    77: UserInput.MAP_RIGHT,
    72: UserInput.MARIO_JUMP,
}
_WINDOWS_KEYS = {**_PLAIN_KEYS, _ESC: UserInput.EXIT}


def parse_key(data: Union[bytes, str]) -> UserInput:
    """Translate the bytes of one key press into a game command.

    A lone escape means exit; an escape with one byte after it is ignored.
    """
    if isinstance(data, str):
        data = data.encode()
    if not data:
        return UserInput.NO_INPUT
    first = data[0]
    if first == _ESC:
        if len(data) < 2:
            return UserInput.EXIT
        if len(data) < 3:
            return UserInput.NO_INPUT
        if data[1] == ord("[") and data[2] in _ANSI_ARROWS:
            return _ANSI_ARROWS[data[2]]
    return _PLAIN_KEYS.get(first, UserInput.NO_INPUT)


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _stdin_tty_fd():
    """The descriptor of standard input when it is a terminal, else None."""
    try:
        fd = sys.stdin.fileno()
    except (OSError, ValueError, AttributeError):
        return None
    return fd if os.isatty(fd) else None


def init_settings() -> Callable[[], None]:
    """Hide the cursor and switch off line buffering and echo.

    Returns a function that puts the terminal back as it was.
    """
    _write(_HIDE_CURSOR)
    saved = None
    fd = _stdin_tty_fd() if termios is not None else None
    if fd is not None:
        try:
            saved = termios.tcgetattr(fd)
            attrs = termios.tcgetattr(fd)
            attrs[3] &= ~(termios.ICANON | termios.ECHO)
            termios.tcsetattr(fd, termios.TCSANOW, attrs)
        except termios.error:
            saved = None

    def restore() -> None:
        if saved is not None:
            try:
                termios.tcsetattr(fd, termios.TCSANOW, saved)
            except termios.error:
                pass
        _write(_SHOW_CURSOR)

    return restore


def set_cursor_start_position() -> None:
    """Move the cursor to the top-left corner of the terminal."""
    _write(_CURSOR_HOME)


def _read_posix_key() -> UserInput:
    if termios is None:
        return UserInput.NO_INPUT
    fd = _stdin_tty_fd()
    if fd is None:
        return UserInput.NO_INPUT
    try:
        old = termios.tcgetattr(fd)
        new = termios.tcgetattr(fd)
    except termios.error:
        return UserInput.NO_INPUT
    new[3] &= ~(termios.ICANON | termios.ECHO)
    new[6][termios.VMIN] = 0
    new[6][termios.VTIME] = 0
    termios.tcsetattr(fd, termios.TCSANOW, new)
    try:
        data = os.read(fd, 1)
        if data and data[0] == _ESC:
            data += os.read(fd, 1)
            if len(data) == 2:
                data += os.read(fd, 1)
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, old)
    return parse_key(data)


def _read_windows_key() -> UserInput:
    if not msvcrt.kbhit():
        return UserInput.NO_INPUT
    code = msvcrt.getch()[0]
    if code in _WINDOWS_ARROW_PREFIXES:
        code = msvcrt.getch()[0]
        if code in _WINDOWS_ARROWS:
            return _WINDOWS_ARROWS[code]
    return _WINDOWS_KEYS.get(code, UserInput.NO_INPUT)


def get_user_input() -> UserInput:
    """Read a pending key press without waiting; NO_INPUT if there is none."""
    if msvcrt is not None:
        return _read_windows_key()
    return _read_posix_key()