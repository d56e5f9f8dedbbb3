import pytest

from marioterm.terminal import (
    UserInput,
    init_settings,
    parse_key,
    set_cursor_start_position,
)


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"a", UserInput.MAP_RIGHT),
        (b"A", UserInput.MAP_RIGHT),
        (b"d", UserInput.MAP_LEFT),
        (b"D", UserInput.MAP_LEFT),
        (b"w", UserInput.MARIO_JUMP),
        (b"W", UserInput.MARIO_JUMP),
        (b" ", UserInput.MARIO_JUMP),
        (b"q", UserInput.EXIT),
        (b"Q", UserInput.EXIT),
        (b"x", UserInput.NO_INPUT),
    ],
)
def test_plain_keys(data, expected):
    assert parse_key(data) is expected


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\x1b[A", UserInput.MARIO_JUMP),
        (b"\x1b[B", UserInput.MAP_RIGHT),
        (b"\x1b[D", UserInput.MAP_RIGHT),
        (b"\x1b[C", UserInput.MAP_LEFT),
    ],
)
def test_arrow_sequences(data, expected):
    assert parse_key(data) is expected


def test_lone_escape_exits():
    assert parse_key(b"\x1b") is UserInput.EXIT


def test_truncated_escape_is_ignored():
    assert parse_key(b"\x1b[") is UserInput.NO_INPUT


def test_unknown_escape_sequence_is_ignored():
    assert parse_key(b"\x1bOA") is UserInput.NO_INPUT


def test_empty_input():
    assert parse_key(b"") is UserInput.NO_INPUT


def test_str_input_matches_bytes():
    assert parse_key("d") is parse_key(b"d")
    assert parse_key("\x1b[A") is UserInput.MARIO_JUMP


def test_cursor_start_position(capsys):
    set_cursor_start_position()
    assert capsys.readouterr().out == "\033[H"


def test_init_settings_hides_cursor_and_restore_shows_it(capsys):
    restore = init_settings()
    assert capsys.readouterr().out == "\033[?25l"
    restore()
    assert capsys.readouterr().out == "\033[?25h"