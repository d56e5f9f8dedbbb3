# marioterm

A small side-scrolling platform game drawn with characters in the terminal.
Jump across ships and boxes, stomp on enemies and reach the last platform of
each level. There are three levels; reaching the end of the third one ends
the game.

## Installing

```
pip install .
```

## Playing

```
marioterm
```

The command takes no options besides `--help`. It hides the cursor, switches
the terminal out of line-buffered, echoing mode for the length of the game,
and redraws the picture about sixty times a second. The cursor and terminal
settings are put back when the game ends or is interrupted with Ctrl-C.

The map is 200 columns wide and 30 rows tall. On a smaller terminal only a
part of it is shown, centred on the player as far as the edges allow.

### Keys (POSIX terminals)

| Key                        | Action                                       |
|----------------------------|----------------------------------------------|
| `d`, right arrow           | shift the scenery two columns to the right   |
| `a`, left arrow, down arrow| shift the scenery two columns to the left    |
| `w`, space, up arrow       | jump (only when not already rising or falling) |
| `q`, Escape                | quit                                         |

The scenery only shifts when the player would not end up inside a box or
ship. On a Windows console the letter keys are the same, Escape quits, and
the left and right arrows are swapped relative to the table above.

### What you see

| Symbol | Meaning                                   |
|--------|-------------------------------------------|
| `@`    | the player                                |
| `#`    | ship (a platform)                         |
| `-`    | box, or a full box that has been emptied  |
| `?`    | full box: hit it from below to get money  |
| `$`    | money that came out of a full box         |
| `e`    | walking enemy, turns at platform edges    |
| `f`    | flying enemy, hovers back and forth       |
| `j`    | jumping enemy, jumps at regular intervals |
| `~`    | the sea                                   |

Falling onto an enemy from above defeats it (a flying enemy also bounces the
player up); touching it any other way, or falling below the map, starts the
level again. Touching the last platform of a level moves on to the next one.

## Using the pieces

The game is built from plain classes that can be driven without a terminal:

- `marioterm.game.Game` holds the objects of a level, moves them and resolves
  collisions.
- `marioterm.console_factory.ConsoleUIFactory` creates the objects for a level,
  registers them with a `Game` and with its `ConsoleGameMap`.
- `marioterm.levels.FirstLevel`, `SecondLevel` and `ThirdLevel` lay out the
  levels; `get_next()` leads from one to the next and `restart()` rebuilds one.
- `marioterm.app.GameSession.step(user_input)` advances the game by one frame
  for a `marioterm.terminal.UserInput` and returns `False` once the game is over.
- `marioterm.console_map.ConsoleGameMap.rows()` gives the drawn grid and
  `frame(term_rows, term_cols)` the text shown on a terminal of a given size.
- `marioterm.terminal.parse_key(data)` turns the bytes of a key press into a
  `UserInput`.

```python
from marioterm.app import GameSession
from marioterm.terminal import UserInput

session = GameSession()
session.step(UserInput.MARIO_JUMP)
print("\n".join(session.game_map.rows()))
```

## What it does not do

There is no graphical window, no sound, no score or coin counter, and no
saving of progress: the game always starts at the first level.

## Running the tests

```
pip install ".[test]"
pytest
```