# betweentrees

A small visual-novel engine built on pygame. It draws a fixed 480×360
canvas scaled to fit the window, shows a dialogue box that slides in and
types text out character by character, offers choices the player picks with
the keyboard or mouse, places actors on the scene and plays audio, all
driven by a scripted event queue.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
between-the-trees
```

This opens a 960×720 resizable window titled "Between the Trees" and starts
the demo scene in `betweentrees.script`. The demo loads its resources from
the current directory:

- `music.opus` and `music_short.opus`: the audio samples `bg_music` and `short_clip`
- `dialogue.png` and `name_container.png`: the dialogue box graphics
- `background/test.png`: the scene background
- `<actor name>/<emotion>.png`: actor images, such as `Car/happy.png`

Missing files do not stop the game. A missing image is not drawn, and a
missing sample plays nothing. An actor whose emotion image is missing keeps
its current image, and a warning is logged.

## Controls

| Input | Action |
| --- | --- |
| Enter / mouse click | advance the dialogue; Enter picks the highlighted option, a click picks the option under the pointer |
| Shift | while a line is being typed, show it in full; if held when advancing, show each new line in full |
| Up / Down | move between options, wrapping at either end |
| Mouse movement | highlight the option under the pointer |
| F11 or left Alt+Enter | toggle fullscreen |
| left Ctrl+left Alt+F | cycle how the canvas fits the window: fit inside, fill, stretch |
| Closing the window | quit |

## Writing scenes

A scene's script is a set of plain functions that take the `Game` and queue
events on it. `betweentrees.script` holds the demo:

```python
from betweentrees.script import scene0_end

def my_scene(game):
    game.set_text("Hello there.", "Bob")
    game.play_audio("bg_music", True)
    game.set_text("Which way?")
    game.set_option("Left", go_left)
    game.set_option("Right", go_right)

def go_left(game):
    game.after(5.0, lambda g: g.set_text("Five seconds later..."))
    game.play_func(scene0_end)

def go_right(game):
    game.set_text("The other way, then.")
    game.play_func(scene0_end)
```

`Game` queues these events, which run in order as the player advances:

- `set_text(text, name="")`: a line of dialogue, with an optional speaker name;
  lines longer than 60 characters are wrapped at a space
- `set_option(text, func)`: a choice that runs `func(game)` when picked
- `play_audio(name, loop=False, gain=0.0, pan=0.0, speed=1.0)` and `stop_audio(name)`
- `play_func(func)`: run `func(game)`
- `after(secs, func)`: run `func(game)` `secs` seconds later without pausing the queue

`clear_event_queue()` drops everything still queued. `set_flag(flag, value)`
and `get_flag(flag)` keep 32 on/off story flags, numbered 0 to 31.

A `Scene(game, background, starting_func, click_event, key_press_event,
dialogue_end_event)` holds a background surface and actors, plus handlers
called with the game: `click_event(game, x, y)` gets canvas coordinates and
`key_press_event(game, key)` gets a pygame key code. Either handler can be
replaced or set to `None` at any time through the attribute of the same
name; while a handler is set, it takes the place of the normal Enter or
click behaviour. `create_actor(name)` adds an `Actor`, and `get_actor(name)`
returns it. An actor can `load_emotion`, `set_position`, `show` and `hide`.
`Game.set_scene(index)` switches to and starts one of `game.scenes`.

## What it does not do

- `ResourceLoader` knows a single resource bank (bank 0), which loads the
  demo scene from fixed file names. There is no scene file format and no way
  to name resource files other than code.
- There is no saving or loading of progress, and no settings file.
- Audio speed changes are made by dropping or repeating sample frames, not by
  proper resampling.