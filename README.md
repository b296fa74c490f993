# pixi

A small arcade in one window. The menu lists two games:

- **Stacker**: a row of blocks slides from side to side on a 7 × 15 grid.
  Press Space to drop it. On the bottom row every block stays; above that,
  only blocks resting on a filled cell of the row below stay, and the rest
  fall away. Each drop makes the row move faster.
- **Snake**: guide the snake around a 7 × 15 board whose edges wrap around,
  and eat the green treats to grow. Running into your own body ends the
  game; so does filling the whole board. Turning straight back is ignored.

## Installation

```
pip install .
```

This installs `pygame`, which draws the window and reads the keyboard.

## Playing

```
pixi
```

The same entry point can be started with `python -m pixi.app`. The window
is 245 × 525 pixels drawn at twice that size. Closing the window quits.

Menu controls:

| Key                  | Action                     |
|----------------------|----------------------------|
| Up / Down            | Move the selection         |
| Enter (or keypad)    | Start the selected game    |
| Escape               | Quit                       |

In a game:

| Key          | Action                               |
|--------------|--------------------------------------|
| Arrow keys   | Steer the snake (Snake)              |
| Space        | Drop the moving row (Stacker)        |
| R            | Restart the current game             |
| Escape       | Go back to the menu                  |

## What it does not do

There is no score, no high-score table and nothing is saved between runs.
When a game ends nothing is shown on screen: the snake simply stops moving,
and a Stacker row that has lost all its blocks, or has run past the top of
the grid, can no longer be dropped. Press R to start again.

## Using it as a library

The game loop is a `pixi.context.StateContext` that runs one `State` at a
time. Each call to `on_user_update(elapsed)` calls the current state's
`tick(dt)` and `render()`, then switches to any state queued with
`transition_to`, and forgets the keys pressed in that frame. It returns
`False` once `quit()` has been called.

`StateContext` offers:

- `load()` — create the off-screen 245 × 525 drawing surface (no window);
- `start()` — open the window and run frames until the application quits;
- `press(key)` and `key_pressed(key)` — record and query a `Key` pressed
  during the current frame (`UP`, `DOWN`, `LEFT`, `RIGHT`, `ENTER`,
  `ESCAPE`, `SPACE`, `R`);
- `fill_rect`, `draw_rect`, `fill_circle`, `draw_string` and `text_height`
  for drawing, plus `width`, `height` and `screen`.

Because `load()` needs no window, a state can be driven frame by frame in
code by calling `press(...)` and then `on_user_update(...)`.

The screens are `pixi.stacker.Stacker`, `pixi.snake.Snake` and
`pixi.menu.Menu`. `pixi.snake` also has the grid helpers `to_1d`, `to_2d`,
`wrap_position` and `direction_to_head_offset`; `Snake` accepts a
`random.Random` for repeatable treat placement. `pixi.timing` provides
`TimeDuration` and `Timestamp`, both counted in whole nanoseconds.

Writing a new screen:

```python
from pixi.context import BLACK, Key, State, StateContext


class Blank(State):
    def tick(self, dt):
        if self.context.key_pressed(Key.ESCAPE):
            self.context.quit()

    def render(self):
        self.context.fill_rect(0, 0, self.context.width, self.context.height, BLACK)


context = StateContext()
if context.load():
    context.transition_to(Blank())
    context.start()
```

## Tests

```
pip install .[test]
pytest
```