"""The snake game on a small wrapping grid."""

from __future__ import annotations

import random
from collections import deque

from pixi.context import BLACK, GREEN, WHITE, Key, State, StateContext
from pixi.timing import TimeDuration, Timestamp

Vec = tuple[int, int]

N_ROW = 15
N_COLUMN = 7
B_WIDTH = StateContext.SCREEN_WIDTH // N_COLUMN
B_HEIGHT = StateContext.SCREEN_HEIGHT // N_ROW

ZERO: Vec = (0, 0)
LEFT: Vec = (-1, 0)
RIGHT: Vec = (1, 0)
UP: Vec = (0, -1)
DOWN: Vec = (0, 1)

_HEAD_OFFSETS: dict[Vec, tuple[float, float]] = {
    LEFT: (1.0, 0.5),
    RIGHT: (0.0, 0.5),
    UP: (0.5, 1.0),
    DOWN: (0.5, 0.0),
}

_DIRECTION_KEYS = ((Key.LEFT, LEFT), (Key.RIGHT, RIGHT), (Key.UP, UP), (Key.DOWN, DOWN))


def direction_to_head_offset(direction: Vec) -> tuple[float, float]:
    """Where, inside its cell, the head is drawn for a direction of travel."""
    return _HEAD_OFFSETS.get(direction, (0.0, 0.0))


def to_1d(position: Vec) -> int:
    x, y = position
    return x + y * N_COLUMN


def to_2d(index: int) -> Vec:
    return index % N_COLUMN, index // N_COLUMN


def wrap_position(position: Vec) -> Vec:
    """Wrap a position around the edges of the board."""
    x, y = position
    return (N_COLUMN + x) % N_COLUMN, (N_ROW + y) % N_ROW


def _add(a: Vec, b: Vec) -> Vec:
    return a[0] + b[0], a[1] + b[1]


class Snake(State):
    """A snake that grows by eating treats and dies by biting itself."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.last_tick = Timestamp()
        self.tick_rate = TimeDuration()
        self.game_over = False
        self.v: Vec = DOWN
        self.new_v: Vec = ZERO
        self.body: deque[Vec] = deque()
        self.treat: Vec = ZERO
        self.reset()

    def _context(self) -> StateContext:
        if self.context is None:
            raise RuntimeError("the state is not attached to a context")
        return self.context

    def tick(self, dt: float) -> None:
        ctx = self._context()
        if Timestamp.now() - self.last_tick > self.tick_rate:
            self.game_tick()
            self.last_tick = Timestamp.now()

        if ctx.key_pressed(Key.ESCAPE):
            from pixi.menu import Menu

            ctx.transition_to(Menu())

        if ctx.key_pressed(Key.R):
            self.reset()

        for key, direction in _DIRECTION_KEYS:
            if ctx.key_pressed(key):
                self.new_v = direction

    def render(self) -> None:
        ctx = self._context()
        ctx.fill_rect(0, 0, ctx.width, ctx.height, BLACK)

        head_x, head_y = self.body[0]
        offset_x, offset_y = direction_to_head_offset(self.v)
        ctx.fill_circle(
            (head_x + offset_x) * B_WIDTH,
            (head_y + offset_y) * B_HEIGHT,
            B_WIDTH // 2,
            WHITE,
        )

        for index, (x, y) in enumerate(self.body):
            if index:
                ctx.fill_rect(x * B_WIDTH, y * B_HEIGHT, B_WIDTH, B_HEIGHT, WHITE)

        treat_x, treat_y = self.treat
        ctx.fill_rect(treat_x * B_WIDTH, treat_y * B_HEIGHT, B_WIDTH, B_HEIGHT, GREEN)

    def reset(self) -> None:
        self.game_over = False
        self.body = deque([(2, 4), (2, 3), (2, 2)])
        self.v = DOWN
        self.new_v = ZERO
        self.tick_rate = TimeDuration.from_seconds(0.2)
        self.treat = self.random_location_not_on_snake()

    def game_tick(self) -> None:
        if self.game_over:
            return

        # A new direction is taken unless it turns straight back.
        if self.new_v != ZERO and _add(self.new_v, self.v) != ZERO:
            self.v = self.new_v
        self.new_v = ZERO

        head = wrap_position(_add(self.body[0], self.v))

        if head == self.treat:
            self.body.appendleft(head)
            if len(self.body) == N_ROW * N_COLUMN:
                self.game_over = True
            else:
                self.treat = self.random_location_not_on_snake()
            return

        for index in range(len(self.body) - 1, 0, -1):
            self.body[index] = self.body[index - 1]
            if head == self.body[index]:
                self.game_over = True

        self.body[0] = head

    def random_location(self) -> Vec:
        return self.rng.randint(0, N_COLUMN - 1), self.rng.randint(0, N_ROW - 1)

    def random_location_not_on_snake(self) -> Vec:
        remaining = N_ROW * N_COLUMN - len(self.body)
        target = self.rng.randint(0, remaining)
        occupied = {to_1d(part) for part in self.body}
        free = (cell for cell in range(N_ROW * N_COLUMN) if cell not in occupied)
        for counter, cell in enumerate(free):
            if counter == target:
                return to_2d(cell)

        print("Random algorithm failed. Fallback to random position...")
        return self.random_location()