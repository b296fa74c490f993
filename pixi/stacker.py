"""The stacker game: drop a sliding row of blocks onto the tower below."""

from __future__ import annotations

from pixi.context import BLACK, BLUE, GREY, WHITE, State, StateContext, Key
from pixi.timing import TimeDuration, Timestamp

N_ROW = 15
N_COLUMN = 7
B_WIDTH = StateContext.SCREEN_WIDTH // N_COLUMN
B_HEIGHT = StateContext.SCREEN_HEIGHT // N_ROW

_START_TICK_RATE = TimeDuration.from_seconds(0.2)
_SPEED_UP_NUMERATOR = 94
_SPEED_UP_DENOMINATOR = 100


class Stacker(State):
    """A row of blocks slides back and forth; each drop keeps only supported blocks."""

    def __init__(self) -> None:
        self.space: list[list[bool]] = []
        self.x = 0
        self.y = 0
        self.size = 0
        self.xv = 0
        self.tick_rate = TimeDuration()
        self.last_tick = Timestamp()
        self.reset()

    def _context(self) -> StateContext:
        if self.context is None:
            raise RuntimeError("the state is not attached to a context")
        return self.context

    def tick(self, dt: float) -> None:
        ctx = self._context()
        if ctx.key_pressed(Key.SPACE):
            self.drop()

        if ctx.key_pressed(Key.ESCAPE):
            from pixi.menu import Menu

            ctx.transition_to(Menu())

        if ctx.key_pressed(Key.R):
            self.reset()

        if Timestamp.now() - self.last_tick > self.tick_rate:
            self.game_tick()
            self.last_tick = Timestamp.now()

    def render(self) -> None:
        ctx = self._context()
        ctx.fill_rect(0, 0, ctx.width, ctx.height, BLACK)

        for y, row in enumerate(self.space):
            for x, filled in enumerate(row):
                if filled:
                    ctx.fill_rect(x * B_WIDTH, y * B_HEIGHT, B_HEIGHT, B_WIDTH, BLUE)

        for column in range(self.x, self.x + self.size):
            ctx.fill_rect(column * B_WIDTH, self.y * B_HEIGHT, B_HEIGHT, B_WIDTH, WHITE)

        for y, row in enumerate(self.space):
            for x in range(len(row)):
                ctx.draw_rect(x * B_WIDTH, y * B_HEIGHT, B_WIDTH - 1, B_HEIGHT - 1, GREY)

    def reset(self) -> None:
        self.space = [[False] * N_COLUMN for _ in range(N_ROW)]
        self.last_tick = Timestamp.now() - TimeDuration.from_seconds(1)
        self.x = 2
        self.y = N_ROW - 1
        self.size = 3
        self.xv = 1
        self.tick_rate = _START_TICK_RATE

    def drop(self) -> None:
        """Place the current row; blocks without support below are lost."""
        if self.y < 0:
            return
        next_size = 0
        for column in range(self.x, self.x + self.size):
            if self.y == N_ROW - 1 or self.space[self.y + 1][column]:
                self.space[self.y][column] = True
                next_size += 1

        self.size = next_size
        self.y -= 1
        self.tick_rate = self.tick_rate * _SPEED_UP_NUMERATOR / _SPEED_UP_DENOMINATOR

    def game_tick(self) -> None:
        if self.x <= 0 or self.x + self.size > N_COLUMN - 1:
            self.xv *= -1
        self.x += self.xv