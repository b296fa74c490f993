"""The game selection menu."""

from __future__ import annotations

from collections.abc import Callable

from pixi.context import BLACK, WHITE, Key, State, StateContext
from pixi.snake import Snake
from pixi.stacker import Stacker


class Menu(State):
    """Lists the games; arrows choose, Enter starts, Escape quits."""

    games: tuple[tuple[str, Callable[[], State]], ...] = (
        ("Stacker", Stacker),
        ("Snake", Snake),
    )

    def __init__(self) -> None:
        self.selection = 0

    def _context(self) -> StateContext:
        if self.context is None:
            raise RuntimeError("the state is not attached to a context")
        return self.context

    def selected_index(self) -> int:
        return self.selection % len(self.games)

    def tick(self, dt: float) -> None:
        ctx = self._context()
        if ctx.key_pressed(Key.DOWN):
            self.selection += 1

        if ctx.key_pressed(Key.UP):
            self.selection -= 1

        if ctx.key_pressed(Key.ENTER):
            game, factory = self.games[self.selected_index()]
            print(f"Playing: {game}")
            ctx.transition_to(factory())
            return

        if ctx.key_pressed(Key.ESCAPE):
            ctx.quit()

    def render(self) -> None:
        ctx = self._context()
        ctx.fill_rect(0, 0, ctx.width, ctx.height, WHITE)

        selected = self.selected_index()
        for index, (game, _) in enumerate(self.games):
            line_height = ctx.text_height(game)
            y = index * line_height + 20
            if index == selected:
                ctx.draw_string(10, y, ">", BLACK)
            ctx.draw_string(20, y, game, BLACK)