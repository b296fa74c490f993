"""The state machine that drives the game window."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

import pygame

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)
GREY: Color = (192, 192, 192)
GREEN: Color = (0, 255, 0)
BLUE: Color = (0, 0, 255)

_CHAR_HEIGHT = 8
_FONT_SIZE = 12
_FRAME_RATE = 60


class Key(Enum):
    """Keys the games respond to."""

    UP = pygame.K_UP
    DOWN = pygame.K_DOWN
    LEFT = pygame.K_LEFT
    RIGHT = pygame.K_RIGHT
    ENTER = pygame.K_RETURN
    ESCAPE = pygame.K_ESCAPE
    SPACE = pygame.K_SPACE
    R = pygame.K_r


_KEYMAP: dict[int, Key] = {key.value: key for key in Key}
_KEYMAP[pygame.K_KP_ENTER] = Key.ENTER


class State(ABC):
    """One screen of the application, driven by a StateContext."""

    context: StateContext | None = None

    @abstractmethod
    def tick(self, dt: float) -> None:
        """Advance the state by dt seconds."""

    @abstractmethod
    def render(self) -> None:
        """Draw the state onto the context's screen."""


class StateContext:
    """Owns the screen, the input of the current frame and the active state."""

    SCREEN_WIDTH = 245
    SCREEN_HEIGHT = 525
    PIXEL_SCALE = 2

    def __init__(self) -> None:
        self.app_name = "Pixi Game Engine"
        self.state: State | None = None
        self.upcoming_state: State | None = None
        self.running = True
        self._pressed: set[Key] = set()
        self._screen: pygame.Surface | None = None
        self._font: pygame.font.Font | None = None

    @property
    def screen(self) -> pygame.Surface:
        if self._screen is None:
            raise RuntimeError("the context has not been loaded")
        return self._screen

    @property
    def width(self) -> int:
        return self.SCREEN_WIDTH

    @property
    def height(self) -> int:
        return self.SCREEN_HEIGHT

    def load(self) -> bool:
        """Create the off-screen drawing surface."""
        self._screen = pygame.Surface((self.SCREEN_WIDTH, self.SCREEN_HEIGHT))
        return True

    def transition_to(self, state: State) -> None:
        """Switch to state once the current frame has finished."""
        self.upcoming_state = state

    def quit(self) -> None:
        self.running = False

    def on_user_create(self) -> bool:
        return True

    def on_user_update(self, elapsed: float) -> bool:
        """Run one frame; returns False once the application should stop."""
        if not self.running:
            return False
        try:
            if self.state is not None:
                self.state.tick(elapsed)
                self.state.render()
            if self.upcoming_state is not None:
                self.state = self.upcoming_state
                self.state.context = self
                self.upcoming_state = None
        finally:
            self._pressed.clear()
        return True

    def press(self, key: Key) -> None:
        """Record that key went down during the current frame."""
        self._pressed.add(key)

    def key_pressed(self, key: Key) -> bool:
        return key in self._pressed

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color = WHITE) -> None:
        rect = pygame.Rect(int(x), int(y), int(width), int(height))
        self.screen.fill(color, rect)

    def draw_rect(self, x: float, y: float, width: float, height: float, color: Color = WHITE) -> None:
        """Outline a rectangle whose edges run from x to x + width inclusive."""
        rect = pygame.Rect(int(x), int(y), int(width) + 1, int(height) + 1)
        pygame.draw.rect(self.screen, color, rect, 1)

    def fill_circle(self, x: float, y: float, radius: float, color: Color = WHITE) -> None:
        pygame.draw.circle(self.screen, color, (int(x), int(y)), int(radius))

    def draw_string(self, x: float, y: float, text: str, color: Color = WHITE) -> None:
        screen = self.screen
        font = self._get_font()
        for row, line in enumerate(text.split("\n")):
            if line:
                image = font.render(line, False, color)
                screen.blit(image, (int(x), int(y) + row * _CHAR_HEIGHT))

    def text_height(self, text: str) -> int:
        """Height in pixels of text drawn by draw_string."""
        return _CHAR_HEIGHT * (text.count("\n") + 1)

    def start(self) -> None:
        """Open the window and run frames until the application quits."""
        if self._screen is None and not self.load():
            return
        pygame.init()
        try:
            window = pygame.display.set_mode(
                (self.SCREEN_WIDTH * self.PIXEL_SCALE, self.SCREEN_HEIGHT * self.PIXEL_SCALE)
            )
            pygame.display.set_caption(self.app_name)
            if not self.on_user_create():
                return
            clock = pygame.time.Clock()
            while True:
                elapsed = clock.tick(_FRAME_RATE) / 1000.0
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.quit()
                    elif event.type == pygame.KEYDOWN and event.key in _KEYMAP:
                        self.press(_KEYMAP[event.key])
                if not self.on_user_update(elapsed):
                    break
                pygame.transform.scale(self.screen, window.get_size(), window)
                pygame.display.flip()
        finally:
            pygame.quit()

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, _FONT_SIZE)
        return self._font