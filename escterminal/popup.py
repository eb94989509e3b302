"""A centred message box with a close button."""

from __future__ import annotations

import pygame

from .textures import texture_storage
from .windows import (
    BG_COLOR,
    FG_COLOR,
    LeftMouse,
    NewWindow,
    Window,
    WindowAction,
    _font,
    draw_outlined_box,
)

WIDTH = 700.0
HEIGHT = 200.0
TEXT_SIZE = 40
CLOSE_BUTTON_SIZE = 64.0


class PopUp(Window):
    """A message box centred on the screen; it is always visible."""

    def __init__(self, text, screen_size):
        self.text = text
        self._screen = pygame.Vector2(screen_size)
        self._position = self._centred_top_left()

    def _centred_top_left(self) -> pygame.Vector2:
        return pygame.Vector2(
            self._screen.x * 0.5 - WIDTH * 0.5, self._screen.y * 0.5 - HEIGHT * 0.5
        )

    def _close_button_pos(self) -> pygame.Vector2:
        return self.top_left() + pygame.Vector2(WIDTH - 50.0, 18.0)

    def position(self) -> pygame.Vector2:
        return pygame.Vector2(self._position)

    def top_left(self) -> pygame.Vector2:
        return self._centred_top_left()

    def size(self) -> pygame.Vector2:
        return pygame.Vector2(WIDTH, HEIGHT)

    def draw(self, surface) -> None:
        icon = texture_storage().close()
        if icon is None:
            raise RuntimeError("close icon is not loaded")

        tl = self.top_left()
        draw_outlined_box(surface, tl.x, tl.y, WIDTH, HEIGHT, 5.0, BG_COLOR, FG_COLOR)

        font = _font(TEXT_SIZE)
        y = self._position.y + 0.8 * font.get_ascent()
        for line in self.text.split("\n"):
            surface.blit(font.render(line, True, FG_COLOR), (self._position.x + 50.0, y))
            y += font.get_linesize()

        surface.blit(icon, self._close_button_pos())

    def is_visible(self) -> bool:
        return True

    def set_visibility(self, value) -> None:
        """Pop-ups cannot be hidden."""

    def handle_input(self, event, last_mouse_pos) -> WindowAction | NewWindow:
        if isinstance(event, LeftMouse) and not event.held:
            button = self._close_button_pos()
            x, y = event.pos
            if (
                button.x <= x < button.x + CLOSE_BUTTON_SIZE
                and button.y <= y < button.y + CLOSE_BUTTON_SIZE
            ):
                return WindowAction.CLOSE
        return WindowAction.NONE

    def icon(self) -> pygame.Surface | None:
        return texture_storage().popup()

    def contains_pos(self, pos) -> bool:
        tl = self.top_left()
        br = tl + self.size()
        x, y = pos
        return tl.x <= x <= br.x and tl.y <= y <= br.y