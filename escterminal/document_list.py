"""The window listing the documents available once the terminal is unlocked."""

from __future__ import annotations

import pygame

from .textures import texture_storage
from .windows import (
    BG_COLOR,
    FG_COLOR,
    HEADER_HEIGHT,
    LeftMouse,
    NewWindow,
    Window,
    WindowAction,
    draw_outlined_box,
    draw_window_top_bar,
    minimize_button,
)

WIDTH = 1000.0
HEIGHT = 500.0
TITLE = "Document List"


class DocumentList(Window):
    """A draggable, minimizable document list window."""

    def __init__(self, screen_size):
        screen = pygame.Vector2(screen_size)
        self._position = pygame.Vector2(screen.x * 0.5, screen.y * 0.4)
        self._window_size = pygame.Vector2(WIDTH, HEIGHT)
        self._visible = True
        self.minimize_position_relative = pygame.Vector2(WIDTH - 50.0, HEADER_HEIGHT * 0.5)
        self._minimize_size = pygame.Vector2(0.0, 0.0)
        self.texture = pygame.Surface((0, 0))

    def position(self) -> pygame.Vector2:
        return pygame.Vector2(self._position)

    def top_left(self) -> pygame.Vector2:
        return self._position - self._window_size * 0.5

    def size(self) -> pygame.Vector2:
        return pygame.Vector2(self._window_size)

    def draw(self, surface) -> None:
        tl = self.top_left()
        draw_outlined_box(
            surface,
            tl.x,
            tl.y,
            self._window_size.x,
            self._window_size.y + 2.5,
            5.0,
            BG_COLOR,
            FG_COLOR,
        )
        draw_window_top_bar(
            surface,
            TITLE,
            30.0,
            tl.x,
            tl.y,
            self._window_size.x,
            HEADER_HEIGHT,
            FG_COLOR,
            BG_COLOR,
        )
        surface.blit(self.texture, (tl.x, tl.y))
        self._minimize_size = minimize_button(surface, tl + self.minimize_position_relative)

    def is_visible(self) -> bool:
        return self._visible

    def set_visibility(self, value) -> None:
        self._visible = bool(value)

    def handle_input(self, event, last_mouse_pos) -> WindowAction | NewWindow:
        if isinstance(event, LeftMouse):
            pos = pygame.Vector2(event.pos)
            if self.is_pos_in_header(pos):
                self._position += pos - pygame.Vector2(last_mouse_pos)
            if self._is_pos_in_minimize_button(pos) and not event.held:
                return WindowAction.MINIMIZE
        return WindowAction.NONE

    def icon(self) -> pygame.Surface | None:
        return texture_storage().document()

    def contains_pos(self, pos) -> bool:
        tl = self.top_left()
        br = tl + self._window_size
        x, y = pos
        return tl.x <= x <= br.x and tl.y <= y <= br.y

    def _is_pos_in_minimize_button(self, pos) -> bool:
        centre = self.top_left() + self.minimize_position_relative
        half = self._minimize_size * 0.5
        x, y = pos
        return centre.x - half.x < x < centre.x + half.x and centre.y - half.y < y < centre.y + half.y