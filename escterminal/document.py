"""A scrollable window that shows one document page."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from .textures import texture_storage
from .windows import (
    BG_COLOR,
    FG_COLOR,
    HEADER_HEIGHT,
    LeftMouse,
    NewWindow,
    Scroll,
    Window,
    WindowAction,
    draw_outlined_box,
    draw_window_top_bar,
    minimize_button,
)

MAX_DOC_HEIGHT = 1000.0
SCROLL_SPEED = 35.0


@dataclass
class VerticalScroller:
    """A scroll bar whose handle sits at ``percent`` (0 to 1) of its track."""

    height: float
    scroller_height: float
    percent: float = 0.0

    WIDTH = 10.0
    BG_COLOR = (0xA0, 0xA0, 0xA0)

    def draw(self, surface, top_left) -> None:
        x, y = top_left
        track = pygame.Rect(round(x), round(y), round(self.WIDTH), round(self.height))
        pygame.draw.rect(surface, self.BG_COLOR, track)

        handle_y = y + self.percent * (self.height - self.scroller_height)
        handle = pygame.Rect(
            round(x), round(handle_y), round(self.WIDTH), round(self.scroller_height)
        )
        pygame.draw.rect(surface, FG_COLOR, handle)


class DocumentWindow(Window):
    """A draggable, scrollable, minimizable view of a named document."""

    def __init__(self, document_name, screen_size):
        storage = texture_storage()
        texture = storage.document_by_name(document_name)
        if texture is None:
            texture = storage.fallback_document()

        screen = pygame.Vector2(screen_size)
        width, document_height = (float(v) for v in texture.get_size())
        height = min(document_height, MAX_DOC_HEIGHT)

        self.document_name = document_name
        self.document_texture = texture
        self.document_height = document_height
        self.vertical_offset = 0.0
        self.max_vertical_offset = document_height - height + 2.0 * HEADER_HEIGHT
        self.scroller = VerticalScroller(
            height=height - 2.0 * HEADER_HEIGHT + 5.0, scroller_height=50.0
        )
        self._position = pygame.Vector2(200.0 + screen.x * 0.5, 50.0 + height * 0.5)
        self._window_size = pygame.Vector2(width + 5.0, height - HEADER_HEIGHT + 5.0)
        self._visible = True
        self.minimize_position_relative = pygame.Vector2(width - 50.0, HEADER_HEIGHT * 0.5)
        self._minimize_size = pygame.Vector2(0.0, 0.0)

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
            self.document_name,
            30.0,
            tl.x,
            tl.y,
            self._window_size.x,
            HEADER_HEIGHT,
            FG_COLOR,
            BG_COLOR,
        )

        area = pygame.Rect(
            0,
            round(self.vertical_offset),
            self.document_texture.get_width(),
            round(self._window_size.y - HEADER_HEIGHT),
        )
        surface.blit(self.document_texture, (tl.x + 2.5, tl.y + HEADER_HEIGHT), area)

        scroller_pos = self._position + pygame.Vector2(
            self._window_size.x * 0.5 - VerticalScroller.WIDTH - 2.5,
            -self._window_size.y * 0.5 + HEADER_HEIGHT,
        )
        self.scroller.draw(surface, scroller_pos)

        self._minimize_size = minimize_button(surface, tl + self.minimize_position_relative)

    def is_visible(self) -> bool:
        return self._visible

    def set_visibility(self, value) -> None:
        self._visible = bool(value)

    def handle_input(self, event, last_mouse_pos) -> WindowAction | NewWindow:
        self.scroller.percent = self.vertical_offset / self.max_vertical_offset

        if isinstance(event, LeftMouse):
            pos = pygame.Vector2(event.pos)
            if self.is_pos_in_header(pos):
                self._position += pos - pygame.Vector2(last_mouse_pos)
            if self._is_pos_in_minimize_button(pos) and not event.held:
                return WindowAction.MINIMIZE
            return WindowAction.NONE

        if isinstance(event, Scroll):
            offset = self.vertical_offset - event.amount * SCROLL_SPEED
            self.vertical_offset = min(max(offset, 0.0), self.max_vertical_offset)

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