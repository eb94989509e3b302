"""Window protocol, input events and drawing helpers shared by all windows."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import lru_cache

import pygame

from .textures import texture_storage

BG_COLOR = (255, 255, 255)
FG_COLOR = (0, 0, 0)
HEADER_HEIGHT = 70.0


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


@dataclass(frozen=True)
class LeftMouse:
    """Left mouse button at ``pos``; ``held`` is true while it stays down."""

    pos: pygame.Vector2
    held: bool = False


@dataclass(frozen=True)
class Scroll:
    """Mouse wheel movement."""

    amount: float


@dataclass(frozen=True)
class KeyInput:
    """A key press together with the text it produced."""

    key: int
    text: str = ""


InputEvent = LeftMouse | Scroll | KeyInput | None


class WindowAction(enum.Enum):
    """What a window asks the system to do after handling input."""

    NONE = enum.auto()
    MINIMIZE = enum.auto()
    CLOSE = enum.auto()
    HACK_COMPLETED = enum.auto()


@dataclass
class NewWindow:
    """Request to open ``window`` on top of the others."""

    window: Window


class Window(ABC):
    """A window on the terminal desktop."""

    @abstractmethod
    def position(self) -> pygame.Vector2: ...

    @abstractmethod
    def top_left(self) -> pygame.Vector2: ...

    @abstractmethod
    def size(self) -> pygame.Vector2: ...

    @abstractmethod
    def draw(self, surface: pygame.Surface) -> None: ...

    @abstractmethod
    def is_visible(self) -> bool: ...

    @abstractmethod
    def set_visibility(self, value: bool) -> None: ...

    @abstractmethod
    def handle_input(self, event, last_mouse_pos) -> WindowAction | NewWindow: ...

    @abstractmethod
    def icon(self) -> pygame.Surface | None: ...

    @abstractmethod
    def contains_pos(self, pos) -> bool: ...

    def is_pos_in_header(self, pos) -> bool:
        tl = self.top_left()
        x, y = pos
        return tl.x < x < tl.x + self.size().x and tl.y < y < tl.y + HEADER_HEIGHT


def draw_outlined_box(surface, x, y, width, height, thickness, background_color, outline_color):
    """Fill a rectangle and outline it."""
    rect = pygame.Rect(round(x), round(y), round(width), round(height))
    pygame.draw.rect(surface, background_color, rect)
    pygame.draw.rect(surface, outline_color, rect, max(1, round(thickness)))


def draw_window_top_bar(surface, text, font_size, x, y, width, height, fg_color, bg_color):
    """Draw a window header with ``text`` centred in it."""
    draw_outlined_box(surface, x, y, width, height, 5.0, bg_color, fg_color)
    rendered = _font(int(font_size)).render(text, True, fg_color)
    surface.blit(rendered, rendered.get_rect(center=(x + width * 0.5, y + height * 0.5)))


def minimize_button(surface, position) -> pygame.Vector2:
    """Draw the minimize icon centred on ``position`` and return its size."""
    texture = texture_storage().minimize()
    if texture is None:
        raise RuntimeError("minimize icon is not loaded")
    size = pygame.Vector2(texture.get_size())
    surface.blit(texture, (position[0] - size.x * 0.5, position[1] - size.y * 0.5))
    return size