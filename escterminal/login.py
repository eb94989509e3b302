"""The password prompt shown while the terminal is locked."""

from __future__ import annotations

import pygame

from .popup import PopUp
from .windows import (
    BG_COLOR,
    FG_COLOR,
    KeyInput,
    LeftMouse,
    NewWindow,
    Window,
    WindowAction,
    _font,
    draw_outlined_box,
)

LOGIN_DISABLED_MESSAGE = "Error:\nLogin is disabled during emergency\nprotocol!"
_BUTTON_SIZE = pygame.Vector2(100.0, 50.0)


class LoginWindow(Window):
    """A password box with a log-in button, always centred on the screen."""

    def __init__(self, screen_size):
        self._screen = pygame.Vector2(screen_size)
        self.width = 500.0
        self.height = 300.0
        self.input_size = pygame.Vector2(300.0, 60.0)
        self.password = ""
        self._visible = True

    def position(self) -> pygame.Vector2:
        return self._screen * 0.5

    def size(self) -> pygame.Vector2:
        return pygame.Vector2(self.width, self.height)

    def top_left(self) -> pygame.Vector2:
        return self.position() - self.input_size * 0.5

    def _button_top_left(self) -> pygame.Vector2:
        return self.position() + pygame.Vector2(-_BUTTON_SIZE.x * 0.5, self.height * 0.25)

    def draw(self, surface) -> None:
        centre = self.position()
        draw_outlined_box(
            surface,
            centre.x - self.width * 0.5,
            centre.y - self.height * 0.5,
            self.width,
            self.height,
            5.0,
            BG_COLOR,
            FG_COLOR,
        )

        label_font = _font(50)
        surface.blit(
            label_font.render("Enter password", True, FG_COLOR),
            (centre.x - self.input_size.x * 0.5, centre.y - self.input_size.y - label_font.get_ascent()),
        )

        bigger = self.input_size * 1.1
        draw_outlined_box(
            surface,
            centre.x - bigger.x * 0.5,
            centre.y - bigger.y * 0.5,
            bigger.x,
            bigger.y,
            5.0,
            BG_COLOR,
            FG_COLOR,
        )
        input_font = _font(30)
        masked = input_font.render("*" * len(self.password), True, FG_COLOR)
        surface.blit(
            masked,
            (centre.x - self.input_size.x * 0.5 + 10.0, centre.y - masked.get_height() * 0.5),
        )

        bigger_button = _BUTTON_SIZE * 1.05
        box = centre + pygame.Vector2(-bigger_button.x * 0.5, self.height * 0.245)
        draw_outlined_box(
            surface, box.x, box.y, bigger_button.x, bigger_button.y, 5.0, FG_COLOR, FG_COLOR
        )
        caption = _font(30).render("Log-in", True, BG_COLOR)
        button_centre = self._button_top_left() + _BUTTON_SIZE * 0.5
        surface.blit(caption, caption.get_rect(center=(button_centre.x, button_centre.y)))

    def is_visible(self) -> bool:
        return self._visible

    def set_visibility(self, value) -> None:
        self._visible = bool(value)

    def handle_input(self, event, last_mouse_pos) -> WindowAction | NewWindow:
        if isinstance(event, KeyInput):
            if event.key == pygame.K_BACKSPACE:
                self.password = self.password[:-1]
            elif event.text and event.text.isprintable():
                self.password += event.text
            return WindowAction.NONE

        if isinstance(event, LeftMouse) and not event.held:
            button = self._button_top_left()
            x, y = event.pos
            if button.x <= x < button.x + _BUTTON_SIZE.x and button.y <= y < button.y + _BUTTON_SIZE.y:
                return NewWindow(PopUp(LOGIN_DISABLED_MESSAGE, self._screen))
        return WindowAction.NONE

    def icon(self) -> pygame.Surface | None:
        return None

    def contains_pos(self, pos) -> bool:
        tl = self.top_left()
        br = tl + self.size()
        x, y = pos
        return tl.x <= x <= br.x and tl.y <= y <= br.y