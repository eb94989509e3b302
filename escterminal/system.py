"""The terminal desktop: windows, dock, top bar and the USB hack sequence."""

from __future__ import annotations

import enum
import subprocess
import time
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import pygame

from .document_list import DocumentList
from .login import LoginWindow
from .popup import PopUp
from .textures import load_texture_storage
from .windows import (
    BG_COLOR,
    FG_COLOR,
    KeyInput,
    LeftMouse,
    NewWindow,
    Scroll,
    WindowAction,
    _font,
    draw_outlined_box,
)

HACK_FILE_NAME = "secret.hack"
TOP_BAR_HEIGHT = 50.0
BAR_FONT_SIZE = 40
BAR_COLOR = FG_COLOR
BAR_TEXT_COLOR = BG_COLOR
DOCK_ICON_SIZE = 64
DOCK_SPACING = 16
USB_CHECK_INTERVAL = 1.0
MINIGAME_DELAY_SECONDS = 2
HACK_IN_PROGRESS_MESSAGE = "Hack in progress!"
HACK_COMPLETED_MESSAGE = "Hack completed!"
AUTOMOUNTER_COMMAND = ("udiskie", "-a")


class HackStatus(enum.Enum):
    """Progress of the hack started by plugging in the USB stick."""

    NO_USB = enum.auto()
    USB_OPENED = enum.auto()
    MINIGAME = enum.auto()
    COMPLETED = enum.auto()


@dataclass
class _Frame:
    """Input gathered from one frame's pygame events."""

    pressed_at: pygame.Vector2 | None = None
    wheel: float = 0.0
    home_pressed: bool = False
    keys: list[KeyInput] = field(default_factory=list)


class EscOS:
    """The whole terminal: owns the windows and runs one frame per ``tick``."""

    def __init__(self, assets_dir, usb_path, screen_size, spawn_automounter=True):
        self._automounter: subprocess.Popen | None = None
        if spawn_automounter:
            self._automounter = subprocess.Popen(list(AUTOMOUNTER_COMMAND))

        assets = Path(assets_dir)
        try:
            load_texture_storage(assets)
            self.logo = pygame.image.load(str(assets / "logo.png"))
            self.hack_file_content = (assets / HACK_FILE_NAME).read_text(encoding="utf-8")
        except BaseException:
            self.close()
            raise

        self.screen_size = pygame.Vector2(screen_size)
        self.login_window = LoginWindow(self.screen_size)
        self.windows = []
        self.is_unlocked = False

        self.usb_path = Path(usb_path)
        self.last_usb_check = time.monotonic()
        self.usb_opened_at: float | None = None
        self.hack_status = HackStatus.NO_USB

        self.last_mouse_pos = pygame.Vector2(0.0, 0.0)
        self._mouse_pos = pygame.Vector2(0.0, 0.0)
        self._left_down = False

    def __enter__(self) -> EscOS:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Stop the automounter if one was started."""
        if self._automounter is not None:
            self._automounter.kill()
            self._automounter.wait()
            self._automounter = None

    def _read_events(self, events) -> _Frame:
        frame = _Frame()
        for event in events:
            if event.type == pygame.MOUSEMOTION:
                self._mouse_pos = pygame.Vector2(event.pos)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._mouse_pos = pygame.Vector2(event.pos)
                self._left_down = True
                frame.pressed_at = pygame.Vector2(event.pos)
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self._mouse_pos = pygame.Vector2(event.pos)
                self._left_down = False
            elif event.type == pygame.MOUSEWHEEL:
                frame.wheel += event.y
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_HOME:
                    frame.home_pressed = True
                frame.keys.append(KeyInput(event.key, getattr(event, "unicode", "")))
        return frame

    def _input_event(self, frame: _Frame):
        mouse = pygame.Vector2(self._mouse_pos)
        if frame.pressed_at is not None:
            return LeftMouse(mouse, False)
        if self._left_down:
            return LeftMouse(mouse, True)
        if frame.wheel != 0.0:
            return Scroll(frame.wheel)
        return None

    def tick(self, surface, events=()) -> None:
        """Handle one frame of input and draw the desktop onto ``surface``."""
        frame = self._read_events(events)

        if self.check_hack_file() and self.hack_status is HackStatus.NO_USB:
            self.hack_status = HackStatus.USB_OPENED
            self.usb_opened_at = time.monotonic()
            self.windows.append(PopUp(HACK_IN_PROGRESS_MESSAGE, self.screen_size))

        if (
            self.hack_status is HackStatus.USB_OPENED
            and int(time.monotonic() - self.usb_opened_at) > MINIGAME_DELAY_SECONDS
        ):
            self.hack_status = HackStatus.MINIGAME

        if frame.home_pressed:
            self.on_hack_completed()

        self._draw_background(surface)

        mouse_pos = pygame.Vector2(self._mouse_pos)
        event = self._input_event(frame)

        to_close: set[int] = set()
        for index in reversed(range(len(self.windows))):
            window = self.windows[index]
            if not window.is_visible():
                continue
            if event is not None and window.contains_pos(mouse_pos):
                this_event, event = event, None
            else:
                this_event = None
            action = window.handle_input(this_event, self.last_mouse_pos)
            if isinstance(action, NewWindow):
                self.windows.append(action.window)
            elif action is WindowAction.MINIMIZE:
                window.set_visibility(False)
            elif action is WindowAction.CLOSE:
                to_close.add(index)
            elif action is WindowAction.HACK_COMPLETED:
                to_close.update((0, index))
                self.on_hack_completed()
        for index in sorted(to_close, reverse=True):
            del self.windows[index]

        if not self.is_unlocked:
            for key in frame.keys:
                self.login_window.handle_input(key, self.last_mouse_pos)
            if event is not None and self.login_window.contains_pos(mouse_pos):
                this_event, event = event, None
            else:
                this_event = None
            action = self.login_window.handle_input(this_event, self.last_mouse_pos)
            if isinstance(action, NewWindow):
                self.windows.append(action.window)
            self.login_window.draw(surface)

        for window in self.windows:
            if window.is_visible():
                window.draw(surface)

        self._draw_dock(surface, frame.pressed_at)
        self._draw_top_bar(surface)

        self.last_mouse_pos = pygame.Vector2(self._mouse_pos)

    def on_hack_completed(self) -> None:
        """Unlock the terminal and open the document list."""
        self.hack_status = HackStatus.COMPLETED
        self.is_unlocked = True
        self.windows.append(PopUp(HACK_COMPLETED_MESSAGE, self.screen_size))
        self.windows.append(DocumentList(self.screen_size))

    def check_hack_file(self) -> bool:
        """Whether the USB stick holds the hack file; checked at most once a second."""
        now = time.monotonic()
        if now - self.last_usb_check < USB_CHECK_INTERVAL:
            return False
        self.last_usb_check = now
        try:
            content = (self.usb_path / HACK_FILE_NAME).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return False
        return content == self.hack_file_content

    def _draw_background(self, surface) -> None:
        surface.fill(BG_COLOR)
        width, height = self.logo.get_size()
        surface.blit(
            self.logo,
            (self.screen_size.x * 0.5 - width * 0.5, self.screen_size.y * 0.5 - height * 0.5),
        )

    def _draw_top_bar(self, surface) -> None:
        pygame.draw.rect(
            surface, BAR_COLOR, pygame.Rect(0, 0, round(self.screen_size.x), round(TOP_BAR_HEIGHT))
        )
        time_text = datetime.now().strftime("%H:%M:%S")
        rendered = _font(BAR_FONT_SIZE).render(time_text, True, BAR_TEXT_COLOR)
        surface.blit(
            rendered,
            rendered.get_rect(center=(self.screen_size.x * 0.5, TOP_BAR_HEIGHT * 0.5)),
        )

    def _dock_slots(self):
        """Icons in the dock with the window index each belongs to and its x position."""
        icons = [
            (icon, index)
            for index, window in enumerate(self.windows)
            if (icon := window.icon()) is not None
        ]
        slot = float(DOCK_ICON_SIZE + DOCK_SPACING)
        width = len(icons) * slot
        left = self.screen_size.x * 0.5 - width * 0.5
        top = self.screen_size.y - (slot + DOCK_SPACING)
        return [(icon, index, left + n * slot) for n, (icon, index) in enumerate(icons)], top

    def _draw_dock(self, surface, click_pos) -> None:
        slots, top = self._dock_slots()
        if not slots:
            return

        slot = float(DOCK_ICON_SIZE + DOCK_SPACING)
        left = slots[0][2]
        draw_outlined_box(surface, left, top, len(slots) * slot, slot, 5.0, BG_COLOR, FG_COLOR)

        for icon, index, x in slots:
            window = self.windows[index]
            surface.blit(icon, (x + DOCK_SPACING * 0.5, top + DOCK_SPACING * 0.5))
            if window.is_visible():
                pygame.draw.circle(
                    surface, FG_COLOR, (x + slot * 0.5, self.screen_size.y - 8.0), 4
                )
            if click_pos is not None and (
                x <= click_pos.x < x + slot and top <= click_pos.y < top + slot
            ):
                window.set_visibility(not window.is_visible())