import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from escterminal.popup import HEIGHT, WIDTH, PopUp
from escterminal.textures import TextureStorage, set_texture_storage
from escterminal.windows import FG_COLOR, LeftMouse, Scroll, WindowAction

SCREEN = (1920, 1080)


@pytest.fixture
def icons():
    close_icon = pygame.Surface((16, 16))
    close_icon.fill((0, 0, 255))
    warning_icon = pygame.Surface((16, 16))
    storage = TextureStorage(popup_icon=warning_icon, close_icon=close_icon)
    set_texture_storage(storage)
    yield storage
    set_texture_storage(None)


def _close_point(popup):
    return popup.top_left() + pygame.Vector2(WIDTH - 50 + 10, 18 + 10)


def test_geometry_is_centred():
    popup = PopUp("WARNING", SCREEN)
    assert popup.size() == pygame.Vector2(WIDTH, HEIGHT)
    assert popup.top_left() == popup.position()
    assert popup.top_left() + popup.size() * 0.5 == pygame.Vector2(SCREEN) * 0.5


def test_contains_pos():
    popup = PopUp("WARNING", SCREEN)
    tl = popup.top_left()
    assert popup.contains_pos(tl)
    assert popup.contains_pos(tl + popup.size())
    assert not popup.contains_pos(tl - pygame.Vector2(1, 0))
    assert not popup.contains_pos(tl + popup.size() + pygame.Vector2(0, 1))


def test_click_on_close_button_closes():
    popup = PopUp("WARNING", SCREEN)
    assert popup.handle_input(LeftMouse(_close_point(popup), False), (0, 0)) is WindowAction.CLOSE


def test_held_click_does_not_close():
    popup = PopUp("WARNING", SCREEN)
    assert popup.handle_input(LeftMouse(_close_point(popup), True), (0, 0)) is WindowAction.NONE


def test_other_input_does_nothing():
    popup = PopUp("WARNING", SCREEN)
    centre = popup.top_left() + popup.size() * 0.5
    assert popup.handle_input(LeftMouse(centre, False), (0, 0)) is WindowAction.NONE
    assert popup.handle_input(Scroll(1.0), (0, 0)) is WindowAction.NONE
    assert popup.handle_input(None, (0, 0)) is WindowAction.NONE


def test_always_visible():
    popup = PopUp("WARNING", SCREEN)
    popup.set_visibility(False)
    assert popup.is_visible() is True


def test_icon_comes_from_storage(icons):
    assert PopUp("WARNING", SCREEN).icon() is icons.popup()


def test_draw(icons):
    popup = PopUp("Hack in progress!", SCREEN)
    surface = pygame.Surface(SCREEN)
    surface.fill((255, 0, 0))
    popup.draw(surface)
    tl = popup.top_left()
    assert surface.get_at((int(tl.x), int(tl.y)))[:3] == FG_COLOR
    button = _close_point(popup)
    assert surface.get_at((int(button.x), int(button.y)))[:3] == (0, 0, 255)


def test_draw_without_close_icon_fails():
    set_texture_storage(TextureStorage())
    try:
        with pytest.raises(RuntimeError):
            PopUp("WARNING", SCREEN).draw(pygame.Surface(SCREEN))
    finally:
        set_texture_storage(None)