import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from escterminal.login import LoginWindow
from escterminal.popup import PopUp
from escterminal.windows import FG_COLOR, KeyInput, LeftMouse, NewWindow, Scroll, WindowAction

SCREEN = (1920, 1080)


def _button_point(login):
    return login.position() + pygame.Vector2(0, login.height * 0.25 + 25)


def test_centred_on_screen():
    login = LoginWindow(SCREEN)
    assert login.position() == pygame.Vector2(SCREEN) * 0.5
    assert login.size() == pygame.Vector2(500, 300)


def test_top_left_follows_input_box():
    login = LoginWindow(SCREEN)
    assert login.top_left() == login.position() - login.input_size * 0.5
    assert login.contains_pos(login.position())
    assert not login.contains_pos(login.top_left() - pygame.Vector2(1, 1))


def test_login_button_reports_disabled_login():
    login = LoginWindow(SCREEN)
    action = login.handle_input(LeftMouse(_button_point(login), False), (0, 0))
    assert isinstance(action, NewWindow)
    assert isinstance(action.window, PopUp)
    assert action.window.text == "Error:\nLogin is disabled during emergency\nprotocol!"


def test_held_or_missed_clicks_do_nothing():
    login = LoginWindow(SCREEN)
    assert login.handle_input(LeftMouse(_button_point(login), True), (0, 0)) is WindowAction.NONE
    assert login.handle_input(LeftMouse(login.position(), False), (0, 0)) is WindowAction.NONE
    assert login.handle_input(Scroll(2.0), (0, 0)) is WindowAction.NONE
    assert login.handle_input(None, (0, 0)) is WindowAction.NONE


def test_typing_and_backspace():
    login = LoginWindow(SCREEN)
    for char in "secretx":
        login.handle_input(KeyInput(ord(char), char), (0, 0))
    login.handle_input(KeyInput(pygame.K_BACKSPACE, "\b"), (0, 0))
    assert login.password == "secret"


def test_backspace_on_empty_input():
    login = LoginWindow(SCREEN)
    login.handle_input(KeyInput(pygame.K_BACKSPACE, "\b"), (0, 0))
    assert login.password == ""


def test_visibility_and_icon():
    login = LoginWindow(SCREEN)
    assert login.is_visible() is True
    login.set_visibility(False)
    assert login.is_visible() is False
    assert login.icon() is None


def test_draw_outlines_the_box():
    login = LoginWindow(SCREEN)
    surface = pygame.Surface(SCREEN)
    surface.fill((255, 0, 0))
    login.draw(surface)
    corner = login.position() - login.size() * 0.5
    assert surface.get_at((int(corner.x), int(corner.y)))[:3] == FG_COLOR
    assert surface.get_at((0, 0))[:3] == (255, 0, 0)