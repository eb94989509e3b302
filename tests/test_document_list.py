import pygame
import pytest

from escterminal.document_list import DocumentList
from escterminal.textures import TextureStorage, set_texture_storage
from escterminal.windows import HEADER_HEIGHT, LeftMouse, Scroll, WindowAction

SCREEN = (1920, 1080)


@pytest.fixture
def storage():
    store = TextureStorage(
        document_icon=pygame.Surface((64, 64)),
        minimize_icon=pygame.Surface((20, 20)),
    )
    set_texture_storage(store)
    yield store
    set_texture_storage(None)


def test_initial_geometry():
    win = DocumentList(SCREEN)
    assert win.size() == pygame.Vector2(1000.0, 500.0)
    assert win.position() == pygame.Vector2(SCREEN[0] * 0.5, SCREEN[1] * 0.4)
    assert win.top_left() + win.size() * 0.5 == win.position()


def test_contains_pos_corners():
    win = DocumentList(SCREEN)
    tl = win.top_left()
    br = tl + win.size()
    assert win.contains_pos(tl)
    assert win.contains_pos(br)
    assert not win.contains_pos(br + pygame.Vector2(0, 1))


def test_header_detection():
    win = DocumentList(SCREEN)
    tl = win.top_left()
    assert win.is_pos_in_header(tl + pygame.Vector2(5, 5))
    assert not win.is_pos_in_header(tl + pygame.Vector2(5, HEADER_HEIGHT + 5))


def test_drag_moves_window():
    win = DocumentList(SCREEN)
    start = win.position()
    grab = win.top_left() + pygame.Vector2(20, 20)
    win.handle_input(LeftMouse(grab, True), grab - pygame.Vector2(4, -6))
    assert win.position() == start + pygame.Vector2(4, -6)


def test_scroll_is_ignored():
    win = DocumentList(SCREEN)
    start = win.position()
    assert win.handle_input(Scroll(3.0), (0, 0)) is WindowAction.NONE
    assert win.position() == start


def test_minimize_after_draw(storage):
    win = DocumentList(SCREEN)
    win.draw(pygame.Surface(SCREEN))
    button = win.top_left() + win.minimize_position_relative
    assert win.handle_input(LeftMouse(button, False), button) is WindowAction.MINIMIZE
    assert win.handle_input(LeftMouse(button, True), button) is WindowAction.NONE


def test_icon_is_document_icon(storage):
    assert DocumentList(SCREEN).icon() is storage.document()


def test_visibility_toggle():
    win = DocumentList(SCREEN)
    win.set_visibility(False)
    assert not win.is_visible()
    win.set_visibility(True)
    assert win.is_visible()


def test_draw_outlines_window(storage):
    win = DocumentList(SCREEN)
    surface = pygame.Surface(SCREEN)
    surface.fill((1, 2, 3))
    win.draw(surface)
    tl = win.top_left()
    assert surface.get_at((round(tl.x), round(tl.y)))[:3] == (0, 0, 0)