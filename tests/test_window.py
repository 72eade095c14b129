import os

import pygame
import pytest

from betweentrees.window import Window

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


@pytest.fixture
def window():
    win = Window(480, 360, 960, 720)
    yield win
    pygame.display.quit()


def test_initial_fit_is_exact_double(window):
    assert window.pix_width == 960 / 480
    assert window.pix_height == 720 / 360
    assert (window.bitmap_x, window.bitmap_y) == (0, 0)


def test_to_canvas_maps_offset_to_origin(window):
    assert window.to_canvas(window.bitmap_x, window.bitmap_y) == (0, 0)
    assert window.to_canvas(960 - 1, 720 - 1) == (480 - 1, 360 - 1)


def test_letterbox_keeps_aspect(window):
    window.resize_window(1000, 720)
    window.fit_screen()
    assert window.pix_width == window.pix_height == 720 / 360
    assert abs(2 * window.bitmap_x + 480 * window.pix_width - 1000) <= 1


def test_fill_mode_uses_larger_scale(window):
    window.resize_window(1000, 720)
    window.set_fit_mode(1)
    assert window.pix_width == window.pix_height == 1000 / 480
    assert window.bitmap_y <= 0


def test_stretch_mode_and_wrap(window):
    window.resize_window(1000, 720)
    window.set_fit_mode(2)
    assert window.pix_width == 1000 / 480
    assert window.pix_height == 720 / 360
    window.set_fit_mode(3)
    assert window.fit_mode == 0


def test_set_and_get_pixel(window):
    window.clear()
    assert window.set_pixel(5, 6, (10, 20, 30, 255)) is True
    assert tuple(window.get_pixel(5, 6))[:3] == (10, 20, 30)
    assert window.set_pixel(480, 0, (1, 1, 1, 255)) is False


def test_transparent_pixel_leaves_canvas(window):
    window.bg_color = (40, 50, 60)
    window.clear()
    window.set_pixel(1, 1, (255, 255, 255, 0))
    assert tuple(window.get_pixel(1, 1))[:3] == (40, 50, 60)


def test_resize_changes_canvas(window):
    window.resize(320, 240)
    assert window.canvas.get_size() == (320, 240)


def test_pointer_and_fullscreen_toggle(window):
    window.toggle_pointer()
    assert window.pointer_visible is False
    window.toggle_fullscreen()
    assert window.fullscreen is True
    window.toggle_fullscreen()
    assert window.fullscreen is False
    assert window.display.get_size() == (960, 720)


def test_update_scales_canvas_to_display(window):
    window.canvas.fill((200, 0, 0))
    window.update()
    assert tuple(window.display.get_at((959, 719)))[:3] == (200, 0, 0)