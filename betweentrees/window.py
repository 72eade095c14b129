"""A window that shows a fixed-resolution canvas scaled to its size."""

from __future__ import annotations

import pygame


class Window:
    """Display window plus a fixed-size canvas that all drawing goes to.

    ``update`` scales the canvas onto the display according to the fit mode:
    0 keeps the aspect ratio inside the window, 1 keeps it while filling the
    window, 2 stretches to fill.
    """

    def __init__(self, width: int, height: int, win_width: int, win_height: int,
                 bg_color=(0, 0, 0)) -> None:
        if not pygame.display.get_init():
            pygame.display.init()
        self.width = width
        self.height = height
        self.win_width = win_width
        self.win_height = win_height
        self.bg_color = bg_color
        self.bitmap_x = 0
        self.bitmap_y = 0
        self.pix_width = 1.0
        self.pix_height = 1.0
        self.fullscreen = False
        self.pointer_visible = True
        self.fit_mode = 0
        self._windowed_size = (win_width, win_height)
        self.display = pygame.display.set_mode((win_width, win_height), pygame.RESIZABLE)
        self.canvas = pygame.Surface((width, height))
        self.fit_screen()

    def set_title(self, title: str) -> None:
        pygame.display.set_caption(title)

    def set_fit_mode(self, mode: int) -> None:
        """Set the fit mode; values above 2 wrap to 0."""
        self.fit_mode = 0 if mode > 2 else mode
        self.fit_screen()

    def set_pixel(self, x: int, y: int, color) -> bool:
        """Blend ``color`` onto the canvas pixel; return False if it lies outside."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return False
        new = pygame.Color(*color)
        old = self.canvas.get_at((x, y))
        alpha = new.a / 255
        blended = tuple(round(n * alpha + o * (1 - alpha))
                        for n, o in zip((new.r, new.g, new.b), (old.r, old.g, old.b)))
        self.canvas.set_at((x, y), blended)
        return True

    def get_pixel(self, x: int, y: int) -> pygame.Color:
        return self.canvas.get_at((x, y))

    def resize(self, width: int, height: int) -> None:
        """Change the canvas resolution."""
        self.width = width
        self.height = height
        self.canvas = pygame.Surface((width, height))

    def resize_window(self, width: int, height: int) -> None:
        """Resize the display window, leaving full-screen mode if needed."""
        self.win_width = width
        self.win_height = height
        self.fullscreen = False
        self._windowed_size = (width, height)
        self.display = pygame.display.set_mode((width, height), pygame.RESIZABLE)

    def clear(self) -> None:
        self.canvas.fill(self.bg_color)

    def toggle_fullscreen(self) -> None:
        self.fullscreen = not self.fullscreen
        if self.fullscreen:
            self._windowed_size = self.display.get_size()
            self.display = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.display = pygame.display.set_mode(self._windowed_size, pygame.RESIZABLE)

    def toggle_pointer(self) -> None:
        self.pointer_visible = not self.pointer_visible
        pygame.mouse.set_visible(self.pointer_visible)

    def fit_screen(self) -> None:
        """Recompute the canvas scale and offset from the current display size."""
        self.win_width, self.win_height = self.display.get_size()
        self.pix_width = self.win_width / self.width
        self.pix_height = self.win_height / self.height
        if self.fit_mode == 0:
            scale = min(self.pix_width, self.pix_height)
            self.pix_width = self.pix_height = scale
        elif self.fit_mode == 1:
            scale = max(self.pix_width, self.pix_height)
            self.pix_width = self.pix_height = scale
        self.bitmap_x = int((self.win_width - self.width * self.pix_width) / 2)
        self.bitmap_y = int((self.win_height - self.height * self.pix_height) / 2)

    def to_canvas(self, x: int, y: int) -> tuple[int, int]:
        """Convert window coordinates to canvas coordinates."""
        return (int((x - self.bitmap_x) / self.pix_width),
                int((y - self.bitmap_y) / self.pix_height))

    def update(self) -> None:
        """Draw the scaled canvas onto the display and flip it."""
        self.display.fill(self.bg_color)
        size = (int(self.width * self.pix_width), int(self.height * self.pix_height))
        self.display.blit(pygame.transform.scale(self.canvas, size),
                          (self.bitmap_x, self.bitmap_y))
        pygame.display.flip()