"""Characters that appear on screen with an image per emotion."""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

logger = logging.getLogger(__name__)


class Actor:
    """A named character with a current emotion image, position and visibility.

    Images are looked up as ``<name>/<emotion>.png`` relative to the working
    directory.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.emotion = ""
        self.visible = False
        self.x = 0
        self.y = 0
        self.image: pygame.Surface | None = None

    def load_emotion(self, emotion: str) -> None:
        """Switch to the image for ``emotion``; keep the current one if it is missing."""
        path = Path(self.name) / f"{emotion}.png"
        try:
            image = pygame.image.load(str(path))
        except (pygame.error, FileNotFoundError, OSError):
            logger.warning("%s does not have emotion '%s'", self.name, emotion)
            return
        self.emotion = emotion
        self.image = image

    def set_position(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def draw(self, surface: pygame.Surface) -> None:
        """Blit the current image onto ``surface`` if visible and loaded."""
        if self.visible and self.image is not None:
            surface.blit(self.image, (self.x, self.y))