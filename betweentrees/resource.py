"""Loading fonts, images, sounds and scenes in numbered banks."""

from __future__ import annotations

import logging
from typing import Any

import pygame

from betweentrees.scene import Scene
from betweentrees.script import scene0_end, scene0_start

logger = logging.getLogger(__name__)

FONT_SIZE = 12


def _builtin_font() -> pygame.font.Font | None:
    try:
        if not pygame.font.get_init():
            pygame.font.init()
        return pygame.font.Font(None, FONT_SIZE)
    except (pygame.error, OSError):
        return None


def _load_image(path: str) -> pygame.Surface | None:
    try:
        return pygame.image.load(path)
    except (pygame.error, FileNotFoundError, OSError):
        logger.warning("could not load image %s", path)
        return None


class ResourceLoader:
    """Holds the font, dialogue images, backgrounds and scenes of the loaded bank."""

    def __init__(self, audio_manager: Any) -> None:
        self.audio_manager = audio_manager
        self.font = _builtin_font()
        self.text_container: pygame.Surface | None = None
        self.name_container: pygame.Surface | None = None
        self.backgrounds: list[pygame.Surface | None] = []
        self.scenes: list[Scene] = []

    @property
    def num_scenes(self) -> int:
        return len(self.scenes)

    def load(self, bank: int, game: Any) -> None:
        """Load resource bank ``bank``; unknown banks load nothing."""
        if bank != 0:
            return
        self.audio_manager.load_sample("bg_music", "music.opus")
        self.audio_manager.load_sample("short_clip", "music_short.opus")
        self.text_container = _load_image("./dialogue.png")
        self.name_container = _load_image("./name_container.png")
        self.backgrounds = [_load_image("./background/test.png")]
        self.scenes = [Scene(game, self.backgrounds[0], scene0_start, None, None, scene0_end)]
        logger.debug("loaded %d scene(s)", len(self.scenes))

    def get_background(self, index: int) -> pygame.Surface | None:
        return self.backgrounds[index]