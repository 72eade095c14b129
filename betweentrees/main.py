"""Command that starts the game."""

from __future__ import annotations

import argparse
import time

import pygame

from betweentrees.draw import drawer
from betweentrees.game import Game
from betweentrees.listener import event_listener

MIXER_CHANNELS = 16
_POLL_SECONDS = 0.001


def _init_audio() -> None:
    try:
        pygame.mixer.init()
        pygame.mixer.set_num_channels(MIXER_CHANNELS)
    except pygame.error:
        pass


def main(argv: list[str] | None = None) -> int:
    """Run the game until it is closed; return the exit status."""
    parser = argparse.ArgumentParser(prog="betweentrees", description="Play Between the Trees.")
    parser.parse_args(argv)

    pygame.init()
    _init_audio()
    game = Game(event_listener, drawer)
    try:
        while not game.should_stop:
            due = game.scheduled_time
            if due > 0 and time.monotonic() >= due:
                game.play_scheduled_func()
            time.sleep(_POLL_SECONDS)
    except KeyboardInterrupt:
        game.stop()
    game.join()
    pygame.quit()
    return 0