"""The story script for scene 0: a walk through the engine's features."""

from __future__ import annotations

import logging
from typing import Any

import pygame

logger = logging.getLogger(__name__)


def _key_name(key: int) -> str:
    try:
        return pygame.key.name(key)
    except pygame.error:
        return str(key)


def scene0_start(game: Any) -> None:
    logger.debug("scene0_start")
    scene = game.scene
    scene.create_actor("Car")
    scene.get_actor("Car").load_emotion("happy")

    game.set_text("Dialogue test")
    game.set_text("Dialogue with name test", "Bob")
    game.set_text("Dialogue options test")
    game.set_text("What kind of functions would you like to test?")
    game.set_option("Audio", scene0_audio)
    game.set_option("Scheduled events", scene0_wait0)
    game.set_option("Mouse click / keyboard events", scene0_event)
    game.set_option("Actors", scene0_actor)


def scene0_audio(game: Any) -> None:
    logger.debug("scene0_audio")
    game.play_audio("bg_music")
    game.set_text("Audio test")
    game.stop_audio("bg_music")
    game.set_text("Audio stop test")
    game.play_audio("short_clip", True)
    game.set_text("Looping audio test")
    game.stop_audio("short_clip")
    game.play_audio("bg_music", False, -0.95, -1.0, 2.0)
    game.set_text("Audio gain, pan, and speed test")
    game.stop_audio("bg_music")
    game.set_text("Goodbye!")
    game.play_func(scene0_end)


def scene0_wait0(game: Any) -> None:
    logger.debug("scene0_wait0")
    game.after(5.0, scene0_wait1)
    game.set_text("Scheduled event test (wait 5 seconds)")


def scene0_wait1(game: Any) -> None:
    logger.debug("scene0_wait1")
    game.set_text("Test complete!\nGoodbye!")
    game.play_func(scene0_end)


def scene0_event(game: Any) -> None:
    logger.debug("scene0_event")
    game.scene.key_press_event = scene0_keypress
    game.play_audio("bg_music", True)
    game.set_text("Keyboard event test: please press any key")


def scene0_keypress(game: Any, key: int) -> None:
    logger.debug("scene0_keypress")
    game.clear_event_queue()
    game.scene.key_press_event = None
    game.scene.click_event = scene0_click
    game.set_text(f"You pressed the {_key_name(key)} key!\n"
                  "Click event test: click the screen somewhere")


def scene0_click(game: Any, x: int, y: int) -> None:
    logger.debug("scene0_click")
    game.clear_event_queue()
    game.scene.click_event = None
    game.set_text(f"You clicked at coordinates {x}, {y}!")
    game.set_text("Tests complete!\nGoodbye!")
    game.play_func(scene0_end)


def scene0_actor(game: Any) -> None:
    logger.debug("scene0_actor")
    car = game.scene.get_actor("Car")
    if car is None:
        raise LookupError("the scene has no actor 'Car'")
    car.load_emotion("never")
    car.set_position(100, 100)
    car.show()
    logger.debug("car emotion: %s", car.emotion)
    game.set_text("I am a car", car.name)
    game.play_func(scene0_end)


def scene0_end(game: Any) -> None:
    logger.debug("scene0_end")
    game.stop()