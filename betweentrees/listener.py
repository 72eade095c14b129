"""Input handling: keyboard, mouse and window events."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import pygame

from betweentrees.dialogue import DialogueState

logger = logging.getLogger(__name__)

_WAIT_MS = 100
_SHIFT_KEYS = (pygame.K_LSHIFT, pygame.K_RSHIFT)


@dataclass
class ModifierKeys:
    """Which modifier keys are currently held."""

    shift: bool = False
    ctrl: bool = False
    alt: bool = False


def _advance(game: Any, modifiers: ModifierKeys, check_options: bool) -> None:
    box = game.dialogue_box
    if box.state == DialogueState.WRITING:
        box.state = DialogueState.DONE
    elif box.state == DialogueState.SLIDING_IN:
        box.state = DialogueState.WRITING
    elif box.state == DialogueState.SLIDING_OUT:
        box.state = DialogueState.HIDDEN
    else:
        if check_options and box.on_option_chooser:
            if not 0 <= box.current_option < box.num_options:
                return
            game.play_selected_option()
        game.next_event()
        if box.state == DialogueState.WRITING and modifiers.shift:
            box.state = DialogueState.DONE


def _key_down(game: Any, key: int, modifiers: ModifierKeys) -> None:
    window = game.window
    box = game.dialogue_box
    choosing = box.state == DialogueState.DONE and box.on_option_chooser
    if key in _SHIFT_KEYS:
        if box.state == DialogueState.WRITING:
            box.state = DialogueState.DONE
        modifiers.shift = True
    elif key == pygame.K_LCTRL:
        modifiers.ctrl = True
    elif key == pygame.K_LALT:
        modifiers.alt = True
    elif key == pygame.K_F11 or (modifiers.alt and key == pygame.K_RETURN):
        window.toggle_fullscreen()
        window.fit_screen()
    elif modifiers.ctrl and modifiers.alt and key == pygame.K_f:
        window.set_fit_mode(window.fit_mode + 1)
        window.fit_screen()
    elif key == pygame.K_DOWN and choosing:
        if box.current_option < box.num_options - 1:
            box.current_option += 1
        else:
            box.current_option = 0
    elif key == pygame.K_UP and choosing:
        if box.current_option > 0:
            box.current_option -= 1
        else:
            box.current_option = box.num_options - 1
    elif game.scene is not None:
        if not game.scene.key_press(key) and key == pygame.K_RETURN:
            _advance(game, modifiers, check_options=True)


def _key_up(key: int, modifiers: ModifierKeys) -> None:
    if key in _SHIFT_KEYS:
        modifiers.shift = False
    elif key == pygame.K_LCTRL:
        modifiers.ctrl = False
    elif key == pygame.K_LALT:
        modifiers.alt = False


def _mouse_down(game: Any, pos: tuple[int, int], modifiers: ModifierKeys) -> None:
    scene = game.scene
    if scene is None:
        return
    x, y = game.window.to_canvas(*pos)
    box = game.dialogue_box
    logger.debug("click at %d, %d", x, y)
    if box.on_option_chooser and box.set_current_option_by_y(y):
        game.play_selected_option()
        game.next_event()
    elif not scene.click(x, y):
        _advance(game, modifiers, check_options=False)


def handle_event(game: Any, event: pygame.event.Event, modifiers: ModifierKeys) -> None:
    """Apply one input event to the game, updating ``modifiers`` as keys change."""
    if event.type == pygame.VIDEORESIZE:
        game.window.fit_screen()
    elif event.type == pygame.QUIT:
        game.stop()
    elif event.type == pygame.KEYDOWN:
        _key_down(game, event.key, modifiers)
    elif event.type == pygame.KEYUP:
        _key_up(event.key, modifiers)
    elif event.type == pygame.MOUSEBUTTONDOWN:
        _mouse_down(game, event.pos, modifiers)
    elif event.type == pygame.MOUSEMOTION and game.dialogue_box.on_option_chooser:
        _, y = game.window.to_canvas(*event.pos)
        game.dialogue_box.set_current_option_by_y(y)


def event_listener(game: Any) -> None:
    """Wait for input events and handle them until the game stops."""
    modifiers = ModifierKeys()
    window = game.window
    while not game.should_stop:
        game.set_mouse_coords(*window.to_canvas(*pygame.mouse.get_pos()))
        event = pygame.event.wait(_WAIT_MS)
        if event.type != pygame.NOEVENT:
            handle_event(game, event, modifiers)