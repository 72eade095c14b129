"""Scenes: a background, actors and the callbacks that drive them."""

from __future__ import annotations

from typing import Any, Callable

import pygame

from betweentrees.actor import Actor


class Scene:
    """A background with actors and callbacks for start, clicks, keys and dialogue end.

    Callbacks receive the game as their first argument. The click and key
    callbacks can be reassigned at any time through their attributes.
    """

    def __init__(self, game: Any, background: pygame.Surface | None,
                 starting_func: Callable[[Any], None] | None,
                 click_event: Callable[[Any, int, int], None] | None,
                 key_press_event: Callable[[Any, int], None] | None,
                 dialogue_end_event: Callable[[Any], None] | None) -> None:
        self.game = game
        self.background = background
        self.starting_func = starting_func
        self.click_event = click_event
        self.key_press_event = key_press_event
        self.dialogue_end_event = dialogue_end_event
        self.actors: dict[str, Actor] = {}

    def start(self) -> None:
        """Run the starting function, then advance the game's event queue."""
        if self.starting_func is not None:
            self.starting_func(self.game)
            self.game.next_event()

    def click(self, x: int, y: int) -> bool:
        """Handle a click; return whether the scene had a click handler."""
        if self.click_event is None:
            return False
        self.click_event(self.game, x, y)
        self.game.next_event()
        return True

    def key_press(self, key: int) -> bool:
        """Handle a key press; return whether the scene had a key handler."""
        if self.key_press_event is None:
            return False
        self.key_press_event(self.game, key)
        self.game.next_event()
        return True

    def dialogue_end(self) -> None:
        if self.dialogue_end_event is not None:
            self.dialogue_end_event(self.game)

    def get_actor(self, name: str) -> Actor | None:
        return self.actors.get(name)

    def create_actor(self, name: str) -> None:
        """Add an actor called ``name`` unless one already exists."""
        self.actors.setdefault(name, Actor(name))

    def draw(self, surface: pygame.Surface) -> None:
        if self.background is not None:
            surface.blit(self.background, (0, 0))
        for actor in self.actors.values():
            actor.draw(surface)