"""The drawing loop that renders the scene and dialogue box at a fixed rate."""

from __future__ import annotations

import time
from typing import Any

from betweentrees.dialogue import DialogueState

FPS = 30
BACKDROP = (0, 0, 255)


def drawer(game: Any) -> None:
    """Draw frames at 30 per second until the game stops."""
    window = game.window
    box = game.dialogue_box
    frame = 1.0 / FPS
    deadline = time.monotonic()
    while True:
        window.clear()
        window.canvas.fill(BACKDROP)

        scene = game.scene
        if scene is not None:
            scene.draw(window.canvas)

        if box.state != DialogueState.HIDDEN:
            box.draw(window.canvas)
            if box.state == DialogueState.WRITING:
                box.next_char()

        window.update()

        if game.should_stop:
            break
        deadline += frame
        delay = deadline - time.monotonic()
        if delay > 0:
            time.sleep(delay)
        else:
            deadline = time.monotonic()