"""The dialogue box: wrapped text written out character by character, plus options."""

from __future__ import annotations

import enum
import math
import time
from dataclasses import dataclass
from typing import Any, Callable

import pygame

LINE_WIDTH = 60
LINE_HEIGHT = 12
TEXT_TOP = 300
OPTION_AREA_BOTTOM = 360
WHITE = (255, 255, 255)
GREY = (192, 192, 192)


def smooth_transition(l_bound: int, r_bound: int, val: float) -> int:
    """Ease from ``l_bound`` at ``val`` 0 to ``r_bound`` at ``val`` 1 along a quarter circle."""
    val = min(max(val, 0.0), 1.0)
    return int(math.sqrt(1.0 - (val - 1) ** 2) * (r_bound - l_bound) + l_bound)


def _wrap_line(line: str) -> str:
    pieces = []
    while len(line) > LINE_WIDTH:
        cut = line.rfind(" ", 0, LINE_WIDTH) + 1
        if cut == 0:
            cut = LINE_WIDTH
        pieces.append(line[:cut])
        line = line[cut:]
    pieces.append(line)
    return "\n".join(pieces)


def insert_newlines(text: str) -> str:
    """Break every line longer than 60 characters after its last space that fits."""
    return "\n".join(_wrap_line(line) for line in text.split("\n"))


class DialogueState(enum.IntEnum):
    HIDDEN = 0
    WRITING = 1
    DONE = 2
    SLIDING_IN = 3
    SLIDING_OUT = 4


@dataclass
class Option:
    text: str
    func: Callable[[Any], None]
    y: int = 0


class Dialogue:
    """Dialogue box state and drawing."""

    def __init__(self, resources: Any) -> None:
        self.transition = 0.0
        self.state = DialogueState.HIDDEN
        self.current_char = 0
        self.current_option = -1
        self.on_option_chooser = False
        self.text = ""
        self.name = ""
        self.options: list[Option] = []
        self.font = resources.font
        self.text_container = resources.text_container
        self.name_container = resources.name_container
        self.start_time = time.monotonic()

    @property
    def num_options(self) -> int:
        return len(self.options)

    def _blit_text(self, surface: pygame.Surface, text: str, pos: tuple[int, int],
                   color: tuple[int, int, int]) -> None:
        if self.font is not None and text:
            surface.blit(self.font.render(text, False, color), pos)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the box onto ``surface`` and advance any slide animation."""
        if not self.text or self.state == DialogueState.HIDDEN:
            return
        y = 372 - smooth_transition(0, 72, self.transition)
        if self.text_container is not None:
            surface.blit(self.text_container, (0, y))
        if self.name:
            if self.name_container is not None:
                surface.blit(self.name_container, ((len(self.name) - 39) * 8, y - 12))
            self._blit_text(surface, self.name, (2, y - 9), WHITE)

        if self.state in (DialogueState.WRITING, DialogueState.DONE):
            write_y = TEXT_TOP + 3
            start = 0
            for line in self.text.split("\n"):
                if start >= len(self.text):
                    break
                end = start + len(line)
                if self.state == DialogueState.WRITING and self.current_char < end:
                    self._blit_text(surface, self.text[start:self.current_char + 1],
                                    (2, write_y), WHITE)
                    break
                self._blit_text(surface, line, (2, write_y), WHITE)
                start = end + 1
                write_y += LINE_HEIGHT
            if self.state == DialogueState.DONE and self.options:
                for index, option in enumerate(self.options):
                    if index == self.current_option:
                        self._blit_text(surface, "> " + option.text, (2, write_y), WHITE)
                    else:
                        self._blit_text(surface, option.text, (18, write_y), GREY)
                    option.y = write_y
                    write_y += LINE_HEIGHT
                self.on_option_chooser = True
            else:
                self.on_option_chooser = False
        elif self.state == DialogueState.SLIDING_IN:
            if self.transition < 1:
                self.transition += 0.1
            else:
                self.state = DialogueState.WRITING
        elif self.state == DialogueState.SLIDING_OUT:
            if self.transition > 0.0:
                self.transition -= 0.1
            else:
                self.state = DialogueState.HIDDEN

    def set_text(self, text: str, name: str | None = None) -> None:
        """Show ``text``; with ``name`` also restart writing and set the speaker."""
        if name is None:
            self.text = insert_newlines(text)
            if self.state in (DialogueState.HIDDEN, DialogueState.DONE):
                self.state = DialogueState.SLIDING_IN
            return
        self.current_char = 0
        self.text = insert_newlines(text)
        if self.state == DialogueState.HIDDEN:
            self.state = DialogueState.SLIDING_IN
        elif self.state in (DialogueState.DONE, DialogueState.SLIDING_OUT):
            self.state = DialogueState.WRITING
        self.name = name

    def add_option(self, text: str, func: Callable[[Any], None]) -> None:
        self.options.append(Option(text, func))

    def set_current_option_by_y(self, y: int) -> bool:
        """Select the option drawn at canvas row ``y``; return whether one was hit."""
        upper = OPTION_AREA_BOTTOM
        for index in reversed(range(len(self.options))):
            option = self.options[index]
            if option.y <= y < upper:
                self.current_option = index
                return True
            upper = option.y
        self.current_option = -1
        return False

    def play_current_option(self, game: Any) -> None:
        """Run the selected option's function and clear all options."""
        if self.current_option >= 0:
            self.options[self.current_option].func(game)
            self.options.clear()
            self.on_option_chooser = False
            self.current_option = -1

    def next_char(self) -> bool:
        """Advance the writing cursor; at the end mark the text done and return False."""
        self.current_char += 1
        if self.current_char >= len(self.text):
            self.state = DialogueState.DONE
            self.current_char = 0
            return False
        return True