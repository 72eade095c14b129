"""Queued game events: dialogue lines, options, audio, functions and timers."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass
from typing import Any, Callable

GameFunc = Callable[[Any], None]


class EventType(enum.Enum):
    DIALOGUE_TEXT = "dialogue_text"
    DIALOGUE_OPTION = "dialogue_option"
    AUDIO_START = "audio_start"
    AUDIO_STOP = "audio_stop"
    FUNC = "func"
    WAIT = "wait"


@dataclass(frozen=True)
class DialogueEvent:
    text: str
    name: str = ""


@dataclass(frozen=True)
class DialogueOptionEvent:
    text: str
    func: GameFunc


@dataclass(frozen=True)
class AudioEvent:
    sample: str
    loop: bool = False
    gain: float = 0.0
    pan: float = 0.0
    speed: float = 1.0


@dataclass(frozen=True)
class FuncEvent:
    func: GameFunc


@dataclass(frozen=True)
class WaitEvent:
    """Schedules ``func`` to run ``secs`` seconds later without pausing the queue."""

    secs: float
    func: GameFunc


_PAYLOADS = {
    EventType.DIALOGUE_TEXT: DialogueEvent,
    EventType.DIALOGUE_OPTION: DialogueOptionEvent,
    EventType.AUDIO_START: AudioEvent,
    EventType.AUDIO_STOP: AudioEvent,
    EventType.FUNC: FuncEvent,
    EventType.WAIT: WaitEvent,
}


class Event:
    """An event type paired with its payload."""

    def __init__(self, type: EventType, payload: Any) -> None:
        expected = _PAYLOADS[type]
        if not isinstance(payload, expected):
            raise TypeError(f"{type.name} event needs a {expected.__name__} payload")
        self.type = type
        self.payload = payload

    def play(self, game: Any) -> None:
        """Apply this event to ``game``."""
        payload = self.payload
        if self.type is EventType.DIALOGUE_TEXT:
            game.dialogue_box.set_text(payload.text, payload.name)
        elif self.type is EventType.DIALOGUE_OPTION:
            game.dialogue_box.add_option(payload.text, payload.func)
        elif self.type is EventType.AUDIO_START:
            sample = game.audio_manager.get_sample(payload.sample)
            sample.play(payload.loop, payload.gain, payload.pan, payload.speed)
        elif self.type is EventType.AUDIO_STOP:
            game.audio_manager.get_sample(payload.sample).stop()
        elif self.type is EventType.FUNC:
            payload.func(game)
        elif self.type is EventType.WAIT:
            game.set_scheduled_func(time.monotonic() + payload.secs, payload.func)

    def __repr__(self) -> str:
        return f"Event({self.type.name}, {self.payload!r})"