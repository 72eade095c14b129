import time
from types import SimpleNamespace

import pytest

from betweentrees.events import (
    AudioEvent,
    DialogueEvent,
    DialogueOptionEvent,
    Event,
    EventType,
    FuncEvent,
    WaitEvent,
)


class FakeBox:
    def __init__(self):
        self.texts = []
        self.options = []

    def set_text(self, text, name):
        self.texts.append((text, name))

    def add_option(self, text, func):
        self.options.append((text, func))


class FakeSample:
    def __init__(self):
        self.plays = []
        self.stopped = False

    def play(self, loop, gain, pan, speed):
        self.plays.append((loop, gain, pan, speed))

    def stop(self):
        self.stopped = True


class FakeAudio:
    def __init__(self):
        self.samples = {}

    def get_sample(self, name):
        return self.samples.setdefault(name, FakeSample())


class FakeGame:
    def __init__(self):
        self.dialogue_box = FakeBox()
        self.audio_manager = FakeAudio()
        self.scheduled = None

    def set_scheduled_func(self, when, func):
        self.scheduled = (when, func)


def test_dialogue_text_event():
    game = FakeGame()
    Event(EventType.DIALOGUE_TEXT, DialogueEvent("Dialogue test", "Bob")).play(game)
    assert game.dialogue_box.texts == [("Dialogue test", "Bob")]


def test_dialogue_option_event():
    game = FakeGame()
    Event(EventType.DIALOGUE_OPTION, DialogueOptionEvent("Audio", print)).play(game)
    assert game.dialogue_box.options == [("Audio", print)]


def test_audio_start_event():
    game = FakeGame()
    Event(EventType.AUDIO_START, AudioEvent("bg_music", False, -0.95, -1.0, 2.0)).play(game)
    assert game.audio_manager.samples["bg_music"].plays == [(False, -0.95, -1.0, 2.0)]


def test_audio_stop_event():
    game = FakeGame()
    Event(EventType.AUDIO_STOP, AudioEvent("bg_music")).play(game)
    assert game.audio_manager.samples["bg_music"].stopped is True


def test_func_event_calls_with_game():
    game = FakeGame()
    seen = []
    Event(EventType.FUNC, FuncEvent(seen.append)).play(game)
    assert seen == [game]
    assert game.scheduled is None


def test_wait_event_schedules():
    game = FakeGame()
    before = time.monotonic()
    Event(EventType.WAIT, WaitEvent(5.0, print)).play(game)
    after = time.monotonic()
    when, func = game.scheduled
    assert before + 5.0 <= when <= after + 5.0
    assert func is print


def test_payload_must_match_type():
    with pytest.raises(TypeError):
        Event(EventType.WAIT, FuncEvent(print))


def test_event_keeps_type():
    event = Event(EventType.AUDIO_STOP, AudioEvent("x"))
    assert event.type is EventType.AUDIO_STOP
    assert event.payload == AudioEvent("x", False, 0.0, 0.0, 1.0)


def test_audio_event_defaults_unused_for_other_games():
    game = SimpleNamespace(audio_manager=FakeAudio())
    Event(EventType.AUDIO_START, AudioEvent("short_clip", True)).play(game)
    assert game.audio_manager.samples["short_clip"].plays == [(True, 0.0, 0.0, 1.0)]