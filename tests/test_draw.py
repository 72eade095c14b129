import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from betweentrees.dialogue import DialogueState
from betweentrees.draw import BACKDROP, drawer
from betweentrees.game import Game


@pytest.fixture
def game(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    g = Game(None, None)
    g.stop()
    yield g
    g.join()


def test_frame_fills_backdrop(game):
    drawer(game)
    pixel = game.window.canvas.get_at((0, 0))
    assert (pixel.r, pixel.g, pixel.b) == (0, 0, 255)
    assert BACKDROP == (0, 0, 255)


def test_writing_advances_one_char(game):
    box = game.dialogue_box
    box.text = "hello"
    box.state = DialogueState.WRITING
    box.current_char = 0
    drawer(game)
    assert box.current_char == 1
    assert box.state == DialogueState.WRITING


def test_sliding_in_advances_transition(game):
    box = game.dialogue_box
    assert box.state == DialogueState.SLIDING_IN
    before = box.transition
    drawer(game)
    assert box.transition > before


def test_hidden_dialogue_untouched(game):
    box = game.dialogue_box
    box.state = DialogueState.HIDDEN
    box.transition = 0.5
    drawer(game)
    assert box.transition == 0.5
    assert box.state == DialogueState.HIDDEN