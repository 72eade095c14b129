from types import SimpleNamespace

import pygame
import pytest

from betweentrees.dialogue import (
    Dialogue,
    DialogueState,
    insert_newlines,
    smooth_transition,
)


@pytest.fixture
def box():
    return Dialogue(SimpleNamespace(font=None, text_container=None, name_container=None))


def test_smooth_transition_endpoints():
    assert smooth_transition(0, 72, 0.0) == 0
    assert smooth_transition(0, 72, 1.0) == 72


def test_smooth_transition_is_monotonic():
    values = [smooth_transition(0, 72, step / 10) for step in range(11)]
    assert values == sorted(values)


def test_insert_newlines_leaves_short_text():
    assert insert_newlines("Dialogue test") == "Dialogue test"
    assert insert_newlines("Test complete!\nGoodbye!") == "Test complete!\nGoodbye!"


def test_insert_newlines_wraps_long_lines():
    text = " ".join(["word"] * 40)
    wrapped = insert_newlines(text)
    lines = wrapped.split("\n")
    assert len(lines) > 1
    assert all(len(line) <= 60 for line in lines)
    assert wrapped.replace(" \n", " ") == text


def test_insert_newlines_keeps_existing_breaks():
    text = "short\n" + " ".join(["tree"] * 30)
    wrapped = insert_newlines(text)
    assert wrapped.startswith("short\n")
    assert wrapped.replace(" \n", " ") == text


def test_set_text_from_hidden_slides_in(box):
    box.set_text("hello", "Bob")
    assert box.state == DialogueState.SLIDING_IN
    assert box.name == "Bob"
    assert box.text == "hello"


def test_set_text_when_done_writes_again(box):
    box.state = DialogueState.DONE
    box.current_char = 3
    box.set_text("next", "")
    assert box.state == DialogueState.WRITING
    assert box.current_char == 0


def test_set_text_without_name_keeps_name(box):
    box.set_text("one", "Bob")
    box.state = DialogueState.DONE
    box.set_text("two")
    assert box.state == DialogueState.SLIDING_IN
    assert box.name == "Bob"


def test_next_char_reaches_end(box):
    box.set_text("abc", "")
    box.state = DialogueState.WRITING
    assert box.next_char() is True
    assert box.next_char() is True
    assert box.next_char() is False
    assert box.state == DialogueState.DONE
    assert box.current_char == 0


def test_option_selection_by_y(box):
    box.add_option("a", print)
    box.add_option("b", print)
    box.options[0].y = 303
    box.options[1].y = 315
    assert box.set_current_option_by_y(320) is True
    assert box.current_option == 1
    assert box.set_current_option_by_y(305) is True
    assert box.current_option == 0
    assert box.set_current_option_by_y(100) is False
    assert box.current_option == -1


def test_play_current_option_runs_and_clears(box):
    seen = []
    box.add_option("go", seen.append)
    box.current_option = 0
    box.play_current_option("game")
    assert seen == ["game"]
    assert box.num_options == 0
    assert box.current_option == -1


def test_play_without_selection_does_nothing(box):
    seen = []
    box.add_option("go", seen.append)
    box.play_current_option("game")
    assert seen == []
    assert box.num_options == 1


def test_draw_slides_in_then_writes(box):
    surface = pygame.Surface((480, 360))
    box.set_text("hi", "")
    for _ in range(20):
        box.draw(surface)
        if box.state == DialogueState.WRITING:
            break
    assert box.state == DialogueState.WRITING
    assert box.transition >= 1


def test_draw_slides_out_to_hidden(box):
    surface = pygame.Surface((480, 360))
    box.set_text("hi", "")
    box.transition = 0.3
    box.state = DialogueState.SLIDING_OUT
    for _ in range(10):
        box.draw(surface)
    assert box.state == DialogueState.HIDDEN


def test_draw_lays_out_options(box):
    surface = pygame.Surface((480, 360))
    box.set_text("question", "")
    box.state = DialogueState.DONE
    box.add_option("a", print)
    box.add_option("b", print)
    box.draw(surface)
    assert box.on_option_chooser is True
    assert box.options[1].y - box.options[0].y == 12
    assert box.options[0].y > 300