"""The game: window, resources, dialogue box, event queue and worker threads."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any, Callable

from betweentrees.audio import AudioManager
from betweentrees.dialogue import Dialogue, DialogueState
from betweentrees.events import (
    AudioEvent,
    DialogueEvent,
    DialogueOptionEvent,
    Event,
    EventType,
    FuncEvent,
    WaitEvent,
)
from betweentrees.resource import ResourceLoader
from betweentrees.scene import Scene
from betweentrees.window import Window

TITLE = "Between the Trees"
CANVAS_SIZE = (480, 360)
WINDOW_SIZE = (960, 720)
FLAG_COUNT = 32

GameFunc = Callable[[Any], None]
ThreadProc = Callable[["Game"], Any]

_DIALOGUE_TYPES = (EventType.DIALOGUE_TEXT, EventType.DIALOGUE_OPTION)


class Game:
    """Owns the game state and runs the input and drawing procedures on threads.

    ``event_proc`` and ``drawing_proc`` are each called with the game on a
    thread of their own; either may be None to run without it.
    """

    def __init__(self, event_proc: ThreadProc | None = None,
                 drawing_proc: ThreadProc | None = None) -> None:
        self.window = Window(*CANVAS_SIZE, *WINDOW_SIZE)
        self.window.set_title(TITLE)
        self.window.clear()

        self.audio_manager = AudioManager()
        self.data = ResourceLoader(self.audio_manager)
        self.data.load(0, self)

        self.dialogue_box = Dialogue(self.data)

        self.event_queue: deque[Event] = deque()
        self.wait_until = 0.0
        self.scheduled_func: GameFunc | None = None
        self.scenes: list[Scene] = self.data.scenes
        self.current_scene = -1
        self.flags = 0
        self.mouse_x = 0
        self.mouse_y = 0
        self._stop_event = threading.Event()
        self._lock = threading.RLock()

        self._threads = [
            threading.Thread(target=proc, args=(self,), daemon=True, name=name)
            for proc, name in ((event_proc, "events"), (drawing_proc, "drawing"))
            if proc is not None
        ]
        for thread in self._threads:
            thread.start()

        if self.scenes:
            self.current_scene = 0
            self.scenes[0].start()

    @property
    def scene(self) -> Scene | None:
        """The current scene, or None when no scene is active."""
        if self.current_scene >= 0:
            return self.scenes[self.current_scene]
        return None

    @property
    def scheduled_time(self) -> float:
        """Monotonic time at which the scheduled function is due; 0 when none is."""
        return self.wait_until

    @property
    def should_stop(self) -> bool:
        return self._stop_event.is_set()

    def set_scene(self, index: int) -> bool:
        """Switch to and start scene ``index``; return whether it exists."""
        if 0 <= index < len(self.scenes):
            self.current_scene = index
            self.scenes[index].start()
            return True
        return False

    def clear_event_queue(self) -> None:
        with self._lock:
            self.event_queue.clear()

    def _enqueue(self, event_type: EventType, payload: Any) -> None:
        with self._lock:
            self.event_queue.append(Event(event_type, payload))

    def set_text(self, text: str, name: str = "") -> None:
        """Queue a line of dialogue spoken by ``name``."""
        self._enqueue(EventType.DIALOGUE_TEXT, DialogueEvent(text, name))

    def set_option(self, text: str, func: GameFunc) -> None:
        """Queue a dialogue option that runs ``func`` when chosen."""
        self._enqueue(EventType.DIALOGUE_OPTION, DialogueOptionEvent(text, func))

    def play_audio(self, name: str, loop: bool = False, gain: float = 0.0,
                   pan: float = 0.0, speed: float = 1.0) -> None:
        self._enqueue(EventType.AUDIO_START, AudioEvent(name, loop, gain, pan, speed))

    def stop_audio(self, name: str) -> None:
        self._enqueue(EventType.AUDIO_STOP, AudioEvent(name))

    def play_func(self, func: GameFunc) -> None:
        self._enqueue(EventType.FUNC, FuncEvent(func))

    def after(self, secs: float, func: GameFunc) -> None:
        """Queue an event that schedules ``func`` to run ``secs`` seconds after it plays."""
        self._enqueue(EventType.WAIT, WaitEvent(secs, func))

    def next_event(self) -> None:
        """Play the next queued event, chaining through non-dialogue events and options."""
        with self._lock:
            box = self.dialogue_box
            if not self.event_queue:
                if box.state == DialogueState.DONE and not box.on_option_chooser:
                    box.state = DialogueState.SLIDING_OUT
                return
            event = self.event_queue.popleft()
            event.play(self)
            if not self.event_queue:
                return
            if event.type not in _DIALOGUE_TYPES and box.state != DialogueState.HIDDEN:
                box.state = DialogueState.SLIDING_OUT
                self.next_event()
            elif self.event_queue[0].type is EventType.DIALOGUE_OPTION:
                self.next_event()

    def set_scheduled_func(self, when: float, func: GameFunc) -> None:
        """Schedule ``func`` for monotonic time ``when``."""
        self.wait_until = when
        self.scheduled_func = func

    def play_scheduled_func(self) -> None:
        """Run the scheduled function now and advance the event queue."""
        func = self.scheduled_func
        self.wait_until = 0.0
        self.scheduled_func = None
        if func is not None:
            func(self)
        self.next_event()

    def play_selected_option(self) -> None:
        self.dialogue_box.play_current_option(self)

    def set_flag(self, flag: int, value: bool) -> None:
        """Set or clear story flag ``flag``; flags from 32 on are ignored."""
        if flag < 0:
            raise ValueError(f"flag must not be negative: {flag}")
        if flag >= FLAG_COUNT:
            return
        bit = 1 << flag
        if value:
            self.flags |= bit
        else:
            self.flags &= ~bit

    def get_flag(self, flag: int) -> bool:
        if flag < 0:
            raise ValueError(f"flag must not be negative: {flag}")
        return flag < FLAG_COUNT and bool(self.flags & (1 << flag))

    def set_mouse_coords(self, x: int, y: int) -> None:
        self.mouse_x = x
        self.mouse_y = y

    def stop(self) -> None:
        """Ask the game and its threads to finish."""
        self._stop_event.set()

    def join(self) -> None:
        """Wait for the worker threads to finish."""
        current = threading.current_thread()
        for thread in self._threads:
            if thread is not current:
                thread.join()