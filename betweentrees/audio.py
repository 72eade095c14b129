"""Loading and playing sound samples by name."""

from __future__ import annotations

import pygame


def _resample(sound: pygame.mixer.Sound, speed: float) -> pygame.mixer.Sound:
    """Return ``sound`` played back ``speed`` times faster by dropping or repeating frames."""
    if speed == 1.0:
        return sound
    mixer_format = pygame.mixer.get_init()
    if mixer_format is None:
        return sound
    _, size, channels = mixer_format
    frame = abs(size) // 8 * channels
    raw = memoryview(sound.get_raw())
    frames = len(raw) // frame
    count = int(frames / speed)
    data = b"".join(
        raw[int(i * speed) * frame:(int(i * speed) + 1) * frame] for i in range(count)
    )
    return pygame.mixer.Sound(buffer=data)


class AudioSample:
    """A sound with base gain, pan and speed that play() adjusts."""

    def __init__(self) -> None:
        self.gain = 1.0
        self.pan = 0.0
        self.speed = 1.0
        self.sound: pygame.mixer.Sound | None = None
        self.channel: pygame.mixer.Channel | None = None

    @property
    def loaded(self) -> bool:
        return self.sound is not None

    def load(self, path: str) -> bool:
        """Load the sound at ``path``; return whether it succeeded."""
        try:
            self.sound = pygame.mixer.Sound(str(path))
        except (pygame.error, FileNotFoundError, OSError):
            self.sound = None
            return False
        return True

    def play(self, loop: bool, gain: float, pan: float, speed: float):
        """Play with gain and pan added to, and speed multiplied by, the base values.

        Does nothing when no sound is loaded or the resulting speed is not positive.
        """
        if self.sound is None:
            return None
        total_speed = self.speed * speed
        if total_speed <= 0:
            return None
        volume = max(0.0, self.gain + gain)
        balance = max(-1.0, min(1.0, self.pan + pan))
        sound = _resample(self.sound, total_speed)
        channel = sound.play(loops=-1 if loop else 0)
        if channel is not None:
            left = volume * (1.0 - max(balance, 0.0))
            right = volume * (1.0 + min(balance, 0.0))
            channel.set_volume(min(left, 1.0), min(right, 1.0))
        self.channel = channel
        return channel

    def stop(self) -> None:
        if self.channel is not None:
            self.channel.stop()
            self.channel = None


class AudioManager:
    """Samples registered by name."""

    def __init__(self) -> None:
        self._samples: dict[str, AudioSample] = {}

    def load_sample(self, name: str, path: str) -> bool:
        """Load ``path`` and register it as ``name``; return whether loading succeeded."""
        sample = AudioSample()
        if not sample.load(path):
            return False
        self._samples[name] = sample
        return True

    def get_sample(self, name: str) -> AudioSample:
        """Return the sample called ``name``; an unknown name yields a silent, empty sample."""
        return self._samples.setdefault(name, AudioSample())