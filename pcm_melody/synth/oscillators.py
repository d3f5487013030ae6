# oscillators.py
"""
Bare-bones oscillators: sine, square, saw.

A waveform maps a phase in [0, 1) to an amplitude in [-1, 1].
A sound maps a time in seconds to an amplitude:
- WaveSound(waveform, frequency)  # infinite repeating wave
- NoSound()                       # rests
"""

from __future__ import annotations

import math
from typing import Callable, Dict, Protocol

Waveform = Callable[[float], float]


# ===== WAVEFORMS (phase in [0, 1)) =====
def sine_wave(phase: float) -> float:
    return math.sin(phase * 2 * math.pi)


def square_wave(phase: float) -> float:
    # 50% duty, no smoothing; phase 0.5 is already the high half
    if phase < 0.5:
        return -1.0
    return 1.0


def saw_wave(phase: float) -> float:
    return abs(4 * phase - 2) - 1


_OSC_LOOKUP: Dict[str, Waveform] = {
    "sine": sine_wave,
    "square": square_wave,
    "saw": saw_wave,
    "sawtooth": saw_wave,
}


def get_waveform(name: str) -> Waveform:
    fn = _OSC_LOOKUP.get(name.lower())
    if fn is None:
        raise ValueError(f"Unknown waveform: {name!r} (valid: {list(_OSC_LOOKUP)})")
    return fn


# ===== SOUNDS (time in seconds) =====
class Sound(Protocol):
    def sample(self, t: float) -> float:
        ...


class NoSound:
    """Exact silence."""

    def sample(self, t: float) -> float:
        return 0.0

    def __repr__(self):
        return "NoSound()"


class WaveSound:
    """A waveform repeated forever at a fixed frequency (Hz)."""

    def __init__(self, waveform: Waveform, frequency: float):
        if not frequency > 0:
            raise ValueError(f"frequency must be > 0 Hz, got {frequency!r}")
        self.waveform = waveform
        self.frequency = frequency

    def sample(self, t: float) -> float:
        wave_length = 1 / self.frequency
        return self.waveform(math.fmod(t, wave_length) * self.frequency)

    def __repr__(self):
        name = getattr(self.waveform, "__name__", repr(self.waveform))
        return f"WaveSound({name}, {self.frequency} Hz)"
