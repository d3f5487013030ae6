# envelopes.py
"""
Linear fade-in/out wrapped around another sound to prevent clicks.

    |  /‾‾‾‾‾‾‾‾‾‾‾‾\\
    | /              \\
    +------------------->  t
    0  F          D-F  D

The fade-in test runs first, so a sample at exactly t == F is scaled by 1.0
through the fade-in branch.
"""

from __future__ import annotations

from pcm_melody.synth.oscillators import Sound


class FadeEnvelope:
    """Decorates `sound` with a fade of `fade_s` seconds at each end of `duration_s`."""

    def __init__(self, sound: Sound, duration_s: float, fade_s: float):
        self.sound = sound
        self.duration_s = duration_s
        self.fade_s = fade_s

    def gain(self, t: float) -> float:
        if t <= self.fade_s:
            # fade in
            return t / self.fade_s
        if t >= self.duration_s - self.fade_s:
            # fade out
            return -(t - (self.duration_s - self.fade_s)) / self.fade_s + 1
        return 1.0

    def sample(self, t: float) -> float:
        # interior gain is exactly 1.0
        return self.sound.sample(t) * self.gain(t)

    def __repr__(self):
        return f"FadeEnvelope({self.sound!r}, duration_s={self.duration_s}, fade_s={self.fade_s})"
