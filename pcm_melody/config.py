from __future__ import annotations

import math
from dataclasses import dataclass

from pcm_melody.errors import ConfigError
from pcm_melody.synth.oscillators import Waveform, get_waveform

SAMPLE_RATE_DEFAULT = 44_100
SPEED_DEFAULT = 1.0      # duration units per second
FADE_S_DEFAULT = 0.04    # fade-in/out at each end of a note (s)
WAVEFORM_DEFAULT = "saw"


def _is_positive_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


@dataclass(frozen=True)
class RenderConfig:
    waveform: str = WAVEFORM_DEFAULT
    speed: float = SPEED_DEFAULT
    sample_rate: int = SAMPLE_RATE_DEFAULT
    fade_s: float = FADE_S_DEFAULT

    def validate(self) -> "RenderConfig":
        """Raise ConfigError on settings that would divide by zero or render nothing sensible."""
        if not _is_positive_number(self.speed):
            raise ConfigError(f"speed must be a finite number > 0, got {self.speed!r}")
        if isinstance(self.sample_rate, bool) or not isinstance(self.sample_rate, int) or self.sample_rate <= 0:
            raise ConfigError(f"sample_rate must be an int > 0, got {self.sample_rate!r}")
        if not _is_positive_number(self.fade_s):
            raise ConfigError(f"fade_s must be a finite number > 0, got {self.fade_s!r}")
        try:
            get_waveform(self.waveform)
        except (ValueError, AttributeError) as e:
            raise ConfigError(str(e)) from e
        return self

    def wave(self) -> Waveform:
        return get_waveform(self.waveform)
