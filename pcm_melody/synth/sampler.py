# sampler.py
"""
Walks a sound at a fixed sample rate and quantizes it to PCM16 mono,
little-endian, no header.

    encoded = round((s + 1) * (2**15 - 0.5)) - 2**15

maps [-1, 1] onto [-32768, 32767]. Rounding is half away from zero.
"""

from __future__ import annotations

import math
import sys
from array import array
from typing import BinaryIO

from pcm_melody.errors import SinkWriteError
from pcm_melody.synth.oscillators import Sound

PCM16_OFFSET = 1 << 15           # 32768
PCM16_SCALE = (1 << 15) - 0.5    # 32767.5, keeps encode(1.0) at 32767
BYTES_PER_SAMPLE = 2


# ===== QUANTIZER =====
def _round_half_away(x: float) -> int:
    if x >= 0:
        return math.floor(x + 0.5)
    return math.ceil(x - 0.5)


def encode_sample(value: float) -> int:
    return _round_half_away((value + 1) * PCM16_SCALE) - PCM16_OFFSET


def decode_sample(code: int) -> float:
    return (code + PCM16_OFFSET) / PCM16_SCALE - 1


def _pcm16_le(codes: array) -> bytes:
    if sys.byteorder == "big":
        codes.byteswap()
    return codes.tobytes()


# ===== SAMPLER =====
def sample_count(duration_s: float, sample_rate: int) -> int:
    """Number of samples covering [0, duration_s); truncates like floor for durations >= 0."""
    return int(duration_s * sample_rate)


def render_samples(sound: Sound, duration_s: float, sample_rate: int) -> bytes:
    """Evaluate `sound` at i / sample_rate for each sample and return PCM16 LE bytes."""
    out = array("h")
    for i in range(sample_count(duration_s, sample_rate)):
        out.append(encode_sample(sound.sample(i / sample_rate)))
    return _pcm16_le(out)


def play(sound: Sound, duration_s: float, sample_rate: int, sink: BinaryIO) -> int:
    """
    Render one sound and append it to `sink`.

    Returns:
        Number of samples written.

    Raises:
        SinkWriteError: the sink rejected the write. The run should stop;
        the sink may hold a truncated stream.
    """
    pcm = render_samples(sound, duration_s, sample_rate)
    # raw sinks may take only part of a buffer
    view = memoryview(pcm)
    while view:
        try:
            n = sink.write(view)
        except OSError as e:
            raise SinkWriteError(f"Failed to write {len(pcm)} bytes of PCM: {e}") from e
        if not n:
            raise SinkWriteError(f"Sink stopped accepting PCM with {len(view)} of {len(pcm)} bytes unwritten")
        view = view[n:]
    return len(pcm) // BYTES_PER_SAMPLE
