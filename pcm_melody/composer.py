"""
Song string -> PCM16 stream.

A song is space-separated tokens, each `<duration>x<note>`:

    "4x- 3xe4 1xf4 2xg4 10xc5"

`duration` is in song units; real seconds are (1 / speed) * units.
`note` is a key of the note table or "-" for a rest. Notes are rendered one
after another, each wrapped in a linear fade, with no gaps or overlap.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, List

from pcm_melody.config import RenderConfig
from pcm_melody.errors import ConfigError, SinkWriteError, SongParseError, UnknownNoteError
from pcm_melody.notes import is_silence, lookup_frequency
from pcm_melody.synth.envelopes import FadeEnvelope
from pcm_melody.synth.oscillators import NoSound, Sound, Waveform, WaveSound
from pcm_melody.synth.sampler import play, render_samples, sample_count

_LOG = logging.getLogger("pcm_melody.composer")

DELIMITER = " "
SEPARATOR = "x"

_DURATION_RE = re.compile(r"\+?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


@dataclass(frozen=True)
class NoteToken:
    units: float   # song units, >= 0
    note: str      # note table key or "-"
    text: str      # token as written
    index: int     # position in the song


@dataclass(frozen=True)
class PlannedNote:
    token: NoteToken
    sound: Sound
    duration_s: float


# ===== PARSING =====
def parse_token(text: str, index: int) -> NoteToken:
    if not text:
        raise SongParseError("empty token (doubled delimiter?)", text, index)
    parts = text.split(SEPARATOR)
    if len(parts) != 2:
        raise SongParseError(f"expected <duration>{SEPARATOR}<note>", text, index)
    units_text, note = parts
    if not _DURATION_RE.fullmatch(units_text):
        raise SongParseError(f"duration {units_text!r} is not a decimal number", text, index)
    units = float(units_text)
    if not math.isfinite(units):
        raise SongParseError(f"duration {units_text!r} is out of range", text, index)
    if not note:
        raise SongParseError("missing note name", text, index)
    return NoteToken(units=units, note=note, text=text, index=index)


def parse_song(song: str) -> List[NoteToken]:
    """Split `song` into tokens, in playback order. A blank song has no tokens."""
    song = song.strip()
    if not song:
        return []
    return [parse_token(text, i) for i, text in enumerate(song.split(DELIMITER))]


def units_to_seconds(units: float, speed: float) -> float:
    return (1 / speed) * units


# ===== SEQUENCING =====
def sound_for_note(token: NoteToken, waveform: Waveform) -> Sound:
    if is_silence(token.note):
        return NoSound()
    freq = lookup_frequency(token.note)
    if freq is None:
        raise UnknownNoteError(token.note, token.text, token.index)
    return WaveSound(waveform, freq)


def plan_song(song: str, config: RenderConfig) -> List[PlannedNote]:
    """
    Parse and check the whole song before any sample is produced.

    Raises:
        ConfigError: bad settings, or a played note not longer than two fades.
        SongParseError: malformed token.
        UnknownNoteError: note name not in the table.
    """
    config.validate()
    waveform = config.wave()

    planned: List[PlannedNote] = []
    for token in parse_song(song):
        sound = sound_for_note(token, waveform)
        duration_s = units_to_seconds(token.units, config.speed)
        # rests are exempt
        if not isinstance(sound, NoSound) and config.fade_s >= duration_s / 2:
            raise ConfigError(
                f"token {token.index} {token.text!r}: note lasts {duration_s:.4f}s, "
                f"needs to be longer than twice the {config.fade_s}s fade"
            )
        planned.append(PlannedNote(token=token, sound=sound, duration_s=duration_s))
    return planned


def _enveloped(note: PlannedNote, fade_s: float) -> FadeEnvelope:
    return FadeEnvelope(note.sound, note.duration_s, fade_s)


def render_note_bytes(note: PlannedNote, config: RenderConfig) -> bytes:
    return render_samples(_enveloped(note, config.fade_s), note.duration_s, config.sample_rate)


def render_song_bytes(song: str, config: RenderConfig) -> bytes:
    """Whole song as PCM16 LE bytes in memory."""
    return b"".join(render_note_bytes(note, config) for note in plan_song(song, config))


def make_song(song: str, config: RenderConfig, sink: BinaryIO) -> int:
    """
    Stream the song into `sink`, one note at a time.

    Returns:
        Total number of samples written, the sum of floor(duration_s * rate)
        over all notes.

    Raises:
        SinkWriteError: the sink failed mid-song. Whatever was written so far
        is a truncated stream.
    """
    return _write_planned(plan_song(song, config), config, sink)


def _write_planned(planned: List[PlannedNote], config: RenderConfig, sink: BinaryIO) -> int:
    expected = sum(sample_count(n.duration_s, config.sample_rate) for n in planned)
    _LOG.info("Rendering %d notes (%d samples @ %d Hz)", len(planned), expected, config.sample_rate)

    total = 0
    for note in planned:
        written = play(_enveloped(note, config.fade_s), note.duration_s, config.sample_rate, sink)
        _LOG.debug(
            "note %d %r: %s for %.4fs -> %d samples",
            note.token.index, note.token.text, note.sound, note.duration_s, written,
        )
        total += written
    return total


def write_pcm(path, song: str, config: RenderConfig) -> Path:
    """Render `song` into a raw .pcm file, replacing it if present and creating parent dirs."""
    p = Path(path)
    # check everything before touching the file
    planned = plan_song(song, config)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        f = open(p, "wb")
    except OSError as e:
        raise SinkWriteError(f"Failed to open {p} for writing: {e}") from e
    with f:
        total = _write_planned(planned, config, f)
    _LOG.info("Wrote %d samples to %s", total, p)
    return p
