"""Render a compact note string to raw PCM16 mono audio."""

from .composer import NoteToken, make_song, parse_song, plan_song, render_song_bytes, write_pcm
from .config import RenderConfig
from .errors import ConfigError, PcmMelodyError, SinkWriteError, SongParseError, UnknownNoteError

__all__ = [
    "ConfigError",
    "NoteToken",
    "PcmMelodyError",
    "RenderConfig",
    "SinkWriteError",
    "SongParseError",
    "UnknownNoteError",
    "make_song",
    "parse_song",
    "plan_song",
    "render_song_bytes",
    "write_pcm",
]
