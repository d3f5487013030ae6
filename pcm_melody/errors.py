"""Errors raised while turning a song string into PCM."""


class PcmMelodyError(Exception):
    """Base class for every error this package raises on purpose."""


class ConfigError(PcmMelodyError, ValueError):
    """Speed, sample rate, fade or waveform settings that cannot render."""


class SongParseError(PcmMelodyError, ValueError):
    """A token that is not `<duration>x<note>` with a finite, non-negative duration."""

    def __init__(self, message: str, token: str, index: int):
        super().__init__(f"token {index} {token!r}: {message}")
        self.token = token
        self.index = index


class UnknownNoteError(PcmMelodyError, ValueError):
    def __init__(self, note: str, token: str, index: int):
        super().__init__(f"token {index} {token!r}: unknown note {note!r}")
        self.note = note
        self.token = token
        self.index = index


class SinkWriteError(PcmMelodyError, OSError):
    """Writing samples failed. Anything already written is incomplete and should be discarded."""
