# errors.py
"""
Error types raised by wavgen.

Every error derives from WavGenError so callers can catch one type.
Parameter problems are also ValueErrors, I/O problems are also OSErrors.
"""

from __future__ import annotations

from pathlib import Path


class WavGenError(Exception):
    """Base class for all wavgen errors."""


class InvalidWaveformParameter(WavGenError, ValueError):
    """Non-positive frequency, empty harmonic list, bad sample rate, ..."""


class UnsupportedDurationPolicy(WavGenError, ValueError):
    """The length policy does not apply to the chosen output target."""


class UnsupportedCycleRequest(WavGenError, ValueError):
    """A single cycle was requested for a waveform without a period."""


# ===== I/O =====
class IoFailure(WavGenError, OSError):
    """Reading or writing a file failed."""


class ReadError(IoFailure):
    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(f"could not read file {str(self.path)!r}")


class WriteError(IoFailure):
    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(f"could not write file {str(self.path)!r}")


class CreateError(IoFailure):
    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(f"unable to create file {str(self.path)!r}")


class HarmonicParseError(IoFailure):
    def __init__(self, line_number: int):
        self.line_number = line_number
        super().__init__(f"parse error in harmonic file at line {line_number}")


class NoHarmonics(IoFailure):
    def __init__(self) -> None:
        super().__init__("no harmonics found")
