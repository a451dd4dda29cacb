# waveform.py
"""
Parametric descriptions of what to synthesize and how much of it.

WaveformSpec   = Tone | Sweep | HarmonicStack
DurationPolicy = ByDuration | ByLength | SingleCycle

All types are frozen dataclasses that validate themselves on construction.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from wavgen.errors import InvalidWaveformParameter


def _check_frequency(value: float, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidWaveformParameter(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise InvalidWaveformParameter(f"{name} must be a positive frequency, got {value!r}")


# ===== WAVEFORMS =====
@dataclass(frozen=True)
class Tone:
    frequency_hz: float

    def __post_init__(self) -> None:
        _check_frequency(self.frequency_hz, "frequency_hz")


@dataclass(frozen=True)
class Sweep:
    """Linear sweep from start_hz to finish_hz over the whole buffer.

    start_hz == finish_hz is accepted and behaves like a Tone.
    """

    start_hz: float
    finish_hz: float

    def __post_init__(self) -> None:
        _check_frequency(self.start_hz, "start_hz")
        _check_frequency(self.finish_hz, "finish_hz")


@dataclass(frozen=True)
class Harmonic:
    frequency_hz: float
    amplitude: float

    def __post_init__(self) -> None:
        _check_frequency(self.frequency_hz, "frequency_hz")
        a = self.amplitude
        if isinstance(a, bool) or not isinstance(a, (int, float)):
            raise InvalidWaveformParameter(f"amplitude must be a number, got {a!r}")
        if not math.isfinite(a) or a < 0:
            raise InvalidWaveformParameter(f"amplitude must be >= 0, got {a!r}")


@dataclass(frozen=True)
class HarmonicStack:
    """Additive sum of sines. Amplitudes are relative; the buffer is peak-normalized later."""

    components: Tuple[Harmonic, ...]

    def __post_init__(self) -> None:
        comps = tuple(self.components)
        if not comps:
            raise InvalidWaveformParameter("a harmonic stack needs at least one component")
        for c in comps:
            if not isinstance(c, Harmonic):
                raise InvalidWaveformParameter(f"not a Harmonic: {c!r}")
        object.__setattr__(self, "components", comps)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[float, float]]) -> "HarmonicStack":
        return cls(tuple(Harmonic(f, a) for f, a in pairs))

    @property
    def fundamental_hz(self) -> float:
        """Lowest listed frequency."""
        return min(c.frequency_hz for c in self.components)


WaveformSpec = Union[Tone, Sweep, HarmonicStack]


# ===== LENGTH POLICIES =====
@dataclass(frozen=True)
class ByDuration:
    seconds: float

    def __post_init__(self) -> None:
        s = self.seconds
        if isinstance(s, bool) or not isinstance(s, (int, float)) or not math.isfinite(s) or s <= 0:
            raise InvalidWaveformParameter(f"duration must be a positive number of seconds, got {s!r}")


@dataclass(frozen=True)
class ByLength:
    sample_frames: int

    def __post_init__(self) -> None:
        n = self.sample_frames
        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise InvalidWaveformParameter(f"length must be a positive whole number of frames, got {n!r}")


@dataclass(frozen=True)
class SingleCycle:
    pass


DurationPolicy = Union[ByDuration, ByLength, SingleCycle]


# ===== OUTPUT SHAPE =====
class ChannelLayout(enum.Enum):
    MONO = 1
    STEREO = 2

    @property
    def channel_count(self) -> int:
        return self.value


class OutputTarget(enum.Enum):
    WAV = "wav"
    SOURCE_ARRAY = "array"
