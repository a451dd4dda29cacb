# oscillators.py
"""
Bare-bones oscillator functions: tone, sweep, harmonic stack.
Each maps a sample index to one float amplitude; nothing here touches PCM.

- tone_sample / sweep_sample / harmonic_sample: per-variant math
- oscillate(spec, n, sample_rate, total_frames): dispatch on the waveform type
"""

from __future__ import annotations

import math
from typing import Sequence

from wavgen.waveform import Harmonic, HarmonicStack, Sweep, Tone, WaveformSpec

TWO_PI = 2.0 * math.pi


# ===== OSCILLATORS =====
def tone_sample(frequency_hz: float, n: int, sample_rate: int) -> float:
    return math.sin(TWO_PI * frequency_hz * n / sample_rate)


def sweep_phase(start_hz: float, finish_hz: float, n: int,
                sample_rate: int, total_frames: int) -> float:
    """
    Phase in radians of a linear chirp over T = total_frames / sample_rate seconds.

    Instantaneous frequency f(t) = start + (finish - start) * t / T, so the
    phase is its integral:
        phase(t) = 2π * (start * t + (finish - start) * t² / (2T))
    """
    if total_frames <= 0:
        raise ValueError("a sweep needs a positive total frame count")
    t = n / sample_rate
    duration = total_frames / sample_rate
    return TWO_PI * (start_hz * t + (finish_hz - start_hz) * t * t / (2.0 * duration))


def sweep_sample(start_hz: float, finish_hz: float, n: int,
                 sample_rate: int, total_frames: int) -> float:
    return math.sin(sweep_phase(start_hz, finish_hz, n, sample_rate, total_frames))


def harmonic_sample(components: Sequence[Harmonic], n: int, sample_rate: int) -> float:
    """Raw additive sum; may exceed [-1, 1] until the buffer is normalized."""
    s = 0.0
    for c in components:
        s += c.amplitude * math.sin(TWO_PI * c.frequency_hz * n / sample_rate)
    return s


def oscillate(spec: WaveformSpec, n: int, sample_rate: int, total_frames: int) -> float:
    if isinstance(spec, Tone):
        return tone_sample(spec.frequency_hz, n, sample_rate)
    if isinstance(spec, Sweep):
        return sweep_sample(spec.start_hz, spec.finish_hz, n, sample_rate, total_frames)
    if isinstance(spec, HarmonicStack):
        return harmonic_sample(spec.components, n, sample_rate)
    raise TypeError(f"Unknown waveform: {spec!r}")
