# generator.py
"""
Bare-bones sample buffer builder:
oscillator -> (peak normalize) -> channel expand

Two phases on purpose: a harmonic stack's scale factor is only known once
every raw sample exists, so raw generation and normalization are separate.

Usage:
- build_frames(spec, sample_rate, frame_count, ChannelLayout.STEREO)
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from wavgen.log import get_logger
from wavgen.synth.oscillators import oscillate
from wavgen.waveform import ChannelLayout, HarmonicStack, WaveformSpec

logger = get_logger(__name__)

Samples = Tuple[float, ...]


# ----- Helpers -----
def _clamp(x: float) -> float:
    return -1.0 if x < -1.0 else 1.0 if x > 1.0 else x


def raw_samples(spec: WaveformSpec, sample_rate: int, frame_count: int) -> List[float]:
    """Phase 1: one oscillator call per frame, n = 0 .. frame_count-1."""
    return [oscillate(spec, n, sample_rate, frame_count) for n in range(frame_count)]


def normalize_peak(raw: Sequence[float]) -> List[float]:
    """
    Phase 2: rescale so max(|x|) == 1.0.
    An all-zero buffer has no peak and is returned unchanged.
    """
    peak = max((abs(x) for x in raw), default=0.0)
    if peak == 0.0:
        return list(raw)
    inv = 1.0 / peak
    return [x * inv for x in raw]


def expand_channels(buf: Iterable[float], layout: ChannelLayout) -> Samples:
    """Mono stays as is; stereo writes each value twice (L, R)."""
    if layout is ChannelLayout.MONO:
        return tuple(buf)
    if layout is ChannelLayout.STEREO:
        out: List[float] = []
        for x in buf:
            out.append(x)
            out.append(x)
        return tuple(out)
    raise TypeError(f"Unknown channel layout: {layout!r}")


# ----- Public API -----
def build_buffer(spec: WaveformSpec, sample_rate: int, frame_count: int) -> Samples:
    """Normalized mono buffer, every value in [-1, 1]."""
    raw = raw_samples(spec, sample_rate, frame_count)
    if isinstance(spec, HarmonicStack):
        raw = normalize_peak(raw)
        logger.debug("normalized %d harmonic(s) over %d frames", len(spec.components), frame_count)
    return tuple(_clamp(x) for x in raw)


def build_frames(
    spec: WaveformSpec,
    sample_rate: int,
    frame_count: int,
    layout: ChannelLayout = ChannelLayout.MONO,
) -> Samples:
    """Normalized buffer expanded to the channel layout, in playback order."""
    return expand_channels(build_buffer(spec, sample_rate, frame_count), layout)
