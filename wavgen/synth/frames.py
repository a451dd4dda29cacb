# frames.py
"""
Sample count resolution: how many mono frames a request produces.

Which length policy is allowed depends on the output target:

    ByDuration  -> WAV only
    ByLength    -> source array only
    SingleCycle -> source array only, Tone and HarmonicStack only

Everything is checked here, before a single sample is generated.
"""

from __future__ import annotations

from typing import Tuple

from wavgen.config import MAX_SAMPLE_RATE
from wavgen.errors import (
    InvalidWaveformParameter,
    UnsupportedCycleRequest,
    UnsupportedDurationPolicy,
)
from wavgen.waveform import (
    ByDuration,
    ByLength,
    DurationPolicy,
    HarmonicStack,
    OutputTarget,
    SingleCycle,
    Sweep,
    Tone,
    WaveformSpec,
)


def check_sample_rate(sample_rate: int) -> None:
    if isinstance(sample_rate, bool) or not isinstance(sample_rate, int) or sample_rate <= 0:
        raise InvalidWaveformParameter(f"sample rate must be a positive integer, got {sample_rate!r}")
    if sample_rate > MAX_SAMPLE_RATE:
        raise InvalidWaveformParameter(f"sample rate must be at most {MAX_SAMPLE_RATE}, got {sample_rate!r}")


def _frames_for_duration(duration_s: float, sample_rate: int) -> int:
    return max(0, int(round(duration_s * sample_rate)))


def _frames_for_period(frequency_hz: float, sample_rate: int) -> int:
    # Never below one frame, even far above the sample rate
    return max(1, int(round(sample_rate / frequency_hz)))


def cycle_frequency_hz(spec: WaveformSpec) -> float:
    """Frequency whose period one cycle spans."""
    if isinstance(spec, Tone):
        return spec.frequency_hz
    if isinstance(spec, HarmonicStack):
        return spec.fundamental_hz
    if isinstance(spec, Sweep):
        raise UnsupportedCycleRequest("a sweep has no single period; use a fixed length instead")
    raise TypeError(f"Unknown waveform: {spec!r}")


def resolve_frame_count(
    spec: WaveformSpec,
    policy: DurationPolicy,
    sample_rate: int,
    target: OutputTarget,
) -> int:
    check_sample_rate(sample_rate)

    if isinstance(policy, ByDuration):
        if target is not OutputTarget.WAV:
            raise UnsupportedDurationPolicy("a duration only applies to WAV output; use a length or a single cycle")
        return _frames_for_duration(policy.seconds, sample_rate)

    if isinstance(policy, ByLength):
        if target is not OutputTarget.SOURCE_ARRAY:
            raise UnsupportedDurationPolicy("a fixed length only applies to array output; use a duration")
        return policy.sample_frames

    if isinstance(policy, SingleCycle):
        if target is not OutputTarget.SOURCE_ARRAY:
            raise UnsupportedDurationPolicy("a single cycle only applies to array output; use a duration")
        return _frames_for_period(cycle_frequency_hz(spec), sample_rate)

    raise TypeError(f"Unknown duration policy: {policy!r}")


def cycle_frequency_error(spec: WaveformSpec, sample_rate: int) -> Tuple[float, float]:
    """
    Rounding one period to whole frames shifts the pitch a little.

    Returns (actual_hz, error_hz) where actual_hz = sample_rate / frames is
    what a loop of the emitted cycle plays and error_hz = actual - requested.
    """
    check_sample_rate(sample_rate)
    requested = cycle_frequency_hz(spec)
    frames = _frames_for_period(requested, sample_rate)
    actual = sample_rate / frames
    return actual, actual - requested
