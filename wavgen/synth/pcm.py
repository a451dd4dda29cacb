# pcm.py
"""
Float -> signed 16-bit PCM quantizer.

value * 32767, rounded half to even (Python's round), clamped to
[-32768, 32767]. -32768 is only reachable through the clamp.
"""

from __future__ import annotations

import math
from array import array
from typing import Iterable

from wavgen.config import PCM_MAX, PCM_MIN, PCM_SCALE


def quantize(value: float) -> int:
    if not math.isfinite(value):
        raise ValueError(f"cannot quantize non-finite sample {value!r}")
    q = int(round(value * PCM_SCALE))
    if q < PCM_MIN:
        return PCM_MIN
    if q > PCM_MAX:
        return PCM_MAX
    return q


def quantize_buffer(buf: Iterable[float]) -> array:
    """Quantize every sample into an array('h')."""
    out = array("h")
    for x in buf:
        out.append(quantize(x))
    return out
