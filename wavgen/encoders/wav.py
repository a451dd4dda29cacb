# wav.py
"""
RIFF/WAVE PCM16 encoder.

The container is written with the standard library wave module into an
in-memory buffer, so the caller gets the whole file as bytes and can write
it in one go. Layout (44-byte header, then data):

    RIFF <size> WAVE
    fmt  16  format=1 channels rate byte_rate block_align 16
    data <n_samples * 2> <little-endian int16 samples>
"""

from __future__ import annotations

import io
import wave
from array import array
from typing import Iterable

from wavgen.config import SAMPLE_WIDTH_BYTES

HEADER_SIZE = 44


def encode_wav(samples: Iterable[int], sample_rate: int, channel_count: int) -> bytes:
    """Encode interleaved int16 samples (L, R, L, R, ... for stereo)."""
    if channel_count not in (1, 2):
        raise ValueError(f"channel_count must be 1 or 2, got {channel_count!r}")
    pcm = samples if isinstance(samples, array) and samples.typecode == "h" else array("h", samples)
    if len(pcm) % channel_count:
        raise ValueError("sample count is not a whole number of frames")

    out = io.BytesIO()
    with wave.open(out, "wb") as w:
        w.setnchannels(channel_count)
        w.setsampwidth(SAMPLE_WIDTH_BYTES)      # 16-bit
        w.setframerate(sample_rate)
        w.setnframes(len(pcm) // channel_count)
        # wave expects native-order frames and swaps them on big-endian hosts
        w.writeframes(pcm.tobytes())
    return out.getvalue()
