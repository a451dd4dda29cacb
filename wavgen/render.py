# render.py
"""
Full pipeline for one invocation:

  RenderRequest (resolves the frame count on construction)
  -> build_frames -> quantize_buffer -> encode_wav | encode_source_array
  -> write_output (one atomic write)
"""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from wavgen.config import SAMPLE_RATE_DEFAULT
from wavgen.encoders.source_array import check_identifier, default_identifier, encode_source_array
from wavgen.encoders.wav import encode_wav
from wavgen.errors import CreateError, WriteError
from wavgen.log import get_logger
from wavgen.synth.frames import resolve_frame_count
from wavgen.synth.generator import build_frames
from wavgen.synth.pcm import quantize_buffer
from wavgen.waveform import (
    ChannelLayout,
    DurationPolicy,
    OutputTarget,
    WaveformSpec,
)

logger = get_logger(__name__)

Payload = Union[bytes, str]


@dataclass(frozen=True)
class RenderRequest:
    """
    Everything needed to render one output.

    Construction fails with UnsupportedDurationPolicy / UnsupportedCycleRequest
    when the policy does not fit the waveform or the target.
    """

    spec: WaveformSpec
    policy: DurationPolicy
    target: OutputTarget = OutputTarget.WAV
    layout: ChannelLayout = ChannelLayout.MONO
    sample_rate: int = SAMPLE_RATE_DEFAULT
    name: Optional[str] = None
    frame_count: int = field(init=False)

    def __post_init__(self) -> None:
        if self.name is not None:
            check_identifier(self.name)
        frames = resolve_frame_count(self.spec, self.policy, self.sample_rate, self.target)
        object.__setattr__(self, "frame_count", frames)

    @property
    def sample_count(self) -> int:
        """Total values emitted: frames x channels."""
        return self.frame_count * self.layout.channel_count


def render(request: RenderRequest, path: Optional[Union[str, Path]] = None) -> Payload:
    """
    Render a request to WAV bytes or array text.
    `path` only feeds the default array identifier.
    """
    frames = build_frames(request.spec, request.sample_rate, request.frame_count, request.layout)
    pcm = quantize_buffer(frames)
    logger.debug("rendered %d frames x %d channel(s)", request.frame_count, request.layout.channel_count)

    if request.target is OutputTarget.WAV:
        return encode_wav(pcm, request.sample_rate, request.layout.channel_count)

    if request.name is not None:
        name = request.name
    elif path is not None:
        name = default_identifier(path)
    else:
        name = None
    return encode_source_array(pcm, name)


def write_output(path: Union[str, Path], payload: Payload) -> Path:
    """
    Write the whole payload next to `path`, then move it into place.
    On failure the destination is untouched and the temp file is removed.
    """
    p = Path(path)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise CreateError(p) from e

    data = payload.encode("utf-8") if isinstance(payload, str) else payload
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{p.name}.", suffix=".tmp", dir=p.parent)
    except OSError as e:
        raise CreateError(p) from e

    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        os.chmod(tmp_name, 0o644)   # mkstemp creates 0600
        os.replace(tmp_name, p)
    except OSError as e:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise WriteError(p) from e
    return p


def generate(request: RenderRequest, path: Union[str, Path]) -> Path:
    payload = render(request, path)
    out = write_output(path, payload)
    logger.info("wrote %s (%d samples, %s)", out, request.sample_count, request.target.value)
    return out
