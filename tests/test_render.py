import os
from pathlib import Path

import pytest

from wavgen.errors import (
    InvalidWaveformParameter,
    UnsupportedCycleRequest,
    UnsupportedDurationPolicy,
    WriteError,
)
from wavgen.render import RenderRequest, generate, render, write_output
from wavgen.synth import generator
from wavgen.waveform import (
    ByDuration,
    ByLength,
    ChannelLayout,
    HarmonicStack,
    OutputTarget,
    SingleCycle,
    Sweep,
    Tone,
)

ARRAY = OutputTarget.SOURCE_ARRAY


def _data_size(wav_bytes: bytes) -> int:
    return int.from_bytes(wav_bytes[40:44], byteorder="little")


def _values(text: str) -> list:
    body = text.split("= [", 1)[1].rsplit("];", 1)[0]
    return [int(v) for v in body.replace(",", " ").split()]


def test_tone_643hz_3s_stereo_wav_size(tmp_path: Path):
    req = RenderRequest(Tone(643.0), ByDuration(3), OutputTarget.WAV, ChannelLayout.STEREO, 44_100)
    out = generate(req, tmp_path / "tone.wav")
    data = out.read_bytes()
    assert len(data) == 44 + 3 * 44_100 * 2 * 2 == 529_244
    assert _data_size(data) == 3 * 44_100 * 2 * 2


def test_array_length_1024_mono_and_stereo():
    mono = render(RenderRequest(Tone(440.0), ByLength(1024), ARRAY, ChannelLayout.MONO, name="T"))
    stereo = render(RenderRequest(Tone(440.0), ByLength(1024), ARRAY, ChannelLayout.STEREO, name="T"))
    assert "[i16; 1024]" in mono
    assert "[i16; 2048]" in stereo
    m = _values(mono)
    s = _values(stereo)
    assert len(m) == 1024 and len(s) == 2048
    assert s[0::2] == m
    assert s[1::2] == m


def test_duration_with_array_fails_before_generating(monkeypatch):
    def boom(*args, **kwargs):
        raise AssertionError("samples generated")

    monkeypatch.setattr(generator, "raw_samples", boom)
    with pytest.raises(UnsupportedDurationPolicy):
        RenderRequest(Tone(440.0), ByDuration(1.0), ARRAY)


def test_length_with_wav_fails():
    with pytest.raises(UnsupportedDurationPolicy):
        RenderRequest(Tone(440.0), ByLength(100), OutputTarget.WAV)


def test_cycle_for_sweep_fails():
    with pytest.raises(UnsupportedCycleRequest):
        RenderRequest(Sweep(100.0, 200.0), SingleCycle(), ARRAY)


def test_single_cycle_tone_array():
    req = RenderRequest(Tone(500.0), SingleCycle(), ARRAY, name="SINE_500")
    assert req.frame_count == 88
    text = render(req)
    assert text.startswith("static SINE_500: [i16; 88] = [")
    values = _values(text)
    assert values[0] == 0
    assert max(values) <= 32767


def test_harmonic_array_hits_full_scale():
    stack = HarmonicStack.from_pairs([(100.0, 2.0), (200.0, 1.0)])
    text = render(RenderRequest(stack, ByLength(2000), ARRAY, name="H"))
    assert max(abs(v) for v in _values(text)) == 32767


def test_default_name_from_path():
    req = RenderRequest(Tone(1000.0), ByLength(4), ARRAY)
    assert render(req, "out/beep-1k.rs").startswith("static BEEP_1K: [i16; 4]")


def test_bad_name_rejected_on_construction():
    with pytest.raises(InvalidWaveformParameter):
        RenderRequest(Tone(1000.0), ByLength(4), ARRAY, name="not valid")


def test_sample_count():
    req = RenderRequest(Tone(440.0), ByDuration(0.5), layout=ChannelLayout.STEREO)
    assert req.frame_count == 22_050
    assert req.sample_count == 44_100


def test_write_output_creates_missing_directories(tmp_path: Path):
    nested = tmp_path / "deep/nested/dir/out.rs"
    out = write_output(nested, "static X: [i16; 0] = [\n];\n")
    assert out.exists()
    assert out.read_text(encoding="utf-8").startswith("static X")


def test_write_output_replaces_existing(tmp_path: Path):
    p = tmp_path / "out.wav"
    p.write_bytes(b"old")
    write_output(p, b"new contents")
    assert p.read_bytes() == b"new contents"
    assert os.listdir(tmp_path) == ["out.wav"]


def test_failed_write_leaves_nothing_behind(tmp_path: Path, monkeypatch):
    p = tmp_path / "out.wav"
    p.write_bytes(b"old")

    def fail_replace(src, dst):
        raise PermissionError("read-only")

    monkeypatch.setattr(os, "replace", fail_replace)
    with pytest.raises(WriteError) as info:
        write_output(p, b"new")
    assert isinstance(info.value.__cause__, PermissionError)
    assert p.read_bytes() == b"old"
    assert os.listdir(tmp_path) == ["out.wav"]
