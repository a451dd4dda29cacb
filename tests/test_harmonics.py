from pathlib import Path

import pytest

from wavgen.errors import (
    HarmonicParseError,
    InvalidWaveformParameter,
    IoFailure,
    NoHarmonics,
    ReadError,
)
from wavgen.harmonics import parse_harmonics, read_harmonics
from wavgen.waveform import Harmonic


def test_parse_basic():
    text = "frequency,amplitude\n220,1.0\n440,0.5\n"
    assert parse_harmonics(text) == [(220.0, 1.0), (440.0, 0.5)]


def test_whitespace_and_blank_lines_tolerated():
    text = "\n  Frequency ,  Amplitude \n\n 220 ,  1 \n   \n440,   0.25\n"
    assert parse_harmonics(text) == [(220.0, 1.0), (440.0, 0.25)]


def test_bad_header_reports_line():
    with pytest.raises(HarmonicParseError) as info:
        parse_harmonics("\nfreq,amp\n220,1\n")
    assert info.value.line_number == 2


def test_non_numeric_row_reports_line():
    with pytest.raises(HarmonicParseError) as info:
        parse_harmonics("frequency,amplitude\n220,1\nabc,1\n")
    assert info.value.line_number == 3
    assert "line 3" in str(info.value)


def test_wrong_column_count():
    with pytest.raises(HarmonicParseError):
        parse_harmonics("frequency,amplitude\n220,1,5\n")


def test_header_only_means_no_harmonics():
    with pytest.raises(NoHarmonics):
        parse_harmonics("frequency,amplitude\n")


def test_empty_file_means_no_harmonics():
    with pytest.raises(NoHarmonics):
        parse_harmonics("")


def test_read_harmonics_builds_stack(tmp_path: Path):
    p = tmp_path / "h.csv"
    p.write_text("frequency,amplitude\n100,1\n300,0.33\n", encoding="utf-8")
    stack = read_harmonics(p)
    assert stack.components == (Harmonic(100.0, 1.0), Harmonic(300.0, 0.33))
    assert stack.fundamental_hz == 100.0


def test_read_missing_file(tmp_path: Path):
    with pytest.raises(ReadError) as info:
        read_harmonics(tmp_path / "nope.csv")
    assert isinstance(info.value, IoFailure)
    assert "could not read file" in str(info.value)


def test_negative_frequency_is_a_parameter_error(tmp_path: Path):
    p = tmp_path / "neg.csv"
    p.write_text("frequency,amplitude\n-100,1\n", encoding="utf-8")
    with pytest.raises(InvalidWaveformParameter):
        read_harmonics(p)


def test_read_harmonics_with_byte_order_mark(tmp_path: Path):
    p = tmp_path / "excel.csv"
    p.write_bytes(b"\xef\xbb\xbffrequency,amplitude\r\n110,1\r\n")
    stack = read_harmonics(p)
    assert stack.components == (Harmonic(110.0, 1.0),)
