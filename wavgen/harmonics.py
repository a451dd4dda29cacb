from __future__ import annotations

import csv
from pathlib import Path
from typing import List, Tuple

from wavgen.errors import HarmonicParseError, NoHarmonics, ReadError
from wavgen.waveform import HarmonicStack

HEADER = ("frequency", "amplitude")


def _parse_float(value: str) -> float | None:
    text = value.strip()
    if not text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def parse_harmonics(text: str) -> List[Tuple[float, float]]:
    """
    Parse harmonics CSV text:

        frequency, amplitude
        220, 1.0
        440, 0.5

    Header is required (case-insensitive); blank lines are skipped and
    whitespace around commas is ignored. Errors carry 1-based line numbers.
    """
    pairs: List[Tuple[float, float]] = []
    header_seen = False
    reader = csv.reader(text.splitlines())
    for line_number, row in enumerate(reader, start=1):
        if not row or all(not cell.strip() for cell in row):
            continue
        if not header_seen:
            if tuple(cell.strip().lower() for cell in row) != HEADER:
                raise HarmonicParseError(line_number)
            header_seen = True
            continue
        if len(row) != 2:
            raise HarmonicParseError(line_number)
        frequency = _parse_float(row[0])
        amplitude = _parse_float(row[1])
        if frequency is None or amplitude is None:
            raise HarmonicParseError(line_number)
        pairs.append((frequency, amplitude))

    if not pairs:
        raise NoHarmonics()
    return pairs


def read_harmonics(path: str | Path) -> HarmonicStack:
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8-sig")   # tolerates a leading BOM
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(p) from e
    return HarmonicStack.from_pairs(parse_harmonics(text))
