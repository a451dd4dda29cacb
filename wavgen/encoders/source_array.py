# source_array.py
"""
Source array encoder: int16 samples -> a static array declaration.

    static SINE_500: [i16; 88] = [
             0,   2333,   4653, ...
    ];

Ten values per line, right-aligned to the width of "-32768".
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional, Sequence

from wavgen.config import (
    ARRAY_INDENT,
    DEFAULT_IDENTIFIER,
    VALUE_WIDTH,
    VALUES_PER_LINE,
)
from wavgen.errors import InvalidWaveformParameter

_NON_IDENT = re.compile(r"[^A-Z0-9_]")


def default_identifier(path: str | Path) -> str:
    """
    Derive an identifier from an output file name:
      "sine-500.rs" -> "SINE_500", "8bit.rs" -> "_8BIT"
    """
    stem = Path(path).stem.upper()
    name = _NON_IDENT.sub("_", stem)
    if not name:
        return DEFAULT_IDENTIFIER
    if name[0].isdigit():
        name = "_" + name
    return name


def check_identifier(name: str) -> str:
    if not isinstance(name, str) or not name.isidentifier() or not name.isascii():
        raise InvalidWaveformParameter(f"not a valid identifier: {name!r}")
    return name


def format_values(samples: Sequence[int], per_line: int = VALUES_PER_LINE) -> List[str]:
    """Column-wrapped, right-aligned, comma-terminated lines."""
    lines = []
    for i in range(0, len(samples), per_line):
        chunk = samples[i:i + per_line]
        lines.append(ARRAY_INDENT + " ".join(f"{s:>{VALUE_WIDTH}d}," for s in chunk))
    return lines


def encode_source_array(samples: Sequence[int], name: Optional[str] = None) -> str:
    ident = check_identifier(name if name is not None else DEFAULT_IDENTIFIER)
    count = len(samples)
    out = [f"static {ident}: [i16; {count}] = ["]
    out.extend(format_values(samples))
    out.append("];")
    return "\n".join(out) + "\n"
