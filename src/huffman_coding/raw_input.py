"""Input boundary: a path on disk -> RawInput.

The core never touches the filesystem; this is the only place that does.
"""

from __future__ import annotations

from pathlib import Path

from huffman_coding.core.encoder import RawInput
from huffman_coding.errors import BoundaryIO


def load_raw_input(path: str | Path) -> RawInput:
    p = Path(path).expanduser()
    try:
        data = p.read_bytes()
    except OSError as e:
        raise BoundaryIO(f"Can't read input file: {p} ({e.strerror or e})") from e
    return RawInput(data)
