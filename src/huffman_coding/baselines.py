"""Reference byte codecs, used only to put the Huffman ratio in context.

Both return a *real* compressed size (bytes), unlike the Huffman encoder which
measures textual bits.
"""

from __future__ import annotations

import zlib
from dataclasses import dataclass

try:
    import zstandard as zstd  # type: ignore
except Exception:  # pragma: no cover
    zstd = None

from huffman_coding.errors import MissingResource, UsageError

BASELINE_IDS: tuple[str, ...] = ("zlib", "zstd")


class BaselineZlib:
    """zlib/DEFLATE (no external deps)."""

    baseline_id: str = "zlib"

    def __init__(self, level: int = 9):
        if not (0 <= level <= 9):
            raise ValueError(f"zlib level must be 0..9, got {level}")
        self.level = level

    def compress(self, data: bytes) -> bytes:
        return zlib.compress(bytes(data), self.level)


@dataclass
class BaselineZstd:
    """
    zstd via the 'zstandard' module.

    Frame "tight": no content size, no checksum, so the size reflects the
    entropy stage rather than the frame overhead.
    """

    level: int = 19
    baseline_id: str = "zstd"

    def _require(self) -> None:
        if zstd is None:
            raise MissingResource(
                "Module 'zstandard' not available. Install with: python3 -m pip install zstandard"
            )

    def compress(self, data: bytes) -> bytes:
        self._require()
        c = zstd.ZstdCompressor(
            level=int(self.level),
            write_content_size=False,
            write_checksum=False,
        )
        return c.compress(bytes(data))


def get_baseline(baseline_id: str) -> BaselineZlib | BaselineZstd:
    bid = baseline_id.strip().lower()
    if bid == "zlib":
        return BaselineZlib()
    if bid == "zstd":
        return BaselineZstd()
    raise UsageError(f"unknown baseline: {baseline_id!r} (expected one of {', '.join(BASELINE_IDS)})")


def parse_baselines(arg: str | None) -> list[str]:
    """'zlib,zstd' -> ['zlib', 'zstd'] (validated, duplicates dropped)."""
    if not arg:
        return []
    out: list[str] = []
    for part in arg.split(","):
        bid = part.strip().lower()
        if not bid:
            continue
        if bid not in BASELINE_IDS:
            raise UsageError(f"unknown baseline: {part.strip()!r}")
        if bid not in out:
            out.append(bid)
    return out


def baseline_bits(baseline_id: str, data: bytes) -> int:
    return len(get_baseline(baseline_id).compress(data)) * 8
