"""Encoder: frequencies -> tree -> code table -> textual bit string.

The output is a str of '0'/'1' characters, NOT a packed bitstream, and there
is no decoder. Sizes are therefore character counts.
"""

from __future__ import annotations

from dataclasses import dataclass

from huffman_coding.core.code_table import build_code_table
from huffman_coding.core.freq import count_bytes
from huffman_coding.core.tree import build_huffman_tree
from huffman_coding.errors import InternalConsistency


@dataclass(frozen=True)
class RawInput:
    data: bytes

    def size(self) -> int:
        """Size in bits with a fixed 8-bit code."""
        return len(self.data) * 8


@dataclass(frozen=True)
class EncodedOutput:
    codes: dict[int, str]
    bits: str

    def size(self) -> int:
        return len(self.bits)


def encode(raw: RawInput | bytes) -> EncodedOutput:
    """Huffman-encode ``raw``.

    InsufficientAlphabet from the tree builder propagates as-is.
    """
    data = raw.data if isinstance(raw, RawInput) else bytes(raw)

    counts = count_bytes(data)
    root = build_huffman_tree(counts)
    codes = build_code_table(root)

    parts: list[str] = []
    for b in data:
        code = codes.get(b)
        if code is None:
            raise InternalConsistency(f"byte {b} missing from code table")
        parts.append(code)

    return EncodedOutput(codes=codes, bits="".join(parts))
