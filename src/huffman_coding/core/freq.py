from __future__ import annotations


def count_bytes(data: bytes | bytearray | memoryview) -> dict[int, int]:
    """Map every byte value present in ``data`` to its number of occurrences.

    Empty input -> empty dict. ``data`` is never modified.
    """
    counts: dict[int, int] = {}
    for b in bytes(data):
        counts[b] = counts.get(b, 0) + 1
    return counts
