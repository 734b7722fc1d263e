#!/usr/bin/env python3
"""Write docs/exit_codes.md from src/huffman_coding/errors.py.

``--check`` only compares: exit 1 when the committed file is stale.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

REPO = Path(__file__).resolve().parents[1]
TARGET = REPO / "docs" / "exit_codes.md"


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description=__doc__)
    ap.add_argument("--check", action="store_true", help="Fail if docs/exit_codes.md is stale")
    ns = ap.parse_args(argv)

    sys.path.insert(0, str(REPO / "src"))
    from huffman_coding.errors import render_exit_codes_markdown  # noqa: E402

    text = render_exit_codes_markdown()

    if ns.check:
        current = TARGET.read_text(encoding="utf-8") if TARGET.is_file() else ""
        if current != text:
            print(f"[huffman-coding] stale: {TARGET} (run without --check)", file=sys.stderr)
            return 1
        print(f"[huffman-coding] up to date: {TARGET}")
        return 0

    TARGET.parent.mkdir(parents=True, exist_ok=True)
    TARGET.write_text(text, encoding="utf-8")
    print(f"[huffman-coding] wrote {TARGET}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
