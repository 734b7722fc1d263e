"""Size/ratio report: raw bits (8 per byte) vs Huffman textual bits.

Determinism note: the report carries no timestamps and no absolute paths, so
the same input always serializes to the same JSON.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from huffman_coding.baselines import baseline_bits
from huffman_coding.core.encoder import EncodedOutput, RawInput

SCHEMA_V1 = "huffman-coding.size_report.v1"


def _ratio(raw_bits: int, out_bits: int) -> float:
    return (raw_bits / out_bits) if out_bits else 0.0


def build_size_report(
    raw: RawInput,
    encoded: EncodedOutput,
    *,
    name: str = "input",
    spec_name: str = "default",
    baselines: Sequence[str] = (),
) -> dict[str, Any]:
    """Build the report dict. ``ratio`` is raw / encoded (higher is better).

    ``name`` is the input file name, ``spec_name`` the report spec that produced it.
    """
    raw_bits = raw.size()
    enc_bits = encoded.size()
    n_bytes = len(raw.data)

    rep: dict[str, Any] = {
        "schema": SCHEMA_V1,
        "name": name,
        "spec_name": spec_name,
        "bytes": n_bytes,
        "symbols": len(encoded.codes),
        "raw_bits": raw_bits,
        "encoded_bits": enc_bits,
        "saved_bits": raw_bits - enc_bits,
        "ratio": float(_ratio(raw_bits, enc_bits)),
        "avg_code_len": (enc_bits / n_bytes) if n_bytes else 0.0,
    }

    if baselines:
        rows: list[dict[str, Any]] = []
        for bid in baselines:
            bits = baseline_bits(bid, raw.data)
            rows.append({"id": bid, "bits": bits, "ratio": float(_ratio(raw_bits, bits))})
        rep["baselines"] = rows

    return rep


def render_size_report_text(rep: dict[str, Any], *, precision: int = 3) -> str:
    lines: list[str] = []
    lines.append(f"Raw file size: {rep['raw_bits']} bits\n")
    lines.append(f"Encoded file size: {rep['encoded_bits']} bits\n")
    lines.append(f"Compression ratio: {float(rep['ratio']):.{precision}f}\n")
    for b in rep.get("baselines") or []:
        lines.append(
            f"Baseline {b['id']}: {b['bits']} bits (ratio {float(b['ratio']):.{precision}f})\n"
        )
    return "".join(lines)


def code_table_rows(codes: dict[int, str]) -> list[dict[str, Any]]:
    """Rows sorted by (code length, symbol): shortest codes first."""
    return [
        {"symbol": sym, "code": codes[sym], "length": len(codes[sym])}
        for sym in sorted(codes, key=lambda s: (len(codes[s]), s))
    ]


def _symbol_label(sym: int) -> str:
    ch = chr(sym)
    if 0x21 <= sym <= 0x7E:
        return f"{sym:3d} {ch!r}"
    return f"{sym:3d} 0x{sym:02x}"


def render_code_table_text(codes: dict[int, str]) -> str:
    lines: list[str] = []
    lines.append(f"Code table ({len(codes)} symbols)\n")
    for r in code_table_rows(codes):
        lines.append(f"  {_symbol_label(r['symbol']):12s} len={r['length']:3d} {r['code']}\n")
    return "".join(lines)
