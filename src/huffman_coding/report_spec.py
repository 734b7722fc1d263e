"""Report spec (v1) for huffman-coding.

Goal: make a report run reproducible (CLI, CI) from a small JSON document.

This module intentionally stays *small* and strict:
  - JSON only
  - explicit schema id
  - unknown keys are rejected
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from huffman_coding.baselines import BASELINE_IDS

SPEC_ID_V1 = "huffman-coding.report.v1"
DEFAULT_PRECISION = 3
MAX_PRECISION = 12


class ReportConfigError(ValueError):
    pass


def _load_json_arg(spec_arg: str) -> dict[str, Any]:
    s = spec_arg.strip()
    if not s:
        raise ReportConfigError("report spec: empty argument")

    if s.startswith("@"):
        p = Path(s[1:]).expanduser()
        if not p.exists() or not p.is_file():
            raise ReportConfigError(f"report spec: file not found: {p}")
        try:
            obj = json.loads(p.read_text(encoding="utf-8"))
        except Exception as e:
            raise ReportConfigError(f"report spec: invalid JSON in {p}: {e}") from e
        if not isinstance(obj, dict):
            raise ReportConfigError(f"report spec: JSON in {p} must be an object")
        return obj

    try:
        obj = json.loads(s)
    except Exception as e:
        raise ReportConfigError(f"report spec: invalid inline JSON: {e}") from e
    if not isinstance(obj, dict):
        raise ReportConfigError("report spec: inline JSON must be an object")
    return obj


def _optional_bool(obj: dict[str, Any], key: str, default: bool) -> bool:
    if key not in obj:
        return default
    v = obj.get(key)
    if isinstance(v, bool):
        return v
    raise ReportConfigError(f"report spec: field '{key}' must be a boolean")


def _optional_precision(obj: dict[str, Any]) -> int:
    if "precision" not in obj:
        return DEFAULT_PRECISION
    v = obj.get("precision")
    # bool is an int subclass
    if isinstance(v, bool) or not isinstance(v, int) or not (0 <= v <= MAX_PRECISION):
        raise ReportConfigError(f"report spec: 'precision' must be an int in 0..{MAX_PRECISION}")
    return v


def _optional_baselines(obj: dict[str, Any]) -> tuple[str, ...]:
    v = obj.get("baselines")
    if v is None:
        return ()
    if not isinstance(v, list):
        raise ReportConfigError("report spec: 'baselines' must be a list of strings")
    out: list[str] = []
    for item in v:
        if not isinstance(item, str) or item.strip().lower() not in BASELINE_IDS:
            raise ReportConfigError(
                f"report spec: unsupported baseline {item!r} (allowed: {', '.join(BASELINE_IDS)})"
            )
        bid = item.strip().lower()
        if bid not in out:
            out.append(bid)
    return tuple(out)


@dataclass(frozen=True)
class ReportSpecV1:
    """How a size/ratio report is computed and printed."""

    name: str = "default"
    precision: int = DEFAULT_PRECISION
    baselines: tuple[str, ...] = field(default_factory=tuple)
    show_table: bool = False


def load_report_spec(spec_arg: str) -> ReportSpecV1:
    """Load and validate a report spec.

    spec_arg:
      - '@file.json'
      - inline JSON object
    """
    obj = _load_json_arg(spec_arg)

    allowed = {"spec", "name", "precision", "baselines", "show_table"}
    extra = sorted(set(obj.keys()) - allowed)
    if extra:
        raise ReportConfigError(f"report spec: unsupported keys: {', '.join(extra)}")

    spec_id = obj.get("spec")
    if spec_id != SPEC_ID_V1:
        raise ReportConfigError(
            f"report spec: unsupported spec: {spec_id!r} (expected {SPEC_ID_V1!r})"
        )

    name = obj.get("name")
    if name is None:
        name = "default"
    if not isinstance(name, str) or not name.strip():
        raise ReportConfigError("report spec: field 'name' must be a string")

    return ReportSpecV1(
        name=name.strip(),
        precision=_optional_precision(obj),
        baselines=_optional_baselines(obj),
        show_table=_optional_bool(obj, "show_table", False),
    )
