"""huffman-coding CLI.

This is the stable CLI entrypoint (console-script: ``huffman-coding``).

Commands:
  - report: raw size vs Huffman size (+ optional zlib/zstd baselines)
  - table: the code table of a file
  - config-validate: check a report spec
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from huffman_coding.baselines import parse_baselines
from huffman_coding.core.encoder import encode
from huffman_coding.errors import HuffmanCodingError
from huffman_coding.raw_input import load_raw_input
from huffman_coding.report import (
    build_size_report,
    code_table_rows,
    render_code_table_text,
    render_size_report_text,
)
from huffman_coding.report_spec import (
    MAX_PRECISION,
    ReportConfigError,
    ReportSpecV1,
    load_report_spec,
)


def _pkg_version() -> str:
    try:
        return version("huffman-coding")
    except PackageNotFoundError:
        # running from a source checkout
        return "0+unknown"


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--debug", action="store_true", help="Show stack traces on errors")


def _resolve_report_spec(
    config_arg: str | None,
    *,
    precision: int | None,
    baselines: str | None,
    table: bool,
) -> ReportSpecV1:
    # precedence: CLI flags > spec > defaults
    spec = load_report_spec(config_arg) if config_arg else ReportSpecV1()
    if precision is not None:
        if not (0 <= precision <= MAX_PRECISION):
            raise ReportConfigError(f"--precision must be in 0..{MAX_PRECISION}")
        spec = replace(spec, precision=int(precision))
    if baselines is not None:
        spec = replace(spec, baselines=tuple(parse_baselines(baselines)))
    if table:
        spec = replace(spec, show_table=True)
    return spec


def _cmd_report(input_path: Path, spec: ReportSpecV1, *, as_json: bool) -> int:
    raw = load_raw_input(input_path)
    encoded = encode(raw)
    rep = build_size_report(
        raw, encoded, name=input_path.name, spec_name=spec.name, baselines=spec.baselines
    )

    if as_json:
        if spec.show_table:
            rep["table"] = code_table_rows(encoded.codes)
        print(json.dumps(rep, ensure_ascii=False, sort_keys=True))
        return 0

    sys.stdout.write(render_size_report_text(rep, precision=spec.precision))
    if spec.show_table:
        sys.stdout.write("\n")
        sys.stdout.write(render_code_table_text(encoded.codes))
    return 0


def _cmd_table(input_path: Path, *, as_json: bool) -> int:
    encoded = encode(load_raw_input(input_path))
    if as_json:
        print(json.dumps(code_table_rows(encoded.codes), ensure_ascii=False))
        return 0
    sys.stdout.write(render_code_table_text(encoded.codes))
    return 0


def _cmd_config_validate(spec_arg: str) -> int:
    # load is the validation
    load_report_spec(spec_arg)
    print("OK")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="huffman-coding",
        description="Huffman code construction and theoretical compression ratio",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {_pkg_version()}")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_r = sub.add_parser("report", help="Raw vs encoded size (bits) and compression ratio")
    p_r.add_argument("-i", "--input-file", type=Path, required=True)
    p_r.add_argument(
        "--config",
        default=None,
        help="Report spec (JSON). Use '@file.json' to load from file, or pass JSON inline.",
    )
    p_r.add_argument(
        "--precision", type=int, default=None, help="Decimals for ratios (default: spec or 3)"
    )
    p_r.add_argument(
        "--baseline",
        default=None,
        help="Comma-separated reference codecs to compare with, e.g. 'zlib,zstd'",
    )
    p_r.add_argument("--table", action="store_true", help="Also print the code table")
    p_r.add_argument("--json", action="store_true", help="Print the report as JSON")
    _add_common_args(p_r)

    p_t = sub.add_parser("table", help="Print the Huffman code table of a file")
    p_t.add_argument("-i", "--input-file", type=Path, required=True)
    p_t.add_argument("--json", action="store_true", help="Print rows as JSON")
    _add_common_args(p_t)

    p_v = sub.add_parser("config-validate", help="Validate a report spec (v1)")
    p_v.add_argument("config", help="Report spec JSON (@file.json or inline JSON)")
    _add_common_args(p_v)

    return p


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    p = build_parser()
    ns = p.parse_args(argv)

    try:
        if ns.cmd == "report":
            spec = _resolve_report_spec(
                ns.config,
                precision=ns.precision,
                baselines=ns.baseline,
                table=bool(ns.table),
            )
            return _cmd_report(ns.input_file, spec, as_json=bool(ns.json))
        if ns.cmd == "table":
            return _cmd_table(ns.input_file, as_json=bool(ns.json))
        if ns.cmd == "config-validate":
            return _cmd_config_validate(str(ns.config))
        raise AssertionError("unreachable")

    except SystemExit:
        raise
    except ReportConfigError as e:
        # Treat as usage/config error.
        if getattr(ns, "debug", False):
            raise
        print(f"[huffman-coding] {e}", file=sys.stderr)
        return 2
    except HuffmanCodingError as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[huffman-coding] {e}", file=sys.stderr)
        return int(getattr(e, "exit_code", 10) or 10)
    except Exception as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[huffman-coding] error: {e}", file=sys.stderr)
        return 10


if __name__ == "__main__":
    raise SystemExit(main())
