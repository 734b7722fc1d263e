from __future__ import annotations

import json
from pathlib import Path

import pytest

from huffman_coding.report_spec import (
    DEFAULT_PRECISION,
    ReportConfigError,
    ReportSpecV1,
    load_report_spec,
)


def test_spec_inline_minimal() -> None:
    spec = load_report_spec(json.dumps({"spec": "huffman-coding.report.v1"}))
    assert spec == ReportSpecV1()
    assert spec.precision == DEFAULT_PRECISION
    assert spec.baselines == ()
    assert spec.show_table is False


def test_spec_full() -> None:
    obj = {
        "spec": "huffman-coding.report.v1",
        "name": " ci ",
        "precision": 5,
        "baselines": ["ZLIB", "zstd", "zlib"],
        "show_table": True,
    }
    spec = load_report_spec(json.dumps(obj))
    assert spec.name == "ci"
    assert spec.precision == 5
    assert spec.baselines == ("zlib", "zstd")
    assert spec.show_table is True


@pytest.mark.parametrize(
    "obj",
    [
        {"spec": "huffman-coding.report.v1", "wat": 1},
        {"spec": "huffman-coding.report.v0"},
        {"name": "missing-spec"},
        {"spec": "huffman-coding.report.v1", "precision": -1},
        {"spec": "huffman-coding.report.v1", "precision": True},
        {"spec": "huffman-coding.report.v1", "baselines": "zlib"},
        {"spec": "huffman-coding.report.v1", "baselines": ["lzma"]},
        {"spec": "huffman-coding.report.v1", "show_table": "yes"},
        {"spec": "huffman-coding.report.v1", "name": ""},
    ],
)
def test_spec_rejects_bad_objects(obj: dict) -> None:
    with pytest.raises(ReportConfigError):
        load_report_spec(json.dumps(obj))


@pytest.mark.parametrize("arg", ["", "   ", "not json", "[1, 2]", "@/nonexistent/spec.json"])
def test_spec_rejects_bad_arguments(arg: str) -> None:
    with pytest.raises(ReportConfigError):
        load_report_spec(arg)


def test_spec_from_file(tmp_path: Path) -> None:
    p = tmp_path / "r.json"
    p.write_text(
        json.dumps({"spec": "huffman-coding.report.v1", "precision": 1}),
        encoding="utf-8",
    )
    spec = load_report_spec("@" + str(p))
    assert spec.precision == 1


def test_spec_file_not_utf8(tmp_path: Path) -> None:
    p = tmp_path / "r.json"
    p.write_bytes(b'{"spec": "\xff\xfe"}')
    with pytest.raises(ReportConfigError):
        load_report_spec("@" + str(p))
