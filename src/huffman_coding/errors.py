"""Typed errors for huffman-coding.

Single source of truth for exit codes lives here.

Policy:
- Errors are small and boring.
- The CLI maps errors to stable exit codes (see EXIT_* constants).
- docs/exit_codes.md is generated from this module (scripts/gen_exit_codes_md.py).
"""

from __future__ import annotations

from dataclasses import dataclass

# -------------------------
# Exit codes (single source)
# -------------------------

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_INSUFFICIENT_ALPHABET = 3
EXIT_INTERNAL_CONSISTENCY = 4
EXIT_GENERIC = 10
EXIT_BOUNDARY_IO = 12
EXIT_MISSING_RESOURCE = 13


@dataclass(frozen=True, slots=True)
class ExitCodeInfo:
    code: int
    name: str
    description: str


EXIT_CODES: tuple[ExitCodeInfo, ...] = (
    ExitCodeInfo(EXIT_OK, "OK", "Success"),
    ExitCodeInfo(EXIT_USAGE, "USAGE", "Usage/config error (invalid args, invalid report spec, etc.)"),
    ExitCodeInfo(
        EXIT_INSUFFICIENT_ALPHABET,
        "INSUFFICIENT_ALPHABET",
        "Input has fewer than three distinct byte values",
    ),
    ExitCodeInfo(
        EXIT_INTERNAL_CONSISTENCY,
        "INTERNAL_CONSISTENCY",
        "Broken tree/table invariant (bug, never a user condition)",
    ),
    ExitCodeInfo(EXIT_GENERIC, "GENERIC", "Generic failure (unexpected error)"),
    ExitCodeInfo(EXIT_BOUNDARY_IO, "BOUNDARY_IO", "Input file cannot be read"),
    ExitCodeInfo(
        EXIT_MISSING_RESOURCE,
        "MISSING_RESOURCE",
        "Missing optional resource (e.g. zstandard module for the zstd baseline)",
    ),
)

_EXIT_CODE_BY_CODE: dict[int, ExitCodeInfo] = {e.code: e for e in EXIT_CODES}


def exit_code_info(code: int) -> ExitCodeInfo | None:
    return _EXIT_CODE_BY_CODE.get(int(code))


_MD_HEADER = """# Exit codes

Generated from `src/huffman_coding/errors.py` by `python scripts/gen_exit_codes_md.py`.
Do not edit by hand.

| Code | Name | Raised for |
|---:|---|---|
"""

_MD_FOOTER = """
Errors raised inside the core (`InsufficientAlphabet`, `InternalConsistency`)
keep their exit code when they reach the CLI. Pass `--debug` to get the
traceback instead of the one-line `[huffman-coding] ...` message.
"""


def render_exit_codes_markdown() -> str:
    rows = [
        f"| {e.code} | `{e.name}` | {e.description} |\n"
        for e in sorted(EXIT_CODES, key=lambda x: x.code)
    ]
    return _MD_HEADER + "".join(rows) + _MD_FOOTER


# ---------------
# Typed exceptions
# ---------------


class HuffmanCodingError(Exception):
    """Base error for huffman-coding."""

    exit_code: int = EXIT_GENERIC


class UsageError(HuffmanCodingError):
    exit_code = EXIT_USAGE


class InsufficientAlphabet(HuffmanCodingError):
    """Fewer than three distinct symbols: no Huffman tree is built."""

    exit_code = EXIT_INSUFFICIENT_ALPHABET


class InternalConsistency(HuffmanCodingError):
    """A tree/table invariant does not hold. Always a bug."""

    exit_code = EXIT_INTERNAL_CONSISTENCY


class BoundaryIO(HuffmanCodingError):
    exit_code = EXIT_BOUNDARY_IO


class MissingResource(HuffmanCodingError):
    exit_code = EXIT_MISSING_RESOURCE
