"""Run the core/glue import check outside pytest (pre-commit, CI shell step).

Exit codes: 0 ok, 2 violations, 3 the check itself could not run.
"""

from __future__ import annotations

import importlib.util
import sys
from pathlib import Path

CHECKS = ("test_core_does_not_import_glue", "test_core_modules_are_found")


def _load_checks(test_path: Path):  # type: ignore[no-untyped-def]
    spec = importlib.util.spec_from_file_location("arch_boundaries", test_path)
    if spec is None or spec.loader is None:
        raise ImportError(f"cannot load {test_path}")
    mod = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = mod
    spec.loader.exec_module(mod)
    return [getattr(mod, name) for name in CHECKS]


def main() -> int:
    test_path = Path(__file__).resolve().parents[1] / "tests" / "test_arch_boundaries.py"
    if not test_path.is_file():
        print(f"ERROR: {test_path} not found.", file=sys.stderr)
        return 3

    try:
        checks = _load_checks(test_path)
    except (ImportError, AttributeError, SyntaxError) as e:
        print(f"ERROR: cannot load boundary checks: {e}", file=sys.stderr)
        return 3

    failed = 0
    for fn in checks:
        try:
            fn()
        except AssertionError as e:
            failed += 1
            print(f"FAIL {fn.__name__}:\n{e}", file=sys.stderr)
    if failed:
        return 2
    print(f"OK: {len(checks)} boundary checks passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
