"""Guard runners for repository standards.

Each guard exposes ``check_path(path) -> list[str]`` and
``run(roots: list[str]) -> int`` returning non-zero on violations.
"""
from __future__ import annotations

import ast
import sys
from collections.abc import Callable, Iterable
from pathlib import Path


def iter_python_files(roots: Iterable[str]) -> Iterable[Path]:
    for root in roots:
        base = Path(root)
        if not base.exists():
            continue
        if base.is_file():
            yield base
            continue
        yield from sorted(base.rglob("*.py"))


def parse(path: Path) -> tuple[str, ast.Module]:
    text = path.read_text(encoding="utf-8")
    try:
        tree = ast.parse(text, filename=str(path))
    except SyntaxError as exc:
        # Surface parse errors explicitly and re-raise to fail the check
        sys.stderr.write(f"{path}: PARSE_ERROR {exc}\n")
        raise
    return text, tree


def run_checks(roots: list[str], check: Callable[[Path], list[str]]) -> int:
    errors: list[str] = []
    for path in iter_python_files(roots):
        errors.extend(check(path))
    if errors:
        sys.stderr.write("\n".join(errors) + "\n")
        return 1
    return 0
