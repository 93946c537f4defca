"""Code standards: strict typing, loud exception handling, no print."""
from __future__ import annotations

import ast
import sys
import tokenize
from collections.abc import Callable
from io import StringIO
from pathlib import Path

from tools.guards import parse, run_checks

FORBIDDEN_TYPING = {"Any", "cast"}

NodeCheck = Callable[[ast.AST], str | None]


def _forbidden_typing(node: ast.AST) -> str | None:
    if isinstance(node, ast.ImportFrom) and node.module == "typing":
        names = sorted(a.name for a in node.names if a.name in FORBIDDEN_TYPING)
        if names:
            return f"forbidden typing import {', '.join(repr(n) for n in names)}"
    if (
        isinstance(node, ast.Attribute)
        and isinstance(node.value, ast.Name)
        and node.value.id == "typing"
        and node.attr in FORBIDDEN_TYPING
    ):
        return f"forbidden use of typing.{node.attr}"
    if isinstance(node, ast.Call) and isinstance(node.func, ast.Name) and node.func.id == "cast":
        return "forbidden use of cast()"
    if isinstance(node, ast.Name) and node.id == "Any":
        return "forbidden type 'Any'"
    return None


def _quiet_handler(node: ast.AST) -> str | None:
    if not isinstance(node, ast.ExceptHandler):
        return None
    if node.type is None:
        return "bare 'except' is forbidden"
    if not any(isinstance(sub, ast.Raise) for sub in ast.walk(node)):
        return "except without re-raise is forbidden"
    return None


def _print_call(node: ast.AST) -> str | None:
    if isinstance(node, ast.Call) and isinstance(node.func, ast.Name) and node.func.id == "print":
        return "use logger or click.echo; 'print' is forbidden"
    return None


NODE_CHECKS: tuple[NodeCheck, ...] = (_forbidden_typing, _quiet_handler, _print_call)


def _ignore_comments(path: Path, text: str) -> list[str]:
    # Comments only; a string literal containing the marker is fine
    reader = StringIO(text).readline
    return [
        f"{path}:{tok.start[0]} forbidden 'type: ignore'"
        for tok in tokenize.generate_tokens(reader)
        if tok.type == tokenize.COMMENT and "type: ignore" in tok.string
    ]


def check_path(path: Path) -> list[str]:
    text, tree = parse(path)
    errors: list[str] = []
    for node in ast.walk(tree):
        for check in NODE_CHECKS:
            message = check(node)
            if message is not None:
                errors.append(f"{path}:{getattr(node, 'lineno', 0)} {message}")
    errors.extend(_ignore_comments(path, text))
    return errors


def run(roots: list[str]) -> int:
    return run_checks(roots, check_path)


if __name__ == "__main__":
    raise SystemExit(run(sys.argv[1:]))
