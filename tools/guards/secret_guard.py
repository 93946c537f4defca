"""Secrets and guesses never reach logs or formatted text."""
from __future__ import annotations

import ast
import sys
from pathlib import Path

from tools.guards import parse, run_checks

LOG_METHODS = {"debug", "info", "warning", "error", "exception", "critical", "log"}
SENSITIVE_NAMES = {"secret", "_secret", "guess", "guesses"}


def _mentions_sensitive(node: ast.AST) -> bool:
    for sub in ast.walk(node):
        if isinstance(sub, ast.Name) and sub.id in SENSITIVE_NAMES:
            return True
        if isinstance(sub, ast.Attribute) and sub.attr in SENSITIVE_NAMES:
            return True
    return False


def _is_log_call(node: ast.AST) -> bool:
    return (
        isinstance(node, ast.Call)
        and isinstance(node.func, ast.Attribute)
        and node.func.attr in LOG_METHODS
    )


def check_path(path: Path) -> list[str]:
    _, tree = parse(path)
    errors: list[str] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Call) and _is_log_call(node):
            args: list[ast.AST] = [*node.args, *(kw.value for kw in node.keywords)]
            if any(_mentions_sensitive(arg) for arg in args):
                errors.append(f"{path}:{node.lineno} secret or guess passed to a log call")
        elif isinstance(node, ast.FormattedValue) and _mentions_sensitive(node.value):
            errors.append(f"{path}:{node.lineno} secret or guess interpolated into an f-string")
    return errors


def run(roots: list[str]) -> int:
    return run_checks(roots, check_path)


if __name__ == "__main__":
    raise SystemExit(run(sys.argv[1:]))
