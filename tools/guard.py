from __future__ import annotations

from collections.abc import Callable

from tools.guards import secret_guard, standards_guard

Runner = Callable[[list[str]], int]


def run_guards(roots: list[str]) -> int:
    runners: list[Runner] = [standards_guard.run, secret_guard.run]
    for runner in runners:
        rc = runner(roots)
        if rc != 0:
            return rc
    return 0


def main() -> int:
    return run_guards(["core", "harness", "tests", "tools"])


if __name__ == "__main__":
    raise SystemExit(main())
