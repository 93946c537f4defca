"""Internal tooling for repository guard checks.

This package hosts guard scripts that enforce repository standards:
- No use of typing.Any or casts, no "type: ignore" comments
- No bare except, and every handler re-raises
- No use of print; use centralized logging or click.echo instead
- No secret or guess handed to a log call or an f-string

Run them all with ``python -m tools.guard``.
"""
