from __future__ import annotations

from collections.abc import Callable, Generator
from pathlib import Path
from typing import TypeVar

import click

from harness.config import Settings
from harness.errors import (
    GuessSourceError,
    HarnessError,
    SecretNotConfiguredError,
    error_report,
)
from harness.logging import get_logger, setup_logging
from harness.session import GuessSession

T = TypeVar("T")

logger = get_logger(__name__)


def _resolve_secret(option: str | None, settings: Settings) -> str | None:
    if option is not None:
        return option
    return settings.secret


def _read_guesses(source: str) -> Generator[str, None, None]:
    """Yield one guess per line; only the line terminator is removed."""
    if source == "-":
        stream = click.get_text_stream("stdin")
        for line in stream:
            yield line[:-1] if line.endswith("\n") else line
        return
    try:
        with Path(source).open("r", encoding="utf-8") as fh:
            for line in fh:
                yield line[:-1] if line.endswith("\n") else line
    except (OSError, UnicodeDecodeError) as exc:
        raise GuessSourceError(source, str(exc)) from exc


def _report_errors(action: Callable[[], T]) -> T:
    try:
        return action()
    except (click.ClickException, click.Abort):
        raise
    except HarnessError as exc:
        logger.warning("Harness error: %s", exc.code)
        click.echo(error_report(exc).model_dump_json(), err=True)
        raise SystemExit(2) from exc
    except Exception as exc:
        logger.exception("Unhandled harness failure")
        click.echo(error_report(exc).model_dump_json(), err=True)
        raise SystemExit(2) from exc


@click.group()
@click.option(
    "--log-level",
    default=None,
    help="Log level (overrides GUESSER_LOG_LEVEL).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Guess a secret under a three-attempt lockout policy."""
    settings = Settings.from_env()
    setup_logging(log_level or settings.log_level)
    ctx.obj = settings


@cli.command()
@click.option("--secret", default=None, help="Secret to guard (else GUESSER_SECRET).")
@click.pass_obj
def play(settings: Settings, secret: str | None) -> None:
    """Prompt for guesses until one matches or no attempts remain."""

    def _run() -> bool:
        resolved = _resolve_secret(secret, settings)
        if resolved is None:
            resolved = click.prompt(
                "Secret", hide_input=True, default="", show_default=False
            )
        session = GuessSession.from_secret(resolved, logger=get_logger("harness.session"))

        while not session.finished:
            guess = click.prompt("Guess", default="", show_default=False)
            record = session.submit(guess)
            if record.accepted:
                click.echo("Correct.")
            else:
                click.echo(f"Incorrect. {record.remaining} attempts remaining.")
        return session.report().matched

    matched = _report_errors(_run)
    raise SystemExit(0 if matched else 1)


@cli.command()
@click.argument("guesses_file", type=click.Path(allow_dash=True))
@click.option("--secret", default=None, help="Secret to guard (else GUESSER_SECRET).")
@click.pass_obj
def replay(settings: Settings, guesses_file: str, secret: str | None) -> None:
    """Replay guesses from a file (one per line, '-' for stdin) and print a JSON report."""

    def _run() -> bool:
        resolved = _resolve_secret(secret, settings)
        if resolved is None:
            raise SecretNotConfiguredError()
        session = GuessSession.from_secret(resolved, logger=get_logger("harness.session"))
        report = session.run(_read_guesses(guesses_file))
        click.echo(report.model_dump_json())
        return report.matched

    matched = _report_errors(_run)
    raise SystemExit(0 if matched else 1)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
