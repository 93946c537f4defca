from __future__ import annotations

from datetime import datetime, timezone

from harness.models import ErrorCode, ErrorReport


class HarnessError(Exception):
    """Harness failure with a stable code for the error report.

    The guard itself never raises; these only cover the harness surface
    (configuration and guess input).
    """

    def __init__(self, message: str, *, code: ErrorCode) -> None:
        super().__init__(message)
        self.code: ErrorCode = code


class SecretNotConfiguredError(HarnessError):
    def __init__(self) -> None:
        super().__init__(
            "No secret configured; pass --secret or set GUESSER_SECRET",
            code="SECRET_NOT_CONFIGURED",
        )


class GuessSourceError(HarnessError):
    def __init__(self, source: str, reason: str) -> None:
        super().__init__(
            f"Cannot read guesses from {source}: {reason}",
            code="GUESS_SOURCE_UNREADABLE",
        )
        self.source = source


def error_report(exc: Exception) -> ErrorReport:
    """Map any exception to a stable error payload."""
    now = datetime.now(timezone.utc)
    if isinstance(exc, HarnessError):
        details: dict[str, object] | None = None
        if isinstance(exc, GuessSourceError):
            details = {"source": exc.source}
        return ErrorReport(error=str(exc), code=exc.code, details=details, timestamp=now)
    # Fallback: treat as unhandled
    return ErrorReport(
        error="Internal error",
        code="INTERNAL_ERROR",
        details={"type": type(exc).__name__},
        timestamp=now,
    )
