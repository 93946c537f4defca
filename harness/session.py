from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from datetime import datetime, timezone
from uuid import uuid4

from core.guard import SecretGuard
from harness.models import GuessRecord, SessionReport


class GuessSession:
    """Drives one guard; all dependencies are injected explicitly.

    The guard defines no synchronization of its own, so every match call
    goes through the session lock.
    """

    def __init__(
        self,
        guard: SecretGuard,
        *,
        logger: logging.Logger,
        session_id: str | None = None,
    ) -> None:
        self._guard = guard
        self._logger = logger
        self._session_id = session_id or str(uuid4())
        self._lock = threading.Lock()
        self._records: list[GuessRecord] = []
        self._matched = False
        self._started_at = datetime.now(timezone.utc)
        self._finished_at: datetime | None = None

    @classmethod
    def from_secret(cls, secret: str, *, logger: logging.Logger) -> GuessSession:
        return cls(SecretGuard(secret), logger=logger)

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def finished(self) -> bool:
        return self._matched or self._guard.remaining() == 0

    def submit(self, guess: str) -> GuessRecord:
        """Evaluate one guess and record the outcome."""
        with self._lock:
            accepted = self._guard.match(guess)
            record = GuessRecord(
                attempt=len(self._records) + 1,
                accepted=accepted,
                remaining=self._guard.remaining(),
            )
            self._records.append(record)
            if accepted:
                self._matched = True
            if self.finished and self._finished_at is None:
                self._finished_at = datetime.now(timezone.utc)

        self._logger.debug(
            "Guess evaluated",
            extra={"session_id": self._session_id, "attempt": record.attempt},
        )
        return record

    def run(self, guesses: Iterable[str]) -> SessionReport:
        """Submit guesses in order until the session finishes or input runs out."""
        for guess in guesses:
            if self.finished:
                break
            self.submit(guess)
        self._logger.info(
            "Session ended",
            extra={"session_id": self._session_id, "attempt": len(self._records)},
        )
        return self.report()

    def report(self) -> SessionReport:
        with self._lock:
            return SessionReport(
                session_id=self._session_id,
                attempts=len(self._records),
                matched=self._matched,
                remaining=self._guard.remaining(),
                records=list(self._records),
                started_at=self._started_at,
                finished_at=self._finished_at,
            )
