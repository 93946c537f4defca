from __future__ import annotations

import logging
import threading

import pytest

from core.guard import SecretGuard
from harness.session import GuessSession

_LOGGER = logging.getLogger("tests.session")


def test_submit_records_outcome_and_remaining() -> None:
    session = GuessSession.from_secret("secret", logger=_LOGGER)

    first = session.submit("secre")
    second = session.submit("secret")

    assert (first.attempt, first.accepted, first.remaining) == (1, False, 2)
    assert (second.attempt, second.accepted, second.remaining) == (2, True, 3)
    assert session.finished


def test_run_stops_after_match() -> None:
    session = GuessSession.from_secret("secret", logger=_LOGGER)

    report = session.run(["secret!", "secret", "never evaluated"])

    assert report.matched
    assert report.attempts == 2
    assert report.remaining == 3
    assert report.finished_at is not None


def test_run_stops_when_attempts_exhausted() -> None:
    session = GuessSession.from_secret("secret", logger=_LOGGER)

    report = session.run(["nothing like it", "secret", "secret", "secret", "secret"])

    assert not report.matched
    assert report.attempts == 3
    assert report.remaining == 0
    assert [r.remaining for r in report.records] == [2, 1, 0]


def test_run_with_too_few_guesses_leaves_session_open() -> None:
    session = GuessSession.from_secret("secret", logger=_LOGGER)

    report = session.run(["secre"])

    assert not session.finished
    assert report.finished_at is None
    assert report.remaining == 2


def test_report_never_carries_secret_or_guesses() -> None:
    session = GuessSession.from_secret("hunter2", logger=_LOGGER)
    session.submit("hunter3")

    dumped = session.report().model_dump_json()

    assert "hunter2" not in dumped
    assert "hunter3" not in dumped


def test_explicit_session_id_and_injected_guard() -> None:
    guard = SecretGuard("abc")
    session = GuessSession(guard, logger=_LOGGER, session_id="fixed")

    session.submit("abd")

    assert session.session_id == "fixed"
    assert guard.remaining() == 2


def test_submit_logs_context_without_guess(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="tests.session")
    session = GuessSession.from_secret("secret", logger=_LOGGER)

    session.submit("secreX")

    records = [r for r in caplog.records if r.getMessage() == "Guess evaluated"]
    assert len(records) == 1
    assert getattr(records[0], "session_id") == session.session_id
    assert getattr(records[0], "attempt") == 1
    assert "secreX" not in caplog.text


def test_concurrent_submits_are_serialized() -> None:
    session = GuessSession.from_secret("secret", logger=_LOGGER)
    barrier = threading.Barrier(8)

    def _worker() -> None:
        barrier.wait()
        session.submit("secreX")

    threads = [threading.Thread(target=_worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    report = session.report()
    assert sorted(r.attempt for r in report.records) == list(range(1, 9))
    assert report.remaining == 0
    assert sorted(r.remaining for r in report.records) == [0, 0, 0, 0, 0, 0, 1, 2]
