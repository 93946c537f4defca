from __future__ import annotations

import logging
from typing import AnyStr, Final

MAX_SECRET_LENGTH: Final[int] = 32
MAX_ATTEMPTS: Final[int] = 3
DISTANCE_TOLERANCE: Final[int] = 2

# Secrets and guesses are compared as UTF-8 code units; lone surrogates pass through.
_ENCODING: Final[str] = "utf-8"
_ENCODING_ERRORS: Final[str] = "surrogatepass"

_logger = logging.getLogger(__name__)


def _units(text: str) -> bytes:
    return text.encode(_ENCODING, _ENCODING_ERRORS)


def edit_distance(a: AnyStr, b: AnyStr) -> int:
    """Return the Levenshtein distance between two strings or byte strings.

    Elements are compared as-is: no case folding and no Unicode normalization.
    Over UTF-8 bytes a precomposed "é" and an "e" followed by a combining
    acute accent are three edits apart.
    """
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (ca != cb),
                )
            )
        previous = current
    return previous[-1]


class SecretGuard:
    """Answers guesses against a fixed secret with a brute-force lockout.

    A guess more than DISTANCE_TOLERANCE edits away locks the guard for good.
    The lock is never reported: a locked guard keeps counting remaining
    attempts down exactly like an unlocked one, so callers watching
    remaining() cannot tell "locked" from "wrong".

    Only the first MAX_SECRET_LENGTH UTF-8 bytes of the secret are kept, even
    when that cuts a multibyte character in half.
    """

    def __init__(self, secret: str) -> None:
        self._secret = _units(secret)[:MAX_SECRET_LENGTH]
        self._remaining = MAX_ATTEMPTS
        self._locked = False

    def __repr__(self) -> str:
        return f"SecretGuard(remaining={self._remaining})"

    def remaining(self) -> int:
        return self._remaining

    def match(self, guess: str) -> bool:
        if self._locked:
            self._consume()
            return False
        if self._remaining == 0:
            return False

        distance = edit_distance(self._secret, _units(guess))
        if distance == 0:
            self._remaining = MAX_ATTEMPTS
            return True
        if distance > DISTANCE_TOLERANCE:
            self._locked = True
            _logger.debug("Guard locked")
        self._consume()
        return False

    def _consume(self) -> None:
        if self._remaining > 0:
            self._remaining -= 1
            if self._remaining == 0:
                _logger.debug("Guard attempts exhausted")
