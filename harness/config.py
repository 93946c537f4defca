from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    """Harness settings loaded from environment in a type-safe, framework-free way.

    An unset secret is None; an empty GUESSER_SECRET is a valid empty secret.
    """

    secret: str | None
    log_level: str

    @staticmethod
    def from_env() -> Settings:
        prefix = "GUESSER_"
        secret = os.environ.get(f"{prefix}SECRET")
        log_level = os.getenv(f"{prefix}LOG_LEVEL", "INFO").strip() or "INFO"
        return Settings(secret=secret, log_level=log_level.upper())
