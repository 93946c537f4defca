from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from core.guard import MAX_ATTEMPTS

ErrorCode = Literal[
    "SECRET_NOT_CONFIGURED",
    "GUESS_SOURCE_UNREADABLE",
    "INTERNAL_ERROR",
]


class GuessRecord(BaseModel):
    attempt: int = Field(ge=1)
    accepted: bool
    remaining: int = Field(ge=0, le=MAX_ATTEMPTS)


class SessionReport(BaseModel):
    session_id: str
    attempts: int = Field(ge=0)
    matched: bool
    remaining: int = Field(ge=0, le=MAX_ATTEMPTS)
    records: list[GuessRecord]
    started_at: datetime
    finished_at: datetime | None = None


class ErrorReport(BaseModel):
    error: str
    code: ErrorCode
    details: dict[str, object] | None = None
    timestamp: datetime
