from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class GameSessionError(Exception):
    """Structured error for the session/API layer.

    Soft in-game rejections never raise; they come back as a rejection code
    on the step result. This error is for requests that cannot reach the
    reducer at all (unknown session, malformed intent payload).
    """

    code: str
    message: str
    details: Optional[Any] = None

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.code}: {self.message}"


# Session/API error codes (stable API surface)
SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
BAD_INTENT = "BAD_INTENT"

# Soft rejection codes returned by the reducer (stable API surface)
INSUFFICIENT_RESOURCE = "INSUFFICIENT_RESOURCE"
SELECTION_LIMIT_EXCEEDED = "SELECTION_LIMIT_EXCEEDED"
PURCHASE_LIMIT_EXCEEDED = "PURCHASE_LIMIT_EXCEEDED"
DUPLICATE_APPLICATION = "DUPLICATE_APPLICATION"
INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
COURSE_LIMIT_EXCEEDED = "COURSE_LIMIT_EXCEEDED"
WRONG_PHASE = "WRONG_PHASE"
GAME_OVER = "GAME_OVER"
NOT_FOUND = "NOT_FOUND"
INVALID_CHOICE = "INVALID_CHOICE"
MENTOR_UNAVAILABLE = "MENTOR_UNAVAILABLE"
EVENT_PENDING = "EVENT_PENDING"
