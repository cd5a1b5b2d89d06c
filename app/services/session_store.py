from __future__ import annotations

"""In-memory game sessions for the HTTP layer.

Each session owns its state and its own ``random.Random`` so concurrent
games never share a generator. The store is bounded; the oldest session is
evicted once ``MAX_SESSIONS`` is exceeded.
"""

import logging
import random
import secrets
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from config import DEFAULT_SEED, MAX_SESSIONS
from game import GameSessionError, GameState, StepResult, dispatch, intent_from_payload, new_game_state
from game.errors import SESSION_NOT_FOUND
from rng_util import make_rng

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GameSession:
    session_id: str
    state: GameState
    rng: random.Random
    seed: Optional[int] = None


class SessionStore:
    def __init__(self, max_sessions: int = MAX_SESSIONS) -> None:
        self._max = max(1, int(max_sessions))
        self._sessions: "OrderedDict[str, GameSession]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self, seed: Optional[int] = None) -> GameSession:
        if seed is None:
            seed = DEFAULT_SEED
        session = GameSession(
            session_id=secrets.token_hex(8),
            state=new_game_state(),
            rng=make_rng(seed),
            seed=seed,
        )
        with self._lock:
            self._sessions[session.session_id] = session
            while len(self._sessions) > self._max:
                evicted, _ = self._sessions.popitem(last=False)
                logger.info("session evicted: %s", evicted)
        logger.info("session created: %s (seed=%r)", session.session_id, seed)
        return session

    def get(self, session_id: str) -> GameSession:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is not None:
                self._sessions.move_to_end(session_id)
        if session is None:
            raise GameSessionError(SESSION_NOT_FOUND, f"session not found: {session_id}", {"session_id": session_id})
        return session

    def apply(self, session_id: str, payload: Mapping[str, Any]) -> StepResult:
        """Parse ``payload`` into an intent and run it against the session."""
        intent = intent_from_payload(payload)
        session = self.get(session_id)
        with self._lock:
            result = dispatch(session.state, intent, rng=session.rng)
            session.state = result.state
        return result

    def drop(self, session_id: str) -> bool:
        with self._lock:
            return self._sessions.pop(session_id, None) is not None


_STORE: Optional[SessionStore] = None


def get_store() -> SessionStore:
    global _STORE
    if _STORE is None:
        _STORE = SessionStore()
    return _STORE


def reset_store(max_sessions: int = MAX_SESSIONS) -> SessionStore:
    global _STORE
    _STORE = SessionStore(max_sessions)
    return _STORE
