"""SessionStore — live StrokeSessions held on behalf of HTTP clients.

Sessions idle for longer than ``idle_timeout_s`` are evicted whenever a new
one is created; past ``max_sessions`` the least recently used one goes first.
"""

from __future__ import annotations

import logging
import threading
import time
import uuid
from collections.abc import Callable

from app.engine.config import ScoringConfig
from app.engine.session import StrokeSession

logger = logging.getLogger(__name__)


class SessionStore:
    def __init__(
        self,
        config: ScoringConfig | None = None,
        clock: Callable[[], int] = time.monotonic_ns,
        idle_timeout_s: float = 600.0,
        max_sessions: int = 1000,
    ) -> None:
        if max_sessions < 1:
            raise ValueError(f"max_sessions must be at least 1, got {max_sessions}")
        self.config = config or ScoringConfig()
        self.idle_timeout_s = idle_timeout_s
        self.max_sessions = max_sessions
        self._clock = clock
        self._sessions: dict[str, StrokeSession] = {}
        self._last_seen: dict[str, int] = {}
        self._lock = threading.Lock()

    def create(self) -> tuple[str, StrokeSession]:
        session_id = uuid.uuid4().hex
        session = StrokeSession(self.config, clock=self._clock)
        now = self._clock()
        with self._lock:
            self._evict_idle(now)
            while len(self._sessions) >= self.max_sessions:
                oldest = min(self._last_seen, key=self._last_seen.__getitem__)
                self._remove(oldest, "capacity")
            self._sessions[session_id] = session
            self._last_seen[session_id] = now
            active = len(self._sessions)
        logger.info("Started session %s (%d active)", session_id, active)
        return session_id, session

    def get(self, session_id: str) -> StrokeSession:
        """Raises KeyError for unknown ids. Counts as activity."""
        with self._lock:
            session = self._sessions[session_id]
            self._last_seen[session_id] = self._clock()
            return session

    def discard(self, session_id: str) -> bool:
        with self._lock:
            if session_id not in self._sessions:
                return False
            self._remove(session_id, "discarded")
        return True

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._sessions)

    def _evict_idle(self, now: int) -> None:
        cutoff = now - int(self.idle_timeout_s * 1_000_000_000)
        for session_id in [sid for sid, seen in self._last_seen.items() if seen < cutoff]:
            self._remove(session_id, "idle")

    def _remove(self, session_id: str, reason: str) -> None:
        del self._sessions[session_id]
        del self._last_seen[session_id]
        logger.info("Removed session %s (%s)", session_id, reason)
