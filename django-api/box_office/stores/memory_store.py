"""Process-local implementation of the SessionStore.

Sessions live in a dict for the life of the process; nothing is persisted.
"""

import threading

from box_office.domain import Session, SessionId
from box_office.stores.interfaces import SessionStore


class InMemorySessionStore(SessionStore):
    """Dict-backed session store, insertion ordered."""

    def __init__(self) -> None:
        self._sessions: dict[SessionId, Session] = {}
        self._lock = threading.Lock()

    def list_sessions(self) -> list[Session]:
        with self._lock:
            return list(self._sessions.values())

    def get_session(self, session_id: SessionId) -> Session | None:
        return self._sessions.get(session_id)

    def add_session(self, session: Session) -> bool:
        with self._lock:
            if session.id in self._sessions:
                return False
            self._sessions[session.id] = session
            return True
