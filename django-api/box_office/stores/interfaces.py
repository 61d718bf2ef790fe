"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from box_office.domain import Session, SessionId


class SessionStore(ABC):
    """Interface for session persistence operations."""

    @abstractmethod
    def list_sessions(self) -> list[Session]:
        """Return all sessions in creation order."""
        ...

    @abstractmethod
    def get_session(self, session_id: SessionId) -> Session | None:
        """Return a session by ID, or None if not found."""
        ...

    @abstractmethod
    def add_session(self, session: Session) -> bool:
        """Store a new session. Return False if its id is already taken."""
        ...
