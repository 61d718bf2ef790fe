"""Domain error codes for the box office module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_INPUT = "INVALID_INPUT"
    CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    SALE_NOT_FOUND = "SALE_NOT_FOUND"
    DUPLICATE_SESSION = "DUPLICATE_SESSION"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidInputError(DomainError):
    """Raised for malformed or out-of-range input."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_INPUT, message=message)


class CapacityExceededError(DomainError):
    """Raised when a sale needs more seats than the session has left."""

    def __init__(self, requested: int, available: int) -> None:
        super().__init__(
            code=ErrorCode.CAPACITY_EXCEEDED,
            message=(
                f"Not enough seats available for this sale "
                f"(requested {requested}, available {available})"
            ),
        )
        self.requested = requested
        self.available = available


class SessionNotFoundError(DomainError):
    """Raised when a session is not found."""

    def __init__(self, session_id: str) -> None:
        super().__init__(
            code=ErrorCode.SESSION_NOT_FOUND,
            message="Session not found",
        )
        self.session_id = session_id


class SaleNotFoundError(DomainError):
    """Raised when a sale does not belong to the session."""

    def __init__(self, session_id: str, sale_id: str) -> None:
        super().__init__(
            code=ErrorCode.SALE_NOT_FOUND,
            message="Sale not found for this session",
        )
        self.session_id = session_id
        self.sale_id = sale_id


class DuplicateSessionError(DomainError):
    """Raised when a session id is already taken."""

    def __init__(self, session_id: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_SESSION,
            message="A session with this id already exists",
        )
        self.session_id = session_id
