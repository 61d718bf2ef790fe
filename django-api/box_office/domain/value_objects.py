"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import ROUND_HALF_DOWN, ROUND_HALF_UP, Decimal
from typing import Self
from uuid import uuid4

CENT = Decimal("0.01")


def round_currency(value: Decimal | int | float | str) -> Decimal:
    """Round to cents, breaking half-cent ties toward positive infinity."""
    amount = Decimal(str(value))
    rounding = ROUND_HALF_UP if amount >= 0 else ROUND_HALF_DOWN
    return amount.quantize(CENT, rounding=rounding)


@dataclass(frozen=True)
class SessionId:
    """Unique identifier for a Session."""

    value: str

    MAX_LENGTH = 60

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("Session id cannot be empty")
        if len(self.value) > self.MAX_LENGTH:
            raise ValueError("Session id is too long")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=str(value).strip())

    @classmethod
    def generate(cls) -> Self:
        return cls(value=f"SESS-{uuid4().hex[:12].upper()}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def of(cls, value: Decimal | int | float | str) -> Self:
        return cls(amount=round_currency(value))

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class Capacity:
    """Number of seats in a session; at least one."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("Capacity must be at least one seat")
