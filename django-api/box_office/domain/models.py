"""Domain models representing in-memory box office state.

These are pure domain objects with no API input rules.
``Session`` is the aggregate that owns its sale ledger; everything else is
immutable.
"""

import itertools
import threading
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from decimal import Decimal

from box_office.domain.errors import CapacityExceededError, InvalidInputError
from box_office.domain.pricing import (
    PricingOptions,
    TicketType,
    compute_ticket_price,
    parse_choice,
    parse_int,
)
from box_office.domain.value_objects import Capacity, Money, SessionId, round_currency


def sequential_sale_ids(prefix: str = "SALE") -> Callable[[], str]:
    """Return a generator of ``PREFIX-00001``-style ids, private to its caller."""
    counter = itertools.count(1)
    return lambda: f"{prefix}-{next(counter):05d}"


@dataclass(frozen=True)
class SaleRecord:
    """Domain representation of one committed sale."""

    id: str
    ticket_type: TicketType
    quantity: int
    seats_consumed: int
    total: Decimal
    created_at: datetime


@dataclass(frozen=True)
class SaleReceipt:
    """A freshly recorded sale plus the session state right after it."""

    sale: SaleRecord
    occupancy_percent: Decimal
    available_seats: int


@dataclass(frozen=True)
class SessionSummary:
    id: SessionId
    movie_title: str
    capacity: int
    seats_sold: int
    available_seats: int
    occupancy_percent: Decimal
    revenue: Decimal
    sale_count: int


@dataclass(eq=False)
class Session:
    """Domain representation of a Session and its sale ledger.

    Invariants:
        seats_sold == sum of seats_consumed over sales
        revenue == sum of total over sales
        seats_sold <= capacity
    """

    id: SessionId
    movie_title: str
    capacity: Capacity
    base_price: Money
    room: str = "Room 1"
    showtime: str = "19:00"
    dubbed: bool = False
    next_sale_id: Callable[[], str] = field(default_factory=sequential_sale_ids, repr=False)
    seats_sold: int = field(default=0, init=False)
    revenue: Decimal = field(default=Decimal("0.00"), init=False)
    _sales: list[SaleRecord] = field(default_factory=list, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    @property
    def available_seats(self) -> int:
        return self.capacity.value - self.seats_sold

    @property
    def occupancy_percent(self) -> Decimal:
        return round_currency(Decimal(self.seats_sold) * 100 / self.capacity.value)

    @property
    def is_full(self) -> bool:
        return self.seats_sold >= self.capacity.value

    def sell(
        self,
        ticket_type: TicketType | str = TicketType.FULL,
        quantity: int = 1,
        number_of_people: int = 1,
        options: PricingOptions | None = None,
    ) -> SaleReceipt:
        """Record a sale of ``quantity`` tickets.

        Family tickets consume ``number_of_people`` seats each; every other
        type consumes one.

        Raises:
            InvalidInputError: If quantity or number_of_people is below one.
            CapacityExceededError: If the sale needs more seats than remain.
                Nothing is recorded in that case.
        """
        ticket = parse_choice(TicketType, ticket_type) or TicketType.FULL
        quantity = parse_int(quantity, "Quantity")
        if quantity < 1:
            raise InvalidInputError("Quantity must be at least 1")
        people = 1
        if ticket is TicketType.FAMILY:
            people = parse_int(number_of_people, "Number of people")
            if people < 1:
                raise InvalidInputError("Number of people must be at least 1")
        seats = quantity * people

        options = replace(options or PricingOptions(), dubbed=self.dubbed)
        price = compute_ticket_price(
            self.base_price.amount,
            ticket,
            options,
            number_of_people=people,
            quantity=quantity,
        )

        with self._lock:
            if seats > self.available_seats:
                raise CapacityExceededError(requested=seats, available=self.available_seats)
            sale = SaleRecord(
                id=self.next_sale_id(),
                ticket_type=ticket,
                quantity=quantity,
                seats_consumed=seats,
                total=price.total,
                created_at=datetime.now(timezone.utc),
            )
            self._sales.append(sale)
            self.seats_sold += seats
            self.revenue += sale.total
            return SaleReceipt(
                sale=sale,
                occupancy_percent=self.occupancy_percent,
                available_seats=self.available_seats,
            )

    def cancel(self, sale_id: str) -> bool:
        """Remove a sale and reverse its effect. Returns False if unknown."""
        with self._lock:
            for index, sale in enumerate(self._sales):
                if sale.id == sale_id:
                    del self._sales[index]
                    self.seats_sold -= sale.seats_consumed
                    self.revenue -= sale.total
                    return True
            return False

    def list_sales(self) -> list[SaleRecord]:
        with self._lock:
            return list(self._sales)

    def summary(self) -> SessionSummary:
        with self._lock:
            return SessionSummary(
                id=self.id,
                movie_title=self.movie_title,
                capacity=self.capacity.value,
                seats_sold=self.seats_sold,
                available_seats=self.available_seats,
                occupancy_percent=self.occupancy_percent,
                revenue=round_currency(self.revenue),
                sale_count=len(self._sales),
            )
