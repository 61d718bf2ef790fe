"""Session service - all ledger orchestration lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging

from box_office import signals
from box_office.domain import (
    Capacity,
    Money,
    PricingOptions,
    SaleReceipt,
    Session,
    SessionId,
    SessionSummary,
    TicketType,
)
from box_office.domain.errors import (
    CapacityExceededError,
    DuplicateSessionError,
    InvalidInputError,
    SaleNotFoundError,
    SessionNotFoundError,
)
from box_office.domain.models import sequential_sale_ids
from box_office.domain.pricing import parse_decimal, parse_int
from box_office.stores.interfaces import SessionStore

logger = logging.getLogger(__name__)

MAX_TITLE_LENGTH = 120


class SessionService:
    """Service for session creation, ticket sales and cancellations."""

    def __init__(self, store: SessionStore, sale_id_prefix: str = "SALE") -> None:
        self._store = store
        self._sale_id_prefix = sale_id_prefix

    def create_session(
        self,
        movie_title: str,
        capacity: int,
        base_price,
        room: str = "Room 1",
        showtime: str = "19:00",
        dubbed: bool = False,
        session_id: str | None = None,
    ) -> Session:
        """Create and store a new session.

        Raises:
            InvalidInputError: If any attribute is missing or out of range.
            DuplicateSessionError: If ``session_id`` is already taken.
        """
        title = (movie_title or "").strip()
        if not title:
            raise InvalidInputError("Movie title cannot be empty")
        if len(title) > MAX_TITLE_LENGTH:
            raise InvalidInputError("Movie title is too long")

        try:
            sid = SessionId.from_string(session_id) if session_id else SessionId.generate()
            seats = Capacity(parse_int(capacity, "Capacity"))
            price = Money.of(parse_decimal(base_price, "Base price"))
        except ValueError as exc:
            raise InvalidInputError(str(exc)) from exc

        session = Session(
            id=sid,
            movie_title=title,
            capacity=seats,
            base_price=price,
            room=room,
            showtime=showtime,
            dubbed=bool(dubbed),
            next_sale_id=sequential_sale_ids(self._sale_id_prefix),
        )
        if not self._store.add_session(session):
            raise DuplicateSessionError(str(sid))

        logger.info(
            "Created session %s for %r (%d seats at %s)", sid, title, seats.value, price
        )
        signals.session_created.send(sender=self.__class__, session=session)
        return session

    def list_sessions(self) -> list[Session]:
        """Return all sessions."""
        return self._store.list_sessions()

    def resolve_id(self, session_id: str) -> SessionId:
        """Normalise a raw session id the way lookups do.

        Raises:
            SessionNotFoundError: If the id is blank or too long to exist.
        """
        try:
            return SessionId.from_string(session_id)
        except ValueError:
            raise SessionNotFoundError(session_id) from None

    def get_session(self, session_id: str) -> Session:
        """Return a session by ID.

        Raises:
            SessionNotFoundError: If the session does not exist.
        """
        session = self._store.get_session(self.resolve_id(session_id))
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def sell_tickets(
        self,
        session_id: str,
        ticket_type: TicketType | str = TicketType.FULL,
        quantity: int = 1,
        number_of_people: int = 1,
        options: PricingOptions | None = None,
    ) -> tuple[SaleReceipt, SessionSummary]:
        """Sell tickets for a session.

        Raises:
            SessionNotFoundError: If the session does not exist.
            InvalidInputError: If a count is below one.
            CapacityExceededError: If the session does not have enough seats left.
        """
        session = self.get_session(session_id)
        try:
            receipt = session.sell(ticket_type, quantity, number_of_people, options)
        except CapacityExceededError as exc:
            logger.warning(
                "Rejected sale for session %s: requested %d seats, %d available",
                session.id,
                exc.requested,
                exc.available,
            )
            raise

        logger.info(
            "Sale %s on session %s: %d x %s, %d seats, total %s",
            receipt.sale.id,
            session.id,
            receipt.sale.quantity,
            receipt.sale.ticket_type.value,
            receipt.sale.seats_consumed,
            receipt.sale.total,
        )
        signals.sale_recorded.send(sender=self.__class__, session=session, sale=receipt.sale)
        return receipt, session.summary()

    def cancel_sale(self, session_id: str, sale_id: str) -> SessionSummary:
        """Cancel a sale and return the updated session summary.

        Raises:
            SessionNotFoundError: If the session does not exist.
            SaleNotFoundError: If the sale is not part of the session.
        """
        session = self.get_session(session_id)
        if not session.cancel(sale_id):
            raise SaleNotFoundError(str(session.id), sale_id)

        logger.info("Cancelled sale %s on session %s", sale_id, session.id)
        signals.sale_cancelled.send(sender=self.__class__, session=session, sale_id=sale_id)
        return session.summary()
