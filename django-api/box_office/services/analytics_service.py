"""Analytics service - read-only aggregates across sessions."""

from dataclasses import dataclass
from decimal import Decimal

from box_office.domain.value_objects import round_currency
from box_office.stores.interfaces import SessionStore


@dataclass(frozen=True)
class OccupancyOverview:
    session_count: int
    total_revenue: Decimal
    seats_sold: int
    total_capacity: int
    average_occupancy_percent: Decimal


class AnalyticsService:
    """Service for dashboard indicators."""

    def __init__(self, store: SessionStore) -> None:
        self._store = store

    def occupancy_overview(self) -> OccupancyOverview:
        """Consolidate revenue and occupancy over every session.

        Each session is read through its own summary, so sessions are never
        locked together.
        """
        summaries = [session.summary() for session in self._store.list_sessions()]
        seats_sold = sum(summary.seats_sold for summary in summaries)
        capacity = sum(summary.capacity for summary in summaries)
        occupancy = Decimal(seats_sold) * 100 / capacity if capacity else Decimal(0)

        return OccupancyOverview(
            session_count=len(summaries),
            total_revenue=round_currency(sum((s.revenue for s in summaries), Decimal(0))),
            seats_sold=seats_sold,
            total_capacity=capacity,
            average_occupancy_percent=round_currency(occupancy),
        )
