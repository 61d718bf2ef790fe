"""Pricing service - thin orchestration over the pricing rules."""

import logging

from box_office.domain.pricing import (
    PriceBreakdown,
    PriceSuggestion,
    PricingOptions,
    RoomType,
    TicketType,
    build_price_grid,
    compute_ticket_price,
    suggest_price,
)

logger = logging.getLogger(__name__)


class PricingService:
    """Service for ticket price calculation and suggestion."""

    def calculate(
        self,
        base_price,
        ticket_type: TicketType | str = TicketType.FULL,
        options: PricingOptions | None = None,
        number_of_people: int = 1,
        quantity: int = 1,
    ) -> PriceBreakdown:
        """Return the detailed price of ``quantity`` tickets.

        Raises:
            InvalidInputError: If the base price is negative or a count is below one.
        """
        breakdown = compute_ticket_price(
            base_price,
            ticket_type,
            options,
            number_of_people=number_of_people,
            quantity=quantity,
        )
        logger.debug(
            "Computed %s ticket price: base=%s total=%s modifiers=%d",
            ticket_type,
            breakdown.base,
            breakdown.total,
            len(breakdown.modifiers),
        )
        return breakdown

    def suggest(
        self,
        base_price,
        occupancy_percent=50,
        lead_time_days=7,
        day_of_week=None,
        room_type: RoomType | str = RoomType.STANDARD,
    ) -> PriceSuggestion:
        """Return an advisory demand-based price."""
        suggestion = suggest_price(
            base_price,
            occupancy_percent=occupancy_percent,
            lead_time_days=lead_time_days,
            day_of_week=day_of_week,
            room_type=room_type,
        )
        logger.debug(
            "Suggested price %s for base %s (%+d%%)",
            suggestion.suggested_price,
            suggestion.base_price,
            suggestion.adjustment_percent,
        )
        return suggestion

    def build_grid(self, base_price, room_type: RoomType | str = RoomType.STANDARD) -> list[PriceSuggestion]:
        """Return one suggestion per weekday."""
        return build_price_grid(base_price, room_type=room_type)
