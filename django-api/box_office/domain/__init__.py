from box_office.domain.models import SaleReceipt, SaleRecord, Session, SessionSummary
from box_office.domain.pricing import (
    DayOfWeek,
    LoyaltyTier,
    PriceBreakdown,
    PriceModifier,
    PriceSuggestion,
    PricingOptions,
    RoomType,
    TicketType,
)
from box_office.domain.value_objects import Capacity, Money, SessionId

__all__ = [
    "Session",
    "SaleRecord",
    "SaleReceipt",
    "SessionSummary",
    "TicketType",
    "RoomType",
    "DayOfWeek",
    "LoyaltyTier",
    "PricingOptions",
    "PriceBreakdown",
    "PriceModifier",
    "PriceSuggestion",
    "SessionId",
    "Money",
    "Capacity",
]
