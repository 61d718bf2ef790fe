from box_office.handlers.views import (
    OccupancyOverviewView,
    PriceCalculationView,
    PriceGridView,
    PriceSuggestionView,
    SaleDetailView,
    SaleListView,
    SessionDetailView,
    SessionListView,
)

__all__ = [
    "SessionListView",
    "SessionDetailView",
    "SaleListView",
    "SaleDetailView",
    "PriceCalculationView",
    "PriceSuggestionView",
    "PriceGridView",
    "OccupancyOverviewView",
]
