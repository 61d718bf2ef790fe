from django.urls import path

from box_office.handlers import (
    OccupancyOverviewView,
    PriceCalculationView,
    PriceGridView,
    PriceSuggestionView,
    SaleDetailView,
    SaleListView,
    SessionDetailView,
    SessionListView,
)

urlpatterns = [
    path("sessions", SessionListView.as_view(), name="session-list"),
    path("sessions/<str:session_id>", SessionDetailView.as_view(), name="session-detail"),
    path("sessions/<str:session_id>/sales", SaleListView.as_view(), name="sale-list"),
    path(
        "sessions/<str:session_id>/sales/<str:sale_id>",
        SaleDetailView.as_view(),
        name="sale-detail",
    ),
    path("pricing/calculate", PriceCalculationView.as_view(), name="pricing-calculate"),
    path("pricing/suggest", PriceSuggestionView.as_view(), name="pricing-suggest"),
    path("pricing/grid", PriceGridView.as_view(), name="pricing-grid"),
    path("analytics/occupancy", OccupancyOverviewView.as_view(), name="analytics-occupancy"),
]
