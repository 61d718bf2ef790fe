"""Serializers for validating requests and shaping domain models into responses.

Input serializers are strict: unknown choices and out-of-range numbers are
rejected here, before the (permissive) domain sees them.
"""

import dataclasses
from decimal import Decimal

from rest_framework import serializers

from box_office.domain import DayOfWeek, LoyaltyTier, PricingOptions, RoomType, TicketType

MONEY = {"max_digits": 12, "decimal_places": 2}


def _choices(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


class PricingOptionsSerializer(serializers.Serializer):
    """Contextual price modifiers."""

    room_type = serializers.ChoiceField(choices=_choices(RoomType), default=RoomType.STANDARD.value)
    premium_seat = serializers.BooleanField(default=False)
    dubbed = serializers.BooleanField(default=False)
    dubbing_surcharge_percent = serializers.DecimalField(
        max_digits=5, decimal_places=2, min_value=Decimal(0), max_value=Decimal(30), default=0
    )
    day_of_week = serializers.ChoiceField(
        choices=_choices(DayOfWeek), required=False, allow_null=True, default=None
    )
    occupancy_percent = serializers.DecimalField(
        max_digits=5,
        decimal_places=2,
        min_value=Decimal(0),
        max_value=Decimal(100),
        required=False,
        allow_null=True,
        default=None,
    )
    loyalty_tier = serializers.ChoiceField(choices=_choices(LoyaltyTier), default=LoyaltyTier.NONE.value)
    coupon_percent = serializers.DecimalField(
        max_digits=5, decimal_places=2, min_value=Decimal(0), max_value=Decimal(80), default=0
    )

    @staticmethod
    def build_options(data: dict) -> PricingOptions:
        fields = {field.name for field in dataclasses.fields(PricingOptions)}
        return PricingOptions(**{key: value for key, value in data.items() if key in fields})


class PriceCalculationSerializer(PricingOptionsSerializer):
    """Request body for POST /api/pricing/calculate"""

    base_price = serializers.DecimalField(**MONEY, min_value=Decimal(0))
    ticket_type = serializers.ChoiceField(choices=_choices(TicketType), default=TicketType.FULL.value)
    number_of_people = serializers.IntegerField(min_value=1, default=1)
    quantity = serializers.IntegerField(min_value=1, default=1)


class PriceSuggestionRequestSerializer(serializers.Serializer):
    """Request body for POST /api/pricing/suggest"""

    base_price = serializers.DecimalField(**MONEY, min_value=Decimal(0))
    occupancy_percent = serializers.DecimalField(
        max_digits=5, decimal_places=2, min_value=Decimal(0), max_value=Decimal(100), default=50
    )
    lead_time_days = serializers.DecimalField(
        max_digits=5, decimal_places=2, min_value=Decimal(0), max_value=Decimal(365), default=7
    )
    day_of_week = serializers.ChoiceField(
        choices=_choices(DayOfWeek), required=False, allow_null=True, default=None
    )
    room_type = serializers.ChoiceField(choices=_choices(RoomType), default=RoomType.STANDARD.value)


class PriceGridRequestSerializer(serializers.Serializer):
    """Request body for POST /api/pricing/grid"""

    base_price = serializers.DecimalField(**MONEY, min_value=Decimal(0))
    room_type = serializers.ChoiceField(choices=_choices(RoomType), default=RoomType.STANDARD.value)


class CreateSessionSerializer(serializers.Serializer):
    """Request body for POST /api/sessions"""

    id = serializers.CharField(max_length=60, required=False)
    movie_title = serializers.CharField(max_length=120)
    room = serializers.CharField(max_length=80, default="Room 1")
    showtime = serializers.RegexField(r"^\d{2}:\d{2}$", default="19:00")
    capacity = serializers.IntegerField(min_value=1)
    base_price = serializers.DecimalField(**MONEY, min_value=Decimal(0))
    dubbed = serializers.BooleanField(default=False)


class SaleRequestSerializer(serializers.Serializer):
    """Request body for POST /api/sessions/{session_id}/sales"""

    ticket_type = serializers.ChoiceField(choices=_choices(TicketType), default=TicketType.FULL.value)
    quantity = serializers.IntegerField(min_value=1, default=1)
    number_of_people = serializers.IntegerField(min_value=1, default=1)
    options = PricingOptionsSerializer(required=False)


class PriceModifierSerializer(serializers.Serializer):
    label = serializers.CharField()
    percent = serializers.DecimalField(max_digits=6, decimal_places=2)
    amount = serializers.DecimalField(**MONEY)


class PriceBreakdownSerializer(serializers.Serializer):
    """Serializer for PriceBreakdown."""

    base = serializers.DecimalField(**MONEY)
    unit_price = serializers.DecimalField(**MONEY)
    quantity = serializers.IntegerField()
    total = serializers.DecimalField(**MONEY)
    modifiers = PriceModifierSerializer(many=True)


class SuggestionFactorSerializer(serializers.Serializer):
    label = serializers.CharField()
    percent = serializers.IntegerField()


class PriceSuggestionSerializer(serializers.Serializer):
    """Serializer for PriceSuggestion."""

    base_price = serializers.DecimalField(**MONEY)
    suggested_price = serializers.DecimalField(**MONEY)
    allowed_range = serializers.SerializerMethodField()
    adjustment_percent = serializers.IntegerField()
    factors = SuggestionFactorSerializer(many=True)

    def get_allowed_range(self, suggestion) -> dict:
        minimum, maximum = suggestion.allowed_range
        return {"min": float(minimum), "max": float(maximum)}


class SaleRecordSerializer(serializers.Serializer):
    """Serializer for SaleRecord domain model."""

    id = serializers.CharField()
    ticket_type = serializers.CharField(source="ticket_type.value")
    quantity = serializers.IntegerField()
    seats_consumed = serializers.IntegerField()
    total = serializers.DecimalField(**MONEY)
    created_at = serializers.DateTimeField()


class SaleReceiptSerializer(serializers.Serializer):
    sale = SaleRecordSerializer()
    occupancy_percent = serializers.DecimalField(max_digits=5, decimal_places=2)
    available_seats = serializers.IntegerField()


class SessionSummarySerializer(serializers.Serializer):
    """Serializer for SessionSummary."""

    id = serializers.CharField(source="id.value")
    movie_title = serializers.CharField()
    capacity = serializers.IntegerField()
    seats_sold = serializers.IntegerField()
    available_seats = serializers.IntegerField()
    occupancy_percent = serializers.DecimalField(max_digits=5, decimal_places=2)
    revenue = serializers.DecimalField(**MONEY)
    sale_count = serializers.IntegerField()


class SessionSerializer(serializers.Serializer):
    """Serializer for Session domain model, including its sales."""

    id = serializers.CharField(source="id.value")
    movie_title = serializers.CharField()
    room = serializers.CharField()
    showtime = serializers.CharField()
    dubbed = serializers.BooleanField()
    capacity = serializers.IntegerField(source="capacity.value")
    base_price = serializers.DecimalField(**MONEY, source="base_price.amount")
    seats_sold = serializers.IntegerField()
    available_seats = serializers.IntegerField()
    occupancy_percent = serializers.DecimalField(max_digits=5, decimal_places=2)
    revenue = serializers.DecimalField(**MONEY)
    sales = SaleRecordSerializer(many=True, source="list_sales")


class OccupancyOverviewSerializer(serializers.Serializer):
    session_count = serializers.IntegerField()
    total_revenue = serializers.DecimalField(**MONEY)
    seats_sold = serializers.IntegerField()
    total_capacity = serializers.IntegerField()
    average_occupancy_percent = serializers.DecimalField(max_digits=5, decimal_places=2)
