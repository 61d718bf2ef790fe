"""Unit tests for the pricing rules.

Run with: pytest tests/test_pricing.py -v
"""

from decimal import Decimal

import pytest

from box_office.domain.errors import InvalidInputError
from box_office.domain.pricing import (
    DayOfWeek,
    LoyaltyTier,
    PricingOptions,
    RoomType,
    TicketType,
    build_price_grid,
    compute_ticket_price,
    suggest_price,
)
from box_office.domain.value_objects import round_currency


class TestComputeTicketPrice:
    """Tests for compute_ticket_price."""

    @pytest.mark.parametrize("base", ["0", "20", "12.345", "9.99"])
    def test_full_price_without_modifiers_is_rounded_base(self, base):
        """A full ticket with no modifiers costs the base price, rounded to cents."""
        result = compute_ticket_price(Decimal(base), TicketType.FULL)
        assert result.total == round_currency(Decimal(base))
        assert result.modifiers == ()

    def test_half_price(self):
        """Half-price ticket costs 50% of the base."""
        result = compute_ticket_price(20, TicketType.HALF)
        assert result.total == Decimal("10.00")
        assert [m.label for m in result.modifiers] == ["Half-price ticket"]

    @pytest.mark.parametrize("base", ["10.01", "9.99", "0.01", "17.33", "33.35"])
    def test_half_is_exactly_half_of_equivalent_full(self, base):
        """Half price equals the rounded half of the same ticket at full price."""
        options = PricingOptions(
            room_type=RoomType.VIP,
            day_of_week=DayOfWeek.SATURDAY,
            loyalty_tier=LoyaltyTier.GOLD,
            coupon_percent=15,
        )
        full = compute_ticket_price(Decimal(base), TicketType.FULL, options)
        half = compute_ticket_price(Decimal(base), TicketType.HALF, options)
        assert half.total == round_currency(full.total * Decimal("0.5"))

    def test_family_of_four_gets_five_percent_discount(self):
        """10 x 4 people = 40, minus 5% = 38."""
        result = compute_ticket_price(10, TicketType.FAMILY, number_of_people=4)
        assert result.total == Decimal("38.00")
        assert [(m.label, m.percent, m.amount) for m in result.modifiers] == [
            ("Family multiplier (4 people)", Decimal(0), Decimal("30.00")),
            ("Family discount", Decimal(-5), Decimal("-2.00")),
        ]

    @pytest.mark.parametrize("people", [1, 2, 3])
    def test_small_family_has_no_discount(self, people):
        """Families of up to three pay base x people x quantity."""
        result = compute_ticket_price(10, TicketType.FAMILY, number_of_people=people, quantity=2)
        assert result.total == Decimal(10 * people * 2)
        assert len(result.modifiers) == 1

    def test_family_multiplier_always_recorded(self):
        """The multiplier step shows up even for a single person."""
        result = compute_ticket_price(10, TicketType.FAMILY, number_of_people=1)
        assert result.modifiers[0].amount == Decimal("0.00")
        assert result.modifiers[0].percent == 0

    def test_modifiers_compound_in_fixed_order(self):
        """Each step applies to the running unit price, in the documented order."""
        options = PricingOptions(
            room_type="vip",
            premium_seat=True,
            dubbed=True,
            dubbing_surcharge_percent=10,
            day_of_week="saturday",
            occupancy_percent=85,
            loyalty_tier="silver",
            coupon_percent=10,
        )
        result = compute_ticket_price(20, TicketType.FULL, options)

        assert [(m.label, m.amount) for m in result.modifiers] == [
            ("VIP room", Decimal("4.00")),
            ("Premium seat", Decimal("3.60")),
            ("Dubbed session", Decimal("2.76")),
            ("Weekend demand", Decimal("3.04")),
            ("High session demand", Decimal("4.01")),
            ("Loyalty program (silver)", Decimal("-1.87")),
            ("Promotional coupon", Decimal("-3.55")),
        ]
        assert result.total == Decimal("31.99")

    def test_percentages_compound_instead_of_adding(self):
        """IMAX then weekend on 100 gives 143, not 140."""
        options = PricingOptions(room_type=RoomType.IMAX, day_of_week=DayOfWeek.SUNDAY)
        assert compute_ticket_price(100, options=options).total == Decimal("143.00")

    def test_dubbing_needs_both_flag_and_percent(self):
        """No dubbing surcharge unless the session is dubbed and a percent is given."""
        assert compute_ticket_price(20, options=PricingOptions(dubbed=True)).modifiers == ()
        assert (
            compute_ticket_price(20, options=PricingOptions(dubbing_surcharge_percent=10)).modifiers
            == ()
        )

    def test_dubbing_percent_is_clamped(self):
        """Dubbing surcharge above 30% is treated as 30%."""
        options = PricingOptions(dubbed=True, dubbing_surcharge_percent=50)
        assert compute_ticket_price(10, options=options).total == Decimal("13.00")

    @pytest.mark.parametrize(
        "occupancy, surcharged",
        [(None, False), (0, False), (79.99, False), (80, True), (100, True)],
    )
    def test_high_occupancy_threshold(self, occupancy, surcharged):
        """Occupancy at or above 80% adds 12%."""
        result = compute_ticket_price(10, options=PricingOptions(occupancy_percent=occupancy))
        assert result.total == (Decimal("11.20") if surcharged else Decimal("10.00"))

    def test_coupon_is_capped_at_eighty_percent(self):
        """A 95% coupon only takes 80% off."""
        result = compute_ticket_price(10, options=PricingOptions(coupon_percent=95))
        assert result.total == Decimal("2.00")

    def test_unknown_choices_apply_no_modifier(self):
        """Unrecognised room, day, tier and ticket type fall back to the base case."""
        options = PricingOptions(room_type="4dx", day_of_week="funday", loyalty_tier="platinum")
        result = compute_ticket_price(25, "vip-pass", options)
        assert result.total == Decimal("25.00")
        assert result.modifiers == ()

    def test_choices_are_case_insensitive(self):
        """'VIP' and ' Saturday ' are recognised."""
        options = PricingOptions(room_type="VIP", day_of_week=" Saturday ")
        assert compute_ticket_price(10, options=options).total == Decimal("13.20")

    def test_total_scales_with_quantity(self):
        """Total is the unit price times the number of tickets."""
        result = compute_ticket_price(12.5, TicketType.HALF, quantity=3)
        assert result.unit_price == Decimal("6.25")
        assert result.total == Decimal("18.75")
        assert result.quantity == 3

    def test_negative_base_price_rejected(self):
        """A negative base price raises InvalidInputError."""
        with pytest.raises(InvalidInputError):
            compute_ticket_price(-1)

    def test_non_numeric_base_price_rejected(self):
        """A base price that is not a number raises InvalidInputError."""
        with pytest.raises(InvalidInputError):
            compute_ticket_price("twenty")

    @pytest.mark.parametrize("kwargs", [{"number_of_people": 0}, {"quantity": 0}, {"quantity": 1.5}])
    def test_counts_must_be_positive_integers(self, kwargs):
        """number_of_people and quantity must be integers of at least one."""
        with pytest.raises(InvalidInputError):
            compute_ticket_price(10, TicketType.FAMILY, **kwargs)


class TestSuggestPrice:
    """Tests for suggest_price."""

    def test_high_demand_raises_price(self):
        """Full IMAX on a Saturday, bought the day before, goes up."""
        result = suggest_price(30, occupancy_percent=92, lead_time_days=1, day_of_week="saturday", room_type="imax")
        assert result.suggested_price > 30
        assert result.adjustment_percent > 0
        assert result.adjustment_percent == 58
        assert result.suggested_price == Decimal("47.40")

    def test_low_demand_lowers_price(self):
        """Empty standard room on a Tuesday, bought weeks ahead, goes down."""
        result = suggest_price(30, occupancy_percent=25, lead_time_days=20, day_of_week="tuesday", room_type="standard")
        assert result.suggested_price < 30
        assert result.adjustment_percent == -27
        assert result.suggested_price == Decimal("21.90")

    def test_factors_listed_in_order(self):
        """All four factors are always reported, in a stable order."""
        result = suggest_price(20)
        assert [f.label for f in result.factors] == [
            "Session demand",
            "Purchase lead time",
            "Day of week",
            "Room type",
        ]
        assert [f.percent for f in result.factors] == [0, -5, 0, 0]

    @pytest.mark.parametrize(
        "occupancy, expected",
        [(100, 15), (85, 15), (84, 8), (70, 8), (69, 0), (40, 0), (39, -12), (0, -12)],
    )
    def test_occupancy_table(self, occupancy, expected):
        result = suggest_price(20, occupancy_percent=occupancy, lead_time_days=3)
        assert result.factors[0].percent == expected

    @pytest.mark.parametrize(
        "days, expected",
        [(0, 7), (2, 7), (3, 0), (6, 0), (7, -5), (14, -5), (15, -10), (365, -10)],
    )
    def test_lead_time_table(self, days, expected):
        result = suggest_price(20, lead_time_days=days)
        assert result.factors[1].percent == expected

    def test_out_of_range_inputs_are_clamped(self):
        """Occupancy above 100 and lead times outside [0, 365] are clamped."""
        result = suggest_price(20, occupancy_percent=150, lead_time_days=-5)
        assert result.factors[0].percent == 15
        assert result.factors[1].percent == 7
        assert suggest_price(20, lead_time_days=1000).factors[1].percent == -10

    @pytest.mark.parametrize(
        "days, expected",
        [(2.5, 7), ("2.99", 7), (Decimal("6.9"), 0), (14.5, -5), (-0.5, 7)],
    )
    def test_fractional_lead_time_is_floored(self, days, expected):
        """Partial days count as the whole days already elapsed."""
        result = suggest_price(20, lead_time_days=days)
        assert result.factors[1].percent == expected

    def test_non_numeric_lead_time_rejected(self):
        with pytest.raises(InvalidInputError):
            suggest_price(20, lead_time_days="soon")

    def test_suggestion_stays_in_allowed_range(self):
        """Every combination lands inside [0.6 x base, 1.8 x base]."""
        for occupancy in (0, 39, 50, 70, 85, 100):
            for days in (0, 2, 5, 7, 15, 365):
                for day in list(DayOfWeek) + [None]:
                    for room in RoomType:
                        result = suggest_price(Decimal("19.99"), occupancy, days, day, room)
                        low, high = result.allowed_range
                        assert low <= result.suggested_price <= high

    def test_allowed_range(self):
        result = suggest_price(30)
        assert result.allowed_range == (Decimal("18.00"), Decimal("54.00"))

    def test_negative_base_price_rejected(self):
        with pytest.raises(InvalidInputError):
            suggest_price(-5)

    def test_zero_base_price(self):
        assert suggest_price(0, room_type="vip").suggested_price == Decimal("0.00")


class TestBuildPriceGrid:
    """Tests for build_price_grid."""

    def test_one_suggestion_per_weekday(self):
        grid = build_price_grid(20)
        assert len(grid) == 7
        assert [s.suggested_price for s in grid] == [
            Decimal("19.00"),
            Decimal("18.00"),
            Decimal("18.00"),
            Decimal("19.00"),
            Decimal("19.00"),
            Decimal("20.60"),
            Decimal("20.60"),
        ]

    def test_room_type_applies_to_every_day(self):
        grid = build_price_grid(20, room_type=RoomType.VIP)
        assert all(s.factors[3].percent == 18 for s in grid)
