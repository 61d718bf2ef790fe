"""Ticket pricing rules.

Two independent pure functions live here:

- ``compute_ticket_price`` applies compounding modifiers to a running unit
  price, in a fixed order, and records every step for display and audit.
- ``suggest_price`` sums additive demand factors against the base price and
  proposes a clamped price. It is advisory and never touches a session.

Unknown room types, weekdays, loyalty tiers and ticket types fall back to
"no modifier". Percentages outside their documented ranges are clamped.
Strict validation is the HTTP layer's job.
"""

from dataclasses import dataclass
from decimal import ROUND_FLOOR, Decimal, InvalidOperation
from enum import Enum
from typing import TypeVar

from box_office.domain.errors import InvalidInputError
from box_office.domain.value_objects import round_currency


class TicketType(str, Enum):
    FULL = "full"
    HALF = "half"
    FAMILY = "family"


class RoomType(str, Enum):
    STANDARD = "standard"
    VIP = "vip"
    IMAX = "imax"


class DayOfWeek(str, Enum):
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @property
    def is_weekend(self) -> bool:
        return self in (DayOfWeek.SATURDAY, DayOfWeek.SUNDAY)


class LoyaltyTier(str, Enum):
    NONE = "none"
    SILVER = "silver"
    GOLD = "gold"


ROOM_SURCHARGE = {RoomType.VIP: 20, RoomType.IMAX: 30}
PREMIUM_SEAT_SURCHARGE = 15
WEEKEND_SURCHARGE = 10
HIGH_OCCUPANCY_THRESHOLD = 80
HIGH_OCCUPANCY_SURCHARGE = 12
LOYALTY_DISCOUNT = {LoyaltyTier.SILVER: 5, LoyaltyTier.GOLD: 10}
MAX_COUPON_PERCENT = 80
MAX_DUBBING_SURCHARGE_PERCENT = 30
HALF_PRICE_DISCOUNT = 50
FAMILY_DISCOUNT_MIN_PEOPLE = 4
FAMILY_DISCOUNT = 5

SUGGESTION_FLOOR = Decimal("0.6")
SUGGESTION_CEILING = Decimal("1.8")
MAX_LEAD_TIME_DAYS = 365

E = TypeVar("E", bound=Enum)


@dataclass(frozen=True)
class PricingOptions:
    """Contextual modifiers for a single ticket price."""

    room_type: RoomType | str = RoomType.STANDARD
    premium_seat: bool = False
    dubbed: bool = False
    dubbing_surcharge_percent: Decimal | int | float = 0
    day_of_week: DayOfWeek | str | None = None
    occupancy_percent: Decimal | int | float | None = None
    loyalty_tier: LoyaltyTier | str = LoyaltyTier.NONE
    coupon_percent: Decimal | int | float = 0


@dataclass(frozen=True)
class PriceModifier:
    label: str
    percent: Decimal
    amount: Decimal


@dataclass(frozen=True)
class PriceBreakdown:
    """Result of ``compute_ticket_price``; ``modifiers`` keep application order."""

    base: Decimal
    unit_price: Decimal
    quantity: int
    total: Decimal
    modifiers: tuple[PriceModifier, ...]


@dataclass(frozen=True)
class SuggestionFactor:
    label: str
    percent: int


@dataclass(frozen=True)
class PriceSuggestion:
    base_price: Decimal
    suggested_price: Decimal
    allowed_range: tuple[Decimal, Decimal]
    adjustment_percent: int
    factors: tuple[SuggestionFactor, ...]


def parse_decimal(value: object, label: str) -> Decimal:
    if isinstance(value, bool):
        raise InvalidInputError(f"{label} must be a number")
    try:
        parsed = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise InvalidInputError(f"{label} must be a number") from None
    if not parsed.is_finite():
        raise InvalidInputError(f"{label} must be a number")
    return parsed


def parse_int(value: object, label: str) -> int:
    parsed = parse_decimal(value, label)
    if parsed != parsed.to_integral_value():
        raise InvalidInputError(f"{label} must be an integer")
    return int(parsed)


def _clamp(value: Decimal, low: int, high: int) -> Decimal:
    return min(max(value, Decimal(low)), Decimal(high))


def parse_choice(enum_cls: type[E], value: object) -> E | None:
    """Return the enum member for ``value``, or None when unrecognised."""
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        return None


class _ModifierChain:
    """Running unit price with its ordered list of applied modifiers."""

    def __init__(self, unit: Decimal) -> None:
        self.unit = unit
        self.modifiers: list[PriceModifier] = []

    def apply(self, label: str, percent) -> None:
        percent = Decimal(percent)
        if not percent:
            return
        amount = round_currency(self.unit * percent / 100)
        self.unit = round_currency(self.unit + amount)
        self.modifiers.append(PriceModifier(label=label, percent=percent, amount=amount))

    def multiply(self, label: str, factor: int) -> None:
        subtotal = round_currency(self.unit * factor)
        self.modifiers.append(
            PriceModifier(label=label, percent=Decimal(0), amount=subtotal - self.unit)
        )
        self.unit = subtotal


def compute_ticket_price(
    base_price,
    ticket_type: TicketType | str = TicketType.FULL,
    options: PricingOptions | None = None,
    *,
    number_of_people: int = 1,
    quantity: int = 1,
) -> PriceBreakdown:
    """Compute the price of ``quantity`` tickets of one type.

    Raises:
        InvalidInputError: If the base price is negative or not a number, or if
            ``number_of_people`` or ``quantity`` is below one.
    """
    base = parse_decimal(base_price, "Base price")
    if base < 0:
        raise InvalidInputError("Base price cannot be negative")
    people = parse_int(number_of_people, "Number of people")
    if people < 1:
        raise InvalidInputError("Number of people must be at least 1")
    quantity = parse_int(quantity, "Quantity")
    if quantity < 1:
        raise InvalidInputError("Quantity must be at least 1")

    options = options or PricingOptions()
    chain = _ModifierChain(round_currency(base))

    room_type = parse_choice(RoomType, options.room_type)
    if room_type in ROOM_SURCHARGE:
        chain.apply(f"{room_type.value.upper()} room", ROOM_SURCHARGE[room_type])

    if options.premium_seat:
        chain.apply("Premium seat", PREMIUM_SEAT_SURCHARGE)

    dubbing = _clamp(
        parse_decimal(options.dubbing_surcharge_percent or 0, "Dubbing surcharge"),
        0,
        MAX_DUBBING_SURCHARGE_PERCENT,
    )
    if options.dubbed and dubbing > 0:
        chain.apply("Dubbed session", dubbing)

    day = parse_choice(DayOfWeek, options.day_of_week)
    if day is not None and day.is_weekend:
        chain.apply("Weekend demand", WEEKEND_SURCHARGE)

    if options.occupancy_percent is not None:
        occupancy = _clamp(parse_decimal(options.occupancy_percent, "Occupancy"), 0, 100)
        if occupancy >= HIGH_OCCUPANCY_THRESHOLD:
            chain.apply("High session demand", HIGH_OCCUPANCY_SURCHARGE)

    tier = parse_choice(LoyaltyTier, options.loyalty_tier)
    if tier in LOYALTY_DISCOUNT:
        chain.apply(f"Loyalty program ({tier.value})", -LOYALTY_DISCOUNT[tier])

    coupon = _clamp(parse_decimal(options.coupon_percent or 0, "Coupon"), 0, MAX_COUPON_PERCENT)
    if coupon > 0:
        chain.apply("Promotional coupon", -coupon)

    ticket = parse_choice(TicketType, ticket_type) or TicketType.FULL
    if ticket is TicketType.HALF:
        chain.apply("Half-price ticket", -HALF_PRICE_DISCOUNT)
    elif ticket is TicketType.FAMILY:
        chain.multiply(f"Family multiplier ({people} people)", people)
        if people >= FAMILY_DISCOUNT_MIN_PEOPLE:
            chain.apply("Family discount", -FAMILY_DISCOUNT)

    return PriceBreakdown(
        base=round_currency(base),
        unit_price=chain.unit,
        quantity=quantity,
        total=round_currency(chain.unit * quantity),
        modifiers=tuple(chain.modifiers),
    )


def _occupancy_factor(occupancy: Decimal) -> int:
    if occupancy >= 85:
        return 15
    if occupancy >= 70:
        return 8
    if occupancy < 40:
        return -12
    return 0


def _lead_time_factor(days: int) -> int:
    if days <= 2:
        return 7
    if days >= 15:
        return -10
    if days >= 7:
        return -5
    return 0


def _day_factor(day: DayOfWeek | None) -> int:
    if day is None:
        return 0
    if day.is_weekend:
        return 8
    if day in (DayOfWeek.TUESDAY, DayOfWeek.WEDNESDAY):
        return -5
    return 0


def _room_factor(room_type: RoomType | None) -> int:
    return {RoomType.VIP: 18, RoomType.IMAX: 28}.get(room_type, 0)


def suggest_price(
    base_price,
    occupancy_percent=50,
    lead_time_days=7,
    day_of_week: DayOfWeek | str | None = None,
    room_type: RoomType | str = RoomType.STANDARD,
) -> PriceSuggestion:
    """Propose a demand-adjusted price without touching any stored price.

    Factors are additive against the base price. Occupancy is clamped to
    [0, 100]; lead time is floored to whole days and clamped to [0, 365].
    Only a negative or non-numeric base price, occupancy or lead time is
    rejected.
    """
    base = parse_decimal(base_price, "Base price")
    if base < 0:
        raise InvalidInputError("Base price cannot be negative")
    base = round_currency(base)
    occupancy = _clamp(parse_decimal(occupancy_percent, "Occupancy"), 0, 100)
    lead_time = parse_decimal(lead_time_days, "Lead time").to_integral_value(ROUND_FLOOR)
    lead_time = int(_clamp(lead_time, 0, MAX_LEAD_TIME_DAYS))

    factors = (
        SuggestionFactor("Session demand", _occupancy_factor(occupancy)),
        SuggestionFactor("Purchase lead time", _lead_time_factor(lead_time)),
        SuggestionFactor("Day of week", _day_factor(parse_choice(DayOfWeek, day_of_week))),
        SuggestionFactor("Room type", _room_factor(parse_choice(RoomType, room_type))),
    )
    adjustment = sum(factor.percent for factor in factors)

    minimum = base * SUGGESTION_FLOOR
    maximum = base * SUGGESTION_CEILING
    unclamped = base * (1 + Decimal(adjustment) / 100)
    suggested = min(max(unclamped, minimum), maximum)

    return PriceSuggestion(
        base_price=base,
        suggested_price=round_currency(suggested),
        allowed_range=(round_currency(minimum), round_currency(maximum)),
        adjustment_percent=adjustment,
        factors=factors,
    )


def build_price_grid(
    base_price,
    room_type: RoomType | str = RoomType.STANDARD,
    days=None,
) -> list[PriceSuggestion]:
    """One suggestion per weekday at default occupancy and lead time."""
    days = list(DayOfWeek) if days is None else days
    return [suggest_price(base_price, day_of_week=day, room_type=room_type) for day in days]
