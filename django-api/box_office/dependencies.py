"""Process-wide wiring of stores and services.

Handlers ask for services here instead of building their own, so every
request sees the same in-memory sessions.
"""

from functools import lru_cache

from django.conf import settings

from box_office.services.analytics_service import AnalyticsService
from box_office.services.pricing_service import PricingService
from box_office.services.session_service import SessionService
from box_office.stores.interfaces import SessionStore
from box_office.stores.memory_store import InMemorySessionStore


@lru_cache(maxsize=1)
def get_session_store() -> SessionStore:
    return InMemorySessionStore()


def get_session_service() -> SessionService:
    return SessionService(
        get_session_store(),
        sale_id_prefix=settings.BOX_OFFICE["SALE_ID_PREFIX"],
    )


def get_pricing_service() -> PricingService:
    return PricingService()


def get_analytics_service() -> AnalyticsService:
    return AnalyticsService(get_session_store())
