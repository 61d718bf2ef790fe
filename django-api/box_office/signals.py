"""Ledger signals and cache invalidation.

The service sends these after every committed mutation; the receivers
below bump the version of the cached session responses they affect.

Cached responses are stored with Django's cache ``version`` argument set to
a per-key counter. Readers take the counter before loading the session, so
a response rendered while a mutation commits lands under a superseded
version and is never read back.
"""

from django.core.cache import cache
from django.dispatch import Signal, receiver

SESSIONS_LIST_KEY = "sessions:list"

session_created = Signal()
sale_recorded = Signal()
sale_cancelled = Signal()


def session_detail_key(session_id: str) -> str:
    return f"sessions:{session_id}"


def current_version(key: str) -> int:
    """Return the version cached responses for ``key`` are stored under."""
    return cache.get_or_set(f"{key}:version", 1, timeout=None)


def invalidate(*keys: str) -> None:
    """Move each key to a new version, orphaning what was cached before."""
    for key in keys:
        version_key = f"{key}:version"
        cache.add(version_key, 1, timeout=None)
        cache.incr(version_key)


@receiver(session_created)
def invalidate_session_list_cache(sender, session, **kwargs):
    """Invalidate the list cache when a session is created."""
    invalidate(SESSIONS_LIST_KEY)


@receiver([sale_recorded, sale_cancelled])
def invalidate_session_cache(sender, session, **kwargs):
    """Invalidate list and detail caches when a sale is recorded or cancelled."""
    invalidate(SESSIONS_LIST_KEY, session_detail_key(str(session.id)))
