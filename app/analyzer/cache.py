"""SellScope — In-process TTL Cache for AI Results.

Only successful AI results are stored; fallback output is cheap to
recompute and never cached. Keys:

  analyze:<creatorId>
  match:<creatorId>-<limit>
  match-creators:<productId>-<limit>
"""

import time
from typing import Any, Callable, Dict, Optional, Tuple

from app.config import settings
from app.core.logging import get_logger

logger = get_logger("analyzer.cache")


LIMITED_PREFIXES = frozenset({"match", "match-creators"})


def cache_key(prefix: str, identifier: str, limit: Optional[int] = None) -> str:
    if limit is None:
        return f"{prefix}:{identifier}"
    return f"{prefix}:{identifier}-{limit}"


def key_identifier(key: str) -> str:
    """Return the creator or product id a key was built from."""
    prefix, _, rest = key.partition(":")
    if prefix in LIMITED_PREFIXES:
        return rest.rpartition("-")[0]
    return rest


class TTLCache:
    """Dict-backed cache whose entries expire ``ttl_seconds`` after insertion."""

    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Tuple[float, Any]] = {}

    def get(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if self._clock() >= expires_at:
            self._entries.pop(key, None)
            return None
        return value

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = (self._clock() + self.ttl_seconds, value)

    def clear(self) -> None:
        self._entries.clear()

    def invalidate(self, identifier: str) -> int:
        """Drop every entry built for ``identifier``. Returns the count."""
        doomed = [k for k in self._entries if key_identifier(k) == identifier]
        for k in doomed:
            del self._entries[k]
        return len(doomed)

    def purge_expired(self) -> int:
        now = self._clock()
        doomed = [k for k, (expires_at, _) in self._entries.items() if now >= expires_at]
        for k in doomed:
            del self._entries[k]
        if doomed:
            logger.info(f"Purged {len(doomed)} expired cache entries")
        return len(doomed)

    def __len__(self) -> int:
        return len(self._entries)


analysis_cache = TTLCache(ttl_seconds=settings.analysis_cache_ttl_seconds)
