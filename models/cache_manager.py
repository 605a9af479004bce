"""In-memory cache for generated debate responses."""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class CacheEntry(BaseModel):
    """Represents a cached generation result."""

    data: Any
    timestamp: datetime
    endpoint: str


class ResponseCache:
    """Process-lifetime cache of generation results.

    Entries never expire and there is no size limit; the cache lives as long
    as the process and is cleared only on request.
    """

    def __init__(self):
        self._entries: Dict[str, CacheEntry] = {}
        self._hits = 0
        self._misses = 0

    def _get_cache_key(self, endpoint: str, params: Dict[str, Any]) -> str:
        """Generate cache key from endpoint and parameters."""
        return f"{endpoint}:{json.dumps(params, sort_keys=True)}"

    def get(self, endpoint: str, params: Dict[str, Any]) -> Optional[Any]:
        """Return the cached result for these parameters, or None."""
        cache_key = self._get_cache_key(endpoint, params)
        entry = self._entries.get(cache_key)
        if entry is None:
            self._misses += 1
            logger.debug(f"Cache MISS: {cache_key}")
            return None

        self._hits += 1
        logger.debug(f"Cache HIT: {cache_key}")
        return entry.data

    def set(self, endpoint: str, params: Dict[str, Any], data: Any) -> None:
        """Store a result."""
        cache_key = self._get_cache_key(endpoint, params)
        self._entries[cache_key] = CacheEntry(
            data=data,
            timestamp=datetime.now(timezone.utc),
            endpoint=endpoint,
        )
        logger.debug(f"Cached {cache_key}")

    def clear(self) -> int:
        """Remove every entry and return how many there were."""
        count = len(self._entries)
        self._entries.clear()
        if count:
            logger.info(f"Cleared {count} cached responses")
        return count

    def get_cache_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        endpoints: Dict[str, int] = {}
        for entry in self._entries.values():
            endpoints[entry.endpoint] = endpoints.get(entry.endpoint, 0) + 1

        return {
            "entries": len(self._entries),
            "hits": self._hits,
            "misses": self._misses,
            "entries_by_endpoint": endpoints,
        }
