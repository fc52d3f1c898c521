"""Bounded in-memory cache for embedded resource bytes."""

import logging
from collections import OrderedDict

logger = logging.getLogger(__name__)


class ResourceCache:
    """Strict-LRU cache mapping canonical identifiers to resource bytes.

    The cache never holds more than ``capacity`` entries. Inserting into a
    full cache evicts exactly one entry, the least recently touched, before
    the new entry is stored. Every hit moves the entry to the most recently
    used position.

    All mutation is synchronous, so an insert and its eviction happen as one
    step relative to other coroutines on the event loop.
    """

    def __init__(self, capacity: int):
        """Initialize an empty cache.

        Args:
            capacity: Maximum number of entries (at least 1)

        Raises:
            ValueError: If capacity is less than 1
        """
        if capacity < 1:
            raise ValueError("Cache capacity must be at least 1")
        self._capacity = capacity
        self._entries: OrderedDict[str, bytes] = OrderedDict()
        self.hits = 0
        self.misses = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, identifier: str) -> bytes | None:
        """Return cached bytes and refresh their recency.

        Args:
            identifier: Canonical resource identifier

        Returns:
            Cached bytes, or None on a miss
        """
        data = self._entries.get(identifier)
        if data is None:
            self.misses += 1
            return None

        self._entries.move_to_end(identifier)
        self.hits += 1
        return data

    def put(self, identifier: str, data: bytes) -> str | None:
        """Insert or replace an entry, evicting the LRU entry if full.

        Args:
            identifier: Canonical resource identifier
            data: Resource bytes

        Returns:
            Identifier of the evicted entry, or None if nothing was evicted
        """
        if identifier in self._entries:
            self._entries[identifier] = data
            self._entries.move_to_end(identifier)
            return None

        evicted = None
        if len(self._entries) >= self._capacity:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug(f"Evicted resource from cache: {evicted}")

        self._entries[identifier] = data
        return evicted

    def identifiers(self) -> list[str]:
        """Return cached identifiers from least to most recently used."""
        return list(self._entries)

    def clear(self) -> None:
        """Drop every cached entry."""
        self._entries.clear()

    def __contains__(self, identifier: object) -> bool:
        # Membership checks do not count as a touch
        return identifier in self._entries

    def __len__(self) -> int:
        return len(self._entries)
