"""Cache-then-store retrieval of embedded resources."""

import asyncio
import functools
import logging

from quickdict.exceptions import ResourceFetchError, ResourceNotFoundError
from quickdict.interfaces import ResourceStore
from quickdict.services.resource_cache import ResourceCache
from quickdict.utils.resource_utils import derive_identifier

logger = logging.getLogger(__name__)


class ResourceLocator:
    """Resolve canonical identifiers to resource bytes.

    Hits are served from the cache without touching the store. Misses are
    fetched from the store on a worker thread; concurrent misses for the same
    identifier share a single in-flight fetch, which keeps running when one
    of its waiters is cancelled. Only successful fetches are cached, so absent
    or broken resources are retried on the next request.
    """

    def __init__(self, store: ResourceStore | None, cache: ResourceCache):
        """Initialize the locator.

        Args:
            store: Resource store to fetch from (None when the dictionary has
                no resource container; every miss is then "not found")
            cache: Shared resource cache
        """
        self.store = store
        self.cache = cache
        self._in_flight: dict[str, asyncio.Task[bytes]] = {}

    def get_cached(self, identifier: str) -> bytes | None:
        """Synchronous cache probe.

        Args:
            identifier: Canonical identifier or raw reference

        Returns:
            Cached bytes (recency refreshed), or None on a miss
        """
        return self.cache.get(derive_identifier(identifier))

    async def get(self, identifier: str, check_cache: bool = True) -> bytes:
        """Retrieve resource bytes, from cache if possible.

        Args:
            identifier: Canonical identifier or raw reference
            check_cache: Probe the cache first (callers that already missed
                through :meth:`get_cached` pass False)

        Returns:
            Resource bytes

        Raises:
            ResourceNotFoundError: If the store has no such resource
            ResourceFetchError: If the store failed to read the resource
        """
        identifier = derive_identifier(identifier)
        if not identifier:
            raise ResourceNotFoundError(identifier, "Empty resource identifier")

        if check_cache:
            data = self.cache.get(identifier)
            if data is not None:
                return data

        task = self._in_flight.get(identifier)
        if task is None:
            task = asyncio.ensure_future(self._fetch(identifier))
            self._in_flight[identifier] = task
            task.add_done_callback(functools.partial(self._finish_fetch, identifier))
        else:
            logger.debug(f"Joining in-flight fetch for {identifier}")

        # The fetch outlives any single cancelled waiter
        return await asyncio.shield(task)

    def _finish_fetch(self, identifier: str, task: asyncio.Task) -> None:
        """Cache a completed fetch and release its in-flight slot."""
        if self._in_flight.get(identifier) is task:
            del self._in_flight[identifier]

        if task.cancelled():
            return
        # Retrieving the exception also keeps an unjoined failure quiet
        if task.exception() is None:
            self.cache.put(identifier, task.result())

    async def _fetch(self, identifier: str) -> bytes:
        """Fetch from the store on a worker thread, mapping store failures."""
        if self.store is None:
            raise ResourceNotFoundError(identifier, f"No resource store for {identifier}")

        try:
            data = await asyncio.to_thread(self.store.locate, identifier)
        except ResourceFetchError:
            raise
        except Exception as e:
            logger.warning(f"Failed to load resource {identifier}: {e}")
            raise ResourceFetchError(identifier, f"Failed to load resource {identifier}: {e}") from e

        if data is None:
            raise ResourceNotFoundError(identifier, f"Resource not found: {identifier}")
        return bytes(data)
