"""Asset protocol server for the ``asset://`` addressing scheme."""

import logging

from quickdict.exceptions import ResourceFetchError, ResourceNotFoundError
from quickdict.models import AssetResponse, ResourceErrorCode
from quickdict.services.resource_locator import ResourceLocator
from quickdict.utils.resource_utils import derive_identifier, infer_mime_type

logger = logging.getLogger(__name__)


class AssetProtocolServer:
    """Serve embedded assets referenced by rewritten definition markup.

    The embedding UI registers this server as the handler of ``asset://``
    requests. Cache hits can be answered synchronously through
    :meth:`serve_cached`; :meth:`serve` covers both hits and misses and only
    suspends the requesting coroutine while the store is read.
    """

    def __init__(self, locator: ResourceLocator):
        """Initialize the server.

        Args:
            locator: Resource locator backing this server
        """
        self.locator = locator

    def serve_cached(self, url: str) -> AssetResponse | None:
        """Answer a request from the cache only.

        Args:
            url: ``asset://`` URL or bare identifier

        Returns:
            Successful response on a cache hit, None on a miss
        """
        identifier = derive_identifier(url)
        data = self.locator.get_cached(identifier)
        if data is None:
            return None
        return AssetResponse(
            identifier=identifier,
            mime_type=infer_mime_type(identifier),
            data=data,
            from_cache=True,
        )

    async def serve(self, url: str) -> AssetResponse:
        """Answer a request, fetching from the resource store on a miss.

        Args:
            url: ``asset://`` URL or bare identifier

        Returns:
            Response carrying either the bytes and MIME type, or one of the
            two distinct error codes
        """
        cached = self.serve_cached(url)
        if cached is not None:
            return cached

        identifier = derive_identifier(url)
        try:
            data = await self.locator.get(identifier, check_cache=False)
        except ResourceNotFoundError:
            logger.debug(f"Asset not found: {identifier}")
            return AssetResponse(identifier=identifier, error=ResourceErrorCode.NOT_FOUND)
        except ResourceFetchError as e:
            logger.warning(f"Asset fetch failed: {e}")
            return AssetResponse(identifier=identifier, error=ResourceErrorCode.FETCH_FAILED)

        return AssetResponse(
            identifier=identifier,
            mime_type=infer_mime_type(identifier),
            data=data,
        )
