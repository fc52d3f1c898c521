"""Sequence tracking for superseded requests."""

import itertools
import logging
from collections.abc import Awaitable
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RequestSequencer:
    """Tag outbound requests with increasing sequence numbers per channel.

    Issuing a new request on a channel supersedes every earlier one on the
    same channel. In-flight requests are not cancelled; their responses are
    dropped when they arrive.
    """

    def __init__(self):
        self._counter = itertools.count(1)
        self._latest: dict[str, int] = {}

    def issue(self, channel: str) -> int:
        """Issue the next sequence number for a channel."""
        sequence = next(self._counter)
        self._latest[channel] = sequence
        return sequence

    def is_current(self, channel: str, sequence: int) -> bool:
        """Check if ``sequence`` is the latest issued on ``channel``."""
        return self._latest.get(channel) == sequence

    async def run(self, channel: str, request: Awaitable[T]) -> T | None:
        """Await a request, discarding its response if it was superseded.

        Args:
            channel: Request channel (e.g. "lookup", "search")
            request: Awaitable producing the response

        Returns:
            The response, or None if a newer request was issued meanwhile
        """
        sequence = self.issue(channel)
        response = await request
        if not self.is_current(channel, sequence):
            logger.debug(f"Discarding stale response #{sequence} on channel '{channel}'")
            return None
        return response
