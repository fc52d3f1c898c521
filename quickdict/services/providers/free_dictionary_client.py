"""Free Dictionary API online fallback client."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING
from urllib.parse import quote

import requests

from quickdict.exceptions import RemoteServiceUnavailable
from quickdict.models import (
    CandidateSource,
    DefinitionResult,
    RemoteEntry,
    ResultKind,
    SearchCandidate,
)
from quickdict.utils.text_utils import is_ascii_word

if TYPE_CHECKING:
    from quickdict.presenters.html_presenter import HtmlPresenter

logger = logging.getLogger(__name__)


class FreeDictionaryClient:
    """Online dictionary client using the Free Dictionary API.

    Blocking HTTP calls run on a worker thread so that only the awaiting
    coroutine is suspended.
    """

    def __init__(
        self,
        api_url: str = "https://api.dictionaryapi.dev/api/v2/entries/en",
        timeout: float = 10.0,
        search_threshold: int = 3,
        max_entries: int = 3,
        presenter: HtmlPresenter | None = None,
    ):
        """Initialize with API URL and request settings.

        Args:
            api_url: Base URL of the entries endpoint (word is appended).
            timeout: Seconds before a request is abandoned.
            search_threshold: Remote search runs only below this many local hits.
            max_entries: Maximum remote entries turned into search candidates.
            presenter: Presenter used to render online definitions.
        """
        if presenter is None:
            from quickdict.presenters.html_presenter import HtmlPresenter

            presenter = HtmlPresenter()

        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._search_threshold = search_threshold
        self._max_entries = max_entries
        self.presenter = presenter

    @property
    def name(self) -> str:
        return "Free Dictionary API"

    def should_search(self, query: str, local_count: int) -> bool:
        """Decide whether a search is worth a network call.

        Args:
            query: Normalized search query.
            local_count: Number of candidates the local index produced.

        Returns:
            True if local results are scarce and the query is an English word.
        """
        return local_count < self._search_threshold and is_ascii_word(query)

    async def search(self, query: str) -> list[SearchCandidate]:
        """Search the online dictionary.

        Args:
            query: Word to search for.

        Returns:
            Online candidates in service order.

        Raises:
            RemoteServiceUnavailable: If the service cannot be reached.
        """
        entries = await asyncio.to_thread(self.fetch_entries, query)
        return [self._to_candidate(entry) for entry in entries[: self._max_entries]]

    async def define(self, word: str) -> DefinitionResult:
        """Look up a full definition online.

        Args:
            word: Word to define.

        Returns:
            ONLINE result with rendered markup, NOT_FOUND if the service has
            no entry, or ERROR if the service failed.
        """
        try:
            entries = await asyncio.to_thread(self.fetch_entries, word)
        except RemoteServiceUnavailable as e:
            logger.warning(f"Online lookup failed for '{word}': {e}")
            return DefinitionResult(
                display_word=word, kind=ResultKind.ERROR, query=word, error=str(e)
            )

        if not entries:
            return DefinitionResult(display_word=word, kind=ResultKind.NOT_FOUND, query=word)

        entry = entries[0]
        return DefinitionResult(
            display_word=entry.word,
            kind=ResultKind.ONLINE,
            markup=self.presenter.render_online_entry(entry),
            query=word,
        )

    def fetch_entries(self, word: str) -> list[RemoteEntry]:
        """Fetch and parse entries for a word (blocking).

        Args:
            word: Word to look up.

        Returns:
            Parsed entries; empty if the service has no definition.

        Raises:
            RemoteServiceUnavailable: On network errors, timeouts, unexpected
                status codes or malformed payloads.
        """
        url = f"{self._api_url}/{quote(word, safe='')}"

        try:
            response = requests.get(url, timeout=self._timeout)
        except requests.exceptions.Timeout as e:
            raise RemoteServiceUnavailable(f"{self.name} timed out") from e
        except requests.RequestException as e:
            raise RemoteServiceUnavailable(f"Cannot reach {self.name}: {e}") from e

        if response.status_code == 404:
            return []
        if response.status_code != 200:
            raise RemoteServiceUnavailable(
                f"{self.name} request failed with status {response.status_code}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise RemoteServiceUnavailable(f"Invalid response from {self.name}") from e

        if not isinstance(data, list):
            raise RemoteServiceUnavailable(f"Unexpected payload from {self.name}")

        entries = []
        for item in data:
            try:
                entries.append(RemoteEntry.from_json(item))
            except ValueError:
                logger.debug(f"Skipping malformed entry for '{word}'")
        return entries

    @staticmethod
    def _to_candidate(entry: RemoteEntry) -> SearchCandidate:
        first = entry.meanings[0] if entry.meanings else None
        part_of_speech = first.part_of_speech if first else ""
        definition = first.definitions[0].definition if first and first.definitions else ""

        if part_of_speech:
            brief = f"{part_of_speech}. {definition[:60]}"
        else:
            brief = definition[:80]

        return SearchCandidate(word=entry.word, brief_text=brief, source=CandidateSource.ONLINE)
