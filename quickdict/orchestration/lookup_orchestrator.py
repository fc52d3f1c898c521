"""Orchestrator for definition lookups and searches."""

import asyncio
import logging

from quickdict.exceptions import RemoteServiceUnavailable
from quickdict.models import (
    CandidateSource,
    DefinitionResult,
    LookupResult,
    ResultKind,
    SearchCandidate,
)
from quickdict.orchestration.app_context import AppContext
from quickdict.orchestration.sequencer import RequestSequencer
from quickdict.services import (
    ContentRewriter,
    RedirectResolver,
    ResultMerger,
    find_redirect_target,
)
from quickdict.utils.text_utils import make_brief, normalize_query

logger = logging.getLogger(__name__)


class LookupOrchestrator:
    """Compose the index, redirect resolver and content rewriter into lookups.

    Every failure inside a lookup is converted into an in-band presentation;
    nothing is raised past :meth:`define`, :meth:`define_remote` or
    :meth:`search`.
    """

    def __init__(
        self,
        context: AppContext,
        resolver: RedirectResolver | None = None,
        rewriter: ContentRewriter | None = None,
        merger: ResultMerger | None = None,
        sequencer: RequestSequencer | None = None,
    ):
        """Initialize the orchestrator.

        Args:
            context: Shared application context
            resolver: Redirect resolver (defaults to one over the context index)
            rewriter: Content rewriter
            merger: Search result merger
            sequencer: Sequencer used by the ``*_latest`` variants
        """
        self.context = context
        self.config = context.config
        self.resolver = resolver or RedirectResolver(
            context.index, max_hops=self.config.max_redirect_hops
        )
        self.rewriter = rewriter or ContentRewriter()
        self.merger = merger or ResultMerger(max_results=self.config.max_results)
        self.sequencer = sequencer or RequestSequencer()

    async def define(self, word: str) -> LookupResult:
        """Look up a word in the local dictionary.

        Args:
            word: Raw query

        Returns:
            Presentable result of kind LOCAL, NOT_FOUND, REDIRECT_FAILED or ERROR
        """
        query = normalize_query(word)
        if not query:
            return self._present(DefinitionResult(display_word="", kind=ResultKind.NOT_FOUND))

        try:
            await self.context.ensure_loaded()
            result = await asyncio.to_thread(self._define_local, query)
        except Exception as e:
            logger.exception(f"Lookup failed for '{query}'")
            result = DefinitionResult(
                display_word=query, kind=ResultKind.ERROR, query=query, error=str(e)
            )

        return self._present(result)

    async def define_remote(self, word: str) -> LookupResult:
        """Look up a word in the online dictionary.

        Args:
            word: Raw query

        Returns:
            Presentable result of kind ONLINE, NOT_FOUND or ERROR
        """
        query = normalize_query(word)
        client = self.context.remote

        if client is None:
            result = DefinitionResult(
                display_word=query,
                kind=ResultKind.ERROR,
                query=query,
                error="Online dictionary is disabled",
            )
        elif not query:
            result = DefinitionResult(display_word="", kind=ResultKind.NOT_FOUND)
        else:
            try:
                result = await client.define(query)
            except Exception as e:
                logger.exception(f"Online lookup failed for '{query}'")
                result = DefinitionResult(
                    display_word=query, kind=ResultKind.ERROR, query=query, error=str(e)
                )

        return self._present(result)

    async def search(self, query: str) -> list[SearchCandidate]:
        """Search headwords locally, topping up with online results.

        Args:
            query: Raw search text

        Returns:
            Ranked candidates, local first, at most ``max_results`` long
        """
        query = normalize_query(query).lower()
        if not query:
            return []

        local: list[SearchCandidate] = []
        try:
            await self.context.ensure_loaded()
            local = await asyncio.to_thread(self._search_local, query)
        except Exception as e:
            logger.warning(f"Local search failed for '{query}': {e}")

        remote: list[SearchCandidate] = []
        client = self.context.remote
        if client is not None and client.should_search(query, len(local)):
            try:
                remote = await client.search(query)
            except RemoteServiceUnavailable as e:
                logger.warning(f"Online search unavailable for '{query}': {e}")

        return self.merger.merge(local, remote)

    async def define_latest(self, word: str, channel: str = "lookup") -> LookupResult | None:
        """Like :meth:`define`, but returns None if superseded on ``channel``."""
        return await self.sequencer.run(channel, self.define(word))

    async def search_latest(
        self, query: str, channel: str = "search"
    ) -> list[SearchCandidate] | None:
        """Like :meth:`search`, but returns None if superseded on ``channel``."""
        return await self.sequencer.run(channel, self.search(query))

    def _define_local(self, word: str) -> DefinitionResult:
        """Lookup, redirect resolution and rewriting (runs on a worker thread)."""
        markup = self.context.index.lookup(word)
        if markup is None:
            return DefinitionResult(
                display_word=word,
                kind=ResultKind.NOT_FOUND,
                query=word,
                suggestions=self._suggestions(word),
            )

        result = self.resolver.resolve(word, markup)
        if result.kind == ResultKind.LOCAL:
            result.markup = self.rewriter.rewrite(result.markup)
        return result

    def _suggestions(self, word: str) -> list[str]:
        try:
            suggestions = self.context.index.suggest(word, self.config.suggestion_distance)
        except Exception as e:
            logger.debug(f"Suggestion failed for '{word}': {e}")
            return []
        return list(suggestions)[: self.config.max_suggestions]

    def _search_local(self, query: str) -> list[SearchCandidate]:
        index = self.context.index
        words = index.prefix(query)[: self.config.max_results]
        return [
            SearchCandidate(
                word=word,
                brief_text=self._brief(index.lookup(word) or ""),
                source=CandidateSource.LOCAL,
            )
            for word in words
        ]

    @staticmethod
    def _brief(markup: str) -> str:
        target = find_redirect_target(markup)
        if target is not None:
            return f"→ {target}"
        return make_brief(markup)

    def _present(self, result: DefinitionResult) -> LookupResult:
        return LookupResult(
            word=result.display_word,
            html=self.context.presenter.render(result),
            result=result,
        )
