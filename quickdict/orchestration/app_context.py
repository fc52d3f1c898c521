"""Application context owning the shared dictionary resources."""

import asyncio
import logging

from quickdict.config import QuickDictConfig
from quickdict.exceptions import SetupError
from quickdict.interfaces import DictionaryIndex, ResourceStore
from quickdict.presenters.html_presenter import HtmlPresenter
from quickdict.services import (
    AssetProtocolServer,
    DirectoryResourceStore,
    FreeDictionaryClient,
    JsonDictionaryIndex,
    ResourceCache,
    ResourceLocator,
)

logger = logging.getLogger(__name__)


class AppContext:
    """Everything a lookup needs, constructed once at startup.

    The context owns the dictionary index, the resource store, the resource
    cache and the online client, and is passed explicitly to every
    component that needs them. The index and store are opened lazily on
    first use and are read-only afterwards. :meth:`close` releases both and
    drops the cache.
    """

    def __init__(
        self,
        config: QuickDictConfig,
        index: DictionaryIndex | None = None,
        store: ResourceStore | None = None,
        remote: FreeDictionaryClient | None = None,
        presenter: HtmlPresenter | None = None,
    ):
        """Initialize the context.

        Args:
            config: Application configuration
            index: Dictionary index (defaults to the JSON index at
                ``config.dictionary_path``)
            store: Resource store (defaults to a directory store at
                ``config.resource_dir`` when one is configured)
            remote: Online client (defaults to the Free Dictionary client
                when ``config.use_online_fallback`` is set)
            presenter: HTML presenter (defaults to one styled from config)
        """
        self.config = config
        self.index = index if index is not None else JsonDictionaryIndex(config.dictionary_path)

        if store is None and config.resource_dir is not None:
            store = DirectoryResourceStore(config.resource_dir)
        self.store = store

        self.presenter = presenter or HtmlPresenter(
            font_family=config.font_family,
            font_size=config.font_size,
            line_height=config.line_height,
        )

        if remote is None and config.use_online_fallback:
            remote = FreeDictionaryClient(
                api_url=config.online_api_url,
                timeout=config.online_timeout,
                search_threshold=config.online_search_threshold,
                max_entries=config.online_max_entries,
                presenter=self.presenter,
            )
        self.remote = remote

        self.cache = ResourceCache(config.resource_cache_capacity)
        self.locator = ResourceLocator(self.store, self.cache)
        self.protocol_server = AssetProtocolServer(self.locator)

        self._load_task: asyncio.Future[None] | None = None
        self._store_opened = False

    async def ensure_loaded(self) -> None:
        """Load the dictionary index (and store and stylesheet) if needed.

        Concurrent callers share one load. A failed load is reported to the
        callers waiting on it and is retried by the next call.

        Raises:
            SetupError: If the dictionary index cannot be opened
        """
        if self.index.is_loaded():
            return

        if self._load_task is None:
            self._load_task = asyncio.ensure_future(self._load())
        task = self._load_task

        try:
            await asyncio.shield(task)
        except Exception:
            if self._load_task is task:
                self._load_task = None
            raise

    async def _load(self) -> None:
        logger.info(f"Loading dictionary '{self.index.name}'...")
        await asyncio.to_thread(self.index.load)
        await self.ensure_store()
        await self._load_css()
        logger.info("Dictionary loaded successfully")

    async def ensure_store(self) -> None:
        """Open the resource store once.

        A store that cannot be opened is detached, so every asset request
        is answered as "not found" instead of failing the lookup.
        """
        if self._store_opened or self.store is None:
            return

        try:
            await asyncio.to_thread(self.store.load)
        except SetupError as e:
            logger.warning(f"Resource store unavailable, assets disabled: {e}")
            self.store = None
            self.locator.store = None
        self._store_opened = True

    async def _load_css(self) -> None:
        css_path = self.config.css_path
        if css_path is None:
            return

        try:
            self.presenter.css_content = await asyncio.to_thread(
                css_path.read_text, encoding="utf-8"
            )
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to load CSS from {css_path}: {e}")
            self.presenter.css_content = ""

    def update_display_settings(
        self,
        font_family: str | None = None,
        font_size: str | None = None,
        line_height: str | None = None,
    ) -> None:
        """Change presentation styling. Cached resources are unaffected."""
        if font_family is not None:
            self.presenter.font_family = font_family
        if font_size is not None:
            self.presenter.font_size = font_size
        if line_height is not None:
            self.presenter.line_height = line_height

    def close(self) -> None:
        """Release the index and store handles and drop the cache."""
        self.index.close()
        if self.store is not None:
            self.store.close()
        self.cache.clear()
        self._load_task = None
        self._store_opened = False

    async def __aenter__(self) -> "AppContext":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.close()
