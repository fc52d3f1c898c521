"""Protocol for dictionary index backends."""

from typing import Protocol


class DictionaryIndex(Protocol):
    """Interface for an indexed dictionary of headwords and their markup.

    Any dictionary source (MDX files, JSON dumps, databases, etc.) implements
    this protocol to participate in lookups. Implementations are opened once
    and then treated as immutable and read-only, so they may be queried from
    worker threads without locking.
    """

    @property
    def name(self) -> str:
        """Human-readable name for this index (e.g., 'OALD9')."""
        ...

    def is_loaded(self) -> bool:
        """Check if this index is ready to serve lookups."""
        ...

    def load(self) -> bool:
        """Open / load the index data.

        Returns:
            True if loading succeeded.

        Raises:
            SetupError: If the index cannot be opened.
        """
        ...

    def lookup(self, word: str) -> str | None:
        """Exact lookup of a headword.

        Args:
            word: Headword to look up (case preserved).

        Returns:
            Raw definition markup, or None if the headword is absent.
        """
        ...

    def prefix(self, text: str) -> list[str]:
        """Return headwords starting with ``text``, in index order."""
        ...

    def suggest(self, word: str, max_distance: int) -> list[str]:
        """Return headwords within ``max_distance`` edits, best match first."""
        ...

    def close(self) -> None:
        """Release any handles held by the index."""
        ...
