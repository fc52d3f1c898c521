"""JSON-backed dictionary index."""

import bisect
import json
import logging
from pathlib import Path

from quickdict.exceptions import IndexNotLoadedError, SetupError

logger = logging.getLogger(__name__)


def edit_distance(a: str, b: str, limit: int) -> int:
    """Levenshtein distance between two strings, capped at ``limit + 1``.

    Args:
        a: First string
        b: Second string
        limit: Largest distance of interest

    Returns:
        Exact distance if it is at most ``limit``, otherwise ``limit + 1``
    """
    if abs(len(a) - len(b)) > limit:
        return limit + 1

    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        current = [i]
        for j, cb in enumerate(b, 1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (ca != cb),
                )
            )
        if min(current) > limit:
            return limit + 1
        previous = current
    return min(previous[-1], limit + 1)


class JsonDictionaryIndex:
    """Dictionary index loaded from a JSON object of ``{headword: markup}``.

    Implements DictionaryIndex protocol. The whole file is read into memory
    on :meth:`load`; afterwards the index is read-only.
    """

    def __init__(self, path: Path):
        """Initialize with path to the JSON dictionary file.

        Args:
            path: Path to a UTF-8 JSON file mapping headwords to markup.
        """
        self._path = path
        self._entries: dict[str, str] | None = None
        self._folded: dict[str, str] = {}  # lower-cased headword -> headword
        self._sorted_keys: list[str] = []  # lower-cased, sorted for prefix search

    @property
    def name(self) -> str:
        return self._path.stem

    def is_loaded(self) -> bool:
        return self._entries is not None

    def load(self) -> bool:
        """Load and index the JSON dictionary file.

        Returns:
            True if loaded successfully.

        Raises:
            SetupError: If the file is missing or is not a JSON object of strings.
        """
        if not self._path.exists():
            raise SetupError(f"Dictionary file not found at: {self._path}")

        try:
            with self._path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise SetupError(f"Error parsing dictionary JSON: {e}") from e
        except OSError as e:
            raise SetupError(f"Error reading dictionary: {e}") from e

        if not isinstance(data, dict):
            raise SetupError("Dictionary JSON must be an object of headword -> markup")

        entries: dict[str, str] = {}
        folded: dict[str, str] = {}
        for headword, markup in data.items():
            if not isinstance(markup, str):
                logger.warning(f"Skipping non-text entry for headword '{headword}'")
                continue
            entries[headword] = markup
            # First headword wins on case collisions
            folded.setdefault(headword.lower(), headword)

        self._entries = entries
        self._folded = folded
        self._sorted_keys = sorted(folded)
        logger.info(f"Loaded {len(entries)} entries from {self._path.name}")
        return True

    def lookup(self, word: str) -> str | None:
        """Exact lookup, falling back to a case-insensitive match.

        Args:
            word: Headword to look up.

        Returns:
            Raw definition markup, or None.
        """
        entries = self._require_entries()
        markup = entries.get(word)
        if markup is not None:
            return markup

        headword = self._folded.get(word.lower())
        return entries.get(headword) if headword is not None else None

    def prefix(self, text: str) -> list[str]:
        """Return headwords whose lower-cased form starts with ``text``."""
        self._require_entries()
        key = text.lower()
        if not key:
            return []

        start = bisect.bisect_left(self._sorted_keys, key)
        results = []
        for folded in self._sorted_keys[start:]:
            if not folded.startswith(key):
                break
            results.append(self._folded[folded])
        return results

    def suggest(self, word: str, max_distance: int) -> list[str]:
        """Return headwords within ``max_distance`` edits, closest first."""
        self._require_entries()
        key = word.lower()
        scored = []
        for folded, headword in self._folded.items():
            distance = edit_distance(key, folded, max_distance)
            if distance <= max_distance:
                scored.append((distance, folded, headword))
        scored.sort()
        return [headword for _, _, headword in scored]

    def close(self) -> None:
        self._entries = None
        self._folded = {}
        self._sorted_keys = []

    def _require_entries(self) -> dict[str, str]:
        if self._entries is None:
            raise IndexNotLoadedError(f"Dictionary '{self.name}' is not loaded")
        return self._entries
