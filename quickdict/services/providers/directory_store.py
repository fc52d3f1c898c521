"""Directory-backed resource store."""

import logging
from pathlib import Path

from quickdict.exceptions import ResourceFetchError, SetupError

logger = logging.getLogger(__name__)


class DirectoryResourceStore:
    """Resource store serving files from an extracted resource directory.

    Implements ResourceStore protocol. Files are indexed by lower-cased
    basename, matching the canonical identifiers used in rewritten markup.
    """

    def __init__(self, root: Path):
        """Initialize with the resource directory.

        Args:
            root: Directory containing the dictionary's images and audio.
        """
        self._root = root
        self._files: dict[str, Path] | None = None

    def load(self) -> bool:
        """Walk the resource directory and index every file by basename.

        Returns:
            True if the directory was indexed.

        Raises:
            SetupError: If the directory does not exist.
        """
        if not self._root.is_dir():
            raise SetupError(f"Resource directory not found at: {self._root}")

        files: dict[str, Path] = {}
        for path in sorted(self._root.rglob("*"), key=lambda p: (len(p.parts), str(p))):
            if path.is_file():
                # Shallowest path wins on basename collisions
                files.setdefault(path.name.lower(), path)

        self._files = files
        logger.info(f"Indexed {len(files)} resources under {self._root}")
        return True

    def locate(self, name: str) -> bytes | None:
        """Read a resource by canonical identifier.

        Args:
            name: Resource basename.

        Returns:
            File bytes, or None if no such resource exists.

        Raises:
            ResourceFetchError: If the file exists but cannot be read.
        """
        if self._files is None:
            self.load()

        path = self._files.get(name.lower())
        if path is None:
            return None

        try:
            return path.read_bytes()
        except OSError as e:
            raise ResourceFetchError(name, f"Error reading resource {name}: {e}") from e

    def close(self) -> None:
        self._files = None
