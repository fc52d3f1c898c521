"""Protocol for embedded resource containers."""

from typing import Protocol


class ResourceStore(Protocol):
    """Interface for a container of binary assets referenced by definitions.

    Implementations distinguish an absent resource (``locate`` returns None)
    from a broken one (``locate`` raises).
    """

    def load(self) -> bool:
        """Open the resource container.

        Raises:
            SetupError: If the container cannot be opened.
        """
        ...

    def locate(self, name: str) -> bytes | None:
        """Retrieve the raw bytes of a named resource.

        Args:
            name: Canonical resource identifier (a basename).

        Returns:
            Resource bytes, or None if no such resource exists.

        Raises:
            ResourceFetchError: If the resource exists but cannot be read.
        """
        ...

    def close(self) -> None:
        """Release any handles held by the store."""
        ...
