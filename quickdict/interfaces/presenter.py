"""Presenter protocol for output abstraction."""

from typing import Protocol

from quickdict.models import AssetResponse, LookupResult, SearchCandidate


class PresenterProtocol(Protocol):
    """Interface for presenting command output to the user (CLI, tray app, etc).

    This protocol abstracts all output operations, allowing the same
    commands to work with different presentation layers.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        ...

    def show_error(self, message: str) -> None:
        """Display an error message."""
        ...

    def show_lookup_result(self, result: LookupResult) -> None:
        """Display a rendered definition.

        Args:
            result: The lookup result to display
        """
        ...

    def show_search_results(self, query: str, candidates: list[SearchCandidate]) -> None:
        """Display ranked search candidates.

        Args:
            query: The query that produced the candidates
            candidates: Candidates in display order
        """
        ...

    def show_asset_response(self, response: AssetResponse) -> None:
        """Display the outcome of an asset request.

        Args:
            response: The protocol server response
        """
        ...
