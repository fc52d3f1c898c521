"""Null presenter for testing (no output)."""

from quickdict.models import AssetResponse, LookupResult, SearchCandidate


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_warning(self, message: str) -> None:
        """Display a warning message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def show_lookup_result(self, result: LookupResult) -> None:
        """Display a rendered definition (no-op)."""
        pass

    def show_search_results(self, query: str, candidates: list[SearchCandidate]) -> None:
        """Display ranked search candidates (no-op)."""
        pass

    def show_asset_response(self, response: AssetResponse) -> None:
        """Display the outcome of an asset request (no-op)."""
        pass
