"""Console presenter for CLI output."""

from quickdict.models import AssetResponse, CandidateSource, LookupResult, SearchCandidate


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_lookup_result(self, result: LookupResult) -> None:
        """Display a rendered definition."""
        header = f"{result.word} [{result.kind.value}]"
        if result.result.redirected_from:
            header += f" (redirected from {result.result.redirected_from})"
        print(header)
        print("=" * 60)
        print(result.html.strip())

    def show_search_results(self, query: str, candidates: list[SearchCandidate]) -> None:
        """Display ranked search candidates."""
        print(f"\nResults for '{query}' ({len(candidates)}):")
        print("=" * 60)

        if not candidates:
            print("  No matches")
            return

        for i, candidate in enumerate(candidates, 1):
            tag = "[online]" if candidate.source == CandidateSource.ONLINE else ""
            print(f"{i:2d}. {candidate.word:20s} {candidate.brief_text} {tag}".rstrip())

    def show_asset_response(self, response: AssetResponse) -> None:
        """Display the outcome of an asset request."""
        if response.ok:
            print(f"[OK] {response.identifier}: {response.mime_type}, {len(response.data)} bytes")
        else:
            print(f"[ERROR] {response.identifier}: {response.error.value}")
