"""Merging of local and online search candidates."""

from quickdict.models import SearchCandidate


class ResultMerger:
    """Combine local and online candidates into one ranked list.

    Local candidates always come first in index order. Online candidates
    follow in service order, minus any whose word (case-insensitively) is
    already listed, so local results are never shadowed by duplicates.
    """

    def __init__(self, max_results: int = 10):
        """Initialize the merger.

        Args:
            max_results: Cap on the merged list length
        """
        self.max_results = max_results

    def merge(
        self,
        local: list[SearchCandidate],
        remote: list[SearchCandidate],
    ) -> list[SearchCandidate]:
        """Merge local and online candidates.

        Args:
            local: Candidates from the dictionary index, in index order
            remote: Candidates from the online service, in service order

        Returns:
            Merged candidates, at most ``max_results`` long
        """
        merged = list(local)
        seen = {candidate.word.lower() for candidate in merged}

        for candidate in remote:
            key = candidate.word.lower()
            if key in seen:
                continue
            seen.add(key)
            merged.append(candidate)

        return merged[: self.max_results]
