"""Data models for search candidates."""

from dataclasses import dataclass
from enum import Enum


class CandidateSource(Enum):
    """Where a search candidate came from."""

    LOCAL = "local"
    ONLINE = "online"


@dataclass(frozen=True)
class SearchCandidate:
    """A single entry in the search result list."""

    word: str
    brief_text: str
    source: CandidateSource = CandidateSource.LOCAL

    def __str__(self) -> str:
        return f"{self.word}: {self.brief_text}" if self.brief_text else self.word
