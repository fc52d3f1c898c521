"""Data models for definition lookups."""

from dataclasses import dataclass, field
from enum import Enum


class ResultKind(Enum):
    """Outcome of a definition lookup."""

    LOCAL = "local"
    ONLINE = "online"
    NOT_FOUND = "not_found"
    REDIRECT_FAILED = "redirect_failed"
    ERROR = "error"


@dataclass
class DefinitionResult:
    """A resolved (or unresolved) definition for a single query."""

    display_word: str  # Headword shown to the user
    kind: ResultKind
    markup: str = ""  # Definition markup (raw, rewritten, or remote-rendered)
    redirected_from: str | None = None  # Original word when an alias was followed
    query: str = ""  # Word as originally requested
    missing_target: str | None = None  # Alias target that could not be found
    suggestions: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def found(self) -> bool:
        """Check if the result carries a definition."""
        return self.kind in (ResultKind.LOCAL, ResultKind.ONLINE)

    @property
    def was_redirected(self) -> bool:
        """Check if an alias marker was followed to reach this result."""
        return self.redirected_from is not None

    def __str__(self) -> str:
        return f"{self.display_word} [{self.kind.value}]"


@dataclass
class LookupResult:
    """Presentable lookup outcome handed to the UI."""

    word: str
    html: str
    result: DefinitionResult

    @property
    def kind(self) -> ResultKind:
        return self.result.kind
