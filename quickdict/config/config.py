"""Configuration classes for QuickDict."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class QuickDictConfig:
    """Immutable configuration for dictionary lookups.

    All configuration is frozen (immutable) so a single instance can be
    shared by every component of the application context.
    """

    # Dictionary settings
    dictionary_path: Path = field(
        default_factory=lambda: Path.home() / ".quickdict" / "dictionary.json"
    )
    resource_dir: Path | None = None
    css_path: Path | None = None

    # Display settings (presentation template only)
    font_family: str = "Segoe UI"
    font_size: str = "14"
    line_height: str = "1.6"

    # Lookup settings
    max_redirect_hops: int = 1
    max_suggestions: int = 5
    suggestion_distance: int = 2
    max_results: int = 10

    # Resource cache settings
    resource_cache_capacity: int = 256

    # Online fallback settings
    use_online_fallback: bool = True
    online_api_url: str = "https://api.dictionaryapi.dev/api/v2/entries/en"
    online_timeout: float = 10.0  # Seconds before a remote call is abandoned
    online_search_threshold: int = 3  # Query remote only below this many local hits
    online_max_entries: int = 3

    def __post_init__(self):
        """Convert string paths to Path objects and validate bounds."""
        if isinstance(self.dictionary_path, str):
            object.__setattr__(self, "dictionary_path", Path(self.dictionary_path).expanduser())
        if isinstance(self.resource_dir, str):
            object.__setattr__(
                self,
                "resource_dir",
                Path(self.resource_dir).expanduser() if self.resource_dir else None,
            )
        if isinstance(self.css_path, str):
            object.__setattr__(
                self, "css_path", Path(self.css_path).expanduser() if self.css_path else None
            )

        if self.resource_cache_capacity < 1:
            raise ValueError("resource_cache_capacity must be at least 1")
        if self.max_redirect_hops < 0:
            raise ValueError("max_redirect_hops cannot be negative")
        if self.max_results < 1:
            raise ValueError("max_results must be at least 1")
