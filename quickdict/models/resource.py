"""Data models for embedded resource responses."""

from dataclasses import dataclass
from enum import Enum


class ResourceErrorCode(Enum):
    """Distinct failure signals for asset requests."""

    NOT_FOUND = "not_found"  # Asset legitimately absent from the store
    FETCH_FAILED = "fetch_failed"  # Asset retrieval broke


@dataclass(frozen=True)
class AssetResponse:
    """Response of the asset protocol server for one request."""

    identifier: str
    mime_type: str = "application/octet-stream"
    data: bytes = b""
    error: ResourceErrorCode | None = None
    from_cache: bool = False

    @property
    def ok(self) -> bool:
        """Check if the asset was served."""
        return self.error is None

    def __repr__(self) -> str:
        if self.error:
            return f"AssetResponse(identifier='{self.identifier}', error={self.error.value})"
        return (
            f"AssetResponse(identifier='{self.identifier}', mime_type='{self.mime_type}', "
            f"size={len(self.data)})"
        )
