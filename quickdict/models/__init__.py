"""Data models for QuickDict."""

from .definition import DefinitionResult, LookupResult, ResultKind
from .remote import RemoteDefinition, RemoteEntry, RemoteMeaning
from .resource import AssetResponse, ResourceErrorCode
from .search import CandidateSource, SearchCandidate

__all__ = [
    "ResultKind",
    "DefinitionResult",
    "LookupResult",
    "CandidateSource",
    "SearchCandidate",
    "ResourceErrorCode",
    "AssetResponse",
    "RemoteDefinition",
    "RemoteMeaning",
    "RemoteEntry",
]
