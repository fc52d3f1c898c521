"""Custom exceptions for QuickDict."""

from .base import QuickDictException
from .dictionary import IndexNotLoadedError, SetupError
from .remote import RemoteServiceUnavailable
from .resource import ResourceError, ResourceFetchError, ResourceNotFoundError

__all__ = [
    "QuickDictException",
    "SetupError",
    "IndexNotLoadedError",
    "ResourceError",
    "ResourceNotFoundError",
    "ResourceFetchError",
    "RemoteServiceUnavailable",
]
