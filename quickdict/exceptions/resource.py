"""Embedded resource (image, audio) exceptions."""

from .base import QuickDictException


class ResourceError(QuickDictException):
    """Base class for resource retrieval errors.

    Attributes:
        identifier: Canonical identifier of the requested resource
    """

    def __init__(self, identifier: str, message: str | None = None):
        self.identifier = identifier
        super().__init__(message or identifier)


class ResourceNotFoundError(ResourceError):
    """Raised when the resource store has no resource with the given name."""

    pass


class ResourceFetchError(ResourceError):
    """Raised when a resource exists but could not be read."""

    pass
