"""Online dictionary service exceptions."""

from .base import QuickDictException


class RemoteServiceUnavailable(QuickDictException):
    """Raised when the online dictionary cannot be reached or answers garbage."""

    pass
