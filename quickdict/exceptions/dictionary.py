"""Dictionary index related exceptions."""

from .base import QuickDictException


class SetupError(QuickDictException):
    """Raised when a dictionary index or resource store cannot be opened."""

    pass


class IndexNotLoadedError(QuickDictException):
    """Raised when the dictionary index is queried before it is loaded."""

    pass
