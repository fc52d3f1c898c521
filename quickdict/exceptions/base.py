"""Base exception classes for QuickDict."""


class QuickDictException(Exception):
    """Base exception for all QuickDict errors.

    All custom exceptions in the quickdict package should inherit
    from this base class for consistent error handling.
    """

    pass
