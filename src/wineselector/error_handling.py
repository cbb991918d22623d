"""
Error types for Wine Selector.

The engine raises and never recovers: every error propagates to the caller,
which decides how to surface it.
"""


class WineSelectorError(Exception):
    """Base exception for Wine Selector."""
    pass


class InvalidInputError(WineSelectorError, ValueError):
    """A dish, occasion or intimacy value is missing or not recognised."""
    pass


class InvariantViolationError(WineSelectorError):
    """
    The static rule configuration is incomplete.

    Raised when a ranking comes out empty or misses a WineProfile. This
    points at the tables themselves, not at the request.
    """
    pass


class ConfigurationError(WineSelectorError):
    """An engine setting (weights, threshold) could not be loaded."""
    pass


__all__ = [
    'WineSelectorError',
    'InvalidInputError',
    'InvariantViolationError',
    'ConfigurationError',
]
