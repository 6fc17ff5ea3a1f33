"""
Custom exceptions for the application.
"""


class HanziException(Exception):
    """Base exception for all Hanzi Trainer application exceptions."""
    pass


class ValidationError(HanziException):
    """Raised when request input is malformed or out of range."""
    pass


class NotFoundError(HanziException):
    """Raised when a requested resource is not found."""
    pass


class ConflictError(HanziException):
    """Raised when there's a conflict (e.g., duplicate entry)."""
    pass


class AuthenticationError(HanziException):
    """Raised when the caller's identity cannot be resolved."""
    pass
