# file: src/reed_solomon/errors.py

"""
Reed-Solomon exception hierarchy.

All exceptions inherit from ReedSolomonError for unified handling.
"""


class ReedSolomonError(Exception):
    """Base exception for all codec errors."""
    pass


class ConfigurationError(ReedSolomonError):
    """Raised when codec parameters are invalid (t, n > 255, field polynomial)."""
    pass


class EncodingError(ReedSolomonError):
    """Raised when the message to encode is malformed."""
    pass


class DecodingError(ReedSolomonError):
    """Raised when received data is malformed (too short, bad framing)."""
    pass


class UncorrectableError(DecodingError):
    """Raised when the received word cannot be repaired."""

    def __init__(self, message: str, num_errors: int = None, max_correctable: int = None):
        super().__init__(message)
        self.num_errors = num_errors
        self.max_correctable = max_correctable


class DivisionByZero(ReedSolomonError, ZeroDivisionError):
    """Raised on division by the zero field element."""
    pass


class MagnitudeUndefined(ReedSolomonError):
    """Raised when the locator derivative vanishes at an error location."""
    pass
