"""
Exception types raised by the Thai QR codec.
"""
from __future__ import annotations

from typing import Iterable

NO_FIELDS_MESSAGE = "No valid QR code fields found"


class ThaiQRError(Exception):
    """Base class for codec failures."""
    pass


class ParseError(ThaiQRError, ValueError):
    """Raised when a payload contains no decodable top-level field."""

    def __init__(self, raw: str, message: str = NO_FIELDS_MESSAGE):
        super().__init__(message)
        self.raw = raw
        self.message = message


class GenerationValidationError(ThaiQRError, ValueError):
    """
    Raised when generator input fails validation.

    Attributes:
        errors: Every violation found, in validation order.
    """

    def __init__(self, errors: Iterable[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class GenerationError(ThaiQRError):
    """Raised when the image renderer fails after a payload was built."""

    def __init__(self, message: str, qr_string: str | None = None):
        super().__init__(message)
        self.qr_string = qr_string
