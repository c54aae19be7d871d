"""Shared domain components.

This module exports the exception base classes and error codes used across
the domain.
"""

from ibanparse.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    ValidationError,
)

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
]
