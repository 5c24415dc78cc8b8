from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    def __init__(self, message: str, *, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class InvalidLineItem(ValidationError):
    """Raised when a line item has a negative or non-numeric price/quantity."""

    def __init__(self, message: str, *, index: int, field: str):
        super().__init__(message, field=field)
        self.index = index
