"""
Exception types raised by escposkit.

Builder operations are total apart from the barcode and code-page selectors,
which raise ``InvalidArgument`` before producing any output.
"""
from __future__ import annotations

from typing import Any


class EscposError(Exception):
    """Base class for all escposkit errors."""
    pass


class InvalidArgument(EscposError, ValueError):
    """
    Raised when a builder parameter is outside its accepted domain.

    Attributes:
        field: Name of the offending parameter (e.g. ``"height"``).
        value: The value that failed validation.
    """

    def __init__(self, field: str, value: Any, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.value = value
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"field": self.field, "value": self.value, "message": self.message}


class CommandTableError(EscposError, ValueError):
    """Raised when a command table is malformed or missing required commands."""
    pass


class CommandTableNotFoundError(FileNotFoundError):
    pass
