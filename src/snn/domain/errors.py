"""Error taxonomy for style name validation.

Every failure is a :class:`StyleNameError` (a ``ValueError``) tagged with
one :class:`ErrorKind`. The messages are fixed literals that callers may
match on.
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar


class ErrorKind(StrEnum):
    """Closed set of validation failures. Values are the error messages."""

    EMPTY_INPUT = "empty input"
    INPUT_TOO_LONG = "input too long"
    INVALID_FORMAT = "invalid format"

    @property
    def code(self) -> str:
        """Machine-readable code, e.g. ``"INVALID_FORMAT"``."""
        return self.name


class StyleNameError(ValueError):
    """Base error for a rejected style name."""

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.kind.value)


class EmptyInputError(StyleNameError):
    """Input string has zero length."""

    kind = ErrorKind.EMPTY_INPUT


class InputTooLongError(StyleNameError):
    """Input exceeds the maximum byte length."""

    kind = ErrorKind.INPUT_TOO_LONG


class InvalidFormatError(StyleNameError):
    """Input is not a string, or does not match the grammar."""

    kind = ErrorKind.INVALID_FORMAT
