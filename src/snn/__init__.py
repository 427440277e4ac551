"""snn — Style Name Notation for abstract strategy board games.

A style name is a PascalCase token with an optional numeric suffix
(``"Chess"``, ``"Shogi"``, ``"Chess960"``), at most 32 bytes long.
"""

from __future__ import annotations

from snn.domain.constants import MAX_LENGTH
from snn.domain.errors import (
    EmptyInputError,
    ErrorKind,
    InputTooLongError,
    InvalidFormatError,
    StyleNameError,
)
from snn.domain.parser import is_valid
from snn.domain.style_name import StyleName

__version__ = "1.0.0"

__all__ = [
    "MAX_LENGTH",
    "EmptyInputError",
    "ErrorKind",
    "InputTooLongError",
    "InvalidFormatError",
    "StyleName",
    "StyleNameError",
    "__version__",
    "parse",
    "valid",
]


def parse(value: object) -> StyleName:
    """Parse *value* into a :class:`StyleName`.

    Raises:
        StyleNameError: One of its subclasses, for the first violated rule.
    """
    return StyleName(value)  # type: ignore[arg-type]


def valid(value: object) -> bool:
    """Report whether *value* is a well-formed style name. Never raises."""
    return is_valid(value)
