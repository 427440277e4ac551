"""Byte-level parser for style names.

Designed for untrusted input: bounds are checked before any scanning, and
the scan classifies raw UTF-8 bytes rather than code points, so anything
outside ``A-Z``, ``a-z`` and ``0-9`` is rejected.

Grammar::

    name ::= upper (upper | lower)* digit*

INVARIANT: ``parse_name`` returns its argument unchanged on success.
"""

from __future__ import annotations

from enum import Enum

from snn.domain.constants import (
    DIGIT_MAX,
    DIGIT_MIN,
    LOWERCASE_MAX,
    LOWERCASE_MIN,
    MAX_LENGTH,
    UPPERCASE_MAX,
    UPPERCASE_MIN,
)
from snn.domain.errors import (
    EmptyInputError,
    InputTooLongError,
    InvalidFormatError,
    StyleNameError,
)


class ScanState(Enum):
    """States of the format scanner."""

    START = "start"
    LETTERS = "letters"
    DIGITS = "digits"
    REJECT = "reject"


ACCEPTING_STATES: frozenset[ScanState] = frozenset({ScanState.LETTERS, ScanState.DIGITS})


def is_uppercase(byte: int) -> bool:
    return UPPERCASE_MIN <= byte <= UPPERCASE_MAX


def is_lowercase(byte: int) -> bool:
    return LOWERCASE_MIN <= byte <= LOWERCASE_MAX


def is_letter(byte: int) -> bool:
    return is_uppercase(byte) or is_lowercase(byte)


def is_digit(byte: int) -> bool:
    return DIGIT_MIN <= byte <= DIGIT_MAX


def _step(state: ScanState, byte: int) -> ScanState:
    if state is ScanState.START:
        return ScanState.LETTERS if is_uppercase(byte) else ScanState.REJECT
    if state is ScanState.LETTERS:
        if is_letter(byte):
            return ScanState.LETTERS
        if is_digit(byte):
            return ScanState.DIGITS
        return ScanState.REJECT
    if state is ScanState.DIGITS:
        return ScanState.DIGITS if is_digit(byte) else ScanState.REJECT
    return ScanState.REJECT


def scan(data: bytes) -> ScanState:
    """Run the format scanner over *data* and return the final state.

    Stops at the first rejected byte. An empty input stays in ``START``,
    which is not accepting.
    """
    state = ScanState.START
    for byte in data:
        state = _step(state, byte)
        if state is ScanState.REJECT:
            break
    return state


def parse_name(value: object) -> str:
    """Validate *value* as a style name and return it unchanged.

    Checks run in a fixed order and the first failure wins:
    type, emptiness, byte length, then format.

    Raises:
        InvalidFormatError: *value* is not a ``str`` or fails the scan.
        EmptyInputError: *value* is ``""``.
        InputTooLongError: *value* encodes to more than ``MAX_LENGTH`` bytes.

    Examples:
        >>> parse_name("Chess960")
        'Chess960'
    """
    if not isinstance(value, str):
        raise InvalidFormatError()
    if not value:
        raise EmptyInputError()
    # Every code point is at least one byte; skip encoding oversized input.
    if len(value) > MAX_LENGTH:
        raise InputTooLongError()
    data = value.encode("utf-8", "surrogatepass")
    if len(data) > MAX_LENGTH:
        raise InputTooLongError()
    if scan(data) not in ACCEPTING_STATES:
        raise InvalidFormatError()
    return value


def is_valid(value: object) -> bool:
    """Return True if *value* is a well-formed style name. Never raises."""
    try:
        parse_name(value)
    except StyleNameError:
        return False
    return True


def split_suffix(name: str) -> tuple[str, str]:
    """Split a validated name into its letters and its digit suffix.

    Examples:
        >>> split_suffix("Chess960")
        ('Chess', '960')
        >>> split_suffix("Shogi")
        ('Shogi', '')
    """
    base = name.rstrip("0123456789")
    return base, name[len(base) :]
