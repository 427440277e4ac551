"""StyleName — immutable value wrapping a validated style name.

INVARIANT: a StyleName only exists for strings accepted by
:func:`snn.domain.parser.parse_name`, and never changes afterwards.
Equality is case-sensitive: ``"CHESS"`` and ``"chess"`` are different
styles.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Self

from snn.domain.constants import MAX_LENGTH
from snn.domain.parser import is_valid, parse_name, split_suffix


@dataclass(frozen=True)
class StyleName:
    """A validated style name such as ``"Chess"`` or ``"Chess960"``.

    Construction raises a :class:`~snn.domain.errors.StyleNameError`
    subclass for invalid input.
    """

    MAX_LENGTH: ClassVar[int] = MAX_LENGTH

    name: str

    def __post_init__(self) -> None:
        parse_name(self.name)

    @classmethod
    def parse(cls, value: object) -> Self:
        """Alias of the constructor."""
        return cls(value)  # type: ignore[arg-type]

    @staticmethod
    def valid(value: object) -> bool:
        """Return True if *value* would construct successfully."""
        return is_valid(value)

    @property
    def base(self) -> str:
        """The letters part of the name."""
        return split_suffix(self.name)[0]

    @property
    def suffix(self) -> str:
        """The trailing digits, or ``""`` when there are none."""
        return split_suffix(self.name)[1]

    def __str__(self) -> str:
        return self.name

    def __hash__(self) -> int:
        return hash(self.name)
