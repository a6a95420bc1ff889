"""Values produced by evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union

from komi.location import Range


class ValueKind(Enum):
    """Kinds of evaluated values."""

    NUMBER = auto()
    BOOL = auto()
    EMPTY = auto()


@dataclass(frozen=True)
class Value:
    """An evaluated value with the location it came from."""

    kind: ValueKind
    location: Range
    value: Optional[Union[float, bool]] = None

    @classmethod
    def from_num(cls, num: float, location: Range) -> Value:
        """Make a number value."""
        return cls(ValueKind.NUMBER, location, float(num))

    @classmethod
    def from_bool(cls, boolean: bool, location: Range) -> Value:
        """Make a boolean value."""
        return cls(ValueKind.BOOL, location, bool(boolean))

    @classmethod
    def from_empty(cls, location: Range) -> Value:
        """Make the empty value."""
        return cls(ValueKind.EMPTY, location)