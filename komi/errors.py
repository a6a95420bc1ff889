"""The error type shared by the stages of the engine."""

from __future__ import annotations

from typing import Any, Generic, Tuple, TypeVar

from komi.location import Range, Spot

K = TypeVar("K")


class EngineError(Exception, Generic[K]):
    """An error raised by the engine, with its kind and the location of its cause."""

    def __init__(self, kind: K, location: Range) -> None:
        super().__init__(kind, location)
        self.kind = kind
        self.location = location

    def __str__(self) -> str:
        return f"Reason: '{self.kind}', Location: {self.location!r}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind!r}, location={self.location!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, EngineError) or type(self) is not type(other):
            return NotImplemented
        return self.kind == other.kind and self.location == other.location

    def __hash__(self) -> int:
        return hash((type(self), self.kind, self.location))


def unpack_spot(spot: Spot) -> Tuple[int, int]:
    """Return ``(row, col)`` of a spot."""
    return spot.row, spot.col


def unpack_engine_error(err: EngineError[K]) -> Tuple[K, Range]:
    """Return ``(kind, location)`` of an engine error."""
    return err.kind, err.location