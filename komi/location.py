"""Positions and spans inside multi-line source text."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Spot:
    """The coordinate of a character in multi-line text."""

    row: int
    col: int


@dataclass(frozen=True)
class Range:
    """The span of one or more characters in multi-line text."""

    begin: Spot
    end: Spot

    @classmethod
    def from_nums(cls, begin_row: int, begin_col: int, end_row: int, end_col: int) -> Range:
        """Build a range from the rows and columns of its two ends."""
        return cls(Spot(begin_row, begin_col), Spot(end_row, end_col))


SPOT_ORIGIN = Spot(0, 0)
ORIGIN = Range(SPOT_ORIGIN, SPOT_ORIGIN)