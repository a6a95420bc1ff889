"""A scanner over a sequence of tokens."""

from __future__ import annotations

from typing import Optional, Sequence

from komi.location import ORIGIN, Range
from komi.scanner import Scanner
from komi.token import Token


class TokenScanner(Scanner[Optional[Token]]):
    """Reads tokens one by one, tracking where the last read token ended."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = tokens
        self._index = 0
        self._last_location: Range = ORIGIN

    def _at_end(self) -> bool:
        return self._index >= len(self._tokens)

    def read(self) -> Optional[Token]:
        """Return the current token, or None at the end."""
        if self._at_end():
            return None
        return self._tokens[self._index]

    def advance(self) -> None:
        """Move past the current token; does nothing at the end."""
        if self._at_end():
            return
        self._last_location = self._tokens[self._index].location
        self._index += 1

    def locate(self) -> Range:
        """Return the current token's location.

        At the end, this is an empty range at the end of the last token passed.
        """
        if not self._at_end():
            return self._tokens[self._index].location
        end = self._last_location.end
        return Range(end, end)