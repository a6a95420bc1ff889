"""Abstract readers that walk over units one at a time."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from komi.location import Range

T = TypeVar("T")


class Scanner(ABC, Generic[T]):
    """Reads units one by one while tracking their location."""

    @abstractmethod
    def read(self) -> T:
        """Return the item at the current position."""

    @abstractmethod
    def advance(self) -> None:
        """Move past the current item."""

    @abstractmethod
    def locate(self) -> Range:
        """Return the location of the current item."""

    def read_and_advance(self) -> T:
        """Return the current item and move past it."""
        item = self.read()
        self.advance()
        return item


class Tape(ABC, Generic[T]):
    """Reads items one by one, able to peek at the next without advancing."""

    @abstractmethod
    def get_current(self) -> Optional[T]:
        """Return the current item, or None at the end."""

    @abstractmethod
    def peek_next(self) -> Optional[T]:
        """Return the item after the current one, or None if there is none."""

    @abstractmethod
    def advance(self) -> None:
        """Move to the next item."""