"""Abstract syntax trees produced by parsing."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Union

from komi.location import Range


class AstKind(Enum):
    """Kinds of syntax tree nodes."""

    PROGRAM = auto()
    NUMBER = auto()
    BOOL = auto()
    IDENTIFIER = auto()
    PREFIX_PLUS = auto()
    PREFIX_MINUS = auto()
    PREFIX_BANG = auto()
    INFIX_PLUS = auto()
    INFIX_MINUS = auto()
    INFIX_ASTERISK = auto()
    INFIX_SLASH = auto()
    INFIX_PERCENT = auto()
    INFIX_CONJUNCT = auto()
    INFIX_DISJUNCT = auto()
    INFIX_EQUALS = auto()
    INFIX_PLUS_EQUALS = auto()
    INFIX_MINUS_EQUALS = auto()
    INFIX_ASTERISK_EQUALS = auto()
    INFIX_SLASH_EQUALS = auto()
    INFIX_PERCENT_EQUALS = auto()
    CLOSURE = auto()


@dataclass
class Ast:
    """A syntax tree node.

    Which of the payload fields is used depends on the kind: ``value`` for
    numbers, booleans and identifiers; ``operand`` for prefixes; ``left`` and
    ``right`` for infixes; ``expressions`` for programs; ``parameters`` and
    ``body`` for closures.
    """

    kind: AstKind
    location: Range
    value: Optional[Union[float, bool, str]] = None
    operand: Optional[Ast] = None
    left: Optional[Ast] = None
    right: Optional[Ast] = None
    expressions: List[Ast] = field(default_factory=list)
    parameters: List[str] = field(default_factory=list)
    body: List[Ast] = field(default_factory=list)