"""Parsing of whole programs from tokens into a syntax tree."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from komi.binding_power import Bp
from komi.closure_parser import ClosureParser
from komi.location import ORIGIN, Range
from komi.syntax_tree import Ast, AstKind
from komi.token import Token


class Parser(ClosureParser):
    """Produces a program syntax tree from a sequence of tokens."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        super().__init__(tokens)

    def parse(self) -> Ast:
        """Parse every token into a program node.

        Raises ``ParseError`` when the tokens do not form a valid program.
        """
        expressions: List[Ast] = []
        while (token := self._scanner.read_and_advance()) is not None:
            expressions.append(self.parse_expression(token, Bp.LOWEST))
        return Ast(AstKind.PROGRAM, _span(expressions), expressions=expressions)


def _span(expressions: List[Ast]) -> Range:
    """Return the range from the first expression's start to the last one's end."""
    if not expressions:
        return ORIGIN
    return Range(expressions[0].location.begin, expressions[-1].location.end)


def parse(tokens: Iterable[Token]) -> Ast:
    """Produce a program syntax tree from tokens."""
    return Parser(list(tokens)).parse()