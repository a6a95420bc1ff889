"""Parsing of closure expressions on top of the expression parser."""

from __future__ import annotations

from typing import List

from komi.binding_power import Bp
from komi.location import Range
from komi.parse_error import ParseError, ParseErrorKind
from komi.syntax_tree import Ast, AstKind
from komi.token import TokenKind


class ClosureParser(ExpressionParser if False else object):  # pragma: no cover - replaced below
    pass


from komi.expression_parser import ExpressionParser  # noqa: E402


class ClosureParser(ExpressionParser):  # type: ignore[no-redef]
    """An expression parser that also understands closures such as ``함수 a, b { a }``."""

    def _parse_closure_start(self, keyword_location: Range) -> Ast:
        return self.parse_closure(keyword_location)

    def parse_closure(self, keyword_location: Range) -> Ast:
        """Parse a closure whose keyword, at ``keyword_location``, was already consumed."""
        parameters: List[str] = []

        token_location = self._scanner.locate()
        token = self._scanner.read_and_advance()
        if token is not None and token.kind is TokenKind.IDENTIFIER:
            parameters.append(token.value)
            parameters.extend(self._parse_parameters())
            token = self._scanner.read_and_advance()
        if token is None or token.kind is not TokenKind.LBRACE:
            raise ParseError(ParseErrorKind.INVALID_FUNC_PARAM, token_location)

        body = self._parse_body()

        rbrace_location = self._scanner.locate()
        closing = self._scanner.read_and_advance()
        if closing is None or closing.kind is not TokenKind.RBRACE:
            raise ParseError(ParseErrorKind.FUNC_BODY_NOT_CLOSED, rbrace_location)

        location = Range(keyword_location.begin, rbrace_location.end)
        return Ast(AstKind.CLOSURE, location, parameters=parameters, body=body)

    def _parse_parameters(self) -> List[str]:
        """Parse the ``, name`` pairs that follow the first parameter."""
        parameters: List[str] = []
        while (token := self._scanner.read()) is not None and token.kind is TokenKind.COMMA:
            self._scanner.advance()
            location = self._scanner.locate()
            name = self._scanner.read_and_advance()
            if name is None or name.kind is not TokenKind.IDENTIFIER:
                raise ParseError(ParseErrorKind.INVALID_FUNC_PARAM, location)
            parameters.append(name.value)
        return parameters

    def _parse_body(self) -> List[Ast]:
        """Parse expressions after a left brace, up to the end or a right brace."""
        expressions: List[Ast] = []
        while (token := self._scanner.read()) is not None and token.kind is not TokenKind.RBRACE:
            self._scanner.advance()
            expressions.append(self.parse_expression(token, Bp.LOWEST))
        return expressions