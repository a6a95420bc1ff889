# komi

Building blocks for a small expression language whose keywords are Korean:
`참` (true), `거짓` (false), `그리고` (and), `또는` (or) and `함수` (closure).

## What is in the package

- `komi.location`: `Spot` (row and column) and `Range` (begin and end spots),
  with `Range.from_nums(begin_row, begin_col, end_row, end_col)` and the
  `ORIGIN` range.
- `komi.errors`: `EngineError`, an exception carrying a `kind` and a
  `location`, plus `unpack_spot` and `unpack_engine_error`.
- `komi.char_validator`: `is_digit`, `is_whitespace` (one ASCII whitespace
  character, or `"\r\n"`) and `is_in_identifier_domain` (one ASCII letter or
  digit, or one Hangul syllable from `가` to `힣`).
- `komi.scanner`: the abstract base classes `Scanner` (`read`, `advance`,
  `locate`, `read_and_advance`) and `Tape` (`get_current`, `peek_next`,
  `advance`).
- `komi.token`: `TokenKind` and `Token(kind, location, value=None)`.
  `NUMBER`, `BOOL`, `STRING_SEGMENT` and `IDENTIFIER` tokens must carry a
  value of the matching type (numbers are stored as `float`); every other
  kind must carry none, or `ValueError` is raised.
- `komi.syntax_tree`: `AstKind` and the `Ast` node. Depending on its kind a
  node uses `value`, `operand`, `left`/`right`, `expressions`, or
  `parameters`/`body`.
- `komi.binding_power`: `Bp`, with the presets `LOWEST`, `ASSIGNMENT`,
  `CONNECTIVE`, `ADDITIVE`, `MULTIPLICATIVE` and `PREFIX`, and
  `Bp.from_token(token)`.
- `komi.token_scanner`: `TokenScanner`, a `Scanner` over a list of tokens.
  At the end, `locate()` returns an empty range at the end of the last token
  passed.
- `komi.parse_error`: `ParseErrorKind` and `ParseError`.
- `komi.expression_parser`: `ExpressionParser`, which parses literals,
  identifiers, prefix `+ - !`, infix operators and parentheses. It does not
  accept closures: a `함수` token raises `InvalidExprStart`.
- `komi.closure_parser`: `ClosureParser`, an `ExpressionParser` that also
  parses closures, `함수 a, b { ... }`.
- `komi.parser`: `Parser` and `parse(tokens)`, which parse a whole program.
- `komi.value`: `ValueKind` and `Value`, with `Value.from_num`,
  `Value.from_bool` and `Value.from_empty`.
- `komi.representer`: `represent(value)` and the constants `EMPTY_REPR`,
  `TRUE_REPR` and `FALSE_REPR`.

## Installation

```
pip install .
```

## Parsing

```python
from komi.location import Range
from komi.parser import parse
from komi.token import Token, TokenKind

# `1+2*3`
tokens = [
    Token(TokenKind.NUMBER, Range.from_nums(0, 0, 0, 1), 1.0),
    Token(TokenKind.PLUS, Range.from_nums(0, 1, 0, 2)),
    Token(TokenKind.NUMBER, Range.from_nums(0, 2, 0, 3), 2.0),
    Token(TokenKind.ASTERISK, Range.from_nums(0, 3, 0, 4)),
    Token(TokenKind.NUMBER, Range.from_nums(0, 4, 0, 5), 3.0),
]
program = parse(tokens)
# program.kind is AstKind.PROGRAM; program.expressions[0] is an
# INFIX_PLUS node whose right side is the INFIX_ASTERISK node for `2*3`.
```

Multiplication, division and remainder bind tighter than addition and
subtraction, which bind tighter than `그리고` and `또는`, which bind tighter
than assignment. Arithmetic and the connectives associate to the left; the
assignment operators (`=`, `+=`, `-=`, `*=`, `/=`, `%=`) associate to the
right. A parenthesised expression keeps its inner node, with its location
widened to cover the parentheses. A program is a sequence of expressions;
its location runs from the start of the first to the end of the last, or is
`ORIGIN` when there are none.

Malformed input raises `komi.parse_error.ParseError`. Its `kind` is a
`ParseErrorKind`, whose `str()` is its name, such as `NoPrefixOperand` for a
lone `+`, `InvalidExprStart` for `*1`, `NoInfixRightOperand` for `1+`,
`LParenNotClosed` for `(1+2`, `InvalidFuncParam` for `함수 +` and
`FuncBodyNotClosed` for `함수 {`. Its `location` is the `Range` of the
offending text.

```python
from komi.parse_error import ParseError
from komi.parser import parse
from komi.location import Range
from komi.token import Token, TokenKind

try:
    parse([Token(TokenKind.PLUS, Range.from_nums(0, 0, 0, 1))])
except ParseError as err:
    print(err)  # Reason: 'NoPrefixOperand', Location: Range(...)
```

## Representing values

```python
from komi.location import Range
from komi.representer import represent
from komi.value import Value

represent(Value.from_num(12.25, Range.from_nums(0, 0, 0, 5)))   # "12.25"
represent(Value.from_num(10.0, Range.from_nums(0, 0, 0, 2)))    # "10"
represent(Value.from_bool(True, Range.from_nums(0, 0, 0, 1)))   # "참"
represent(Value.from_empty(Range.from_nums(0, 0, 0, 0)))        # "(EMPTY)"
```

## What the package does not do

There is no lexer and no evaluator. The package cannot turn source text into
tokens, and it cannot run a parsed program: tokens have to be built by hand
or by other code, and `Value` objects have to be made directly before
`represent` can show them. There is no command-line program.

## Tests

```
pip install .[test]
pytest
```