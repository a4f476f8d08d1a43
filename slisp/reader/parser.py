"""
  Lisp Reader: tokenizer and recursive-descent parser

- `(` and `)` are always tokens of their own; every other whitespace-delimited
  run of characters is one token. No strings, comments or escapes.
- Emits Python primitives, the same objects the evaluator consumes:

    - true / false -> bool   (when boolean literals are enabled)
    - numbers      -> float
    - symbols      -> Symbol
    - lists        -> Python list

Only the first complete expression is read by `parse`; the tokens after it
are handed back to the caller untouched.
"""

from __future__ import annotations

import logging
import re

from slisp import SExpression
from slisp.errors import SlispSyntaxError
from slisp.types.symbol import Symbol

log = logging.getLogger(__name__)

LPAREN = "("
RPAREN = ")"

# Unicode White_Space; unlike str.split(), U+001C..U+001F are not separators
WHITESPACE_RE = re.compile(r"[\t-\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+")


def tokenize(source: str) -> list[str]:
    """tokenize("(+ 10 5)") -> ["(", "+", "10", "5", ")"]"""
    padded = source.replace(LPAREN, " ( ").replace(RPAREN, " ) ")
    tokens = [t for t in WHITESPACE_RE.split(padded) if t]
    log.debug("tokens: %r", tokens)
    return tokens


def parse_number(token: str) -> float | None:
    # float() would also take digit separators and non-ASCII digits
    if "_" in token or not token.isascii():
        return None
    try:
        return float(token)
    except ValueError:
        return None


def parse_atom(token: str, enable_boolean_literals: bool = True) -> SExpression:
    """Classify a non-parenthesis token; never fails."""
    if enable_boolean_literals:
        if token == "true":
            return True
        if token == "false":
            return False
    number = parse_number(token)
    if number is not None:
        return number
    return Symbol(token)


def parse(
    tokens: list[str], enable_boolean_literals: bool = True
) -> tuple[SExpression, list[str]]:
    """Parse one expression from the front of `tokens`.

    Returns the expression and the tokens that follow it.
    """
    expr, pos = _parse_at(tokens, 0, enable_boolean_literals)
    return expr, tokens[pos:]


def _parse_at(tokens: list[str], pos: int, booleans: bool) -> tuple[SExpression, int]:
    if pos >= len(tokens):
        raise SlispSyntaxError("could not get token")
    token = tokens[pos]
    if token == LPAREN:
        return _read_seq(tokens, pos + 1, booleans)
    if token == RPAREN:
        raise SlispSyntaxError("unexpected ')'")
    return parse_atom(token, booleans), pos + 1


def _read_seq(tokens: list[str], pos: int, booleans: bool) -> tuple[list, int]:
    # Reads the forms following an opening parenthesis up to its match.
    items: list[SExpression] = []
    while True:
        if pos >= len(tokens):
            raise SlispSyntaxError("could not find closing ')'")
        if tokens[pos] == RPAREN:
            return items, pos + 1
        expr, pos = _parse_at(tokens, pos, booleans)
        items.append(expr)


def read(source: str, enable_boolean_literals: bool = True) -> SExpression:
    """Tokenize `source` and parse its first expression.

    Leftover tokens are discarded (permissive: "(+ 1 2) junk" reads fine).
    """
    expr, rest = parse(tokenize(source), enable_boolean_literals)
    if rest:
        log.debug("discarding %d leftover token(s): %r", len(rest), rest)
    return expr
