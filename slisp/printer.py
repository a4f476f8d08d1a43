"""Display rendering of slisp values."""

from __future__ import annotations

import math
from decimal import Decimal

from slisp import LispValue
from slisp.types.builtin import Builtin
from slisp.types.symbol import Symbol


def format_number(n: float) -> str:
    """Plain decimal text: no exponent, no trailing ".0"."""
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "inf" if n > 0 else "-inf"
    text = format(Decimal(repr(n)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def to_string(value: LispValue) -> str:
    """Render a value for display. Lists use commas between elements."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, Symbol):
        return value.id
    if isinstance(value, list):
        return "(" + ",".join(to_string(x) for x in value) + ")"
    if isinstance(value, Builtin):
        return f"<builtin {value.name}>"
    return str(value)


def to_source(expr: LispValue) -> str:
    """Render a parsed tree back into text the reader accepts."""
    if isinstance(expr, list):
        return "(" + " ".join(to_source(x) for x in expr) + ")"
    return to_string(expr)
