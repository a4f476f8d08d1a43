"""Runtime environment for slisp.

A single flat mapping from Symbols to values. There are no nested scopes and
no deletion; the bootstrap in slisp.builtins is the only writer.
"""

from __future__ import annotations

from typing import Iterator

from slisp import LispValue
from slisp.errors import SlispError, SlispUnboundSymbol
from slisp.types.symbol import Symbol


class Environment:
    """Flat mapping from Symbols to Lisp values."""

    __slots__ = ("vars",)

    def __init__(self):
        self.vars: dict[Symbol, LispValue] = {}

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value`, replacing any previous binding."""
        if not isinstance(name, Symbol):
            raise SlispError(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value."""
        for k, v in mapping.items():
            self.define(k, v)

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`.

        Raises SlispUnboundSymbol if not found.
        """
        try:
            return self.vars[name]
        except KeyError:
            raise SlispUnboundSymbol(f"unexpected symbol k='{name}'") from None

    def __contains__(self, name: object) -> bool:
        return name in self.vars

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self.vars)

    def __str__(self) -> str:
        """Compact `{name: value, ...}` view, used in bootstrap logging."""
        bindings = ", ".join(f"{k}: {v!r}" for k, v in self.vars.items())
        return "{" + bindings + "}"
