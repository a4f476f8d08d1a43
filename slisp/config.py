"""Language configuration.

The language grew in steps (first only `+`/`-` over numbers, later boolean
literals and chained comparisons). Rather than hard-coding one step, the
reader and the environment bootstrap take a LanguageConfig.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field

from slisp.builtins import OPERATORS
from slisp.errors import SlispError

_FALSY = {"0", "false", "no", "off"}


def _all_builtins() -> frozenset[str]:
    return frozenset(OPERATORS)


@dataclass(frozen=True)
class LanguageConfig:
    enable_boolean_literals: bool = True
    builtins: frozenset[str] = field(default_factory=_all_builtins)

    def __post_init__(self):
        if isinstance(self.builtins, str):
            raise SlispError(f"builtins must be a collection of names, got string '{self.builtins}'")
        names = frozenset(self.builtins)
        unknown = sorted(names - _all_builtins())
        if unknown:
            raise SlispError(f"unknown builtin '{unknown[0]}'")
        # accept any iterable of names, store a frozenset
        object.__setattr__(self, "builtins", names)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> LanguageConfig:
        """Build a config from SLISP_BOOLEAN_LITERALS and SLISP_BUILTINS."""
        environ = os.environ if environ is None else environ
        enable = True
        raw_bool = environ.get("SLISP_BOOLEAN_LITERALS")
        if raw_bool:
            enable = raw_bool.strip().lower() not in _FALSY
        raw_ops = environ.get("SLISP_BUILTINS")
        if not raw_ops or not raw_ops.strip():
            return cls(enable_boolean_literals=enable)
        return cls(enable_boolean_literals=enable, builtins=split_operators(raw_ops))


def split_operators(raw: str) -> frozenset[str]:
    """Split an operator list separated by whitespace and/or commas."""
    return frozenset(p for p in re.split(r"[\s,]+", raw) if p)


FULL = LanguageConfig()
# The earliest language: numbers and symbols only, addition and subtraction.
ARITHMETIC = LanguageConfig(enable_boolean_literals=False, builtins=frozenset({"+", "-"}))
