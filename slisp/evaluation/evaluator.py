"""Tree-walking evaluator for slisp.

Every non-empty list is an application: there are no special forms. The
operator is evaluated first, then the arguments left to right; the first
SlispError raised anywhere aborts the whole evaluation.
"""

from __future__ import annotations

from slisp import SExpression, LispValue
from slisp.errors import SlispInvalidForm
from slisp.types.builtin import Builtin
from slisp.types.environment import Environment
from slisp.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case bool() | float():
            return expr
        case Symbol():
            return env.lookup(expr)
        case Builtin():
            raise SlispInvalidForm("unexpected form")
        case []:
            raise SlispInvalidForm("expected a non-empty list")
        case [head, *arg_forms]:
            fn = evaluate(head, env)
            if not isinstance(fn, Builtin):
                raise SlispInvalidForm("first form must be a function")
            args = [evaluate(arg, env) for arg in arg_forms]
            return fn(args)
    raise SlispInvalidForm("unexpected form")
