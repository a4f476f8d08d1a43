# Core type aliases for slisp's data model.
# Plain Python types represent both parsed forms and runtime values:
#   bool -> Bool, float -> Number, Symbol -> Symbol, list -> List,
#   Builtin -> Func. There is no separate AST type.
#
# Naming guidance:
# - SExpression: use in reader/parser code for syntactic forms.
# - LispValue:  use in evaluator/runtime code for evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any

LispValue = Any
SExpression = LispValue

from slisp.interpreter import Interpreter, parse_and_eval  # noqa: E402

__all__ = ["LispValue", "SExpression", "Interpreter", "parse_and_eval"]
