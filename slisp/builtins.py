"""Builtin operators and the environment bootstrap."""

from __future__ import annotations

import logging
import operator
from typing import Callable, Iterable

from slisp import LispValue
from slisp.errors import SlispArityError, SlispError, SlispTypeError
from slisp.types.builtin import Builtin
from slisp.types.environment import Environment
from slisp.types.symbol import Symbol

log = logging.getLogger(__name__)


# -------------------------------
# Numeric coercion
# -------------------------------
def to_number(value: LispValue) -> float:
    # bool is an int subclass; only real Numbers (floats) are accepted
    if isinstance(value, float):
        return value
    raise SlispTypeError("expected a number")


def to_numbers(args: list[LispValue]) -> list[float]:
    return [to_number(a) for a in args]


def _first_and_rest(args: list[LispValue]) -> tuple[float, list[float]]:
    numbers = to_numbers(args)
    if not numbers:
        raise SlispArityError("expected at least one number")
    return numbers[0], numbers[1:]


# -------------------------------
# Arithmetic
# -------------------------------
class Add(Builtin):
    def __init__(self):
        super().__init__("+")

    def apply(self, args: list[LispValue]) -> float:
        total = 0.0
        for x in to_numbers(args):
            total += x
        return total


class Subtract(Builtin):
    """(- a b c ...) is a - (b + c + ...); (- a) is a."""

    def __init__(self):
        super().__init__("-")

    def apply(self, args: list[LispValue]) -> float:
        first, rest = _first_and_rest(args)
        sum_of_rest = 0.0
        for x in rest:
            sum_of_rest += x
        return first - sum_of_rest


# -------------------------------
# Comparison
# -------------------------------
class ChainedComparison(Builtin):
    """True iff `relation` holds between every adjacent pair of arguments."""

    __slots__ = ("relation",)

    def __init__(self, name: str, relation: Callable[[float, float], bool]):
        super().__init__(name)
        self.relation = relation

    def apply(self, args: list[LispValue]) -> bool:
        first, rest = _first_and_rest(args)
        prev = first
        for x in rest:
            if not self.relation(prev, x):
                return False
            prev = x
        return True


# -------------------------------
# Registration
# -------------------------------
OPERATORS: dict[str, Callable[[], Builtin]] = {
    "+": Add,
    "-": Subtract,
    "=": lambda: ChainedComparison("=", operator.eq),
    ">": lambda: ChainedComparison(">", operator.gt),
    "<": lambda: ChainedComparison("<", operator.lt),
    ">=": lambda: ChainedComparison(">=", operator.ge),
    "<=": lambda: ChainedComparison("<=", operator.le),
}


def register(env: Environment, names: Iterable[str] | None = None) -> None:
    """Install the named operators (all of them by default) into `env`."""
    wanted = set(OPERATORS) if names is None else set(names)
    unknown = sorted(wanted - set(OPERATORS))
    if unknown:
        raise SlispError(f"unknown builtin '{unknown[0]}'")
    selected = [n for n in OPERATORS if n in wanted]
    env.update({Symbol(n): OPERATORS[n]() for n in selected})
    log.debug("bootstrapped environment: %s", env)


def default_env(config=None) -> Environment:
    """Create a fresh Environment holding the builtins named by `config`."""
    env = Environment()
    register(env, None if config is None else config.builtins)
    return env
