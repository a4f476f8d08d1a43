"""Native operations bound in the environment.

A Builtin is the only callable value in slisp. It receives an ordered list of
already-evaluated arguments and returns a value or raises SlispError. User
code cannot construct one; they are installed by the environment bootstrap.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from slisp import LispValue


class Builtin(ABC):
    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def apply(self, args: list[LispValue]) -> LispValue:
        ...

    def __call__(self, args: list[LispValue]) -> LispValue:
        return self.apply(args)

    def __repr__(self):
        return f"<builtin {self.name}>"
