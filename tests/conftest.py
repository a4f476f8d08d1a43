import pytest

from slisp.builtins import register
from slisp.interpreter import Interpreter
from slisp.types.environment import Environment


@pytest.fixture
def env():
    """Fresh environment with every builtin loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()
