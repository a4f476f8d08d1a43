from __future__ import annotations

import logging

from slisp import LispValue
from slisp.builtins import default_env
from slisp.config import LanguageConfig
from slisp.errors import SlispError
from slisp.evaluation.evaluator import evaluate
from slisp.printer import to_string
from slisp.reader.parser import read
from slisp.types.environment import Environment

log = logging.getLogger(__name__)


def parse_and_eval(
    source: str, env: Environment, config: LanguageConfig | None = None
) -> LispValue:
    """Read the first expression of `source` and evaluate it in `env`."""
    booleans = True if config is None else config.enable_boolean_literals
    expr = read(source, booleans)
    return evaluate(expr, env)


class Interpreter:
    """
    Holds one Environment for its lifetime and evaluates one line at a time.
    A failing line raises SlispError and leaves the Environment untouched.
    """

    def __init__(self, config: LanguageConfig | None = None):
        self.config: LanguageConfig = config or LanguageConfig()
        self.env: Environment = default_env(self.config)

    def eval(self, line: str) -> LispValue:
        return parse_and_eval(line, self.env, self.config)

    def eval_to_string(self, line: str) -> str:
        """Evaluate and render; an error yields its reason instead."""
        try:
            return to_string(self.eval(line))
        except SlispError as e:
            log.debug("line failed: %r: %s", line, e.reason)
            return e.reason
