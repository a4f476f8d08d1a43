import logging

import pytest

from slisp import errors
from slisp.builtins import Add, default_env
from slisp.evaluation.evaluator import evaluate
from slisp.interpreter import Interpreter, parse_and_eval
from slisp.types.builtin import Builtin
from slisp.types.symbol import Symbol


class Recorder(Builtin):
    """Builtin that records each argument list it receives."""

    def __init__(self):
        super().__init__("rec")
        self.calls = []

    def apply(self, args):
        self.calls.append(list(args))
        return 0.0


# -----------------------------------------------------
# Tests
# -----------------------------------------------------

def test_self_evaluating_literals(env):
    assert evaluate(1.0, env) == 1.0
    assert evaluate(3.14, env) == 3.14
    assert evaluate(True, env) is True
    assert evaluate(False, env) is False


def test_symbol_lookup(env):
    env.define(Symbol("x"), 42.0)
    assert evaluate(Symbol("x"), env) == 42.0
    assert isinstance(evaluate(Symbol("+"), env), Builtin)


def test_unbound_symbol_names_the_symbol(env):
    with pytest.raises(errors.SlispUnboundSymbol) as exc_info:
        evaluate(Symbol("foo"), env)
    assert exc_info.value.reason == "unexpected symbol k='foo'"
    assert "foo" in str(exc_info.value)


def test_bare_builtin_is_not_a_form(env):
    with pytest.raises(errors.SlispInvalidForm) as exc_info:
        evaluate(Add(), env)
    assert exc_info.value.reason == "unexpected form"


@pytest.mark.parametrize("expr", [None, "text", 3])
def test_foreign_python_values_are_rejected(env, expr):
    with pytest.raises(errors.SlispInvalidForm):
        evaluate(expr, env)


def test_empty_list(env):
    with pytest.raises(errors.SlispInvalidForm) as exc_info:
        parse_and_eval("()", env)
    assert exc_info.value.reason == "expected a non-empty list"


@pytest.mark.parametrize(
    "source",
    ["(1 2 3)", "(true)", "((+ 1 2) 3)", "((> 1 0))"]
)
def test_first_form_must_be_a_function(env, source):
    with pytest.raises(errors.SlispInvalidForm) as exc_info:
        parse_and_eval(source, env)
    assert exc_info.value.reason == "first form must be a function"


def test_nested_empty_list_in_head(env):
    with pytest.raises(errors.SlispInvalidForm) as exc_info:
        parse_and_eval("(())", env)
    assert exc_info.value.reason == "expected a non-empty list"


def test_head_is_evaluated_before_arguments(env):
    # unknown head is reported even though an argument is also unbound
    with pytest.raises(errors.SlispUnboundSymbol) as exc_info:
        parse_and_eval("(nope bad)", env)
    assert "nope" in exc_info.value.reason


def test_arguments_left_to_right_and_short_circuit(env):
    rec = Recorder()
    env.define(Symbol("rec"), rec)
    with pytest.raises(errors.SlispUnboundSymbol) as exc_info:
        parse_and_eval("(+ (rec 1) first (rec 2) second)", env)
    assert "first" in exc_info.value.reason
    assert rec.calls == [[1.0]]


def test_builtin_not_applied_to_partial_arguments(env):
    rec = Recorder()
    env.define(Symbol("rec"), rec)
    with pytest.raises(errors.SlispError):
        parse_and_eval("(rec 1 (+ 1 true) 3)", env)
    assert rec.calls == []


def test_builtin_receives_evaluated_arguments(env):
    rec = Recorder()
    env.define(Symbol("rec"), rec)
    parse_and_eval("(rec (+ 1 2) true (> 2 1) 4)", env)
    assert rec.calls == [[3.0, True, True, 4.0]]


def test_builtin_is_callable():
    add = Add()
    assert add([1.0, 2.0]) == 3.0
    assert add([1.0, 2.0]) == add.apply([1.0, 2.0])


def test_leftover_tokens_are_ignored(env):
    assert parse_and_eval("(+ 1 2) garbage", env) == 3.0
    assert parse_and_eval("5 )", env) == 5.0


def test_failed_line_leaves_environment_intact(interp):
    before = dict(interp.env.vars)
    with pytest.raises(errors.SlispError):
        interp.eval("(+ 1 (- ))")
    assert interp.env.vars == before
    assert interp.eval("(+ 1 2)") == 3.0


def test_evaluation_is_deterministic(interp):
    first = interp.eval("(+ 10 5 (- 10 3 3))")
    second = interp.eval("(+ 10 5 (- 10 3 3))")
    assert first == second == 19.0


def test_default_env_contains_operator_set():
    env = default_env()
    assert {str(s) for s in env} == {"+", "-", "=", ">", "<", ">=", "<="}


def test_interpreter_eval_to_string(interp):
    assert interp.eval_to_string("(+ 10 5 (- 10 3 3))") == "19"
    assert interp.eval_to_string("(> 6 4 3 1)") == "true"
    assert interp.eval_to_string("foo") == "unexpected symbol k='foo'"
    assert interp.eval_to_string("(") == "could not find closing ')'"


def test_interpreters_do_not_share_state():
    a, b = Interpreter(), Interpreter()
    a.env.define(Symbol("x"), 1.0)
    assert Symbol("x") not in b.env


def test_environment_str_lists_bindings():
    env = default_env()
    assert str(env).startswith("{+: <builtin +>, -: <builtin ->, =: <builtin =>")


def test_bootstrap_logs_environment(caplog):
    with caplog.at_level(logging.DEBUG, logger="slisp.builtins"):
        default_env()
    assert "bootstrapped environment: {+: <builtin +>" in caplog.text
