from __future__ import annotations

import argparse
import logging
import sys

from slisp.config import LanguageConfig, split_operators
from slisp.errors import SlispError
from slisp.interpreter import Interpreter
from slisp.printer import to_string
from slisp.repl import run_repl


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="slisp", description="A tiny s-expression interpreter.")
    parser.add_argument("-e", "--eval", dest="expr", help="evaluate one expression and exit")
    parser.add_argument(
        "--no-boolean-literals",
        action="store_true",
        help="read true/false as ordinary symbols",
    )
    parser.add_argument(
        "--builtins",
        help="operators to install, separated by spaces or commas (default: all)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )
    return parser


def make_config(args: argparse.Namespace) -> LanguageConfig:
    # command-line options override the SLISP_* environment variables
    base = LanguageConfig.from_env()
    enable = base.enable_boolean_literals and not args.no_boolean_literals
    builtins = split_operators(args.builtins) if args.builtins else base.builtins
    return LanguageConfig(enable_boolean_literals=enable, builtins=builtins)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    try:
        interp = Interpreter(make_config(args))
    except SlispError as e:
        print(f"error: {e.reason}", file=sys.stderr)
        return 2

    if args.expr is not None:
        try:
            print(to_string(interp.eval(args.expr)))
        except SlispError as e:
            print(f"error: {e.reason}", file=sys.stderr)
            return 1
        return 0

    run_repl(sys.stdin, sys.stdout, interp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
