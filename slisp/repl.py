"""Line-at-a-time read-eval-print loop."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from slisp.errors import SlispError
from slisp.interpreter import Interpreter
from slisp.printer import to_string

log = logging.getLogger(__name__)

PROMPT = "slisp > "
QUIT = "quit"


def run_repl(
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
    interpreter: Interpreter | None = None,
    prompt: str = PROMPT,
) -> None:
    """Read lines until EOF or `quit`, printing each result or error."""
    interp = interpreter or Interpreter()
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            break
        line = line.strip()
        if line == QUIT:
            break
        if not line:
            continue
        try:
            result = interp.eval(line)
        except SlispError as e:
            log.debug("line failed: %r: %s", line, e.reason)
            stdout.write(f"error: {e.reason}\n")
        else:
            stdout.write(f"=> {to_string(result)}\n")
