"""Interactive read loop of the shell and its command-line entry point."""

from __future__ import annotations

import sys
from typing import Callable, List, Optional, Sequence, TextIO

from .env import ShellState, initialize
from .errors import ShellExit
from .printf import printf

try:
    import readline as _readline
except ImportError:  # line editing is unavailable on some platforms
    _readline = None

PROMPT = "$ "
GOODBYE = "exiting..\n"
INTERRUPTED = 130


def repl(
    state: ShellState,
    read_line: Callable[[str], Optional[str]],
    output: Optional[TextIO] = None,
) -> List[str]:
    """Read lines until end of input and return the non-empty ones as history.

    ``read_line`` is called with the prompt and returns None at end of input,
    at which point a farewell message is written to ``output``.
    """
    out = sys.stdout if output is None else output
    history: List[str] = []
    while True:
        state.line = read_line(PROMPT)
        if state.line is None:
            printf(GOODBYE, stream=out)
            break
        if state.line:
            history.append(state.line)
        state.line = None
    return history


def _read_terminal_line(prompt: str) -> Optional[str]:
    try:
        return input(prompt)
    except EOFError:
        return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the shell; it accepts no arguments besides its own name."""
    if argv is None:
        argv = sys.argv
    try:
        state = initialize(list(argv))
    except ShellExit as exc:
        sys.stderr.write(exc.message)
        return exc.exit_code
    try:
        repl(state, _read_terminal_line, sys.stdout)
    except KeyboardInterrupt:
        return INTERRUPTED
    finally:
        if _readline is not None:
            _readline.clear_history()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())