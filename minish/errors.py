"""Errors that end the shell or a command, and a fatal-message helper."""

from __future__ import annotations

import sys
from typing import NoReturn, Optional, TextIO

EXIT_FAILURE = 1
COMMAND_NOT_FOUND = 127

_BOLD = "\x1b[1m"
_RED = "\x1b[91m"
_RESET = "\x1b[0m"


class ShellExit(Exception):
    """A fatal condition: ``message`` goes to standard error, then exit with ``exit_code``."""

    def __init__(self, message: str = "", exit_code: int = EXIT_FAILURE) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


class CommandNotFoundError(ShellExit):
    """No executable for ``command`` exists on the search path."""

    def __init__(self, command: str) -> None:
        super().__init__(f"{command}: command not found\n", COMMAND_NOT_FOUND)
        self.command = command


def return_error(message: str, stream: Optional[TextIO] = None) -> NoReturn:
    """Print ``message`` highlighted in bold red and exit with failure."""
    out = sys.stdout if stream is None else stream
    out.write(f"{_BOLD}{_RED}❗️{message}❗️\n{_RESET}")
    out.flush()
    raise SystemExit(EXIT_FAILURE)