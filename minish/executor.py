"""Run commands as a pipeline with input and output redirection."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import BinaryIO, Callable, Dict, List, Optional, Sequence

from .env import ShellState
from .errors import CommandNotFoundError, ShellExit
from .textops import compare_prefix

HERE_DOC_PROMPT = ">"


def find_path(paths: Sequence[str], cmd: Optional[str]) -> str:
    """Locate an executable: ``cmd`` itself first, then each search directory."""
    if not cmd:
        raise ShellExit("minishell: invalid command\n", 1)
    if os.access(cmd, os.X_OK):
        return cmd
    for directory in paths:
        candidate = directory + "/" + cmd
        if os.access(candidate, os.X_OK):
            return candidate
    raise CommandNotFoundError(cmd)


def open_input(infile: Optional[str]) -> Optional[BinaryIO]:
    """Open the input file, creating it if missing; None means standard input."""
    if infile is None:
        return None
    try:
        fd = os.open(infile, os.O_RDONLY | os.O_CREAT, 0o644)
    except OSError as exc:
        raise ShellExit(f"failed to open input: {exc.strerror}\n", 1) from exc
    return os.fdopen(fd, "rb")


def open_output(outfile: Optional[str], append: bool = False) -> Optional[BinaryIO]:
    """Open the output file, truncating or appending; None means standard output."""
    if outfile is None:
        return None
    flags = os.O_WRONLY | os.O_CREAT | (os.O_APPEND if append else os.O_TRUNC)
    try:
        fd = os.open(outfile, flags, 0o644)
    except OSError as exc:
        raise ShellExit(f"failed to open output: {exc.strerror}\n", 1) from exc
    return os.fdopen(fd, "ab" if append else "wb")


def read_here_doc(delimiter: str, read_line: Callable[[str], Optional[str]]) -> str:
    """Collect lines until one begins with ``delimiter``; end of input is an error."""
    lines: List[str] = []
    while True:
        line = read_line(HERE_DOC_PROMPT)
        if line is None:
            raise ShellExit("minishell error: here-document delimited by EOF\n", 1)
        if compare_prefix(line, delimiter, len(delimiter)) == 0:
            break
        lines.append(line + "\n")
    return "".join(lines)


def _environment(envp: Sequence[str]) -> Dict[str, str]:
    return dict(entry.split("=", 1) for entry in envp if "=" in entry)


def run_pipeline(state: ShellState, commands: Sequence[Sequence[str]]) -> int:
    """Run each argv connected by pipes and return the last command's exit code.

    The first command reads ``state.infile`` and the last writes
    ``state.outfile``. A command that cannot start reports to standard error
    and counts as failed with its error's exit code.
    """
    stages = [list(argv) for argv in commands]
    if not stages:
        raise ValueError("a pipeline needs at least one command")
    state.nbr_pipes = len(stages) - 1
    env = _environment(state.envp)
    processes: List[subprocess.Popen] = []
    previous: Optional[BinaryIO] = None
    last_process: Optional[subprocess.Popen] = None
    last_failure = 1

    for index, argv in enumerate(stages):
        is_first = index == 0
        is_last = index == state.nbr_pipes
        upstream, previous = previous, None
        opened: List[BinaryIO] = []
        process: Optional[subprocess.Popen] = None
        failure = 0
        try:
            if is_first:
                stdin = open_input(state.infile)
                if stdin is not None:
                    opened.append(stdin)
            else:
                stdin = upstream if upstream is not None else subprocess.DEVNULL
            if is_last:
                stdout = open_output(state.outfile, state.append_mode)
                if stdout is not None:
                    opened.append(stdout)
            else:
                stdout = subprocess.PIPE
            path = find_path(state.paths, argv[0] if argv else None)
            if is_last:
                state.cmd = path
                state.argv_for_cmd = argv
            process = subprocess.Popen(
                argv, executable=path, stdin=stdin, stdout=stdout, env=env
            )
        except ShellExit as exc:
            sys.stderr.write(exc.message)
            failure = exc.exit_code
        except OSError as exc:
            sys.stderr.write(f"execve: {exc.strerror}\n")
            failure = 1
        finally:
            for handle in opened:
                handle.close()
            if upstream is not None:
                upstream.close()
        if process is not None:
            processes.append(process)
            if not is_last:
                previous = process.stdout
        if is_last:
            last_process = process
            last_failure = failure

    for process in processes:
        process.wait()
    if last_process is None:
        code = last_failure
    else:
        code = last_process.returncode if last_process.returncode >= 0 else 1
    state.exit_code = code
    return code


def handle_command(state: ShellState, commands: Sequence[Sequence[str]]) -> int:
    """Execute a parsed command line; an empty one leaves the exit code alone."""
    if not commands:
        return state.exit_code
    return run_pipeline(state, commands)