"""Shell state, token model and environment lookup."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Sequence

from .errors import ShellExit
from .textops import split


class TokenType(Enum):
    """Kinds of token produced by the lexer."""

    WORD = auto()
    CMD = auto()
    FLAG = auto()
    PIPE = auto()
    REDIR_IN = auto()
    INFILE = auto()
    REDIR_OUT = auto()
    REDIR_APPEND = auto()
    OUTFILE = auto()
    HEREDOC = auto()
    DELIMITER = auto()


class Quotes(Enum):
    """How a token was quoted in the input."""

    NONE = auto()
    SINGLE = auto()
    DOUBLE = auto()


@dataclass
class Token:
    """One lexical unit of a command line."""

    content: str
    type: TokenType = TokenType.WORD
    quotes: Quotes = Quotes.NONE


@dataclass
class ShellState:
    """Everything the shell needs while it runs."""

    envp: List[str] = field(default_factory=list)
    paths: List[str] = field(default_factory=list)
    line: Optional[str] = None
    tokens: List[Token] = field(default_factory=list)
    infile: Optional[str] = None
    outfile: Optional[str] = None
    append_mode: bool = False
    here_doc: bool = False
    delimiter: Optional[str] = None
    nbr_pipes: int = 0
    cmd: Optional[str] = None
    argv_for_cmd: List[str] = field(default_factory=list)
    exit_code: int = 0


def find_env_var(envp: Sequence[str], key: str) -> Optional[str]:
    """Value of ``key`` among ``KEY=value`` entries, or None when absent."""
    prefix = key + "="
    for entry in envp:
        if entry.startswith(prefix):
            return entry[len(prefix):]
    return None


def initialize(argv: Sequence[str], envp: Optional[Sequence[str]] = None) -> ShellState:
    """Build the initial state; the shell takes no arguments besides its name."""
    if envp is None:
        envp = [f"{key}={value}" for key, value in os.environ.items()]
    envp = list(envp)
    paths = split(find_env_var(envp, "PATH"), ":")
    if len(argv) != 1 or not argv[0]:
        raise ShellExit("minishell: wrong number of arguments\n", 1)
    return ShellState(envp=envp, paths=paths)