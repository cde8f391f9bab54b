# minish

The beginnings of a small shell. The `minish` command shows a `$ `
prompt and reads lines until end of input. The `minish` package also
provides a library that runs commands joined by pipes with file
redirections, and a set of string, number and formatting helpers.

## Installation

```
pip install .
```

## The `minish` command

```
minish
```

- The shell shows the `$ ` prompt and reads one line at a time. When
  Python's `readline` module is available, line editing works and the
  line history is cleared when the shell exits.
- Press Ctrl+D to leave. The shell prints `exiting..` and exits with
  status 0.
- Ctrl+C ends the shell with status 130.
- The shell takes no arguments. If you give it any, it prints
  `minishell: wrong number of arguments` to standard error and exits
  with status 1.

### What the command does not do yet

The interactive shell does not execute the lines you type. It reads
each line, and `repl` returns the non-empty lines as a history list.
It does not tokenize or parse lines. It has no quoting, no variable
expansion and no built-in commands such as `cd`, `echo` or `exit`.
There is no special handling of Ctrl+C or Ctrl+\ at the prompt. The
pieces for running commands are in the library (see below), but the
prompt does not use them.

## Using it as a library

### `minish.env`

- `find_env_var(envp, key)` returns the value from a `KEY=value` entry,
  or `None` if there is no such entry.
- `initialize(argv, envp=None)` builds a `ShellState`. It reads the
  search path from `PATH`. If you do not pass an environment, it uses
  the process environment. `argv` must hold exactly one non-empty item;
  otherwise it raises `ShellExit`.
- `ShellState` is a dataclass with these fields: `envp`, `paths`,
  `line`, `tokens`, `infile`, `outfile`, `append_mode`, `here_doc`,
  `delimiter`, `nbr_pipes`, `cmd`, `argv_for_cmd` and `exit_code`.
- `Token`, `TokenType` and `Quotes` describe lexical tokens.

### `minish.executor`

- `find_path(paths, cmd)` checks whether `cmd` itself is executable. If
  it is not, it tries each directory in `paths`. If nothing is found, it
  raises `CommandNotFoundError`.
- `run_pipeline(state, commands)` runs each argv list and connects them
  with pipes.
  - The first command reads `state.infile`. The file is created if it
    is missing.
  - The last command writes `state.outfile`. The file is truncated, or
    appended to when `state.append_mode` is set.
  - It returns the exit status of the last command and stores it in
    `state.exit_code`.
  - If a command cannot be started, a message goes to standard error.
    The command then counts with that error's status, for example 127
    for a command that is not found.
- `handle_command(state, commands)` calls `run_pipeline`. If the list
  is empty, it returns the current exit code.
- `open_input(infile)` and `open_output(outfile, append)` open
  redirection files. For `None`, they return `None`.
- `read_here_doc(delimiter, read_line)` collects lines until one starts
  with `delimiter`. If input ends first, it raises `ShellExit`.

```python
from minish.env import initialize
from minish.executor import run_pipeline

state = initialize(["minish"], ["PATH=/usr/bin:/bin"])
state.outfile = "out.txt"
code = run_pipeline(state, [["echo", "hello"], ["tr", "a-z", "A-Z"]])
# out.txt now holds "HELLO\n", and code is 0
```

### `minish.shell`

- `repl(state, read_line, output=None)` runs the read loop against any
  line source. `read_line` is called with the prompt and returns `None`
  at end of input. The loop returns the history list.
- `main(argv=None)` is the entry point of the `minish` command.

### `minish.errors`

- `ShellExit` carries `message` and `exit_code`.
- `CommandNotFoundError` is a `ShellExit` with status 127.
- `return_error(message, stream=None)` prints the message in bold red
  and raises `SystemExit(1)`.

### Helpers

- `minish.linereader.LineReader(stream, buffer_size=128)` reads a text
  or binary stream one line at a time. Each line keeps its newline. It
  can be used as an iterator.
- `minish.printf`:
  - `sprintf(fmt, *args)` and `printf(fmt, *args, stream=None)` format
    text. The supported conversions are `%c %s %p %d %i %u %x %X %%`.
    `%d`, `%i`, `%u`, `%x` and `%X` use 32-bit integer semantics.
  - `to_base(number, digits)` writes a number using the given digit
    set.
  - `put_line(text, stream=None)` writes a line.
- `minish.textops`:
  - `split` and `split_charset` split text and drop empty pieces.
  - `trim` and `substr` cut text.
  - `find_bounded`, `index_of` and `rindex_of` search text.
  - `compare_prefix` compares two prefixes.
  - `map_indexed` maps a function over the characters with their
    positions.
  - `bounded_copy` and `bounded_concat` copy and append with a size
    limit.
- `minish.numbers`:
  - `atoi` parses numbers leniently and wraps at 32 bits.
  - `atoi_strict` raises `ValueError` on bad input.
  - `itoa` formats an integer.
  - `base_to_uint` reads digits in any digit set.
- `minish.chars`: ASCII character classes (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`), case conversion (`to_upper`,
  `to_lower`), `abs_value`, `max2`, `max3` and `min2`.

```python
from minish.env import find_env_var
from minish.textops import split

envp = ["HOME=/home/user", "PATH=/usr/bin:/bin"]
paths = split(find_env_var(envp, "PATH"), ":")
# ['/usr/bin', '/bin']
```

## Running the tests

```
pip install .[test]
pytest
```