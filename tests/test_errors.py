import io

import pytest

from minish.errors import CommandNotFoundError, ShellExit, return_error


def test_shell_exit_keeps_message_and_code():
    exc = ShellExit("minishell: wrong number of arguments\n", 1)
    assert exc.message == "minishell: wrong number of arguments\n"
    assert exc.exit_code == 1
    assert str(exc) == exc.message


def test_shell_exit_defaults_to_failure():
    assert ShellExit("boom").exit_code == 1


def test_command_not_found_uses_127():
    exc = CommandNotFoundError("frobnicate")
    assert exc.exit_code == 127
    assert exc.command == "frobnicate"
    assert "frobnicate" in exc.message


def test_command_not_found_is_a_shell_exit():
    exc = CommandNotFoundError("nothing")
    assert isinstance(exc, ShellExit)
    assert exc.exit_code == 127
    assert exc.command == "nothing"
    assert str(exc) == exc.message


def test_return_error_writes_coloured_message_and_exits():
    stream = io.StringIO()
    with pytest.raises(SystemExit) as info:
        return_error("disk on fire", stream)
    assert info.value.code == 1
    text = stream.getvalue()
    assert text.startswith("\x1b[1m\x1b[91m")
    assert text.endswith("\x1b[0m")
    assert "disk on fire" in text