"""Commands the shell runs itself: echo, cd, exit, export, env, history."""

from __future__ import annotations

import os
import sys
from typing import Sequence, TextIO

from minishellkit.environment import parse_assignment
from minishellkit.statement import ShellState
from minishellkit.textutils import atoi, is_alpha, is_digit


class ShellExit(SystemExit):
    """Raised by the exit builtin; carries the status the shell ends with."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


def _stream(stream: TextIO | None, default: TextIO) -> TextIO:
    return default if stream is None else stream


def parse_exit_status(arg: str) -> int:
    """Return the process status for an exit argument, in 0..255.

    One leading sign is allowed; any other non-digit raises ValueError.
    """
    body = arg[1:] if arg[:1] in ("-", "+") else arg
    if not all(is_digit(char) for char in body):
        raise ValueError(f"exit: {arg}: numeric argument required")
    return atoi(arg) & 0xFF


def _strip_single_quotes(arg: str) -> str:
    return arg[1:-1] if len(arg) >= 2 else ""


def run_echo(argv: Sequence[str], state: ShellState, out: TextIO | None = None) -> int:
    """Print the arguments separated by spaces; "-n" first drops the newline."""
    stream = _stream(out, sys.stdout)
    args = list(argv[1:])
    newline = True
    if args and args[0] == "-n":
        newline = False
        args = args[1:]
    for position, arg in enumerate(args):
        if arg == "$?":
            stream.write(f"{state.exit_status}\n")
        elif arg.startswith("'$"):
            stream.write(_strip_single_quotes(arg))
        else:
            stream.write(arg)
        if position < len(args) - 1 and arg:
            stream.write(" ")
    if newline:
        stream.write("\n")
    state.exit_status = 0
    return 0


def run_cd(
    argv: Sequence[str],
    state: ShellState,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Change the working directory; with no argument go to $HOME."""
    stream = _stream(out, sys.stdout)
    if len(argv) > 2:
        _stream(err, sys.stderr).write("minishell: cd: too many arguments.\n")
        state.exit_status = 1
        return 1
    try:
        os.getcwd()
    except OSError:
        state.exit_status = 1
        return 1
    target = argv[1] if len(argv) > 1 else os.environ.get("HOME", "")
    try:
        os.chdir(target)
    except OSError as error:
        stream.write(f"minishell: {error.strerror}\n")
    state.exit_status = 0
    return 0


def run_exit(argv: Sequence[str], state: ShellState, out: TextIO | None = None) -> int:
    """Leave the shell by raising ShellExit.

    With more than one argument, or a non-numeric one, the shell stays and
    the failure status is returned instead.
    """
    stream = _stream(out, sys.stdout)
    if len(argv) > 2:
        stream.write("exit: too many arguments\n")
        state.exit_status = 1
        return 1
    status = 0
    if len(argv) == 2:
        try:
            status = parse_exit_status(argv[1])
        except ValueError:
            stream.write(f"exit: {argv[1]}: numeric argument required\n")
            state.exit_status = 2
            return 2
    state.clear_commands()
    stream.write("Bye then :)\n")
    raise ShellExit(status)


def run_export(argv: Sequence[str], state: ShellState, out: TextIO | None = None) -> int:
    """Set variables from NAME[=value] arguments, or list them sorted.

    Arguments whose name does not start with a letter are ignored.
    """
    if len(argv) <= 1:
        _stream(out, sys.stdout).write(state.env.format_export())
    else:
        for arg in argv[1:]:
            name, value = parse_assignment(arg)
            if name and is_alpha(name[0]):
                state.env.set(name, value)
    state.exit_status = 0
    return 0


def run_env(argv: Sequence[str], state: ShellState, out: TextIO | None = None) -> int:
    """Print the assigned variables; status 1 when there are none at all."""
    if len(argv) > 1:
        raise ValueError("env takes no arguments")
    _stream(out, sys.stdout).write(state.env.format_env())
    status = 0 if len(state.env) else 1
    state.exit_status = status
    return status


def run_history(argv: Sequence[str], state: ShellState, out: TextIO | None = None) -> int:
    """Print the numbered history; refuses any argument."""
    stream = _stream(out, sys.stdout)
    if len(argv) > 1:
        stream.write("history: too many arguments\n")
        return 1
    stream.write(state.history.format())
    return 0


def run_builtin(
    argv: Sequence[str],
    state: ShellState,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> bool:
    """Run argv if it names a builtin; return whether it did."""
    if not argv:
        return False
    name = argv[0]
    if name == "echo":
        run_echo(argv, state, out)
    elif name == "cd":
        run_cd(argv, state, out, err)
    elif name == "exit":
        run_exit(argv, state, out)
    elif name == "export":
        run_export(argv, state, out)
    elif name == "env" and len(argv) == 1:
        run_env(argv, state, out)
    elif name == "history":
        run_history(argv, state, out)
    else:
        return False
    return True