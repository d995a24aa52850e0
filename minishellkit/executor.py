"""Starting external commands and files as child processes."""

from __future__ import annotations

import errno
import os
import subprocess
import sys
from typing import Sequence, TextIO

from minishellkit.environment import Environment
from minishellkit.statement import ShellState


def command_path(name: str, env: Environment) -> str:
    """Return the path a command is run from.

    Commands live in /bin when PATH names a standard binary directory;
    otherwise the name is used as it is.
    """
    return f"/bin/{name}" if env.has_system_path() else name


def build_arguments(argv: Sequence[str], additional_args: Sequence[str] = ()) -> list[str]:
    """Return the argument vector handed to the child.

    Pending additional arguments are merged into the statement beforehand,
    so they are never appended here.
    """
    del additional_args
    return list(argv)


def exit_status_for_error(error: OSError) -> int:
    """Map a failure to start a program onto a shell status."""
    if error.errno == errno.EACCES:
        return 126
    if error.errno == errno.ENOENT:
        return 127
    return 1


def _env_mapping(env: Environment) -> dict[str, str]:
    return dict(entry.partition("=")[::2] for entry in env.to_envp())


def _executable(path: str) -> str:
    # Without a directory part the program is looked up in the working
    # directory, never along PATH.
    return path if os.path.dirname(path) else os.path.join(".", path)


def _display_name(path: str) -> str:
    return path[len("/bin/"):] if path.startswith("/bin/") else path


def _spawn(
    args: list[str],
    state: ShellState,
    err: TextIO | None,
    failure_text: str,
    signalled_status: int,
) -> int:
    stream = sys.stderr if err is None else err
    try:
        process = subprocess.Popen(
            args, executable=_executable(args[0]), env=_env_mapping(state.env)
        )
    except OSError as error:
        stream.write(f"{_display_name(args[0])}: {failure_text}\n")
        state.pid = None
        state.exit_status = exit_status_for_error(error)
        return state.exit_status
    state.pid = process.pid
    code = process.wait()
    state.exit_status = code if code >= 0 else signalled_status
    return state.exit_status


def run_command(
    argv: Sequence[str], state: ShellState, err: TextIO | None = None
) -> int:
    """Run argv[0] as a command and return its exit status."""
    if not argv:
        raise ValueError("no command given")
    args = build_arguments(argv, state.additional_args)
    args[0] = command_path(args[0], state.env)
    return _spawn(args, state, err, "Command not found.", 1)


def run_file(argv: Sequence[str], state: ShellState, err: TextIO | None = None) -> int:
    """Run argv[0] as a program file and return its exit status."""
    if not argv:
        raise ValueError("no file given")
    args = build_arguments(argv, state.additional_args)
    return _spawn(args, state, err, "File not found.", 0)