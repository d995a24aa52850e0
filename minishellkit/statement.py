"""Parsed commands and the state the shell carries between them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from minishellkit.environment import Environment
from minishellkit.history import History


@dataclass
class Statement:
    """One simple command: its arguments and the operator that follows it."""

    argv: list[str] = field(default_factory=list)
    operator: str | None = None

    @property
    def argc(self) -> int:
        """Number of arguments, the command name included."""
        return len(self.argv)


def merge_additional_args(
    statement: Statement, additional_args: Sequence[str]
) -> Statement:
    """Return a new statement with additional_args folded into its arguments.

    A leading additional argument that starts with '-' is placed right after
    the command name; the rest follow the statement's own arguments.
    """
    if not statement.argv:
        raise ValueError("statement has no command name")
    extra = list(additional_args)
    flags = extra[:1] if extra and extra[0].startswith("-") else []
    rest = extra[len(flags):]
    argv = [statement.argv[0], *flags, *statement.argv[1:], *rest]
    return Statement(argv=argv, operator=statement.operator)


@dataclass
class ShellState:
    """Everything the shell keeps while running."""

    commands: list[Statement] = field(default_factory=list)
    env: Environment = field(default_factory=Environment)
    history: History = field(default_factory=History)
    exit_status: int = 0
    additional_args: list[str] = field(default_factory=list)
    input: str | None = None
    pid: int | None = None

    def apply_additional_args(self, index: int) -> Statement:
        """Merge the pending additional arguments into commands[index].

        The merged statement replaces the old one and is returned; the
        pending arguments are cleared.
        """
        merged = merge_additional_args(self.commands[index], self.additional_args)
        self.commands[index] = merged
        self.additional_args = []
        return merged

    def clear_commands(self) -> None:
        """Drop the parsed commands and the line they came from."""
        self.commands.clear()
        self.input = None