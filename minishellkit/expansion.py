"""Variable expansion and quote removal for command arguments."""

from __future__ import annotations

import re
from typing import Iterable, Protocol

from minishellkit.environment import Environment
from minishellkit.textutils import is_alnum, itoa

_NAME = re.compile(r"[A-Za-z0-9_]*")
_QUOTE = re.compile(r"['\"]")
_UNEXPANDED = "'$?'"


class _HasArgv(Protocol):
    argv: list[str]


def _expand_dollar(
    text: str, pos: int, env: Environment, exit_status: int, pieces: list[str]
) -> int:
    """Expand the reference whose '$' sits just before pos; return the new position."""
    char = text[pos] if pos < len(text) else ""
    if not char or char == '"' or not (is_alnum(char) or char in "{}?"):
        pieces.append("$")
        return pos
    braces = char == "{"
    if braces:
        pos += 1
    if text.startswith("?", pos):
        pieces.append(itoa(exit_status))
        pos += 1
    else:
        match = _NAME.match(text, pos)
        pos = match.end()
        value = env.get(match.group())
        if value is not None:
            pieces.append(value)
    if braces and text.startswith("}", pos):
        pos += 1
    return pos


def expand_variables(text: str, env: Environment, exit_status: int = 0) -> str:
    """Replace $NAME, ${NAME}, $? and ${?} in text.

    Unknown variables expand to nothing. A '$' not followed by a letter,
    digit, brace or '?' is kept as it is.
    """
    pieces: list[str] = []
    pos = 0
    while pos < len(text):
        dollar = text.find("$", pos)
        if dollar < 0:
            pieces.append(text[pos:])
            break
        pieces.append(text[pos:dollar])
        pos = _expand_dollar(text, dollar + 1, env, exit_status, pieces)
    return "".join(pieces)


def process_argument(arg: str, env: Environment, exit_status: int = 0) -> str:
    """Remove quotes from arg and expand variables outside single quotes.

    A quote without its closing partner runs to the end of the argument.
    """
    pieces: list[str] = []
    pos = 0
    while pos < len(arg):
        char = arg[pos]
        if char in "'\"":
            end = arg.find(char, pos + 1)
            if end < 0:
                end = len(arg)
            segment = arg[pos + 1:end]
            if char == '"':
                segment = expand_variables(segment, env, exit_status)
            pieces.append(segment)
            pos = end + 1
        else:
            match = _QUOTE.search(arg, pos)
            end = match.start() if match else len(arg)
            pieces.append(expand_variables(arg[pos:end], env, exit_status))
            pos = end
    return "".join(pieces)


def expand_statements(
    statements: Iterable[_HasArgv], env: Environment, exit_status: int = 0
) -> None:
    """Process every argument of every statement in place.

    The literal argument "'$?'" is left untouched.
    """
    for statement in statements:
        statement.argv = [
            arg if arg == _UNEXPANDED else process_argument(arg, env, exit_status)
            for arg in statement.argv
        ]