"""Syntax checks run on a command line before it is parsed."""

from __future__ import annotations

OPERATORS = "|<>"
QUOTES = "'\""
_SPACES = " \t\n\v\f\r"

UNCLOSED_QUOTES = "syntax error: unclosed quotes"
UNFINISHED_OUTPUT_REDIRECT = "syntax error: unfinished output redirection"
UNFINISHED_PIPE = "syntax error: unfinished pipe"
UNFINISHED_INPUT_REDIRECT = "syntax error: unfinished input redirection"


class InputError(ValueError):
    """A command line that fails one of the syntax checks."""

    def __init__(self, message: str, text: str) -> None:
        super().__init__(message)
        self.message = message
        self.text = text


def _is_space(char: str) -> bool:
    return bool(char) and char in _SPACES


def _is_operator(char: str) -> bool:
    return bool(char) and char in OPERATORS


def has_unclosed_quotes(text: str) -> bool:
    """True when the total number of quote characters is odd."""
    return sum(char in QUOTES for char in text) % 2 == 1


def has_mismatched_quotes(text: str) -> bool:
    """True when a quote is closed by the other kind of quote."""
    open_quote: str | None = None
    for char in text:
        if char not in QUOTES:
            continue
        if open_quote is None:
            open_quote = char
        elif char != open_quote:
            return True
        else:
            open_quote = None
    return False


def _incomplete_redirect(text: str, symbol: str, stop_on_overflow: bool) -> bool:
    length = len(text)
    position = 0
    redirect = 0
    while position < length:
        while position < length and text[position] != symbol:
            position += 1
        while position < length and text[position] == symbol:
            redirect += 1
            position += 1
            if redirect > 2:
                if stop_on_overflow:
                    return True
                break
        while position < length and _is_space(text[position]):
            position += 1
        char = text[position] if position < length else ""
        if redirect and (not char or _is_operator(char)):
            return True
        if not char:
            break
        redirect = 0
        position += 1
    return False


def has_incomplete_output_redirect(text: str) -> bool:
    """True for more than two '>' in a row, or '>' without a target."""
    return _incomplete_redirect(text, ">", stop_on_overflow=True)


def has_incomplete_input_redirect(text: str) -> bool:
    """True for '<' followed by nothing or by another operator."""
    return _incomplete_redirect(text, "<", stop_on_overflow=False)


def has_double_pipe(text: str) -> bool:
    """True for more than two pipes in a run, or a line ending in '||'.

    Spaces between pipes do not break the run.
    """
    length = len(text)
    position = 0
    pipes = 0
    while position < length:
        while position < length and text[position] == "|":
            pipes += 1
            position += 1
            if pipes > 2:
                return True
        if position >= length:
            return pipes >= 2
        if not _is_space(text[position]):
            pipes = 0
        position += 1
    return False


def has_leading_pipe(text: str) -> bool:
    """True when the first non-space character is a pipe."""
    return text.lstrip(_SPACES).startswith("|")


def check_input(text: str) -> None:
    """Raise InputError with the first problem found in text."""
    if has_unclosed_quotes(text):
        raise InputError(UNCLOSED_QUOTES, text)
    if has_incomplete_output_redirect(text):
        raise InputError(UNFINISHED_OUTPUT_REDIRECT, text)
    if has_double_pipe(text) or has_leading_pipe(text):
        raise InputError(UNFINISHED_PIPE, text)
    if has_incomplete_input_redirect(text):
        raise InputError(UNFINISHED_INPUT_REDIRECT, text)


def is_valid_input(text: str) -> bool:
    """True when text passes every syntax check."""
    try:
        check_input(text)
    except InputError:
        return False
    return True