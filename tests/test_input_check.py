import pytest

from minishellkit.input_check import (
    UNCLOSED_QUOTES,
    UNFINISHED_INPUT_REDIRECT,
    UNFINISHED_OUTPUT_REDIRECT,
    UNFINISHED_PIPE,
    InputError,
    check_input,
    has_double_pipe,
    has_incomplete_input_redirect,
    has_incomplete_output_redirect,
    has_leading_pipe,
    has_mismatched_quotes,
    has_unclosed_quotes,
    is_valid_input,
)


@pytest.mark.parametrize("text", ["echo 'hi'", 'echo "hi"', "ls", ""])
def test_closed_quotes(text):
    assert not has_unclosed_quotes(text)


@pytest.mark.parametrize("text", ["echo 'hi", 'echo "it\'s"'])
def test_unclosed_quotes(text):
    assert has_unclosed_quotes(text)


def test_mismatched_quotes():
    assert has_mismatched_quotes("'a\"")
    assert not has_mismatched_quotes("'a' \"b\"")
    assert not has_mismatched_quotes("abc")


@pytest.mark.parametrize("text", ["echo hi > out", "echo >> out", "ls"])
def test_complete_output_redirect(text):
    assert not has_incomplete_output_redirect(text)


@pytest.mark.parametrize("text", ["echo hi >", "echo >>> out", "echo > | cat", "echo >   "])
def test_incomplete_output_redirect(text):
    assert has_incomplete_output_redirect(text)


@pytest.mark.parametrize("text", ["ls | wc", "ls || wc", "ls |"])
def test_no_double_pipe(text):
    assert not has_double_pipe(text)


@pytest.mark.parametrize("text", ["ls ||| wc", "ls | | | wc", "ls ||"])
def test_double_pipe(text):
    assert has_double_pipe(text)


def test_leading_pipe():
    assert has_leading_pipe("| ls")
    assert has_leading_pipe("   | ls")
    assert not has_leading_pipe("ls | wc")


@pytest.mark.parametrize("text", ["cat < in", "cat << EOF", "cat <<< word"])
def test_complete_input_redirect(text):
    assert not has_incomplete_input_redirect(text)


@pytest.mark.parametrize("text", ["cat <", "cat < | wc", "cat <<<< word"])
def test_incomplete_input_redirect(text):
    assert has_incomplete_input_redirect(text)


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("echo 'x", UNCLOSED_QUOTES),
        ("| 'a", UNCLOSED_QUOTES),
        ("| ls >", UNFINISHED_OUTPUT_REDIRECT),
        ("| ls", UNFINISHED_PIPE),
        ("ls ||| wc", UNFINISHED_PIPE),
        ("cat <", UNFINISHED_INPUT_REDIRECT),
    ],
)
def test_check_input_reports_first_problem(text, message):
    with pytest.raises(InputError) as info:
        check_input(text)
    assert info.value.message == message
    assert info.value.text == text


def test_is_valid_input():
    assert is_valid_input("ls -l | wc -l > out")
    assert not is_valid_input("echo >")