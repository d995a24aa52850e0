# minishellkit

The pieces of a small interactive shell, as a plain Python library with no
dependencies beyond the standard library.

It covers the work a shell does between reading a line and running a
program.

## Modules

- **`minishellkit.input_check`**: syntax checks on a raw command line.
  `check_input(text)` raises `InputError` (a `ValueError` with `message`
  and `text`) for the first problem found: an odd number of quote
  characters, more than two `>` in a row or a `>` with no target, a run of
  more than two pipes or a line ending in `||`, a line starting with `|`,
  and a `<` followed by nothing or by another operator.
  `is_valid_input(text)` answers `True` or `False`. The single checks
  (`has_unclosed_quotes`, `has_mismatched_quotes`,
  `has_incomplete_output_redirect`, `has_double_pipe`, `has_leading_pipe`,
  `has_incomplete_input_redirect`) can be called on their own;
  `has_mismatched_quotes` is not part of `check_input`.
- **`minishellkit.expansion`**: `expand_variables(text, env, exit_status)`
  replaces `$NAME`, `${NAME}`, `$?` and `${?}`; unknown names expand to
  nothing and a `$` not followed by a letter, digit, brace or `?` is kept.
  `process_argument(arg, env, exit_status)` removes quotes and expands
  variables everywhere except inside single quotes.
  `expand_statements(statements, env, exit_status)` processes the `argv` of
  each statement in place, leaving the literal argument `'$?'` untouched.
- **`minishellkit.environment`**: `Environment`, an ordered collection of
  `EnvVar(name, value)` entries, built with `Environment.from_strings` from
  `NAME=value` strings. `set` adds or updates a variable as `export` does
  (names must start with an ASCII letter, otherwise `ValueError`).
  `format_env()` and `format_export()` produce the text printed by `env`
  and by `export` without arguments; `to_envp()` gives `NAME=value`
  strings for a child process; `has_system_path()` tells whether `PATH`
  names `/bin`, `/usr/bin` or `/usr/local/bin`. `parse_assignment(text)`
  splits `NAME=value`, giving `None` as value when there is no `=`.
- **`minishellkit.history`**: `History(capacity=10)` keeps the most recent
  commands, skips a command equal to the one before it, and numbers
  entries across the whole session (`entries()`, `format()`).
- **`minishellkit.statement`**: `Statement` (an `argv` list, an optional
  `operator` and the `argc` property) and `ShellState`, which holds the
  commands of the current line, the environment, the history, the last
  exit status and pending additional arguments.
  `merge_additional_args` and `ShellState.apply_additional_args` fold
  pending arguments into a statement, putting a leading `-flag` right
  after the command name.
- **`minishellkit.builtins`**: `run_echo`, `run_cd`, `run_exit`,
  `run_export`, `run_env` and `run_history`, dispatched by
  `run_builtin(argv, state, out, err)`, which returns whether `argv` named
  a builtin. `run_exit` raises `ShellExit` (a `SystemExit`) carrying the
  status; `parse_exit_status` checks and converts its argument.
- **`minishellkit.executor`**: `run_command(argv, state, err)` runs a
  command from `/bin` when `PATH` names a standard directory, otherwise by
  its name in the working directory; `run_file(argv, state, err)` runs a
  program file. Both wait for the child and store its status in the state.
  A failed start is reported on `err` and mapped by `exit_status_for_error`
  to 126 (permission denied), 127 (not found) or 1.
- **Helpers**: string functions in `minishellkit.textutils` (`atoi`,
  `split`, `trim`, `compare`, character tests and more), a small
  `printf`-style formatter with `%i %d %c %s %x %X %p %u %%` in
  `minishellkit.output` (`format_message`, `print_message`, `put_*`), and
  `LineReader` in `minishellkit.linereader`, which reads a text or binary
  stream line by line through a fixed-size buffer.

## Example

```python
import io

from minishellkit.builtins import run_builtin
from minishellkit.environment import Environment
from minishellkit.expansion import process_argument
from minishellkit.history import History
from minishellkit.input_check import is_valid_input
from minishellkit.statement import ShellState

env = Environment.from_strings(["HOME=/home/user", "PATH=/usr/bin:/bin"])

line = 'echo "$HOME" \'$HOME\''
if is_valid_input(line):
    print(process_argument('"$HOME"', env, 0))   # /home/user
    print(process_argument("'$HOME'", env, 0))   # $HOME

history = History(10)
history.add("ls")
history.add("ls")        # a repeat of the previous entry is not stored
history.add("pwd")
print(history.format())  # "1 ls" and "2 pwd"

state = ShellState(env=env)
out = io.StringIO()
run_builtin(["echo", "-n", "hello"], state, out)
print(out.getvalue())    # hello
```

## What it does not do

The package has no command-line program and no interactive loop. It does
not split a line into words, operators and statements: `Statement` objects
are built by the caller. Pipes and redirections are only checked for
syntax, never carried out, and there are no `pwd` or `unset` builtins.

## Running the tests

Install the `test` extra, then run `pytest` from the project root.