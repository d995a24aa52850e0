"""Shell environment variables kept in definition order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Union

from minishellkit.textutils import is_alpha

_SYSTEM_PATHS = ("/bin", "/usr/bin", "/usr/local/bin")


@dataclass
class EnvVar:
    """One variable; a value of None means declared but never assigned."""

    name: str
    value: str | None = None


def parse_assignment(text: str) -> tuple[str, str | None]:
    """Split "NAME=value" into its name and value.

    Without an '=' the value is None; "NAME=" gives an empty value.
    """
    name, separator, value = text.partition("=")
    return name, (value if separator else None)


_VarSource = Union[EnvVar, tuple[str, Union[str, None]]]


class Environment:
    """An ordered collection of environment variables."""

    def __init__(self, variables: Iterable[_VarSource] = ()) -> None:
        self._vars: list[EnvVar] = []
        for item in variables:
            var = item if isinstance(item, EnvVar) else EnvVar(*item)
            self._vars.append(EnvVar(var.name, var.value))

    @classmethod
    def from_strings(cls, envp: Iterable[str]) -> "Environment":
        """Build an environment from "NAME=value" strings.

        An entry without '=' is taken as a variable with an empty value.
        """
        return cls(
            EnvVar(name, value)
            for name, _, value in (entry.partition("=") for entry in envp)
        )

    def _find(self, name: str) -> EnvVar | None:
        return next((var for var in self._vars if var.name == name), None)

    def get(self, name: str) -> str | None:
        """Return the value of name, or None when it is unset or unassigned."""
        var = self._find(name)
        return None if var is None else var.value

    def set(self, name: str, value: str | None = None) -> None:
        """Add or update a variable, as export does.

        A known variable keeps its value when value is None. A name must
        start with an ASCII letter, otherwise ValueError is raised.
        """
        if not name or not is_alpha(name[0]):
            raise ValueError(f"not a valid identifier: {name!r}")
        existing = self._find(name)
        if existing is None:
            self._vars.append(EnvVar(name, value))
        elif value is not None:
            existing.value = value

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._find(name) is not None

    def __iter__(self) -> Iterator[EnvVar]:
        return iter(self._vars)

    def __len__(self) -> int:
        return len(self._vars)

    def copy(self) -> "Environment":
        """Return an independent copy."""
        return Environment(self._vars)

    def format_env(self) -> str:
        """Lines as printed by env: assigned variables in definition order."""
        return "".join(
            f"{var.name}={var.value}\n" for var in self._vars if var.value is not None
        )

    def format_export(self) -> str:
        """Lines as printed by export: sorted by name, '_' names left out."""
        lines = []
        for var in sorted(self._vars, key=lambda v: v.name.encode("utf-8")):
            if var.name.startswith("_"):
                continue
            if var.value is None:
                lines.append(f"declare -x {var.name}\n")
            else:
                lines.append(f'declare -x {var.name}="{var.value}"\n')
        return "".join(lines)

    def has_system_path(self) -> bool:
        """True when PATH contains one of the standard binary directories."""
        return any(
            var.name == "PATH"
            and var.value
            and any(path in var.value for path in _SYSTEM_PATHS)
            for var in self._vars
        )

    def to_envp(self) -> list[str]:
        """Return "NAME=value" strings for starting a child process."""
        return [f"{var.name}={var.value or ''}" for var in self._vars]