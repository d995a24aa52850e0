"""Command history kept in a fixed-size ring."""

from __future__ import annotations

from collections import deque


class History:
    """The most recent commands, numbered from the first ever added."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self.total = 0
        self._commands: deque[str] = deque(maxlen=capacity)

    def add(self, command: str) -> bool:
        """Record command unless it repeats the last one; True if recorded."""
        if self._commands and self._commands[-1] == command:
            return False
        self.total += 1
        self._commands.append(command)
        return True

    def entries(self) -> list[tuple[int, str]]:
        """Return the kept commands, oldest first, with their numbers."""
        start = self.total - self.capacity + 1 if self.total > self.capacity else 1
        return list(enumerate(self._commands, start))

    def format(self) -> str:
        """Lines as printed by the history builtin."""
        return "".join(f"{number} {command}\n" for number, command in self.entries())

    def __len__(self) -> int:
        return len(self._commands)