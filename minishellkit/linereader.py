"""Reading a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator


class LineReader(Generic[AnyStr]):
    """Return one line at a time from a text or binary stream.

    Each line keeps its trailing newline; a final line without one is
    returned as it is. Reads are made buffer_size units at a time.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = 10) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def _newline(self) -> AnyStr:
        return b"\n" if isinstance(self._pending, bytes) else "\n"  # type: ignore[return-value]

    def _has_newline(self) -> bool:
        return self._pending is not None and self._newline() in self._pending

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        while not self._has_newline():
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
        if not self._pending:
            return None
        index = self._pending.find(self._newline())
        if index < 0:
            line = self._pending
            self._pending = self._pending[:0]
        else:
            line = self._pending[:index + 1]
            self._pending = self._pending[index + 1:]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line