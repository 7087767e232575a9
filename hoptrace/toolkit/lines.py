"""Read a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, Any, Optional, Union

Text = Union[str, bytes]

DEFAULT_BUFFER_SIZE = 42


class LineReader:
    """Return successive lines of a text or binary stream.

    Each line keeps its trailing newline; the last line may lack one.
    The stream is read ``buffer_size`` units at a time.
    """

    def __init__(self, stream: IO[Any], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer_size must be at least 1, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash: Optional[Text] = None

    def read_line(self) -> Optional[Text]:
        """Return the next line, or None when the stream has nothing left."""
        while True:
            if self._stash is not None:
                newline = b"\n" if isinstance(self._stash, (bytes, bytearray)) else "\n"
                index = self._stash.find(newline)
                if index >= 0:
                    line = self._stash[:index + 1]
                    self._stash = self._stash[index + 1:]
                    return line
            try:
                chunk = self._stream.read(self._buffer_size)
            except Exception:
                self._stash = None
                raise
            if not chunk:
                break
            self._stash = chunk if self._stash is None else self._stash + chunk
        line, self._stash = self._stash, None
        return line or None

    def __iter__(self) -> "LineReader":
        return self

    def __next__(self) -> Text:
        line = self.read_line()
        if line is None:
            raise StopIteration
        return line