"""Read a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

BUFFER_SIZE = 10


def _newline_index(data: AnyStr) -> int:
    """Return the index of the first newline in data, or -1 if there is none."""
    if isinstance(data, (bytes, bytearray)):
        return data.find(b"\n")
    return data.find("\n")


class LineReader(Generic[AnyStr]):
    """Yield lines, each with its trailing newline, from a text or binary stream.

    The stream is read in chunks of buffer_size; text read past a newline is
    kept for the next call. The final line may lack a newline.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._remainder: Optional[AnyStr] = None

    def _fill(self, parts: list) -> None:
        """Read chunks into parts until one holds a newline or the stream ends."""
        while True:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                return
            parts.append(chunk)
            if _newline_index(chunk) >= 0:
                return

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        parts: list = []
        if self._remainder is not None:
            parts.append(self._remainder)
        if not parts or _newline_index(parts[0]) < 0:
            try:
                self._fill(parts)
            except Exception:
                self._remainder = None
                raise
        if not parts:
            self._remainder = None
            return None
        data = parts[0][:0].join(parts)
        cut = _newline_index(data)
        if cut < 0:
            self._remainder = None
            return data
        rest = data[cut + 1 :]
        self._remainder = rest if rest else None
        return data[: cut + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line