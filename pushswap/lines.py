"""Reading a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, Iterator, Optional, Union

Chunk = Union[str, bytes]


class LineReader:
    """Read lines from a text or binary stream, ``buffer_size`` units at a time.

    Each line keeps its trailing newline; the final line may lack one.
    Data read past a newline is kept for the next call.
    """

    def __init__(self, stream: IO, buffer_size: int = 1) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.stream = stream
        self.buffer_size = buffer_size
        self._pending: Optional[Chunk] = None

    @staticmethod
    def _newline(chunk: Chunk) -> Chunk:
        return b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"

    def read_line(self) -> Optional[Chunk]:
        """Return the next line, or None once the stream is exhausted."""
        while True:
            if self._pending:
                cut = self._pending.find(self._newline(self._pending))
                if cut >= 0:
                    line = self._pending[: cut + 1]
                    self._pending = self._pending[cut + 1:]
                    return line
            chunk = self.stream.read(self.buffer_size)
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
        line = self._pending
        self._pending = None
        return line if line else None

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self.read_line, None)