"""Reading a stream one line at a time."""

from typing import Iterator, List, Optional, Union

BUFFER_SIZE = 1024

Chunk = Union[str, bytes]


def _newline(data: Chunk) -> Chunk:
    return "\n" if isinstance(data, str) else b"\n"


class LineReader:
    """Split a text or binary stream into lines, newline kept.

    The stream only needs a ``read(size)`` method; it is read in chunks of
    ``buffer_size`` until a newline turns up or the stream ends.
    """

    def __init__(self, stream, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[Chunk] = None
        self._eof = False

    def _fill(self) -> None:
        while not self._eof:
            pending = self._pending
            if pending is not None and _newline(pending) in pending:
                return
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._eof = True
                return
            self._pending = chunk if pending is None else pending + chunk

    def next_line(self) -> Optional[Chunk]:
        """The next line with its newline, the unterminated tail, or ``None`` at the end."""
        self._fill()
        pending = self._pending
        if not pending:
            return None
        index = pending.find(_newline(pending))
        if index < 0:
            self._pending = pending[:0]
            return pending
        self._pending = pending[index + 1:]
        return pending[:index + 1]

    def __iter__(self) -> Iterator[Chunk]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line


def read_lines(stream) -> List[Chunk]:
    """Every line of ``stream``, each with its newline."""
    return list(LineReader(stream))