"""Read a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import AnyStr, Generic, Iterator, Optional

BUFFER_SIZE = 128


def _newline_index(data: AnyStr) -> int:
    """Return the position of the first newline in ``data``, or -1."""
    if isinstance(data, (bytes, bytearray)):
        return data.find(b"\n")
    return data.find("\n")


class LineReader(Generic[AnyStr]):
    """Yield lines, newline included, from a text or binary stream.

    Data is read ``buffer_size`` units at a time. A read shorter than the
    buffer ends the current line even without a newline; ``read_line``
    returns None once nothing more is available.
    """

    def __init__(self, stream, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _fill(self) -> Optional[AnyStr]:
        pending = self._pending
        while pending is None or _newline_index(pending) < 0:
            chunk = self._stream.read(self._buffer_size)
            if chunk is None:
                chunk = pending[:0] if pending is not None else ""
            pending = chunk if pending is None else pending + chunk
            if len(chunk) < self._buffer_size:
                break
        return pending

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None when the stream has no more data."""
        pending = self._fill()
        if not pending:
            self._pending = None
            return None
        end = _newline_index(pending)
        if end < 0:
            line, rest = pending, pending[:0]
        else:
            line, rest = pending[: end + 1], pending[end + 1 :]
        self._pending = rest or None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        return iter(self.read_line, None)