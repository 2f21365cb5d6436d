"""Thread-safe readable byte stream fed by the encoder."""

from __future__ import annotations

import queue
from typing import Iterator

_CLOSED = object()


class _Failure:
    def __init__(self, error: BaseException) -> None:
        self.error = error


class ByteStream:
    """Producer writes chunks and closes (or fails); a single consumer iterates them."""

    def __init__(self) -> None:
        self._queue: queue.Queue = queue.Queue()
        self._closed = False
        self.bytes_written = 0

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, chunk: bytes) -> None:
        if self._closed:
            raise RuntimeError("write to closed stream")
        if chunk:
            self.bytes_written += len(chunk)
            self._queue.put(bytes(chunk))

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._queue.put(_CLOSED)

    def fail(self, error: BaseException) -> None:
        """Close the stream so the consumer raises ``error`` instead of finishing."""
        if not self._closed:
            self._closed = True
            self._queue.put(_Failure(error))

    def __iter__(self) -> Iterator[bytes]:
        while True:
            item = self._queue.get()
            if item is _CLOSED:
                return
            if isinstance(item, _Failure):
                raise item.error
            yield item

    def read(self) -> bytes:
        return b"".join(self)
