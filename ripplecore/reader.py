"""A byte reader that stops after a fixed number of bytes."""

from __future__ import annotations

from typing import BinaryIO


class LimitedReader:
    """Reads at most ``limit`` bytes from an underlying binary stream."""

    def __init__(self, stream: BinaryIO, limit: int):
        self._stream = stream
        self.remaining = limit

    def __len__(self) -> int:
        return max(self.remaining, 0)

    def read(self, size: int = -1) -> bytes:
        """Read up to size bytes (all that is allowed if size is negative)."""
        if self.remaining <= 0:
            return b""
        if size < 0 or size > self.remaining:
            size = self.remaining
        data = self._stream.read(size)
        self.remaining -= len(data)
        return data

    def read_byte(self) -> int:
        """Read a single byte; raises EOFError when the limit or data runs out."""
        if self.remaining <= 0:
            raise EOFError("read limit reached")
        self.remaining -= 1
        data = self._stream.read(1)
        if not data:
            raise EOFError("end of underlying stream")
        return data[0]