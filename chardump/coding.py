# based on binja_helpers/coding.py from the SC62015 tooling
"""Buffered byte cursor shared by the unit decoders."""

from __future__ import annotations

import io
from typing import BinaryIO

DEFAULT_CHUNK_SIZE = 4096


class BufferTooShort(Exception):
    """Raised when attempting to read past the end of the stream."""


class ByteCursor:
    """Forward-only reader over a binary stream with non-destructive peek.

    Binary file objects have no portable peek, so upcoming bytes are kept in
    a local look-ahead buffer.  ``pos`` counts consumed bytes and never moves
    backwards.
    """

    def __init__(self, stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self.stream = stream
        self.chunk_size = chunk_size
        self.buf, self.pos = bytearray(), 0
        self._head = 0
        self._eof = False

    @classmethod
    def from_bytes(cls, data: bytes, chunk_size: int = DEFAULT_CHUNK_SIZE) -> ByteCursor:
        return cls(io.BytesIO(bytes(data)), chunk_size=chunk_size)

    def get_pos(self) -> int:
        return self.pos

    def buffered(self) -> int:
        return len(self.buf) - self._head

    def _fill(self, count: int) -> None:
        if self.buffered() >= count or self._eof:
            return
        if self._head:
            del self.buf[: self._head]
            self._head = 0
        # A short read is not the end of input; only an empty read is.
        while len(self.buf) < count:
            chunk = self.stream.read(max(self.chunk_size, count - len(self.buf)))
            if not chunk:
                self._eof = True
                break
            self.buf += chunk

    def peek(self, count: int) -> bytes:
        self._fill(count)
        return bytes(self.buf[self._head : self._head + count])

    def read_upto(self, count: int) -> bytes:
        data = self.peek(count)
        self._head += len(data)
        self.pos += len(data)
        return data

    def read_byte(self) -> int:
        self._fill(1)
        if not self.buffered():
            raise BufferTooShort
        value = self.buf[self._head]
        self._head += 1
        self.pos += 1
        return value

    def at_end(self) -> bool:
        self._fill(1)
        return not self.buffered()
