from __future__ import annotations

import logging

from ..coding import BufferTooShort, ByteCursor
from ..tokens import StreamSignal, Token
from .base import END_OF_STREAM, DecodeResult

logger = logging.getLogger(__name__)

# leader upper bound -> (continuation count, payload mask, smallest canonical value)
_LEADERS = (
    (0xDF, 1, 0x1F, 0x80),
    (0xEF, 2, 0x0F, 0x800),
    (0xF7, 3, 0x07, 0x10000),
)


def _is_continuation(b: int) -> bool:
    return b & 0xC0 == 0x80


class Utf8Decoder:
    """Variable-length decoder with strict continuation-byte checks.

    Continuation bytes are peeked before they are consumed, so a byte that
    breaks a sequence is left in the stream for the next call.  Overlong
    forms are reported as ``REDUNDANT_ENCODING`` with the decoded value.
    Surrogate-range values and values above U+10FFFF carried by a
    well-formed four byte sequence are not rejected.
    """

    unit_size = 1

    def __init__(self, cursor: ByteCursor) -> None:
        self.cursor = cursor

    def decode(self) -> DecodeResult:
        try:
            b1 = self.cursor.read_byte()
        except BufferTooShort:
            return END_OF_STREAM

        if b1 <= 0x7F:
            return DecodeResult(Token.ok(b1, bytes([b1])))
        if b1 <= 0xBF or b1 > 0xF7:
            return self._invalid(bytearray([b1]))

        for upper, count, mask, minimum in _LEADERS:
            if b1 <= upper:
                break

        acc = bytearray([b1])
        value = b1 & mask
        for _ in range(count):
            ahead = self.cursor.peek(1)
            if not ahead:
                return self._invalid(acc, StreamSignal.UNEXPECTED_END)
            if not _is_continuation(ahead[0]):
                return self._invalid(acc)
            b = self.cursor.read_byte()
            acc.append(b)
            value = (value << 6) | (b & 0x3F)

        if value < minimum:
            return DecodeResult(Token.redundant(value, bytes(acc)))
        return DecodeResult(Token.ok(value, bytes(acc)))

    def _invalid(
        self, acc: bytearray, signal: StreamSignal | None = None
    ) -> DecodeResult:
        logger.debug(
            "invalid UTF-8 sequence %s ending at offset %d%s",
            acc.hex(" "),
            self.cursor.get_pos(),
            " (truncated)" if signal else "",
        )
        return DecodeResult(Token.invalid(bytes(acc)), signal)
