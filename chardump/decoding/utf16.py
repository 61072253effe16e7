from __future__ import annotations

import logging
import struct

from ..coding import ByteCursor
from ..tokens import StreamSignal, Token
from .base import END_OF_STREAM, ByteOrder, DecodeResult

logger = logging.getLogger(__name__)


def is_high_surrogate(unit: int) -> bool:
    return 0xD800 <= unit <= 0xDBFF


def is_low_surrogate(unit: int) -> bool:
    return 0xDC00 <= unit <= 0xDFFF


def combine_surrogates(high: int, low: int) -> int:
    return (((high & 0x3FF) << 10) | (low & 0x3FF)) + 0x10000


class Utf16Decoder:
    """Two-byte unit decoder pairing surrogates through look-ahead."""

    unit_size = 2

    def __init__(self, cursor: ByteCursor, byte_order: ByteOrder = ByteOrder.BIG) -> None:
        self.cursor = cursor
        self.byte_order = byte_order
        self._fmt = byte_order.struct_prefix + "H"

    def _unpack(self, raw: bytes) -> int:
        return struct.unpack(self._fmt, raw)[0]

    def decode(self) -> DecodeResult:
        raw = self.cursor.read_upto(self.unit_size)
        if not raw:
            return END_OF_STREAM
        if len(raw) < self.unit_size:
            logger.debug("trailing odd byte %s at end of UTF-16 input", raw.hex())
            return DecodeResult(Token.invalid(raw), StreamSignal.UNEXPECTED_END)

        r1 = self._unpack(raw)
        if is_high_surrogate(r1):
            ahead = self.cursor.peek(self.unit_size)
            if len(ahead) < self.unit_size:
                logger.debug("high surrogate %04X at end of input", r1)
                return DecodeResult(
                    Token.incomplete_pair(raw), StreamSignal.UNEXPECTED_END
                )
            r2 = self._unpack(ahead)
            if not is_low_surrogate(r2):
                logger.debug("high surrogate %04X followed by %04X", r1, r2)
                return DecodeResult(Token.incomplete_pair(raw))
            raw += self.cursor.read_upto(self.unit_size)
            return DecodeResult(Token.ok(combine_surrogates(r1, r2), raw))

        if is_low_surrogate(r1):
            logger.debug("unpaired low surrogate %04X", r1)
            return DecodeResult(Token.incomplete_pair(raw))

        return DecodeResult(Token.ok(r1, raw))
