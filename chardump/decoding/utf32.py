from __future__ import annotations

import logging
import struct

from ..coding import ByteCursor
from ..tokens import StreamSignal, Token
from .base import END_OF_STREAM, ByteOrder, DecodeResult

logger = logging.getLogger(__name__)

MAX_SCALAR = 0x10FFFF


class Utf32Decoder:
    """Fixed four-byte unit decoder."""

    unit_size = 4

    def __init__(self, cursor: ByteCursor, byte_order: ByteOrder = ByteOrder.BIG) -> None:
        self.cursor = cursor
        self.byte_order = byte_order
        self._fmt = byte_order.struct_prefix + "I"

    def decode(self) -> DecodeResult:
        raw = self.cursor.read_upto(self.unit_size)
        if not raw:
            return END_OF_STREAM
        if len(raw) < self.unit_size:
            logger.debug("partial UTF-32 unit %s at end of input", raw.hex(" "))
            return DecodeResult(Token.invalid(raw), StreamSignal.UNEXPECTED_END)

        value = struct.unpack(self._fmt, raw)[0]
        if value > MAX_SCALAR:
            logger.debug("UTF-32 value %08X out of range", value)
            return DecodeResult(Token.invalid(raw))
        return DecodeResult(Token.ok(value, raw))
