from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Union

from ..coding import ByteCursor
from ..tokens import Token
from .base import ByteOrder, UnitDecoder
from .utf8 import Utf8Decoder
from .utf16 import Utf16Decoder
from .utf32 import Utf32Decoder

logger = logging.getLogger(__name__)

SUPPORTED_WIDTHS = (8, 16, 32)


class UnknownCharset(ValueError):
    """Raised for a charset label outside the supported table."""

    def __init__(self, label: str) -> None:
        super().__init__(
            f"Unknown charset {label!r} (expected one of: {', '.join(CHARSETS)})"
        )
        self.label = label


@dataclass(frozen=True, slots=True)
class CharsetSpec:
    name: str
    bits: int
    byte_order: Optional[ByteOrder]


CHARSETS: Mapping[str, CharsetSpec] = MappingProxyType(
    {
        "UTF-8": CharsetSpec("UTF-8", 8, None),
        "UTF-16": CharsetSpec("UTF-16", 16, ByteOrder.BIG),
        "UTF-16BE": CharsetSpec("UTF-16BE", 16, ByteOrder.BIG),
        "UTF-16LE": CharsetSpec("UTF-16LE", 16, ByteOrder.LITTLE),
        "UTF-32": CharsetSpec("UTF-32", 32, ByteOrder.BIG),
        "UTF-32BE": CharsetSpec("UTF-32BE", 32, ByteOrder.BIG),
        "UTF-32LE": CharsetSpec("UTF-32LE", 32, ByteOrder.LITTLE),
    }
)


def parse_charset(label: str) -> CharsetSpec:
    normalized = label.strip().upper()
    try:
        return CHARSETS[normalized]
    except KeyError:
        raise UnknownCharset(label) from None


def new_decoder(
    cursor: ByteCursor,
    bits: int,
    byte_order: Union[ByteOrder, str, None] = None,
) -> UnitDecoder:
    """Build the decoder for a unit width; ``byte_order`` is ignored for 8 bits."""
    if bits == 8:
        return Utf8Decoder(cursor)
    if bits not in SUPPORTED_WIDTHS:
        raise ValueError(f"Unsupported unit width: {bits} (expected 8, 16 or 32)")
    order = ByteOrder(byte_order) if byte_order is not None else ByteOrder.BIG
    if bits == 16:
        return Utf16Decoder(cursor, order)
    return Utf32Decoder(cursor, order)


def decoder_for_charset(cursor: ByteCursor, label: str) -> UnitDecoder:
    spec = parse_charset(label)
    logger.debug("using %s decoder (%d-bit, %s)", spec.name, spec.bits, spec.byte_order)
    return new_decoder(cursor, spec.bits, spec.byte_order)


def iter_tokens(decoder: UnitDecoder) -> Iterator[Token]:
    """Yield tokens until the decoder reports a stream signal.

    The partial token that accompanies an unexpected end is yielded before
    the iteration stops.
    """
    while True:
        token, signal = decoder.decode()
        if token is not None:
            yield token
        if signal is not None:
            logger.debug(
                "stopped with %s at offset %d", signal.name, decoder.cursor.get_pos()
            )
            return


__all__ = [
    "CHARSETS",
    "CharsetSpec",
    "SUPPORTED_WIDTHS",
    "UnknownCharset",
    "decoder_for_charset",
    "iter_tokens",
    "new_decoder",
    "parse_charset",
]
