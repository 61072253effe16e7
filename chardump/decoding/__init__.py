"""
Unit decoders for UTF-8, UTF-16 and UTF-32 byte streams.

Every decoder reads from a shared :class:`~chardump.coding.ByteCursor` and
returns one classified token per call, plus an optional stream signal.
"""

from .base import ByteOrder, DecodeResult, UnitDecoder  # noqa: F401
from .dispatcher import (  # noqa: F401
    CHARSETS,
    CharsetSpec,
    UnknownCharset,
    decoder_for_charset,
    iter_tokens,
    new_decoder,
    parse_charset,
)
from .utf8 import Utf8Decoder  # noqa: F401
from .utf16 import Utf16Decoder  # noqa: F401
from .utf32 import Utf32Decoder  # noqa: F401

__all__ = [
    "ByteOrder",
    "CHARSETS",
    "CharsetSpec",
    "DecodeResult",
    "UnitDecoder",
    "UnknownCharset",
    "Utf8Decoder",
    "Utf16Decoder",
    "Utf32Decoder",
    "decoder_for_charset",
    "iter_tokens",
    "new_decoder",
    "parse_charset",
]
