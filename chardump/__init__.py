"""Classify every code unit of a UTF-8, UTF-16 or UTF-32 byte stream."""

from .coding import BufferTooShort, ByteCursor  # noqa: F401
from .decoding import (  # noqa: F401
    ByteOrder,
    DecodeResult,
    UnknownCharset,
    Utf8Decoder,
    Utf16Decoder,
    Utf32Decoder,
    decoder_for_charset,
    iter_tokens,
    new_decoder,
    parse_charset,
)
from .tokens import Classification, StreamSignal, Token  # noqa: F401

__all__ = [
    "BufferTooShort",
    "ByteCursor",
    "ByteOrder",
    "Classification",
    "DecodeResult",
    "StreamSignal",
    "Token",
    "UnknownCharset",
    "Utf8Decoder",
    "Utf16Decoder",
    "Utf32Decoder",
    "decoder_for_charset",
    "iter_tokens",
    "new_decoder",
    "parse_charset",
]
