from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Optional, Protocol

from ..coding import ByteCursor
from ..tokens import StreamSignal, Token


class ByteOrder(str, Enum):
    BIG = "big"
    LITTLE = "little"

    @property
    def struct_prefix(self) -> str:
        return ">" if self is ByteOrder.BIG else "<"


class DecodeResult(NamedTuple):
    token: Optional[Token]
    signal: Optional[StreamSignal] = None


END_OF_STREAM = DecodeResult(None, StreamSignal.END)


class UnitDecoder(Protocol):
    """A decoder bound to one cursor that yields one token per call."""

    cursor: ByteCursor
    unit_size: int

    def decode(self) -> DecodeResult: ...
