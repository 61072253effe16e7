from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Classification(str, Enum):
    """How a single decode step judged the unit it consumed."""

    OK = "ok"
    INVALID_BYTE_SEQUENCE = "invalid-byte-sequence"
    REDUNDANT_ENCODING = "redundant-encoding"
    INCOMPLETE_SURROGATE_PAIR = "incomplete-surrogate-pair"

    @property
    def has_value(self) -> bool:
        return self in (Classification.OK, Classification.REDUNDANT_ENCODING)


class StreamSignal(str, Enum):
    """Out-of-band condition reported next to (or instead of) a token."""

    END = "end"
    UNEXPECTED_END = "unexpected-end"


@dataclass(frozen=True, slots=True)
class Token:
    scalar: Optional[int]
    classification: Classification
    raw: bytes

    def __post_init__(self) -> None:
        if not self.raw:
            raise ValueError("Token must carry at least one byte")
        if self.classification.has_value:
            if self.scalar is None or self.scalar < 0:
                raise ValueError(
                    f"{self.classification.name} token requires a scalar, got {self.scalar!r}"
                )
        elif self.scalar is not None:
            raise ValueError(
                f"{self.classification.name} token must not carry a scalar "
                f"(got {self.scalar:#x})"
            )
        object.__setattr__(self, "raw", bytes(self.raw))

    @classmethod
    def ok(cls, scalar: int, raw: bytes) -> Token:
        return cls(scalar, Classification.OK, raw)

    @classmethod
    def redundant(cls, scalar: int, raw: bytes) -> Token:
        return cls(scalar, Classification.REDUNDANT_ENCODING, raw)

    @classmethod
    def invalid(cls, raw: bytes) -> Token:
        return cls(None, Classification.INVALID_BYTE_SEQUENCE, raw)

    @classmethod
    def incomplete_pair(cls, raw: bytes) -> Token:
        return cls(None, Classification.INCOMPLETE_SURROGATE_PAIR, raw)

    @property
    def has_value(self) -> bool:
        return self.classification.has_value

    def hex(self) -> str:
        return " ".join(f"{b:02x}" for b in self.raw)

    def code_point(self) -> Optional[str]:
        """Formal ``U+XXXX`` notation, or ``None`` when no scalar was decoded."""
        if self.scalar is None:
            return None
        return f"U+{self.scalar:04X}"

    def __repr__(self) -> str:
        scalar = "-" if self.scalar is None else f"{self.scalar:#x}"
        return f"Token({scalar}, {self.classification.name}, [{self.hex()}])"


__all__ = ["Classification", "StreamSignal", "Token"]
