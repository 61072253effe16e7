"""One display line per token, tab separated.

``<glyph>\\t<U+XXXX>\\t<hex bytes>\\t<name>``; tokens without a value keep
only the byte column.
"""

from __future__ import annotations

from typing import Iterable, Iterator, TextIO

from . import names
from .tokens import Classification, Token

REDUNDANT_MARKER = "[Redundant encoding]"


def render_token(token: Token) -> str:
    if token.scalar is None or not token.has_value:
        return f"\t\t{token.hex()}\t"

    label = names.name(token.scalar)
    if token.classification is Classification.REDUNDANT_ENCODING:
        label = REDUNDANT_MARKER + label
    return "\t".join(
        (names.glyph(token.scalar), token.code_point() or "", token.hex(), label)
    )


def render_tokens(tokens: Iterable[Token]) -> Iterator[str]:
    for token in tokens:
        yield render_token(token)


def write_tokens(tokens: Iterable[Token], out: TextIO) -> int:
    count = 0
    for line in render_tokens(tokens):
        out.write(line + "\n")
        count += 1
    return count


__all__ = ["REDUNDANT_MARKER", "render_token", "render_tokens", "write_tokens"]
