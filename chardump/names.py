"""Code-point names and control-code tables used when rendering tokens.

Formal names come from :mod:`unicodedata`.  Control characters have no
formal name there, so they get the ``<control>`` label followed by their
conventional alias, and a Control Pictures glyph when one exists.
"""

from __future__ import annotations

import unicodedata
from types import MappingProxyType
from typing import Mapping

CONTROL_LABEL = "<control>"

# C0 controls map onto U+2400..U+241F, DEL onto U+2421.
CONTROL_CODE_SYMBOLS: Mapping[int, str] = MappingProxyType(
    {**{cp: chr(0x2400 + cp) for cp in range(0x20)}, 0x7F: "␡"}
)

CONTROL_CODE_ALIASES: Mapping[int, str] = MappingProxyType(
    {
        0x00: "NULL (NUL)",
        0x01: "START OF HEADING (SOH)",
        0x02: "START OF TEXT (STX)",
        0x03: "END OF TEXT (ETX)",
        0x04: "END OF TRANSMISSION (EOT)",
        0x05: "ENQUIRY (ENQ)",
        0x06: "ACKNOWLEDGE (ACK)",
        0x07: "ALERT (BEL)",
        0x08: "BACKSPACE (BS)",
        0x09: "CHARACTER TABULATION (HT)",
        0x0A: "LINE FEED (LF)",
        0x0B: "LINE TABULATION (VT)",
        0x0C: "FORM FEED (FF)",
        0x0D: "CARRIAGE RETURN (CR)",
        0x0E: "SHIFT OUT (SO)",
        0x0F: "SHIFT IN (SI)",
        0x10: "DATA LINK ESCAPE (DLE)",
        0x11: "DEVICE CONTROL ONE (DC1)",
        0x12: "DEVICE CONTROL TWO (DC2)",
        0x13: "DEVICE CONTROL THREE (DC3)",
        0x14: "DEVICE CONTROL FOUR (DC4)",
        0x15: "NEGATIVE ACKNOWLEDGE (NAK)",
        0x16: "SYNCHRONOUS IDLE (SYN)",
        0x17: "END OF TRANSMISSION BLOCK (ETB)",
        0x18: "CANCEL (CAN)",
        0x19: "END OF MEDIUM (EM)",
        0x1A: "SUBSTITUTE (SUB)",
        0x1B: "ESCAPE (ESC)",
        0x1C: "INFORMATION SEPARATOR FOUR (FS)",
        0x1D: "INFORMATION SEPARATOR THREE (GS)",
        0x1E: "INFORMATION SEPARATOR TWO (RS)",
        0x1F: "INFORMATION SEPARATOR ONE (US)",
        0x7F: "DELETE (DEL)",
        0x80: "PADDING CHARACTER (PAD)",
        0x81: "HIGH OCTET PRESET (HOP)",
        0x82: "BREAK PERMITTED HERE (BPH)",
        0x83: "NO BREAK HERE (NBH)",
        0x84: "INDEX (IND)",
        0x85: "NEXT LINE (NEL)",
        0x86: "START OF SELECTED AREA (SSA)",
        0x87: "END OF SELECTED AREA (ESA)",
        0x88: "CHARACTER TABULATION SET (HTS)",
        0x89: "CHARACTER TABULATION WITH JUSTIFICATION (HTJ)",
        0x8A: "LINE TABULATION SET (VTS)",
        0x8B: "PARTIAL LINE FORWARD (PLD)",
        0x8C: "PARTIAL LINE BACKWARD (PLU)",
        0x8D: "REVERSE LINE FEED (RI)",
        0x8E: "SINGLE SHIFT TWO (SS2)",
        0x8F: "SINGLE SHIFT THREE (SS3)",
        0x90: "DEVICE CONTROL STRING (DCS)",
        0x91: "PRIVATE USE ONE (PU1)",
        0x92: "PRIVATE USE TWO (PU2)",
        0x93: "SET TRANSMIT STATE (STS)",
        0x94: "CANCEL CHARACTER (CCH)",
        0x95: "MESSAGE WAITING (MW)",
        0x96: "START OF GUARDED AREA (SPA)",
        0x97: "END OF GUARDED AREA (EPA)",
        0x98: "START OF STRING (SOS)",
        0x99: "SINGLE GRAPHIC CHARACTER INTRODUCER (SGC)",
        0x9A: "SINGLE CHARACTER INTRODUCER (SCI)",
        0x9B: "CONTROL SEQUENCE INTRODUCER (CSI)",
        0x9C: "STRING TERMINATOR (ST)",
        0x9D: "OPERATING SYSTEM COMMAND (OSC)",
        0x9E: "PRIVACY MESSAGE (PM)",
        0x9F: "APPLICATION PROGRAM COMMAND (APC)",
    }
)

MAX_SCALAR = 0x10FFFF


def is_printable_scalar(scalar: int) -> bool:
    return 0 <= scalar <= MAX_SCALAR and not 0xD800 <= scalar <= 0xDFFF


def category(scalar: int) -> str:
    if not is_printable_scalar(scalar):
        return "Cs" if 0xD800 <= scalar <= 0xDFFF else "Cn"
    return unicodedata.category(chr(scalar))


def is_control(scalar: int) -> bool:
    return category(scalar) == "Cc"


def glyph(scalar: int) -> str:
    """Printable stand-in for a scalar in the first display column."""
    if is_control(scalar):
        return CONTROL_CODE_SYMBOLS.get(scalar, "(control)")
    if 0xD800 <= scalar <= 0xDFFF:
        return "(surrogate)"
    if not is_printable_scalar(scalar):
        return "(invalid)"
    return chr(scalar)


def name(scalar: int) -> str:
    if is_control(scalar):
        alias = CONTROL_CODE_ALIASES.get(scalar)
        return f"{CONTROL_LABEL} {alias}" if alias else CONTROL_LABEL
    if not is_printable_scalar(scalar):
        return ""
    return unicodedata.name(chr(scalar), "")


__all__ = [
    "CONTROL_CODE_ALIASES",
    "CONTROL_CODE_SYMBOLS",
    "CONTROL_LABEL",
    "category",
    "glyph",
    "is_control",
    "name",
]
