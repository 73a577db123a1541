"""Per-encoding BOM predicates.

Each predicate inspects only its own byte positions and returns ``False``
when the buffer is shorter than the signature it tests for.
"""

from __future__ import annotations

from bomdetect._utils import Buffer, _head
from bomdetect.signatures import (
    UTF8_BOM,
    UTF16BE_BOM,
    UTF16LE_BOM,
    UTF32BE_BOM,
    UTF32LE_BOM,
)


def is_utf8_bom(buffer: Buffer) -> bool:
    """Return whether *buffer* carries the UTF-8 BOM.

    Compares positions 0, 1 and 3 against the three signature bytes.
    Position 2 is not inspected, so ``EF BB 00 BF`` matches while
    ``EF BB BF`` on its own does not (there is no position 3).  See DESIGN.md
    before changing this.
    """
    data = _head(buffer)
    if len(data) < len(UTF8_BOM):
        return False
    # Slicing instead of indexing: a three-byte buffer has no position 3.
    return data[0:2] == UTF8_BOM[0:2] and data[3:4] == UTF8_BOM[2:3]


def is_utf16le_bom(buffer: Buffer) -> bool:
    """Return whether *buffer* starts with the UTF-16 little-endian BOM."""
    data = _head(buffer)
    if len(data) < len(UTF16LE_BOM):
        return False
    return data[0] == UTF16LE_BOM[0] and data[1] == UTF16LE_BOM[1]


def is_utf16be_bom(buffer: Buffer) -> bool:
    """Return whether *buffer* starts with the UTF-16 big-endian BOM."""
    data = _head(buffer)
    if len(data) < len(UTF16BE_BOM):
        return False
    return data[0] == UTF16BE_BOM[0] and data[1] == UTF16BE_BOM[1]


def is_utf16_bom(buffer: Buffer) -> bool:
    """Return whether *buffer* starts with either UTF-16 BOM."""
    return is_utf16le_bom(buffer) or is_utf16be_bom(buffer)


def is_utf32le_bom(buffer: Buffer) -> bool:
    """Return whether *buffer* starts with the UTF-32 little-endian BOM."""
    data = _head(buffer)
    if len(data) < len(UTF32LE_BOM):
        return False
    return data[:4] == UTF32LE_BOM


def is_utf32be_bom(buffer: Buffer) -> bool:
    """Return whether *buffer* starts with the UTF-32 big-endian BOM."""
    data = _head(buffer)
    if len(data) < len(UTF32BE_BOM):
        return False
    return data[:4] == UTF32BE_BOM


def is_utf32_bom(buffer: Buffer) -> bool:
    """Return whether *buffer* starts with either UTF-32 BOM."""
    return is_utf32le_bom(buffer) or is_utf32be_bom(buffer)
