"""Unicode Byte Order Mark detection for byte buffers and streams."""

from __future__ import annotations

from bomdetect.classifier import (
    bytes_to_skip,
    classify_naive,
    classify_strict,
    strip_bom,
)
from bomdetect.enums import BOMKind, ReaderState
from bomdetect.predicates import (
    is_utf8_bom,
    is_utf16_bom,
    is_utf16be_bom,
    is_utf16le_bom,
    is_utf32_bom,
    is_utf32be_bom,
    is_utf32le_bom,
)
from bomdetect.reader import BOMReader
from bomdetect.signatures import (
    UTF8_BOM,
    UTF16BE_BOM,
    UTF16LE_BOM,
    UTF32BE_BOM,
    UTF32LE_BOM,
)

__version__ = "1.0.0"
__all__ = [
    "UTF8_BOM",
    "UTF16BE_BOM",
    "UTF16LE_BOM",
    "UTF32BE_BOM",
    "UTF32LE_BOM",
    "BOMKind",
    "BOMReader",
    "ReaderState",
    "bytes_to_skip",
    "classify_naive",
    "classify_strict",
    "is_utf8_bom",
    "is_utf16_bom",
    "is_utf16be_bom",
    "is_utf16le_bom",
    "is_utf32_bom",
    "is_utf32be_bom",
    "is_utf32le_bom",
    "strip_bom",
]
