"""BOM signature constants and the lookup tables built from them.

The values come from http://www.unicode.org/faq/utf_bom.html#BOM
"""

from __future__ import annotations

from types import MappingProxyType

from bomdetect.enums import BOMKind

UTF8_BOM: bytes = b"\xef\xbb\xbf"
UTF16LE_BOM: bytes = b"\xff\xfe"
UTF16BE_BOM: bytes = b"\xfe\xff"
UTF32LE_BOM: bytes = b"\xff\xfe\x00\x00"
UTF32BE_BOM: bytes = b"\x00\x00\xfe\xff"

#: Longest signature, in bytes.
MAX_SIGNATURE_LENGTH: int = 4

#: ``classify_naive`` refuses to guess below this many bytes.  One more than
#: strictly needed for a UTF-32 signature; existing callers rely on it.
NAIVE_MIN_LENGTH: int = 5

# Prefix-test order for classify_naive.  UTF-16-LE comes before UTF-32-LE,
# so FF FE 00 00 is reported as UTF-16-LE.  Do not reorder.
NAIVE_ORDER: tuple[tuple[bytes, BOMKind], ...] = (
    (UTF16LE_BOM, BOMKind.UTF16LE),
    (UTF16BE_BOM, BOMKind.UTF16BE),
    (UTF8_BOM, BOMKind.UTF8),
    (UTF32LE_BOM, BOMKind.UTF32LE),
    (UTF32BE_BOM, BOMKind.UTF32BE),
)

SIGNATURES: MappingProxyType[BOMKind, bytes] = MappingProxyType(
    {
        BOMKind.UTF8: UTF8_BOM,
        BOMKind.UTF16LE: UTF16LE_BOM,
        BOMKind.UTF16BE: UTF16BE_BOM,
        BOMKind.UTF32LE: UTF32LE_BOM,
        BOMKind.UTF32BE: UTF32BE_BOM,
    }
)

#: Bytes to discard for each kind; covers every member, ``UNKNOWN`` is -1.
SKIP_LENGTHS: MappingProxyType[BOMKind, int] = MappingProxyType(
    {BOMKind.UNKNOWN: -1, **{kind: len(sig) for kind, sig in SIGNATURES.items()}}
)
