"""BOM classification.

Two classifiers with deliberately different rules live here:

* :func:`classify_naive` needs at least five bytes and prefix-tests the
  signatures in the order UTF-16-LE, UTF-16-BE, UTF-8, UTF-32-LE, UTF-32-BE.
* :func:`classify_strict` runs the per-encoding predicates in the order
  UTF-8, UTF-16-LE, UTF-16-BE, UTF-32-LE, UTF-32-BE.

They disagree on some inputs (see :func:`~bomdetect.predicates.is_utf8_bom`)
and both behaviours are kept.
"""

from __future__ import annotations

from collections.abc import Callable

from bomdetect._utils import Buffer, _as_bytes, _head
from bomdetect.enums import BOMKind
from bomdetect.predicates import (
    is_utf8_bom,
    is_utf16be_bom,
    is_utf16le_bom,
    is_utf32be_bom,
    is_utf32le_bom,
)
from bomdetect.signatures import NAIVE_MIN_LENGTH, NAIVE_ORDER, SKIP_LENGTHS

# Predicate order for classify_strict.  Do not reorder.
_STRICT_ORDER: tuple[tuple[Callable[[Buffer], bool], BOMKind], ...] = (
    (is_utf8_bom, BOMKind.UTF8),
    (is_utf16le_bom, BOMKind.UTF16LE),
    (is_utf16be_bom, BOMKind.UTF16BE),
    (is_utf32le_bom, BOMKind.UTF32LE),
    (is_utf32be_bom, BOMKind.UTF32BE),
)


def classify_naive(buffer: Buffer) -> BOMKind:
    """Detect the BOM of *buffer* by plain prefix comparison.

    Buffers shorter than five bytes are always :attr:`BOMKind.UNKNOWN`.
    Because UTF-16-LE is tested first, ``FF FE 00 00 ..`` classifies as
    UTF-16-LE, never UTF-32-LE.

    :param buffer: Any bytes-like object; it is only read.
    :returns: The detected :class:`BOMKind`.
    """
    data = _head(buffer)
    if len(data) < NAIVE_MIN_LENGTH:
        return BOMKind.UNKNOWN
    for signature, kind in NAIVE_ORDER:
        if data.startswith(signature):
            return kind
    return BOMKind.UNKNOWN


def classify_strict(buffer: Buffer) -> BOMKind:
    """Detect the BOM of *buffer* with the per-encoding predicates.

    :param buffer: Any bytes-like object; it is only read.
    :returns: The kind of the first predicate that matches, or
        :attr:`BOMKind.UNKNOWN`.
    """
    data = _head(buffer)
    for predicate, kind in _STRICT_ORDER:
        if predicate(data):
            return kind
    return BOMKind.UNKNOWN


def bytes_to_skip(buffer: Buffer) -> int:
    """Return how many leading bytes to drop to reach the payload, or -1.

    Follows :func:`classify_strict`.
    """
    return SKIP_LENGTHS[classify_strict(buffer)]


def strip_bom(buffer: Buffer) -> bytes:
    """Return the contents of *buffer* without its BOM.

    Data without a recognised BOM is returned unchanged (as ``bytes``).
    """
    data = _as_bytes(buffer)
    skip = bytes_to_skip(data)
    if skip < 0:
        return data
    return data[skip:]
