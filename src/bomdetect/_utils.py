"""Internal shared utilities for bomdetect."""

from __future__ import annotations

from bomdetect.signatures import NAIVE_MIN_LENGTH

#: Anything the classifier functions accept.
Buffer = bytes | bytearray | memoryview


def _head(buffer: Buffer, size: int = NAIVE_MIN_LENGTH) -> bytes:
    """Return a ``bytes`` copy of at most the first *size* bytes of *buffer*.

    Raises :class:`TypeError` for objects that do not support the buffer
    protocol.  The caller's object is never retained or modified.
    """
    if isinstance(buffer, bytes):
        return buffer[:size]
    with memoryview(buffer) as view:
        if view.ndim == 1 and view.itemsize == 1:
            # Slicing works for strided views too, unlike cast().
            return view[:size].tobytes()
        return view.tobytes()[:size]


def _as_bytes(buffer: Buffer) -> bytes:
    """Return the whole of *buffer* as ``bytes``.

    Only buffer-protocol objects are accepted; ``bytes(5)`` style coercion
    of ints and iterables raises :class:`TypeError` instead.
    """
    if isinstance(buffer, bytes):
        return buffer
    with memoryview(buffer) as view:
        return view.tobytes()
