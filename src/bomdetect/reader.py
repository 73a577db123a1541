"""BOMReader -- strip a leading BOM from a binary stream."""

from __future__ import annotations

import io
import logging
import threading
from typing import BinaryIO

from bomdetect.classifier import classify_strict
from bomdetect.enums import BOMKind, ReaderState
from bomdetect.signatures import MAX_SIGNATURE_LENGTH, NAIVE_MIN_LENGTH, SKIP_LENGTHS

logger = logging.getLogger(__name__)


class BOMReader(io.RawIOBase):
    """Raw binary stream that yields the bytes of *raw* minus any leading BOM.

    The first read buffers up to *head_size* bytes from *raw*, classifies
    them with :func:`~bomdetect.classifier.classify_strict` and drops the
    matching signature.  Whatever is left of that head is handed out before
    *raw* is read again.

    If *raw* raises while the head is being buffered, the exception is kept
    until the buffered bytes have been returned, then raised once.  Reads
    after that go straight to *raw* again.

    Wrap the instance in :class:`io.BufferedReader` or
    :class:`io.TextIOWrapper` for buffered or text access.

    .. code::

            with BOMReader(open("data.csv", "rb")) as reader:
                print(reader.kind)
                payload = reader.read()

    """

    def __init__(
        self,
        raw: BinaryIO,
        head_size: int = NAIVE_MIN_LENGTH,
        closefd: bool = True,
    ) -> None:
        """Wrap *raw*.

        :param raw: Binary file-like object with a ``read(size)`` method.
        :param head_size: How many bytes to collect before classifying.
            Must be at least the longest signature (4 bytes).
        :param closefd: Close *raw* when this reader is closed.
        """
        super().__init__()
        self._raw = raw
        # Not owned until validation passes; close() runs from __del__ too.
        self._closefd = False
        if head_size < MAX_SIGNATURE_LENGTH:
            msg = f"head_size must be at least {MAX_SIGNATURE_LENGTH}"
            raise ValueError(msg)
        self._head_size = head_size
        self._closefd = closefd
        self._state = ReaderState.NOT_STARTED
        self._residual = bytearray()
        self._fault: Exception | None = None
        self._kind = BOMKind.UNKNOWN
        self._skipped = 0
        self._lock = threading.Lock()

    @property
    def raw(self) -> BinaryIO:
        """The wrapped stream."""
        return self._raw

    @property
    def state(self) -> ReaderState:
        """Current position in the detect, drain, delegate lifecycle."""
        return self._state

    @property
    def kind(self) -> BOMKind:
        """Detected BOM; :attr:`BOMKind.UNKNOWN` until the first read."""
        return self._kind

    @property
    def bytes_skipped(self) -> int:
        """Number of BOM bytes removed from the stream (0 if none)."""
        return self._skipped

    def readable(self) -> bool:
        return True

    def readinto(self, buffer: bytearray | memoryview) -> int | None:
        """Read bytes into *buffer* and return how many were written.

        Returns 0 at end of data and ``None`` when a non-blocking *raw* has
        nothing available yet.
        """
        if self.closed:
            msg = "I/O operation on closed file."
            raise ValueError(msg)
        with memoryview(buffer) as view, view.cast("B") as dest:
            if not len(dest):
                return 0
            with self._lock:
                return self._readinto(dest)

    def readall(self) -> bytes | None:
        """Read until end of data.

        Stops early when a fault recorded during BOM detection is pending,
        so the bytes read so far are returned and the fault is raised by the
        next call.
        """
        chunks = bytearray()
        while not (chunks and self._state == ReaderState.FAULTED):
            data = self.read(io.DEFAULT_BUFFER_SIZE)
            if data is None:
                return bytes(chunks) if chunks else None
            if not data:
                break
            chunks += data
        return bytes(chunks)

    def _readinto(self, dest: memoryview) -> int | None:
        if self._state in (
            ReaderState.NOT_STARTED,
            ReaderState.DETECTING_AND_BUFFERING,
        ):
            self._state = ReaderState.DETECTING_AND_BUFFERING
            if not self._fill_head():
                return None

        if self._state == ReaderState.DRAINING:
            n = min(len(dest), len(self._residual))
            dest[:n] = self._residual[:n]
            del self._residual[:n]
            if not self._residual:
                self._state = (
                    ReaderState.DELEGATING
                    if self._fault is None
                    else ReaderState.FAULTED
                )
            return n

        if self._state == ReaderState.FAULTED:
            fault, self._fault = self._fault, None
            self._state = ReaderState.DELEGATING
            raise fault

        data = self._raw.read(len(dest))
        if data is None:
            return None
        n = len(data)
        dest[:n] = data
        return n

    def _fill_head(self) -> bool:
        """Buffer the head of the stream and strip the BOM from it.

        Returns ``False`` if *raw* is non-blocking and ran dry first; the
        bytes collected so far are kept for the next attempt.
        """
        while len(self._residual) < self._head_size:
            try:
                chunk = self._raw.read(self._head_size - len(self._residual))
            except Exception as exc:
                logger.debug("stream failed while reading BOM: %r", exc)
                self._fault = exc
                break
            if chunk is None:
                return False
            if not chunk:
                break
            self._residual += chunk

        self._kind = classify_strict(bytes(self._residual))
        skip = SKIP_LENGTHS[self._kind]
        if skip > 0:
            del self._residual[:skip]
            self._skipped = skip
        logger.debug("%s BOM, skipped %d bytes", self._kind.name, self._skipped)

        if self._residual:
            self._state = ReaderState.DRAINING
        elif self._fault is not None:
            self._state = ReaderState.FAULTED
        else:
            self._state = ReaderState.DELEGATING
        return True

    def close(self) -> None:
        """Close the reader and, if *closefd* was true, the wrapped stream."""
        if self.closed:
            return
        try:
            if self._closefd:
                self._raw.close()
        finally:
            super().close()
