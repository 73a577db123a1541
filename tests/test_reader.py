# tests/test_reader.py
"""Tests for the BOM-stripping stream adapter."""

from __future__ import annotations

import io
import logging
import threading

import pytest

from bomdetect.enums import BOMKind, ReaderState
from bomdetect.reader import BOMReader
from bomdetect.signatures import UTF8_BOM, UTF16BE_BOM, UTF16LE_BOM, UTF32BE_BOM


class ScriptedStream(io.RawIOBase):
    """Stream that replays a list of chunks, ``None`` values and exceptions."""

    def __init__(self, script: list[bytes | None | Exception]) -> None:
        super().__init__()
        self._script = list(script)
        self.calls = 0

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes | None:
        self.calls += 1
        if not self._script:
            return b""
        item = self._script.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


# ---------------------------------------------------------------------------
# Basic stripping
# ---------------------------------------------------------------------------


def test_strips_utf16be_bom() -> None:
    reader = BOMReader(io.BytesIO(UTF16BE_BOM + "Hi".encode("utf-16-be")))
    assert reader.read() == b"\x00H\x00i"
    assert reader.kind is BOMKind.UTF16BE
    assert reader.bytes_skipped == 2


def test_strips_utf32be_bom() -> None:
    reader = BOMReader(io.BytesIO(UTF32BE_BOM + "Hi".encode("utf-32-be")))
    assert reader.read() == "Hi".encode("utf-32-be")
    assert reader.kind is BOMKind.UTF32BE
    assert reader.bytes_skipped == 4


def test_no_bom_passes_everything_through() -> None:
    reader = BOMReader(io.BytesIO(b"Hello, world"))
    assert reader.read() == b"Hello, world"
    assert reader.kind is BOMKind.UNKNOWN
    assert reader.bytes_skipped == 0


def test_utf8_bom_follows_strict_classification() -> None:
    # Position 3 is 'H', not 0xBF, so nothing is stripped.
    data = UTF8_BOM + b"Hello"
    reader = BOMReader(io.BytesIO(data))
    assert reader.read() == data
    assert reader.kind is BOMKind.UNKNOWN


def test_empty_stream() -> None:
    reader = BOMReader(io.BytesIO(b""))
    assert reader.read() == b""
    assert reader.kind is BOMKind.UNKNOWN
    assert reader.state is ReaderState.DELEGATING


def test_stream_holding_only_a_bom() -> None:
    reader = BOMReader(io.BytesIO(UTF16LE_BOM))
    assert reader.read() == b""
    assert reader.kind is BOMKind.UTF16LE


def test_larger_head_size() -> None:
    reader = BOMReader(io.BytesIO(UTF16LE_BOM + b"H\x00i\x00"), head_size=64)
    assert reader.read() == b"H\x00i\x00"


def test_head_size_too_small() -> None:
    with pytest.raises(ValueError, match="head_size"):
        BOMReader(io.BytesIO(b""), head_size=3)


# ---------------------------------------------------------------------------
# State machine
# ---------------------------------------------------------------------------


def test_initial_state() -> None:
    reader = BOMReader(io.BytesIO(b"\xfe\xffABC"))
    assert reader.state is ReaderState.NOT_STARTED
    assert reader.kind is BOMKind.UNKNOWN


def test_zero_length_read_does_not_start_detection() -> None:
    raw = io.BytesIO(b"\xfe\xffABC")
    reader = BOMReader(raw)
    assert reader.readinto(bytearray()) == 0
    assert reader.state is ReaderState.NOT_STARTED
    assert raw.tell() == 0


def test_residual_is_drained_before_delegating() -> None:
    reader = BOMReader(io.BytesIO(b"\xfe\xffABCDEF"))
    assert reader.read(1) == b"A"
    assert reader.state is ReaderState.DRAINING
    assert reader.read(1) == b"B"
    assert reader.read(1) == b"C"
    assert reader.state is ReaderState.DELEGATING
    assert reader.read(1) == b"D"
    assert reader.read() == b"EF"


def test_readinto_memoryview() -> None:
    reader = BOMReader(io.BytesIO(b"\xff\xfeH\x00i\x00"))
    buf = bytearray(8)
    n = reader.readinto(memoryview(buf))
    assert n == 3
    assert bytes(buf[:n]) == b"H\x00i"


# ---------------------------------------------------------------------------
# Fault handling
# ---------------------------------------------------------------------------


def test_fault_is_raised_after_residual_and_only_once() -> None:
    raw = ScriptedStream([b"\xfe\xffAB", OSError("boom"), b"CD"])
    reader = BOMReader(raw)

    assert reader.read(10) == b"AB"
    assert reader.state is ReaderState.FAULTED
    with pytest.raises(OSError, match="boom"):
        reader.read(10)
    assert reader.state is ReaderState.DELEGATING
    assert reader.read(10) == b"CD"
    assert reader.read(10) == b""


def test_read_all_returns_residual_before_fault() -> None:
    raw = ScriptedStream([b"\xfe\xffAB", OSError("boom")])
    reader = BOMReader(raw)

    assert reader.read() == b"AB"
    with pytest.raises(OSError, match="boom"):
        reader.read()
    assert reader.read() == b""


def test_read_all_continues_after_fault() -> None:
    raw = ScriptedStream([b"\xfe\xffAB", OSError("boom"), b"CD", b"EF"])
    reader = BOMReader(raw)

    assert reader.read() == b"AB"
    with pytest.raises(OSError, match="boom"):
        reader.read()
    assert reader.read() == b"CDEF"


def test_fault_with_nothing_buffered() -> None:
    raw = ScriptedStream([OSError("boom"), b"data"])
    reader = BOMReader(raw)
    with pytest.raises(OSError, match="boom"):
        reader.read(10)
    assert reader.kind is BOMKind.UNKNOWN
    assert reader.read(10) == b"data"


def test_fault_after_bom_only() -> None:
    raw = ScriptedStream([b"\xff\xfe", OSError("boom")])
    reader = BOMReader(raw)
    with pytest.raises(OSError, match="boom"):
        reader.read(10)
    assert reader.kind is BOMKind.UTF16LE
    assert reader.read(10) == b""


def test_faults_while_delegating_propagate_every_time() -> None:
    raw = ScriptedStream([b"plain", ValueError("a"), ValueError("b")])
    reader = BOMReader(raw)
    assert reader.read(10) == b"plain"
    with pytest.raises(ValueError, match="a"):
        reader.read(10)
    with pytest.raises(ValueError, match="b"):
        reader.read(10)


# ---------------------------------------------------------------------------
# Non-blocking streams
# ---------------------------------------------------------------------------


def test_non_blocking_stream_during_detection() -> None:
    raw = ScriptedStream([b"\xfe", None, b"\xff\x00H\x00", b"i"])
    reader = BOMReader(raw)
    assert reader.read(10) is None
    assert reader.state is ReaderState.DETECTING_AND_BUFFERING
    assert reader.read(10) == b"\x00H\x00"
    assert reader.kind is BOMKind.UTF16BE
    assert reader.read(10) == b"i"
    assert reader.read(10) == b""


def test_non_blocking_stream_while_delegating() -> None:
    raw = ScriptedStream([b"abcde", None, b"f"])
    reader = BOMReader(raw)
    assert reader.read(5) == b"abcde"
    assert reader.read(5) is None
    assert reader.read(5) == b"f"


# ---------------------------------------------------------------------------
# io integration
# ---------------------------------------------------------------------------


def test_text_wrapper() -> None:
    raw = io.BytesIO(UTF16LE_BOM + "héllo\nwörld\n".encode("utf-16-le"))
    with io.TextIOWrapper(io.BufferedReader(BOMReader(raw)), encoding="utf-16-le") as f:
        assert f.readlines() == ["héllo\n", "wörld\n"]


def test_close_closes_raw() -> None:
    raw = io.BytesIO(b"\xfe\xff")
    with BOMReader(raw) as reader:
        reader.read()
    assert reader.closed
    assert raw.closed


def test_closefd_false_keeps_raw_open() -> None:
    raw = io.BytesIO(b"\xfe\xff")
    with BOMReader(raw, closefd=False) as reader:
        reader.read()
    assert reader.closed
    assert not raw.closed


def test_read_after_close_raises() -> None:
    reader = BOMReader(io.BytesIO(b"abc"))
    reader.close()
    with pytest.raises(ValueError):
        reader.readinto(bytearray(4))


def test_raw_property() -> None:
    raw = io.BytesIO(b"")
    assert BOMReader(raw, closefd=False).raw is raw


def test_logs_detected_kind(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="bomdetect.reader")
    BOMReader(io.BytesIO(b"\xfe\xff\x00H\x00i")).read()
    assert "UTF16BE BOM, skipped 2 bytes" in caplog.text


# ---------------------------------------------------------------------------
# Concurrency
# ---------------------------------------------------------------------------


def test_shared_reader_hands_out_each_byte_once() -> None:
    payload = bytes(range(256)) * 40
    reader = BOMReader(io.BytesIO(UTF16BE_BOM + payload))
    chunks: list[bytes] = []
    chunks_lock = threading.Lock()

    def worker() -> None:
        while True:
            chunk = reader.read(7)
            if not chunk:
                return
            with chunks_lock:
                chunks.append(chunk)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    received = b"".join(chunks)
    assert len(received) == len(payload)
    assert sorted(received) == sorted(payload)
