"""Tests for the exact-count block copy."""

import io

import pytest

from common.exceptions import IOFailureError, ShortReadError
from splitter.streaming import StreamCursor, copy_exact, read_exact


class TrickleStream(io.BytesIO):
    """BytesIO that never returns more than a few bytes per read."""

    def __init__(self, data: bytes, max_read: int = 3):
        super().__init__(data)
        self.max_read = max_read

    def read(self, size=-1):
        if size is None or size < 0:
            size = self.max_read
        return super().read(min(size, self.max_read))


class RecordingOutput(io.BytesIO):
    """BytesIO that remembers the size of every write."""

    def __init__(self):
        super().__init__()
        self.write_sizes = []

    def write(self, data):
        self.write_sizes.append(len(data))
        return super().write(data)


def test_cursor_tracks_progress():
    cursor = StreamCursor(remaining=20, block_size=8)

    assert cursor.next_read_size == 8
    cursor.advance(8)
    cursor.advance(8)

    assert cursor.remaining == 4
    assert cursor.transferred == 16
    assert cursor.next_read_size == 4


def test_read_exact_loops_over_short_reads():
    stream = TrickleStream(b"abcdefghij", max_read=3)

    assert read_exact(stream, 7) == b"abcdefg"
    assert stream.tell() == 7


def test_read_exact_raises_when_stream_ends_early():
    stream = io.BytesIO(b"abc")

    with pytest.raises(ShortReadError) as exc_info:
        read_exact(stream, 5)

    assert exc_info.value.expected == 5
    assert exc_info.value.received == 3
    assert isinstance(exc_info.value, IOFailureError)


def test_read_exact_zero_bytes():
    assert read_exact(io.BytesIO(b"abc"), 0) == b""


def test_copy_exact_writes_full_blocks_then_tail():
    source = io.BytesIO(bytes(range(30)))
    output = RecordingOutput()

    copied = copy_exact(source, output, 20, block_size=8)

    assert copied == 20
    assert output.write_sizes == [8, 8, 4]
    assert output.getvalue() == bytes(range(20))


def test_copy_exact_multiple_of_block_size():
    output = RecordingOutput()

    copy_exact(io.BytesIO(bytes(16)), output, 16, block_size=8)

    assert output.write_sizes == [8, 8]


def test_copy_exact_never_reads_past_count():
    """Bytes after the requested count stay in the source for the next chunk."""
    source = io.BytesIO(b"0123456789")

    copy_exact(source, io.BytesIO(), 4, block_size=3)

    assert source.read() == b"456789"


def test_copy_exact_with_trickling_source():
    data = bytes(range(200))
    output = io.BytesIO()

    copy_exact(TrickleStream(data, max_read=5), output, 200, block_size=64)

    assert output.getvalue() == data


def test_copy_exact_zero_count_writes_nothing():
    output = RecordingOutput()

    assert copy_exact(io.BytesIO(b"abc"), output, 0, block_size=8) == 0
    assert output.write_sizes == []


def test_copy_exact_short_source_raises():
    with pytest.raises(ShortReadError):
        copy_exact(io.BytesIO(b"abc"), io.BytesIO(), 10, block_size=4)
