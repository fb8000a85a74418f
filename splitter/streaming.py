"""Exact-count block copy shared by the splitter and the assembler."""

from dataclasses import dataclass
from typing import BinaryIO

from common.exceptions import ShortReadError


@dataclass
class StreamCursor:
    """Progress of one exact-count copy."""

    remaining: int
    block_size: int
    transferred: int = 0

    @property
    def next_read_size(self) -> int:
        return min(self.remaining, self.block_size)

    def advance(self, count: int) -> None:
        self.remaining -= count
        self.transferred += count


def read_exact(source: BinaryIO, size: int) -> bytes:
    """
    Read exactly ``size`` bytes from a stream.

    A single read() may return fewer bytes than asked for, so reads are
    repeated until the count is reached.

    Args:
        source: Binary stream to read from
        size: Number of bytes wanted

    Returns:
        Exactly ``size`` bytes

    Raises:
        ShortReadError: If the stream is exhausted first
    """
    pieces = []
    missing = size
    while missing > 0:
        piece = source.read(missing)
        if not piece:
            raise ShortReadError(expected=size, received=size - missing)
        pieces.append(piece)
        missing -= len(piece)
    return b"".join(pieces)


def copy_exact(source: BinaryIO, output: BinaryIO, count: int, block_size: int) -> int:
    """
    Copy exactly ``count`` bytes from ``source`` to ``output``.

    Full blocks are moved while more than one block remains, then the tail
    goes as one short read and write. Nothing beyond ``count`` is consumed
    from ``source``.

    Returns:
        Number of bytes transferred (always ``count``)

    Raises:
        ShortReadError: If ``source`` runs out before ``count`` bytes
        OSError: If the underlying read or write fails
    """
    cursor = StreamCursor(remaining=count, block_size=block_size)
    while cursor.remaining > cursor.block_size:
        output.write(read_exact(source, cursor.block_size))
        cursor.advance(cursor.block_size)

    if cursor.remaining > 0:
        tail = cursor.next_read_size
        output.write(read_exact(source, tail))
        cursor.advance(tail)

    return cursor.transferred
