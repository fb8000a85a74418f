"""Shared data type definitions (ByteRange, ChunkDescriptor, SplitResult, etc.)."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Tuple


class ChunkOrder(str, Enum):
    """How chunk files found in a directory are put in reassembly order."""

    LEXICAL = "lexical"
    INDEX = "index"


@dataclass(frozen=True)
class ByteRange:
    """
    Size accounting for one split run.

    The last chunk receives the remainder, every other chunk receives
    exactly ``bytes_per_chunk`` bytes.
    """
    total_size: int
    bytes_per_chunk: int

    def __post_init__(self):
        if self.total_size < 0:
            raise ValueError(f"total_size must be non-negative, got {self.total_size}")
        if self.bytes_per_chunk <= 0:
            raise ValueError(f"bytes_per_chunk must be positive, got {self.bytes_per_chunk}")

    @classmethod
    def from_parts(cls, total_size: int, parts: int) -> "ByteRange":
        """
        Build a range that splits ``total_size`` into at most ``parts`` chunks.

        Args:
            total_size: Size of the source in bytes
            parts: Requested number of chunks

        Returns:
            ByteRange with bytes_per_chunk = ceil(total_size / parts)
        """
        if parts <= 0:
            raise ValueError(f"parts must be positive, got {parts}")
        bytes_per_chunk = -(-total_size // parts)
        return cls(total_size=total_size, bytes_per_chunk=max(bytes_per_chunk, 1))

    @property
    def chunk_count(self) -> int:
        return -(-self.total_size // self.bytes_per_chunk)

    def chunk_length(self, index: int) -> int:
        """
        Number of bytes chunk ``index`` holds.

        Raises:
            IndexError: If index is outside 0..chunk_count-1
        """
        count = self.chunk_count
        if index < 0 or index >= count:
            raise IndexError(f"chunk index {index} out of range for {count} chunks")
        if index < count - 1:
            return self.bytes_per_chunk
        remainder = self.total_size % self.bytes_per_chunk
        return remainder or self.bytes_per_chunk

    def chunk_lengths(self) -> Tuple[int, ...]:
        return tuple(self.chunk_length(i) for i in range(self.chunk_count))


@dataclass(frozen=True)
class ChunkDescriptor:
    """
    Metadata for a single chunk file written by a split run.
    """
    index: int
    size: int
    path: Path


@dataclass(frozen=True)
class SplitResult:
    """
    Outcome of a split run.
    """
    source: Path
    destination: Path
    bytes_per_chunk: int
    chunks: Tuple[ChunkDescriptor, ...]
    source_deleted: bool = False

    @property
    def total_bytes(self) -> int:
        return sum(chunk.size for chunk in self.chunks)

    @property
    def chunk_paths(self) -> Tuple[Path, ...]:
        return tuple(chunk.path for chunk in self.chunks)


@dataclass(frozen=True)
class ValidationFailure:
    """
    One source path that did not pass validation, with the reason.
    """
    path: Path
    error: Exception

    def __str__(self) -> str:
        return f"{self.path}: {self.error}"
