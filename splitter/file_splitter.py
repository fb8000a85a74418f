"""Splits a source file into numbered chunk files."""

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from common.constants import CHUNK_INDEX_SEPARATOR, CHUNK_SUFFIX
from common.exceptions import DestinationInvalidError, IOFailureError, InvalidChunkSpecError
from common.logging_config import get_logger
from common.types import ByteRange, ChunkDescriptor, SplitResult
from splitter.config import TransferConfig
from splitter.streaming import copy_exact
from splitter.validation import prepare_destination_directory, validate_source_file

PathLike = Union[str, Path]


def chunk_file_name(base_name: str, index: int) -> str:
    """
    Name of chunk ``index`` for ``base_name``, e.g. ``movie-3.split``.

    The index is unpadded base 10, so lexical order of names matches chunk
    order only while all indices have the same number of digits.
    """
    return f"{base_name}{CHUNK_INDEX_SEPARATOR}{index}{CHUNK_SUFFIX}"


def chunk_path(dest_dir: PathLike, base_name: str, index: int) -> Path:
    return Path(dest_dir) / chunk_file_name(base_name, index)


def _validate_base_name(base_name: str) -> None:
    if not base_name or base_name in (".", ".."):
        raise InvalidChunkSpecError(f"Invalid base name: {base_name!r}")
    if "/" in base_name or os.sep in base_name:
        raise InvalidChunkSpecError(f"Base name must not contain a path separator: {base_name!r}")


class FileSplitter:
    """
    Splits files into chunk files of a bounded size.

    Usage:
        splitter = FileSplitter(TransferConfig(block_size=4096))
        result = splitter.split_by_size("movie.mkv", "parts", 100 * 1024 * 1024, "movie")
    """

    def __init__(self, config: Optional[TransferConfig] = None, logger: Optional[logging.Logger] = None):
        self.config = config or TransferConfig()
        self.logger = logger or get_logger(__name__)

    def split_by_parts(
        self,
        source: PathLike,
        dest_dir: PathLike,
        parts: int,
        base_name: str,
        delete_source: bool = False,
    ) -> SplitResult:
        """
        Split ``source`` into at most ``parts`` chunk files.

        The chunk size is ceil(size / parts), so fewer than ``parts`` files
        are produced when the source is small relative to ``parts``.

        Args:
            source: File to split
            dest_dir: Directory receiving the chunk files
            parts: Requested number of chunks
            base_name: Prefix of the chunk file names
            delete_source: Remove ``source`` once every chunk is written

        Returns:
            SplitResult describing the chunks written

        Raises:
            InvalidChunkSpecError: If parts is not positive
            SourceError: If the source fails validation
        """
        source = Path(source)
        if parts <= 0:
            raise InvalidChunkSpecError(f"parts must be positive, got {parts}")
        validate_source_file(source)

        byte_range = ByteRange.from_parts(source.stat().st_size, parts)
        self.logger.debug(
            f"Splitting {source.name} into {parts} part(s): {byte_range.bytes_per_chunk} bytes per chunk"
        )
        return self.split_by_size(source, dest_dir, byte_range.bytes_per_chunk, base_name, delete_source)

    def split_by_size(
        self,
        source: PathLike,
        dest_dir: PathLike,
        bytes_per_chunk: int,
        base_name: str,
        delete_source: bool = False,
    ) -> SplitResult:
        """
        Split ``source`` into chunk files of ``bytes_per_chunk`` bytes each.

        The last chunk holds the remainder. Existing chunk files with the
        same names are overwritten.

        Args:
            source: File to split
            dest_dir: Directory receiving the chunk files, created if missing
            bytes_per_chunk: Size of every chunk except possibly the last
            base_name: Prefix of the chunk file names
            delete_source: Remove ``source`` once every chunk is written

        Returns:
            SplitResult describing the chunks written

        Raises:
            InvalidChunkSpecError: If bytes_per_chunk or base_name is invalid
            SourceError: If the source fails validation
            DestinationInvalidError: If dest_dir cannot be used or a chunk
                would overwrite the source
            IOFailureError: If streaming fails part way through
        """
        source = Path(source)
        dest_dir = Path(dest_dir)
        if bytes_per_chunk <= 0:
            raise InvalidChunkSpecError(f"bytes_per_chunk must be positive, got {bytes_per_chunk}")
        _validate_base_name(base_name)
        validate_source_file(source)
        if prepare_destination_directory(dest_dir):
            self.logger.debug(f"Created destination directory {dest_dir.absolute()}")

        byte_range = ByteRange(total_size=source.stat().st_size, bytes_per_chunk=bytes_per_chunk)
        self.logger.debug(
            f"Splitting file {source.absolute()}, size (bytes) {byte_range.total_size}, "
            f"bytes per file {bytes_per_chunk}, {byte_range.chunk_count} chunk(s)"
        )
        self._check_source_not_overwritten(source, dest_dir, base_name, byte_range.chunk_count)

        try:
            chunks = self._write_chunks(source, dest_dir, base_name, byte_range)
        except OSError as e:
            raise IOFailureError(f"Splitting {source} failed: {e}") from e

        if self.config.purge_stale_chunks:
            self._purge_stale_chunks(dest_dir, base_name, byte_range.chunk_count, source)

        source_deleted = False
        if delete_source:
            source_deleted = self._delete_source(source)

        self.logger.info(f"Split {source.name} into {len(chunks)} chunk(s) in {dest_dir}")
        return SplitResult(
            source=source,
            destination=dest_dir,
            bytes_per_chunk=bytes_per_chunk,
            chunks=tuple(chunks),
            source_deleted=source_deleted,
        )

    def _write_chunks(
        self, source: Path, dest_dir: Path, base_name: str, byte_range: ByteRange
    ) -> List[ChunkDescriptor]:
        chunks = []
        with open(source, 'rb') as input_stream:
            for index, length in enumerate(byte_range.chunk_lengths()):
                path = chunk_path(dest_dir, base_name, index)
                self.logger.debug(f"Creating split-file {path.absolute()} ({length} bytes)")
                with open(path, 'wb') as output:
                    copy_exact(input_stream, output, length, self.config.block_size)
                chunks.append(ChunkDescriptor(index=index, size=length, path=path))
        return chunks

    def _check_source_not_overwritten(
        self, source: Path, dest_dir: Path, base_name: str, chunk_count: int
    ) -> None:
        resolved = source.resolve()
        for index in range(chunk_count):
            path = chunk_path(dest_dir, base_name, index)
            if path.resolve() == resolved:
                raise DestinationInvalidError(
                    f"Source would be overwritten by split-file {path.absolute()}", path
                )

    def _purge_stale_chunks(
        self, dest_dir: Path, base_name: str, first_stale_index: int, source: Path
    ) -> None:
        """Remove chunks left behind by an earlier run that produced more of them.

        The source itself is never removed, even when its name matches.
        """
        index = first_stale_index
        while True:
            stale = chunk_path(dest_dir, base_name, index)
            if not stale.is_file():
                break
            if stale.samefile(source):
                self.logger.debug(f"Keeping {stale}, it is the source file")
                index += 1
                continue
            try:
                stale.unlink()
                self.logger.debug(f"Removed stale split-file {stale}")
            except OSError as e:
                self.logger.warning(f"Could not remove stale split-file {stale}: {e}")
                break
            index += 1

    def _delete_source(self, source: Path) -> bool:
        try:
            source.unlink()
        except OSError as e:
            self.logger.warning(f"Could not delete source {source}: {e}")
            return False
        self.logger.debug(f"Deleted source {source}")
        return True


def split_by_size(
    source: PathLike,
    dest_dir: PathLike,
    bytes_per_chunk: int,
    base_name: str,
    delete_source: bool = False,
    config: Optional[TransferConfig] = None,
) -> SplitResult:
    """Split with a FileSplitter built from ``config``."""
    return FileSplitter(config).split_by_size(source, dest_dir, bytes_per_chunk, base_name, delete_source)


def split_by_parts(
    source: PathLike,
    dest_dir: PathLike,
    parts: int,
    base_name: str,
    delete_source: bool = False,
    config: Optional[TransferConfig] = None,
) -> SplitResult:
    """Split into at most ``parts`` chunks with a FileSplitter built from ``config``."""
    return FileSplitter(config).split_by_parts(source, dest_dir, parts, base_name, delete_source)
