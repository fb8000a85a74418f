"""Assembles a file from an ordered list of chunk files."""

import logging
import os
import re
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from common.constants import CHUNK_INDEX_SEPARATOR, CHUNK_SUFFIX
from common.exceptions import (
    DestinationInvalidError,
    IOFailureError,
    SourceDirectoryEmptyError,
    SourceValidationError,
)
from common.logging_config import get_logger
from common.types import ChunkOrder
from splitter.config import TransferConfig
from splitter.streaming import copy_exact
from splitter.validation import (
    validate_destination_file,
    validate_source_directory,
    validate_sources,
)

PathLike = Union[str, Path]

CHUNK_NAME_PATTERN = re.compile(
    rf"^(?P<base>.+){re.escape(CHUNK_INDEX_SEPARATOR)}(?P<index>\d+){re.escape(CHUNK_SUFFIX)}$"
)


def _index_sort_key(path: Path):
    match = CHUNK_NAME_PATTERN.match(path.name)
    if match is None:
        return (1, str(path), 0)
    return (0, str(path.parent / match.group("base")), int(match.group("index")))


def order_chunk_paths(paths: Iterable[Path], order: ChunkOrder = ChunkOrder.LEXICAL) -> List[Path]:
    """
    Put chunk paths in reassembly order.

    LEXICAL sorts path names as strings, so ``x-10.split`` comes before
    ``x-2.split``. INDEX groups chunk names by base name and sorts them by
    numeric index; names that are not chunk names follow, lexically.
    """
    paths = [Path(p) for p in paths]
    if ChunkOrder(order) is ChunkOrder.INDEX:
        return sorted(paths, key=_index_sort_key)
    return sorted(paths, key=str)


class FileAssembler:
    """
    Concatenates chunk files back into one file.

    Usage:
        assembler = FileAssembler()
        assembler.assemble_directory("parts", "movie.mkv")
    """

    def __init__(self, config: Optional[TransferConfig] = None, logger: Optional[logging.Logger] = None):
        self.config = config or TransferConfig()
        self.logger = logger or get_logger(__name__)

    def assemble_file(
        self,
        source: Union[PathLike, Sequence[PathLike]],
        destination: PathLike,
        delete_sources: bool = False,
    ) -> Path:
        """
        Assemble from a directory (single path) or from an ordered list of paths.
        """
        if isinstance(source, (str, os.PathLike)):
            return self.assemble_directory(source, destination, delete_sources)
        return self.assemble_files(source, destination, delete_sources)

    def assemble_directory(
        self,
        source_directory: PathLike,
        destination: PathLike,
        delete_sources: bool = False,
        order: Optional[ChunkOrder] = None,
    ) -> Path:
        """
        Assemble a file from every entry of ``source_directory``.

        Args:
            source_directory: Directory holding the chunk files
            destination: File to write
            delete_sources: Remove the chunk files and the directory afterwards
            order: Ordering rule, defaults to the configured chunk_order

        Returns:
            The destination path

        Raises:
            SourceDirectoryNotFoundError: If the directory is missing
            SourceDirectoryEmptyError: If the directory has no entries
            SourceValidationError: If any entry cannot be read as a chunk
            DestinationInvalidError: If the destination cannot be written
            IOFailureError: If streaming fails part way through
        """
        source_directory = Path(source_directory)
        entries = validate_source_directory(source_directory)
        ordered = order_chunk_paths(entries, order or self.config.chunk_order)

        result = self.assemble_files(ordered, destination, delete_sources)

        if delete_sources:
            try:
                source_directory.rmdir()
                self.logger.debug(f"Deleted source directory {source_directory}")
            except OSError as e:
                self.logger.warning(f"Could not delete source directory {source_directory}: {e}")

        return result

    def assemble_files(
        self,
        sources: Sequence[PathLike],
        destination: PathLike,
        delete_sources: bool = False,
    ) -> Path:
        """
        Concatenate ``sources`` in the given order into ``destination``.

        All sources are validated first; any failure aborts the run before
        the destination is touched. An existing destination file is replaced.

        Args:
            sources: Chunk files, in order
            destination: File to write
            delete_sources: Remove the chunk files after a successful run

        Returns:
            The destination path

        Raises:
            SourceDirectoryEmptyError: If ``sources`` is empty
            SourceValidationError: If any source is missing, unreadable or a directory
            DestinationInvalidError: If the destination cannot be written
            IOFailureError: If streaming fails part way through
        """
        sources = [Path(p) for p in sources]
        destination = Path(destination)
        if not sources:
            raise SourceDirectoryEmptyError("No sources to assemble")

        failures = validate_sources(sources)
        if failures:
            for failure in failures:
                self.logger.error(f"Invalid source {failure}")
            raise SourceValidationError(failures)

        validate_destination_file(destination)
        if destination.exists() and any(destination.samefile(p) for p in sources):
            raise DestinationInvalidError(f"Destination is one of the sources: {destination.absolute()}", destination)

        self.logger.debug(f"Assembling file to: {destination.absolute()}")
        total = 0
        try:
            destination.unlink(missing_ok=True)
            with open(destination, 'wb') as output:
                for path in sources:
                    size = path.stat().st_size
                    self.logger.debug(f"Assemble part {path.absolute()}, size {size}")
                    with open(path, 'rb') as input_stream:
                        total += copy_exact(input_stream, output, size, self.config.block_size)
        except OSError as e:
            raise IOFailureError(f"Assembling {destination} failed: {e}") from e

        if delete_sources:
            self.logger.debug("Deleting sources")
            self._delete_sources(sources)

        self.logger.info(f"Assembled {len(sources)} chunk(s), {total} bytes, into {destination}")
        return destination

    def _delete_sources(self, sources: List[Path]) -> None:
        for path in sources:
            try:
                path.unlink(missing_ok=True)
            except OSError as e:
                self.logger.warning(f"Could not delete source {path}: {e}")


def assemble_file(
    source: Union[PathLike, Sequence[PathLike]],
    destination: PathLike,
    delete_sources: bool = False,
    config: Optional[TransferConfig] = None,
) -> Path:
    """Assemble with a FileAssembler built from ``config``."""
    return FileAssembler(config).assemble_file(source, destination, delete_sources)
