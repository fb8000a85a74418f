"""Custom exception classes for split and assemble runs."""

from pathlib import Path
from typing import Sequence, Tuple

from common.types import ValidationFailure


class ChunkSplitError(Exception):
    """
    Base exception class for all chunksplit errors.
    """
    pass


class SourceError(ChunkSplitError):
    """
    Raised when an input file or directory fails validation.
    """

    def __init__(self, message: str, path: Path = None):
        super().__init__(message)
        self.path = path


class SourceNotFoundError(SourceError):
    """
    Raised when a source file does not exist.
    """
    pass


class SourceUnreadableError(SourceError):
    """
    Raised when a source exists but the process cannot read it.
    """
    pass


class SourceIsDirectoryError(SourceError):
    """
    Raised when a source file turns out to be a directory.
    """
    pass


class SourceDirectoryNotFoundError(SourceError):
    """
    Raised when the directory to assemble from is missing or is not a directory.
    """
    pass


class SourceDirectoryEmptyError(SourceError):
    """
    Raised when there is nothing to assemble.
    """
    pass


class SourceValidationError(SourceError):
    """
    Raised when one or more chunk files in an assemble run failed validation.

    Every failure found by the scan is kept in ``failures``.
    """

    def __init__(self, failures: Sequence[ValidationFailure]):
        self.failures: Tuple[ValidationFailure, ...] = tuple(failures)
        lines = "; ".join(str(f) for f in self.failures)
        super().__init__(f"{len(self.failures)} source(s) failed validation: {lines}")


class DestinationInvalidError(ChunkSplitError):
    """
    Raised when the destination is of the wrong kind or cannot be written.
    """

    def __init__(self, message: str, path: Path = None):
        super().__init__(message)
        self.path = path


class InvalidChunkSpecError(ChunkSplitError, ValueError):
    """
    Raised for a non-positive chunk size or part count, or a bad base name.
    """
    pass


class IOFailureError(ChunkSplitError):
    """
    Raised when reading or writing fails while bytes are being streamed.

    The underlying OSError is chained as ``__cause__``.
    """
    pass


class ShortReadError(IOFailureError):
    """
    Raised when a stream ends before the expected number of bytes was read.
    """

    def __init__(self, expected: int, received: int):
        super().__init__(f"Stream ended early: expected {expected} bytes, got {received}")
        self.expected = expected
        self.received = received
