"""Checks run on sources and destinations before any bytes move."""

import os
from pathlib import Path
from typing import Iterable, List

from common.exceptions import (
    DestinationInvalidError,
    SourceDirectoryEmptyError,
    SourceDirectoryNotFoundError,
    SourceError,
    SourceIsDirectoryError,
    SourceNotFoundError,
    SourceUnreadableError,
)
from common.types import ValidationFailure


def validate_source_file(path: Path) -> None:
    """
    Check that ``path`` is an existing, readable regular file.

    Raises:
        SourceNotFoundError: If the path does not exist
        SourceIsDirectoryError: If the path is a directory
        SourceUnreadableError: If the path cannot be read
    """
    if not path.exists():
        raise SourceNotFoundError(f"Source does not exist: {path.absolute()}", path)
    if path.is_dir():
        raise SourceIsDirectoryError(f"Source is a directory: {path.absolute()}", path)
    if not os.access(path, os.R_OK):
        raise SourceUnreadableError(f"Source is not readable: {path.absolute()}", path)


def validate_sources(paths: Iterable[Path]) -> List[ValidationFailure]:
    """
    Validate every chunk file and collect the failures.

    The scan does not stop at the first bad path. Callers must treat a
    non-empty result as fatal.

    Returns:
        Failures in the order the paths were given (empty if all are valid)
    """
    failures = []
    for path in paths:
        try:
            validate_source_file(path)
        except SourceError as e:
            failures.append(ValidationFailure(path=path, error=e))
    return failures


def validate_source_directory(path: Path) -> List[Path]:
    """
    Check the directory an assemble run reads from.

    Returns:
        The directory entries, in the order the OS listed them

    Raises:
        SourceDirectoryNotFoundError: If missing or not a directory
        SourceUnreadableError: If the directory cannot be listed
        SourceDirectoryEmptyError: If it holds no entries
    """
    if not path.exists():
        raise SourceDirectoryNotFoundError(f"Source directory does not exist: {path.absolute()}", path)
    if not path.is_dir():
        raise SourceDirectoryNotFoundError(f"Source is not a directory: {path.absolute()}", path)
    if not os.access(path, os.R_OK | os.X_OK):
        raise SourceUnreadableError(f"Source directory is not readable: {path.absolute()}", path)

    entries = list(path.iterdir())
    if not entries:
        raise SourceDirectoryEmptyError(f"No files in directory: {path.absolute()}", path)
    return entries


def _nearest_existing(path: Path) -> Path:
    for candidate in (path, *path.parents):
        if candidate.exists():
            return candidate
    return Path.cwd()


def prepare_destination_directory(path: Path) -> bool:
    """
    Make sure ``path`` is a writable directory, creating it if needed.

    Returns:
        True if the directory was created by this call

    Raises:
        DestinationInvalidError: If it is not a directory, not writable,
            or cannot be created
    """
    if path.exists():
        if not path.is_dir():
            raise DestinationInvalidError(f"Destination is not a directory: {path.absolute()}", path)
        if not os.access(path, os.W_OK | os.X_OK):
            raise DestinationInvalidError(f"Destination is not writable: {path.absolute()}", path)
        return False

    ancestor = _nearest_existing(path)
    if not ancestor.is_dir():
        raise DestinationInvalidError(f"Destination is not a directory: {path.absolute()}", path)
    if not os.access(ancestor, os.W_OK | os.X_OK):
        raise DestinationInvalidError(f"Destination is not writable: {path.absolute()}", path)

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DestinationInvalidError(f"Cannot create destination {path.absolute()}: {e}", path) from e
    return True


def validate_destination_file(path: Path) -> None:
    """
    Check that ``path`` can be (re)created as a regular file.

    Raises:
        DestinationInvalidError: If it is a directory, or it or its parent
            is not writable
    """
    if path.is_dir():
        raise DestinationInvalidError(f"Destination is a directory: {path.absolute()}", path)
    if path.exists() and not os.access(path, os.W_OK):
        raise DestinationInvalidError(f"Destination is not writable: {path.absolute()}", path)

    parent = path.parent
    if not parent.is_dir():
        raise DestinationInvalidError(f"Destination parent is not a directory: {parent.absolute()}", path)
    if not os.access(parent, os.W_OK | os.X_OK):
        raise DestinationInvalidError(f"Destination is not writable: {path.absolute()}", path)
