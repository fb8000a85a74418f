"""Provides file checksum calculation and verification helpers."""

import hashlib
from pathlib import Path
from typing import Union

DEFAULT_ALGORITHM = "sha256"
DEFAULT_PIECE_SIZE = 64 * 1024


def compute_checksum(data: bytes, algorithm: str = DEFAULT_ALGORITHM) -> str:
    """
    Compute checksum for given data.

    Args:
        data: Bytes to compute checksum for
        algorithm: Any hashlib algorithm name (default sha256)

    Returns:
        Hexadecimal digest string
    """
    return hashlib.new(algorithm, data).hexdigest()


def compute_file_checksum(
    path: Union[str, Path],
    algorithm: str = DEFAULT_ALGORITHM,
    piece_size: int = DEFAULT_PIECE_SIZE,
) -> str:
    """
    Compute checksum of a file without loading it into memory.

    Args:
        path: File to digest
        algorithm: Any hashlib algorithm name (default sha256)
        piece_size: Read size in bytes

    Returns:
        Hexadecimal digest string

    Raises:
        FileNotFoundError: If the file does not exist
        OSError: If read operation fails
    """
    calculator = IncrementalChecksumCalculator(algorithm)
    with open(path, 'rb') as f:
        while True:
            piece = f.read(piece_size)
            if not piece:
                break
            calculator.update(piece)
    return calculator.finalize()


def verify_checksum(data: bytes, expected: str, algorithm: str = DEFAULT_ALGORITHM) -> bool:
    """
    Verify that data matches expected checksum.

    Args:
        data: Bytes to verify
        expected: Expected checksum (hex string)
        algorithm: Algorithm the expected checksum was computed with

    Returns:
        True if checksum matches, False otherwise
    """
    return compute_checksum(data, algorithm) == expected.lower()


def files_match(
    first: Union[str, Path],
    second: Union[str, Path],
    algorithm: str = DEFAULT_ALGORITHM,
) -> bool:
    """
    Check whether two files have identical content digests.

    Files of different size never match, so their digests are not computed.
    """
    if Path(first).stat().st_size != Path(second).stat().st_size:
        return False
    return compute_file_checksum(first, algorithm) == compute_file_checksum(second, algorithm)


class IncrementalChecksumCalculator:
    """
    Calculate a checksum incrementally for streaming data.

    Usage:
        calculator = IncrementalChecksumCalculator()
        calculator.update(piece1)
        calculator.update(piece2)
        final_checksum = calculator.finalize()
    """

    def __init__(self, algorithm: str = DEFAULT_ALGORITHM):
        self.algorithm = algorithm
        self._hasher = hashlib.new(algorithm)
        self._finalized = False

    def update(self, data: bytes) -> None:
        if self._finalized:
            raise ValueError("Cannot update after finalization")
        self._hasher.update(data)

    def finalize(self) -> str:
        """
        Finalize checksum calculation and return result.

        Returns:
            Hexadecimal digest string
        """
        self._finalized = True
        return self._hasher.hexdigest()

    def reset(self) -> None:
        """Reset calculator to initial state."""
        self._hasher = hashlib.new(self.algorithm)
        self._finalized = False
