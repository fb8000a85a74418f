"""Utility functions for CLI output."""

BINARY_UNITS = ['KiB', 'MiB', 'GiB', 'TiB']


def format_file_size(size_bytes: int) -> str:
    """
    Format a byte count as a human-readable size.

    Uses binary units (1024-based), e.g. "512 B", "1.50 MiB".
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"

    size = size_bytes / 1024.0
    for unit in BINARY_UNITS:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0

    return f"{size:.2f} PiB"
