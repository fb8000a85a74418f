"""Command request data types for CLI."""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class SplitSizeCommand:
    """Split a file into chunks of a fixed size."""

    source: str
    dest_dir: str
    bytes_per_chunk: int
    base_name: str | None = None
    delete_source: bool = False
    command: Literal["split"] = "split"


@dataclass(frozen=True)
class SplitPartsCommand:
    """Split a file into at most a number of chunks."""

    source: str
    dest_dir: str
    parts: int
    base_name: str | None = None
    delete_source: bool = False
    command: Literal["split-parts"] = "split-parts"


@dataclass(frozen=True)
class AssembleCommand:
    """Assemble a file from a directory or an explicit list of chunks."""

    destination: str
    sources: tuple[str, ...]
    delete_sources: bool = False
    numeric_order: bool = False
    command: Literal["assemble"] = "assemble"


@dataclass(frozen=True)
class VerifyCommand:
    """Compare the checksums of two files."""

    first: str
    second: str
    command: Literal["verify"] = "verify"


@dataclass(frozen=True)
class ConfigCommand:
    """Show effective configuration."""

    command: Literal["config"] = "config"


CommandRequest = (
    SplitSizeCommand
    | SplitPartsCommand
    | AssembleCommand
    | VerifyCommand
    | ConfigCommand
)
