"""Command parser for CLI input."""

import re
import shlex

from cli.constants import SIZE_UNITS
from cli.models import (
    AssembleCommand,
    CommandRequest,
    ConfigCommand,
    SplitPartsCommand,
    SplitSizeCommand,
    VerifyCommand,
)

SIZE_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([KMG]?B?)?\s*$", re.IGNORECASE)


class ParseError(Exception):
    """Raised when command parsing fails."""

    pass


def parse_command(input_line: str) -> CommandRequest:
    """Parse user input into a CommandRequest object.

    Args:
        input_line: Raw user input from REPL or joined command line arguments

    Returns:
        CommandRequest object (one of SplitSize/SplitParts/Assemble/Verify/Config)

    Raises:
        ParseError: If command syntax is invalid
    """
    if not input_line.strip():
        raise ParseError("Empty command")

    try:
        tokens = shlex.split(input_line)
    except ValueError as e:
        raise ParseError(f"Invalid syntax: {e}")

    if not tokens:
        raise ParseError("Empty command")

    command_name = tokens[0]

    if command_name == "split":
        return _parse_split(tokens[1:])
    elif command_name == "split-parts":
        return _parse_split_parts(tokens[1:])
    elif command_name == "assemble":
        return _parse_assemble(tokens[1:])
    elif command_name == "verify":
        return _parse_verify(tokens[1:])
    elif command_name == "config":
        return ConfigCommand()
    else:
        raise ParseError(f"Unknown command: {command_name}")


def parse_size(size_str: str) -> int:
    """
    Parse a size string (e.g. "10000", "10MB", "2GB") into a number of bytes.

    Supported units (case-insensitive): B, K, KB, M, MB, G, GB. Units are
    binary (1 KB = 1024 bytes). No unit means bytes.

    Raises:
        ParseError: If the format or unit is not recognised, or the size is zero
    """
    match = SIZE_PATTERN.match(size_str)
    if not match:
        raise ParseError(f"Invalid size format: {size_str}")

    number_part = float(match.group(1))
    unit_part = match.group(2).upper() if match.group(2) else ""
    if unit_part not in SIZE_UNITS:
        raise ParseError(f"Unknown unit: {unit_part}")

    size_in_bytes = int(number_part * SIZE_UNITS[unit_part])
    if size_in_bytes <= 0:
        raise ParseError(f"Size must be positive: {size_str}")
    return size_in_bytes


def _split_options(args: list[str], switches: set[str], valued: set[str]) -> tuple[list[str], dict]:
    """Separate positional arguments from --switches and --option VALUE pairs."""
    positional = []
    options: dict = {}
    index = 0
    while index < len(args):
        arg = args[index]
        if arg in switches:
            options[arg] = True
        elif arg in valued:
            if index + 1 >= len(args):
                raise ParseError(f"{arg} requires a value")
            options[arg] = args[index + 1]
            index += 1
        elif arg.startswith("--"):
            raise ParseError(f"Unknown option: {arg}")
        else:
            positional.append(arg)
        index += 1
    return positional, options


def _parse_split(args: list[str]) -> SplitSizeCommand:
    """Parse 'split <source> <dest_dir> <size> [--name BASE] [--delete]' command."""
    positional, options = _split_options(args, {"--delete"}, {"--name"})
    if len(positional) != 3:
        raise ParseError("split requires exactly 3 arguments: <source> <dest_dir> <size>")

    source, dest_dir, size = positional
    return SplitSizeCommand(
        source=source,
        dest_dir=dest_dir,
        bytes_per_chunk=parse_size(size),
        base_name=options.get("--name"),
        delete_source=options.get("--delete", False),
    )


def _parse_split_parts(args: list[str]) -> SplitPartsCommand:
    """Parse 'split-parts <source> <dest_dir> <parts> [--name BASE] [--delete]' command."""
    positional, options = _split_options(args, {"--delete"}, {"--name"})
    if len(positional) != 3:
        raise ParseError("split-parts requires exactly 3 arguments: <source> <dest_dir> <parts>")

    source, dest_dir, parts = positional
    if not parts.isdigit() or int(parts) <= 0:
        raise ParseError(f"parts must be a positive integer: {parts}")

    return SplitPartsCommand(
        source=source,
        dest_dir=dest_dir,
        parts=int(parts),
        base_name=options.get("--name"),
        delete_source=options.get("--delete", False),
    )


def _parse_assemble(args: list[str]) -> AssembleCommand:
    """Parse 'assemble <dest_file> <source_dir | chunk...> [--delete] [--numeric]' command."""
    positional, options = _split_options(args, {"--delete", "--numeric"}, set())
    if len(positional) < 2:
        raise ParseError("assemble requires a destination and at least one source")

    return AssembleCommand(
        destination=positional[0],
        sources=tuple(positional[1:]),
        delete_sources=options.get("--delete", False),
        numeric_order=options.get("--numeric", False),
    )


def _parse_verify(args: list[str]) -> VerifyCommand:
    """Parse 'verify <file_a> <file_b>' command."""
    if len(args) != 2:
        raise ParseError("verify requires exactly 2 arguments: <file_a> <file_b>")

    first, second = args
    return VerifyCommand(first=first, second=second)
