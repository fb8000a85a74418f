"""Command handler functions for CLI operations."""

from pathlib import Path
from typing import Optional

from common.checksum import compute_file_checksum
from common.logging_config import get_logger
from common.types import ChunkOrder
from cli.config import DEFAULT_CONFIG_PATH, Config
from cli.models import (
    AssembleCommand,
    ConfigCommand,
    SplitPartsCommand,
    SplitSizeCommand,
    VerifyCommand,
)
from cli.utils import format_file_size
from splitter.file_assembler import FileAssembler, order_chunk_paths
from splitter.file_splitter import FileSplitter

logger = get_logger(__name__)


_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get or create global Config instance.

    Returns:
        Config instance
    """
    global _config
    if _config is None:
        logger.debug("Loading CLI configuration")
        _config = Config(DEFAULT_CONFIG_PATH)
    return _config


def _resolve_base_name(source: str, base_name: Optional[str]) -> str:
    return base_name or get_config().get_base_name() or Path(source).name


def _describe_split(result) -> str:
    lines = [
        f"Split {result.source} ({format_file_size(result.total_bytes)}) into "
        f"{len(result.chunks)} chunk(s) of up to {format_file_size(result.bytes_per_chunk)} in {result.destination}"
    ]
    for chunk in result.chunks:
        lines.append(f"  {chunk.path.name}  {chunk.size} bytes")
    if result.source_deleted:
        lines.append(f"Deleted source {result.source}")
    return "\n".join(lines)


def handle_split(cmd: SplitSizeCommand, splitter: Optional[FileSplitter] = None) -> str:
    """
    Handle 'split' command.

    Args:
        cmd: SplitSizeCommand with source, destination and chunk size
        splitter: Optional FileSplitter for dependency injection (testing)

    Returns:
        Summary of the chunks written
    """
    logger.info(f"Executing split command: {cmd.source} -> {cmd.dest_dir}, {cmd.bytes_per_chunk} bytes per chunk")
    if splitter is None:
        splitter = FileSplitter(get_config().get_transfer_config())
    result = splitter.split_by_size(
        cmd.source,
        cmd.dest_dir,
        cmd.bytes_per_chunk,
        _resolve_base_name(cmd.source, cmd.base_name),
        cmd.delete_source,
    )
    return _describe_split(result)


def handle_split_parts(cmd: SplitPartsCommand, splitter: Optional[FileSplitter] = None) -> str:
    """
    Handle 'split-parts' command.

    Args:
        cmd: SplitPartsCommand with source, destination and part count
        splitter: Optional FileSplitter for dependency injection (testing)

    Returns:
        Summary of the chunks written
    """
    logger.info(f"Executing split-parts command: {cmd.source} -> {cmd.dest_dir}, {cmd.parts} part(s)")
    if splitter is None:
        splitter = FileSplitter(get_config().get_transfer_config())
    result = splitter.split_by_parts(
        cmd.source,
        cmd.dest_dir,
        cmd.parts,
        _resolve_base_name(cmd.source, cmd.base_name),
        cmd.delete_source,
    )
    return _describe_split(result)


def handle_assemble(cmd: AssembleCommand, assembler: Optional[FileAssembler] = None) -> str:
    """
    Handle 'assemble' command.

    A single directory argument is assembled from its entries; otherwise the
    arguments are the chunk files in order.

    Args:
        cmd: AssembleCommand with destination and sources
        assembler: Optional FileAssembler for dependency injection (testing)

    Returns:
        Success message with the destination size
    """
    logger.info(f"Executing assemble command: {len(cmd.sources)} source(s) -> {cmd.destination}")
    if assembler is None:
        assembler = FileAssembler(get_config().get_transfer_config())

    order = ChunkOrder.INDEX if cmd.numeric_order else None
    if len(cmd.sources) == 1 and Path(cmd.sources[0]).is_dir():
        destination = assembler.assemble_directory(cmd.sources[0], cmd.destination, cmd.delete_sources, order)
    else:
        sources = [Path(s) for s in cmd.sources]
        if order is not None:
            sources = order_chunk_paths(sources, order)
        destination = assembler.assemble_files(sources, cmd.destination, cmd.delete_sources)

    size = Path(destination).stat().st_size
    logger.debug("Assemble command completed")
    return f"Assembled {destination} ({format_file_size(size)})"


def handle_verify(cmd: VerifyCommand) -> str:
    """
    Handle 'verify' command.

    Args:
        cmd: VerifyCommand with the two files to compare

    Returns:
        Both digests and whether they match
    """
    first_digest = compute_file_checksum(cmd.first)
    second_digest = compute_file_checksum(cmd.second)
    verdict = "Files have identical checksums." if first_digest == second_digest else "Files have different checksums."
    return "\n".join([
        f"SHA-256 for {cmd.first}: {first_digest}",
        f"SHA-256 for {cmd.second}: {second_digest}",
        verdict,
    ])


def handle_config(cmd: ConfigCommand, config: Optional[Config] = None) -> str:
    """
    Handle 'config' command.

    Returns:
        Effective configuration, one setting per line
    """
    if config is None:
        config = get_config()
    transfer = config.get_transfer_config()
    return "\n".join([
        f"Config file: {config.config_path}",
        f"  block_size: {transfer.block_size}",
        f"  purge_stale_chunks: {transfer.purge_stale_chunks}",
        f"  chunk_order: {transfer.chunk_order.value}",
        f"  base_name: {config.get_base_name() or '(source file name)'}",
        f"  log_level: {config.get_log_level()}",
    ])
