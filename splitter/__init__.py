"""Split files into chunk files and assemble them back."""

from splitter.config import TransferConfig
from splitter.file_assembler import FileAssembler, assemble_file, order_chunk_paths
from splitter.file_splitter import (
    FileSplitter,
    chunk_file_name,
    chunk_path,
    split_by_parts,
    split_by_size,
)

__all__ = [
    "TransferConfig",
    "FileAssembler",
    "FileSplitter",
    "assemble_file",
    "chunk_file_name",
    "chunk_path",
    "order_chunk_paths",
    "split_by_parts",
    "split_by_size",
]
