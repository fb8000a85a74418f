"""Project-wide constants (block size, chunk naming, environment keys)."""

BLOCK_SIZE_BYTES: int = 8192  # transfer buffer, unrelated to chunk size

CHUNK_SUFFIX: str = ".split"
CHUNK_INDEX_SEPARATOR: str = "-"

ENV_BLOCK_SIZE = "CHUNKSPLIT_BLOCK_SIZE"
ENV_PURGE_STALE = "CHUNKSPLIT_PURGE_STALE"
ENV_CHUNK_ORDER = "CHUNKSPLIT_CHUNK_ORDER"
