"""Transfer settings passed into split and assemble runs."""

import os

from pydantic import BaseModel, ConfigDict, Field

from common.constants import (
    BLOCK_SIZE_BYTES,
    ENV_BLOCK_SIZE,
    ENV_CHUNK_ORDER,
    ENV_PURGE_STALE,
)
from common.types import ChunkOrder


class TransferConfig(BaseModel):
    """Immutable settings for FileSplitter and FileAssembler."""

    model_config = ConfigDict(frozen=True)

    block_size: int = Field(default=BLOCK_SIZE_BYTES, gt=0)
    purge_stale_chunks: bool = True
    chunk_order: ChunkOrder = ChunkOrder.LEXICAL

    @classmethod
    def from_env(cls) -> "TransferConfig":
        """
        Build a config from CHUNKSPLIT_* environment variables.

        Unset variables keep their defaults.
        """
        values = {}
        if os.environ.get(ENV_BLOCK_SIZE):
            values["block_size"] = int(os.environ[ENV_BLOCK_SIZE])
        if os.environ.get(ENV_PURGE_STALE):
            values["purge_stale_chunks"] = os.environ[ENV_PURGE_STALE].lower() in ("1", "true", "yes", "on")
        if os.environ.get(ENV_CHUNK_ORDER):
            values["chunk_order"] = os.environ[ENV_CHUNK_ORDER].lower()
        return cls(**values)
