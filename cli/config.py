"""Configuration management for the chunksplit CLI."""

import json
import shutil
import tempfile
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from common.constants import BLOCK_SIZE_BYTES
from common.logging_config import get_logger
from splitter.config import TransferConfig

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / '.chunksplit' / 'config.json'


class Config:
    """Manages CLI configuration stored in JSON file."""

    def __init__(self, config_path: Path):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to config JSON file (typically ~/.chunksplit/config.json)
        """
        self.config_path = config_path
        self.data = self._load()

    def _defaults(self) -> dict:
        """
        Build the default settings, taking transfer values from the environment.

        Returns:
            Configuration dictionary
        """
        try:
            transfer = TransferConfig.from_env()
        except ValueError as e:
            logger.warning(f"Ignoring invalid CHUNKSPLIT_* environment settings: {e}")
            transfer = TransferConfig()
        return {
            "block_size": transfer.block_size,
            "base_name": None,
            "chunk_order": transfer.chunk_order.value,
            "purge_stale_chunks": transfer.purge_stale_chunks,
            "log_level": "INFO",
        }

    def _load(self) -> dict:
        """
        Load configuration from file, creating defaults if necessary.

        Returns:
            Configuration dictionary
        """
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
        except PermissionError:
            self.config_path = Path(tempfile.gettempdir()) / '.chunksplit' / 'config.json'
            self.config_path.parent.mkdir(parents=True, exist_ok=True)

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    data = json.load(f)
                config = self._defaults()
                config.update(data)
                return config
            except (json.JSONDecodeError, IOError) as e:
                logger.warning(f"Config file {self.config_path} unreadable, using defaults: {e}")
                backup_path = self.config_path.with_suffix('.json.bak')
                try:
                    shutil.copy(self.config_path, backup_path)
                except OSError as copy_error:
                    logger.warning(f"Could not back up config file: {copy_error}")
                return self._defaults()
        else:
            config = self._defaults()
            try:
                with open(self.config_path, 'w') as f:
                    json.dump(config, f, indent=2)
            except IOError as e:
                logger.debug(f"Could not write default config: {e}")
            return config

    def save(self) -> None:
        """Save current configuration to file."""
        try:
            with open(self.config_path, 'w') as f:
                json.dump(self.data, f, indent=2)
        except IOError as e:
            logger.warning(f"Could not save config to {self.config_path}: {e}")

    def get_transfer_config(self) -> TransferConfig:
        """
        Build the settings passed to FileSplitter and FileAssembler.

        Returns:
            TransferConfig, or the defaults if the stored values are invalid
        """
        try:
            return TransferConfig(
                block_size=self.data.get('block_size', BLOCK_SIZE_BYTES),
                purge_stale_chunks=self.data.get('purge_stale_chunks', True),
                chunk_order=self.data.get('chunk_order', 'lexical'),
            )
        except ValidationError as e:
            logger.warning(f"Invalid transfer settings in {self.config_path}, using defaults: {e}")
            return TransferConfig()

    def get_base_name(self) -> Optional[str]:
        """
        Get the configured chunk base name.

        Returns:
            Base name, or None to derive it from the source file name
        """
        return self.data.get('base_name')

    def set_base_name(self, base_name: Optional[str]) -> None:
        self.data['base_name'] = base_name
        self.save()

    def get_log_level(self) -> str:
        return self.data.get('log_level', 'INFO')
