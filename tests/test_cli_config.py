"""Tests for CLI configuration module."""

import json

from common.types import ChunkOrder
from cli.config import Config


def test_config_creates_default_file(tmp_path):
    """Test that config file is created with defaults if missing."""
    config_path = tmp_path / '.chunksplit' / 'config.json'
    config = Config(config_path)

    assert config_path.exists()

    assert config.data['block_size'] == 8192
    assert config.data['base_name'] is None
    assert config.data['chunk_order'] == 'lexical'
    assert config.data['purge_stale_chunks'] is True
    assert config.data['log_level'] == 'INFO'


def test_config_loads_existing_file(tmp_path):
    """Test loading existing config file."""
    config_path = tmp_path / '.chunksplit' / 'config.json'
    config_path.parent.mkdir(parents=True)

    with open(config_path, 'w') as f:
        json.dump({'block_size': 1024, 'chunk_order': 'index'}, f)

    config = Config(config_path)

    assert config.data['block_size'] == 1024
    assert config.data['chunk_order'] == 'index'
    assert config.data['purge_stale_chunks'] is True


def test_config_handles_corrupted_file(tmp_path):
    """Test recovery from corrupted config file."""
    config_path = tmp_path / '.chunksplit' / 'config.json'
    config_path.parent.mkdir(parents=True)

    with open(config_path, 'w') as f:
        f.write('{ invalid json content')

    config = Config(config_path)
    assert config.data['block_size'] == 8192

    backup_path = config_path.with_suffix('.json.bak')
    assert backup_path.exists()


def test_config_transfer_config(temp_config):
    temp_config.data['block_size'] = 512
    temp_config.data['chunk_order'] = 'index'
    temp_config.data['purge_stale_chunks'] = False

    transfer = temp_config.get_transfer_config()

    assert transfer.block_size == 512
    assert transfer.chunk_order is ChunkOrder.INDEX
    assert transfer.purge_stale_chunks is False


def test_config_invalid_transfer_settings_fall_back(temp_config):
    temp_config.data['block_size'] = 0
    temp_config.data['chunk_order'] = 'random'

    transfer = temp_config.get_transfer_config()

    assert transfer.block_size == 8192
    assert transfer.chunk_order is ChunkOrder.LEXICAL


def test_config_save_and_get_base_name(temp_config):
    assert temp_config.get_base_name() is None

    temp_config.set_base_name('backup')

    assert temp_config.get_base_name() == 'backup'
    with open(temp_config.config_path, 'r') as f:
        assert json.load(f)['base_name'] == 'backup'


def test_config_directory_created_if_missing(tmp_path):
    """Test that config directory is created if it doesn't exist."""
    config_path = tmp_path / 'nested' / 'deep' / '.chunksplit' / 'config.json'

    assert not config_path.parent.exists()

    Config(config_path)
    assert config_path.parent.exists()
    assert config_path.exists()


def test_config_defaults_follow_environment(tmp_path, monkeypatch):
    monkeypatch.setenv('CHUNKSPLIT_PURGE_STALE', 'false')
    monkeypatch.setenv('CHUNKSPLIT_BLOCK_SIZE', '1024')
    monkeypatch.setenv('CHUNKSPLIT_CHUNK_ORDER', 'INDEX')

    config = Config(tmp_path / 'env' / '.chunksplit' / 'config.json')
    transfer = config.get_transfer_config()

    assert config.data['purge_stale_chunks'] is False
    assert transfer.purge_stale_chunks is False
    assert transfer.block_size == 1024
    assert transfer.chunk_order is ChunkOrder.INDEX


def test_config_file_overrides_environment(tmp_path, monkeypatch):
    monkeypatch.setenv('CHUNKSPLIT_PURGE_STALE', 'false')
    config_path = tmp_path / 'env' / '.chunksplit' / 'config.json'
    config_path.parent.mkdir(parents=True)
    with open(config_path, 'w') as f:
        json.dump({'purge_stale_chunks': True}, f)

    assert Config(config_path).data['purge_stale_chunks'] is True


def test_config_invalid_environment_falls_back(tmp_path, monkeypatch):
    monkeypatch.setenv('CHUNKSPLIT_BLOCK_SIZE', 'lots')

    config = Config(tmp_path / 'env' / '.chunksplit' / 'config.json')

    assert config.data['block_size'] == 8192
