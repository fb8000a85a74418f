"""Shared pytest fixtures for all tests."""

import os

import pytest

import cli.commands
from cli.config import Config

SAMPLE_CONTENT = (b"chunksplit sample line\n" * 4)[:81]


@pytest.fixture(autouse=True)
def isolated_cli_config(tmp_path_factory, monkeypatch):
    """
    Point the CLI's global Config at a temporary file.

    Returns:
        Config instance used by cli.commands
    """
    config = Config(tmp_path_factory.mktemp('cli_home') / '.chunksplit' / 'config.json')
    monkeypatch.setattr(cli.commands, '_config', config)
    return config


@pytest.fixture
def temp_config_dir(tmp_path):
    """
    Create temporary config directory.

    Returns:
        Path to temporary .chunksplit directory
    """
    config_dir = tmp_path / 'cfg' / '.chunksplit'
    config_dir.mkdir(parents=True)
    return config_dir


@pytest.fixture
def temp_config(temp_config_dir):
    """
    Create temporary config instance.

    Returns:
        Config instance with temp config file
    """
    return Config(temp_config_dir / 'config.json')


@pytest.fixture
def sample_file(tmp_path):
    """
    Create the 81 byte sample file used by the split scenarios.

    Returns:
        Path to sample file
    """
    file_path = tmp_path / 'text.txt'
    file_path.write_bytes(SAMPLE_CONTENT)
    return file_path


@pytest.fixture
def large_file(tmp_path):
    """
    Create a file of random bytes spanning many transfer blocks.

    Returns:
        Path to the file
    """
    file_path = tmp_path / 'large.bin'
    file_path.write_bytes(os.urandom(100_003))
    return file_path


@pytest.fixture
def split_dir(tmp_path):
    """
    Destination directory for chunk files (not created).

    Returns:
        Path to the directory
    """
    return tmp_path / 'parts'
