"""Tests for ChunkSplitCompleter."""

import pytest
from pathlib import Path
from unittest.mock import patch

from prompt_toolkit.document import Document

from cli.completer import ChunkSplitCompleter
from cli.constants import COMMANDS


@pytest.fixture
def completer():
    """Create a ChunkSplitCompleter instance."""
    return ChunkSplitCompleter()


@pytest.fixture
def workdir(tmp_path):
    """
    Create a working directory with files and a chunk directory.

    Returns:
        Path to the directory
    """
    (tmp_path / "movie.mkv").write_text("content")
    (tmp_path / "music.mp3").write_text("content")
    (tmp_path / ".hidden").write_text("content")
    parts = tmp_path / "parts"
    parts.mkdir()
    (parts / "movie-0.split").write_text("content")
    return tmp_path


def get_completions_list(completer, text):
    """Helper to get list of completion texts from completer."""
    doc = Document(text, len(text))
    return [c.text for c in completer.get_completions(doc, None)]


class TestCommandCompletion:
    """Tests for command name completion."""

    def test_empty_input_shows_all_commands(self, completer):
        completions = get_completions_list(completer, "")
        for cmd in COMMANDS:
            assert cmd in completions

    def test_partial_command_filters(self, completer):
        completions = get_completions_list(completer, "spl")
        assert completions == ["split", "split-parts"]

    def test_command_completion_case_insensitive(self, completer):
        completions = get_completions_list(completer, "ASS")
        assert completions == ["assemble"]


class TestPathCompletion:
    """Tests for path completion in command arguments."""

    def test_lists_working_directory(self, completer, workdir):
        with patch.object(Path, "cwd", return_value=workdir):
            completions = get_completions_list(completer, "split ")
        assert completions == ["movie.mkv", "music.mp3", "parts/"]

    def test_filters_by_prefix(self, completer, workdir):
        with patch.object(Path, "cwd", return_value=workdir):
            completions = get_completions_list(completer, "split mo")
        assert completions == ["movie.mkv"]

    def test_hidden_files_need_dot_prefix(self, completer, workdir):
        with patch.object(Path, "cwd", return_value=workdir):
            completions = get_completions_list(completer, "verify .h")
        assert completions == [".hidden"]

    def test_descends_into_directories(self, completer, workdir):
        with patch.object(Path, "cwd", return_value=workdir):
            completions = get_completions_list(completer, "assemble out.mkv parts/")
        assert completions == ["parts/movie-0.split"]

    def test_absolute_paths(self, completer, workdir):
        completions = get_completions_list(completer, f"split {workdir}/mu")
        assert completions == [f"{workdir}/music.mp3"]

    def test_missing_directory_gives_nothing(self, completer, workdir):
        with patch.object(Path, "cwd", return_value=workdir):
            assert get_completions_list(completer, "split nowhere/") == []

    def test_no_path_completion_for_config(self, completer, workdir):
        with patch.object(Path, "cwd", return_value=workdir):
            assert get_completions_list(completer, "config ") == []


class TestOptionCompletion:
    """Tests for --option completion."""

    def test_split_options(self, completer):
        assert get_completions_list(completer, "split a b 10 --") == ["--name", "--delete"]

    def test_used_options_are_skipped(self, completer):
        assert get_completions_list(completer, "assemble out parts --delete --") == ["--numeric"]

    def test_verify_has_no_options(self, completer):
        assert get_completions_list(completer, "verify --") == []
