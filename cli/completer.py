"""Custom completer for the chunksplit CLI with path autocompletion."""

from pathlib import Path
from typing import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from cli.constants import COMMANDS

PATH_COMMANDS = ("split", "split-parts", "assemble", "verify")
OPTIONS = {
    "split": ("--name", "--delete"),
    "split-parts": ("--name", "--delete"),
    "assemble": ("--delete", "--numeric"),
}


class ChunkSplitCompleter(Completer):
    """
    Custom completer that provides:
    - Command name completion for the first token
    - Option completion for tokens starting with '--'
    - File and directory path completion for command arguments
    """

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        text = document.text_before_cursor
        tokens = text.split()

        is_typing_new_token = text.endswith(" ") or not tokens

        if not tokens or (len(tokens) == 1 and not is_typing_new_token):
            yield from self._complete_commands(tokens[0] if tokens else "")
            return

        command = tokens[0].lower()
        if command not in PATH_COMMANDS:
            return

        current_word = "" if is_typing_new_token else tokens[-1]
        if current_word.startswith("-"):
            yield from self._complete_options(command, current_word, set(tokens[1:]))
            return

        yield from self._complete_paths(current_word)

    def _complete_commands(self, partial: str) -> Iterable[Completion]:
        """Complete command names matching the partial input."""
        partial_lower = partial.lower()
        for cmd in COMMANDS:
            if cmd.startswith(partial_lower):
                yield Completion(cmd, start_position=-len(partial))

    def _complete_options(self, command: str, partial: str, used: set) -> Iterable[Completion]:
        for option in OPTIONS.get(command, ()):
            if option.startswith(partial) and option not in used:
                yield Completion(option, start_position=-len(partial))

    def _complete_paths(self, partial: str) -> Iterable[Completion]:
        """
        Complete file and directory names relative to the working directory.

        Directories are suggested with a trailing '/', hidden entries only
        when the partial name starts with '.'.
        """
        if "/" in partial:
            dir_part, name_part = partial.rsplit("/", 1)
            dir_part += "/"
        else:
            dir_part, name_part = "", partial

        base = Path(dir_part) if Path(dir_part).is_absolute() else Path.cwd() / dir_part
        if not base.is_dir():
            return

        try:
            entries = sorted(base.iterdir(), key=lambda p: p.name)
        except OSError:
            return

        for entry in entries:
            if entry.name.startswith(".") and not name_part.startswith("."):
                continue
            if not entry.name.startswith(name_part):
                continue
            suffix = "/" if entry.is_dir() else ""
            yield Completion(
                f"{dir_part}{entry.name}{suffix}",
                start_position=-len(partial),
                display=f"{entry.name}{suffix}",
            )
