"""REPL with prompt_toolkit for user interaction."""

import os
import sys
from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from common.exceptions import ChunkSplitError
from cli.commands import (
    handle_assemble,
    handle_config,
    handle_split,
    handle_split_parts,
    handle_verify,
)
from cli.completer import ChunkSplitCompleter
from cli.constants import (
    HELP_TEXT,
    LOGO,
    PROMPT_TEXT,
    STYLE,
    WELCOME_HELP,
    WELCOME_TITLE,
)
from cli.models import (
    AssembleCommand,
    ConfigCommand,
    SplitPartsCommand,
    SplitSizeCommand,
    VerifyCommand,
)
from cli.parser import ParseError, parse_command


def clear_screen() -> None:
    """Clear the terminal screen (cross-platform)."""
    if sys.platform == "win32":
        os.system("cls")
    else:
        os.system("clear")


def show_welcome() -> None:
    print(LOGO)
    print(WELCOME_TITLE)
    print(WELCOME_HELP)


def dispatch_command(cmd_obj) -> str:
    """Dispatch parsed command to appropriate handler."""
    if isinstance(cmd_obj, SplitSizeCommand):
        return handle_split(cmd_obj)
    elif isinstance(cmd_obj, SplitPartsCommand):
        return handle_split_parts(cmd_obj)
    elif isinstance(cmd_obj, AssembleCommand):
        return handle_assemble(cmd_obj)
    elif isinstance(cmd_obj, VerifyCommand):
        return handle_verify(cmd_obj)
    elif isinstance(cmd_obj, ConfigCommand):
        return handle_config(cmd_obj)
    else:
        return f"Unknown command type: {type(cmd_obj)}"


def run_command(input_line: str) -> tuple[bool, str]:
    """
    Parse and execute one command line.

    Returns:
        (success, message) where message is the handler output or the error
    """
    try:
        cmd_obj = parse_command(input_line)
        return True, dispatch_command(cmd_obj)
    except (ParseError, ChunkSplitError, OSError) as e:
        return False, f"Error: {e}"


def repl_loop() -> None:
    """Start interactive REPL with prompt_toolkit."""
    history = InMemoryHistory()
    session: PromptSession = PromptSession(
        completer=ChunkSplitCompleter(), history=history, style=STYLE
    )

    clear_screen()
    show_welcome()

    while True:
        try:
            user_input = session.prompt([("class:prompt", PROMPT_TEXT)])

            if not user_input.strip():
                continue

            if user_input.strip() == "exit":
                print("Goodbye!")
                break

            if user_input.strip() == "help":
                print(HELP_TEXT)
                continue

            if user_input.strip() == "clear":
                clear_screen()
                show_welcome()
                continue

            _, message = run_command(user_input)
            print(message)

        except KeyboardInterrupt:
            continue
        except EOFError:
            print("\nGoodbye!")
            break
