"""CLI entry point."""

import shlex
import sys
import os

from common.logging_config import setup_logging
from cli.commands import get_config
from cli.constants import HELP_TEXT
from cli.repl import repl_loop, run_command


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for CLI.

    With arguments, runs that single command and returns its exit code.
    Without, starts the interactive REPL.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    debug = '--debug' in args
    if debug:
        args.remove('--debug')

    log_level = 'DEBUG' if debug else os.getenv('LOG_LEVEL') or get_config().get_log_level()
    setup_logging('cli', log_level=log_level)
    logger = setup_logging('splitter', log_level=log_level)

    if debug:
        logger.info("Debug logging enabled")

    if args:
        if args[0] in ('help', '--help', '-h'):
            print(HELP_TEXT)
            return 0
        success, message = run_command(shlex.join(args))
        print(message, file=sys.stdout if success else sys.stderr)
        return 0 if success else 1

    logger.info("CLI starting...")
    try:
        repl_loop()
    except Exception as e:
        logger.error(f"CLI error: {e}", exc_info=True)
        raise
    finally:
        logger.info("CLI exiting")
    return 0


if __name__ == "__main__":
    sys.exit(main())
