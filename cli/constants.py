"""CLI constants and configuration."""

from prompt_toolkit.styles import Style

COMMANDS = ["split", "split-parts", "assemble", "verify", "config", "clear", "exit", "help"]

STYLE = Style.from_dict(
    {
        "prompt": "#2E9E6B bold",
        "command": "#0088ff bold",
    }
)

GREEN = "\033[38;2;46;158;107m"
RESET = "\033[0m"

LOGO = f"""{GREEN}
  ┌─┐┬ ┬┬ ┬┌┐┌┬┌─┌─┐┌─┐┬  ┬┌┬┐
  │  ├─┤│ ││││├┴┐└─┐├─┘│  │ │
  └─┘┴ ┴└─┘┘└┘┴ ┴└─┘┴  ┴─┘┴ ┴
{RESET}"""

WELCOME_TITLE = "chunksplit - split files into chunks and put them back together"
WELCOME_HELP = "Type 'help' for commands or 'exit' to quit.\n"

PROMPT_TEXT = "chunksplit> "

HELP_TEXT = """Available commands:
  split <source> <dest_dir> <size> [--name BASE] [--delete]
                                      Split a file into chunks of <size> (e.g. 10, 64KB, 2MB, 1GB)
  split-parts <source> <dest_dir> <parts> [--name BASE] [--delete]
                                      Split a file into at most <parts> chunks
  assemble <dest_file> <source_dir | chunk...> [--delete] [--numeric]
                                      Assemble a file from a directory or explicit chunk list
  verify <file_a> <file_b>            Compare the checksums of two files
  config                              Show effective configuration
  clear                               Clear screen and redisplay welcome message
  help                                Show this help
  exit                                Exit REPL

Chunk files are named <base>-<index>.split. Directories are assembled in
lexical name order; pass --numeric to order by chunk index instead.
Examples:
  split backup.tar parts 100MB --name backup
  split-parts video.mp4 parts 5
  assemble restored.tar parts
  assemble restored.tar parts/backup-0.split parts/backup-1.split
  verify backup.tar restored.tar"""

SIZE_UNITS = {
    "": 1,
    "B": 1,
    "K": 1024,
    "KB": 1024,
    "M": 1024 ** 2,
    "MB": 1024 ** 2,
    "G": 1024 ** 3,
    "GB": 1024 ** 3,
}
