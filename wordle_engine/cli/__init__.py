"""
Terminal front end for Wordle.

Parses the process arguments, then shows help, the version, or plays games
with words read from a file or STDIN.
"""

import sys
from typing import Optional, Sequence

import colorama

from ..config import get_config
from ..models.errors import NoWordsError, WordleError
from ..services.word_picker import RandomWordPicker
from .arguments import (
    HELP,
    VERSION,
    Command,
    CommandError,
    ExecMissingError,
    UnexpectedArgumentsError,
    parse_command,
)
from .commands import write_help, write_version
from .game_loop import GameLoop

TTY_PATH = '/dev/tty'


def run_game(command: Command, settings=None) -> None:
    """
    Load the words and play until the player stops.

    When words come from STDIN, guesses are read from the controlling
    terminal instead.

    Raises:
        OSError: If the words or the terminal cannot be read
        NoWordsError: If no words were loaded
        InvalidWordListError: If a loaded word cannot be played
    """
    settings = settings or get_config()
    if command.reads_stdin:
        picker = RandomWordPicker.from_stream(sys.stdin)
        with open(TTY_PATH, 'r') as tty:
            GameLoop(picker, tty, sys.stdout, sys.stderr, settings).run()
    else:
        picker = RandomWordPicker.from_path(command.input_path)
        GameLoop(picker, sys.stdin, sys.stdout, sys.stderr, settings).run()


def execute(command: Command) -> None:
    """Attempt to execute the given command."""
    if command.name == VERSION:
        write_version(sys.stdout, command.exec_name)
    elif command.name == HELP:
        write_help(sys.stdout, command.exec_name)
    else:
        run_game(command)


def display_command_error(error: CommandError, exec_name: str) -> None:
    if isinstance(error, ExecMissingError):
        print("fatal error: could not retrieve executable name", file=sys.stderr)
    elif isinstance(error, UnexpectedArgumentsError):
        print(f"{error}\nRun `{exec_name} help` for usage.", file=sys.stderr)
    else:
        print(f"error: {error}", file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point; returns the process exit code."""
    argv = list(sys.argv if argv is None else argv)
    colorama.just_fix_windows_console()

    try:
        command = parse_command(argv)
    except CommandError as e:
        display_command_error(e, argv[0] if argv else "wordle")
        return 1

    try:
        execute(command)
    except OSError as e:
        print(f"io error: {e}", file=sys.stderr)
        return 1
    except NoWordsError:
        print("provided file did not contain any word", file=sys.stderr)
        return 1
    except WordleError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0
