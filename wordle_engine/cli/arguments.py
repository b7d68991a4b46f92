"""
Command Line Arguments

Maps the process arguments to the command to run:

    wordle                  play, reading words from STDIN
    wordle [file path]      play, reading words from a file
    wordle help|--help|-h   display the help message
    wordle version|--version|-v
                            display the version
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

HELP = 'help'
VERSION = 'version'
RUN = 'run'

HELP_WORDS = ('help', '--help', '-h')
VERSION_WORDS = ('version', '--version', '-v')


@dataclass(frozen=True)
class Command:
    """A command to execute, with the executable name as it was invoked."""
    name: str
    exec_name: str
    input_path: Optional[Path] = None  # None means STDIN

    @property
    def reads_stdin(self) -> bool:
        return self.name == RUN and self.input_path is None


class CommandError(Exception):
    """The process arguments could not be understood."""


class ExecMissingError(CommandError):
    """The executable name, conventionally the first argument, was missing."""

    def __init__(self):
        super().__init__("could not retrieve executable name")


class UnexpectedArgumentsError(CommandError):
    """A command was identified but extra arguments were found."""

    def __init__(self, command: str, arguments: List[str]):
        self.command = command
        self.arguments = arguments
        super().__init__(f"Did not expect arguments `{','.join(arguments)}` for command `{command}`.")


def parse_command(argv: Sequence[str]) -> Command:
    """
    Get the command to run from the process arguments.

    Only the first argument after the executable name selects the command;
    anything after it is unexpected, whatever it looks like.

    Args:
        argv: Arguments including the executable name, as in sys.argv

    Raises:
        ExecMissingError: If argv is empty
        UnexpectedArgumentsError: If arguments remain once the command is known
    """
    if not argv:
        raise ExecMissingError()

    exec_name = argv[0]
    if len(argv) == 1:
        return Command(RUN, exec_name)

    first, remaining = argv[1], list(argv[2:])
    if first in HELP_WORDS:
        name, error_name = HELP, HELP
    elif first in VERSION_WORDS:
        name, error_name = VERSION, VERSION
    else:
        name, error_name = RUN, 'input-file'

    if remaining:
        raise UnexpectedArgumentsError(error_name, remaining)
    if name == RUN:
        return Command(RUN, exec_name, Path(first))
    return Command(name, exec_name)
