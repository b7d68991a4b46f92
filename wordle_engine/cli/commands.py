"""
Help and version output.
"""

from typing import TextIO

from colorama import Style
from colorama.ansi import code_to_chars

from .. import __version__

UNDERLINE = code_to_chars(4)

HELP_TEMPLATE = """{exec}
    Play wordle in the terminal. See the {bold}GAME{reset} section.

SYNOPSIS
    {exec} version      Display the binary version.
    {exec} --version    Same as above.
    {exec} -v           Same as above.
    {exec} help         Display this help message.
    {exec} --help       Same as above.
    {exec} -h           Same as above.
    {exec} [file path]  Play wordle picking a random word.

GAME
    The word is picked from the input file, randomly.
    The file is expected to contain one word per line.
    Line terminator is {underline}'\\n'{reset}.
    Empty lines are discarded.

    If no files are specified, then read words from {bold}STDIN{reset}."""


def generate_help_output(exec_name: str) -> str:
    return HELP_TEMPLATE.format(
        exec=exec_name, bold=Style.BRIGHT, underline=UNDERLINE, reset=Style.RESET_ALL
    )


def generate_version_output(exec_name: str, version: str = __version__) -> str:
    """
    Raises:
        ValueError: If the executable name or the version is empty
    """
    if not exec_name:
        raise ValueError("executable name must not be empty")
    if not version:
        raise ValueError("version must not be empty")
    return f"{exec_name} version {version}"


def write_help(stream: TextIO, exec_name: str) -> None:
    stream.write(generate_help_output(exec_name) + "\n")


def write_version(stream: TextIO, exec_name: str) -> None:
    stream.write(generate_version_output(exec_name) + "\n")
