"""
Terminal Output

Colours letters by hint and drives the screen with ANSI escape codes.
"""

from typing import TextIO

from colorama import Back, Cursor, Style
from colorama.ansi import CSI, clear_screen

from ..models.hint import GuessHint, LetterHint

ALTERNATE_SCREEN_ON = CSI + '?1049h'
ALTERNATE_SCREEN_OFF = CSI + '?1049l'


def format_letter(letter: str, hint: LetterHint) -> str:
    if hint is LetterHint.CORRECT:
        return Back.GREEN + letter + Style.RESET_ALL
    if hint is LetterHint.PLACEMENT_INCORRECT:
        return Back.YELLOW + letter + Style.RESET_ALL
    return letter


def format_guess_hint(guess_hint: GuessHint) -> str:
    """One guess as space separated, coloured letters."""
    return " ".join(format_letter(letter, hint) for letter, hint in guess_hint.guessed_letters_and_hints())


def format_placeholder(word_length: int) -> str:
    return f"{'-' * word_length} ({word_length} characters)"


class Terminal:
    """Writes text and screen-control sequences to an output stream."""

    def __init__(self, stream: TextIO):
        self.stream = stream

    def write(self, text: str = "") -> None:
        self.stream.write(text)
        self.stream.flush()

    def print(self, text: str = "") -> None:
        self.write(text + "\n")

    def clear_screen(self) -> None:
        """Clear the entire screen and place the cursor at the top left."""
        self.write(clear_screen() + Cursor.POS(1, 1))

    def switch_to_alternate_screen(self) -> None:
        self.write(ALTERNATE_SCREEN_ON)
        self.clear_screen()

    def switch_from_alternate_screen(self) -> None:
        self.write(ALTERNATE_SCREEN_OFF)

    def move_cursor_up(self, lines: int) -> None:
        self.write(Cursor.UP(lines))

    def clear_to_end_of_screen(self) -> None:
        self.write(clear_screen(0))
