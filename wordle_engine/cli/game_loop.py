"""
Interactive Game Loop

Plays rounds of Wordle in the terminal until the player wants to stop.
"""

import time
from typing import Callable, Optional, TextIO

from ..config import Config
from ..models.errors import GuessError
from ..models.game import GameState, Lost, Pending, Won
from ..services.game_service import Game, GameService
from ..services.word_picker import WordPicker
from .terminal import Terminal, format_guess_hint, format_placeholder

EMPTY_GUESS = 'empty'
ALREADY_PLAYED = 'already_played'
LENGTH_INVALID = 'length_invalid'


def get_attempts_text(n: int) -> str:
    """Return "attempt" with the correct plural form."""
    return "attempt" if n == 1 else "attempts"


class GameLoop:
    """
    Terminal front end for the game service.

    Guesses and answers are read line by line from input_stream. Errors the
    engine reports are written to error_stream.
    """

    def __init__(self,
                 picker: WordPicker,
                 input_stream: TextIO,
                 output_stream: TextIO,
                 error_stream: Optional[TextIO] = None,
                 settings=Config,
                 sleep: Callable[[float], None] = time.sleep):
        self.service = GameService(picker, settings.ATTEMPT_LIMIT)
        self.input_stream = input_stream
        self.terminal = Terminal(output_stream)
        self.error_stream = error_stream or output_stream
        self.settings = settings
        self.sleep = sleep

    def run(self) -> None:
        self.terminal.switch_to_alternate_screen()
        try:
            self.print_welcome_screen()
            playing = True
            while playing:
                self.play_one_game()
                playing = self.ask_keep_playing()
        except EOFError:
            pass
        self.print_goodbye_screen()
        self.terminal.switch_from_alternate_screen()

    def print_welcome_screen(self) -> None:
        self.terminal.print("Welcome to WORDLE")
        self.sleep(self.settings.WELCOME_SCREEN_SLEEP_SECONDS)

    def print_goodbye_screen(self) -> None:
        self.terminal.clear_screen()
        self.terminal.print("Thanks for playing WORDLE.\n\nSee you soon!")
        self.sleep(self.settings.GOODBYE_SCREEN_SLEEP_SECONDS)

    def play_one_game(self) -> GameState:
        """Play a round with a freshly picked word and return its final state."""
        self.terminal.clear_screen()
        self.terminal.print("Playing one game of wordle")

        game_id = self.service.create_game()
        game = self.service.get_game(game_id)
        try:
            state = game.current_state()
            while not state.game_over:
                self.print_hints(game)
                state = self.try_to_guess_word(game_id, game, state)
        finally:
            self.service.delete_game(game_id)
        return state

    def try_to_guess_word(self, game_id: str, game: Game, state: GameState) -> GameState:
        guess = self.read_guess(game)
        try:
            state = self.service.submit_guess(game_id, guess)
        except GuessError as e:
            self.error_stream.write(f"{e}\n")
            return state

        self.terminal.clear_screen()
        if isinstance(state, Lost):
            self.print_hints(game)
            self.terminal.print(f"You lost :(\nThe word to guess was {game.target_word}.")
        elif isinstance(state, Won):
            self.print_hints(game)
            self.terminal.print(f"You win with {state.attempts} {get_attempts_text(state.attempts)} :)")
        elif isinstance(state, Pending):
            self.terminal.print(
                f"{state.attempts_remaining} {get_attempts_text(state.attempts_remaining)} remaining"
            )
        return state

    def print_hints(self, game: Game) -> None:
        if game.latest_hint() is None:
            self.terminal.print(format_placeholder(len(game.target_word)))
            return
        for guess_hint in game.hints():
            self.terminal.print(format_guess_hint(guess_hint))
            self.terminal.print()

    def read_line(self) -> str:
        line = self.input_stream.readline()
        if not line:
            raise EOFError("input closed")
        return line

    def read_guess(self, game: Game) -> str:
        """Prompt until the player types a word the game can accept."""
        first_error = True
        while True:
            self.terminal.write("Your guess: ")
            guess = self.read_line().strip().upper()
            error = self.get_guess_word_error(game, guess)
            if error is None:
                return guess
            self.print_guess_word_error(game, error, first_error)
            first_error = False

    @staticmethod
    def get_guess_word_error(game: Game, guess: str) -> Optional[str]:
        if not guess:
            return EMPTY_GUESS
        if len(guess) != len(game.target_word):
            return LENGTH_INVALID
        if game.has_guessed(guess):
            return ALREADY_PLAYED
        return None

    def print_guess_word_error(self, game: Game, error: str, first_error: bool) -> None:
        # Overwrite the previous prompt, and the previous message if any
        self.terminal.move_cursor_up(1 if first_error else 3)
        self.terminal.clear_to_end_of_screen()

        self.terminal.print()
        if error == EMPTY_GUESS:
            self.terminal.print("Please provide a guess word.")
        elif error == ALREADY_PLAYED:
            self.terminal.print("This word has already been played.")
        else:
            self.terminal.print(f"Please type a {len(game.target_word)}-letter word.")

    def ask_keep_playing(self) -> bool:
        while True:
            self.terminal.write("Do you want to keep playing? (y/n) ")
            try:
                answer = self.read_line().strip().upper()
            except EOFError:
                return False
            if answer in ("Y", "YES"):
                return True
            if answer in ("N", "NO"):
                return False
