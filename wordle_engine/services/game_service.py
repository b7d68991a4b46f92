"""
Game Service

Contains the rules of a single Wordle game and the registry that hands out
opaque ids for games played through the service.
"""

import uuid
from typing import Dict, List, Optional, Tuple

from ..config import Config, DEFAULT_ATTEMPT_LIMIT, MIN_ATTEMPT_LIMIT, normalize_word
from ..models.errors import (
    AlreadyGuessedError,
    EmptyTargetError,
    GameCreationError,
    GameNotFoundError,
    GuessError,
    InvalidAttemptLimitError,
    LengthMismatchError,
)
from ..models.game import GameSnapshot, GameState, Lost, Pending, Won
from ..models.hint import GuessHint
from ..utils.game_logger import game_logger
from .word_picker import WordPicker


class Game:
    """
    One round of Wordle.

    The game owns the word to guess, the guesses submitted so far and the
    attempt limit. Its state is derived from the guesses on every query.

    A game does not refuse guesses once it is won or lost; stopping is up
    to the caller.
    """

    def __init__(self, target_word: str, attempt_limit: int = DEFAULT_ATTEMPT_LIMIT):
        """
        Args:
            target_word: The word to guess, in any case
            attempt_limit: Number of guesses allowed before the game is lost

        Raises:
            EmptyTargetError: If target_word is empty
            InvalidAttemptLimitError: If attempt_limit is lower than 1
        """
        if not target_word:
            raise EmptyTargetError()
        if attempt_limit < MIN_ATTEMPT_LIMIT:
            raise InvalidAttemptLimitError(attempt_limit)

        self._target_word = normalize_word(target_word)
        self._attempt_limit = attempt_limit
        self._guesses: List[str] = []

    @classmethod
    def with_attempt_limit(cls, target_word: str, attempt_limit: int) -> "Game":
        """New game with a custom attempt limit."""
        return cls(target_word, attempt_limit)

    @property
    def target_word(self) -> str:
        return self._target_word

    @property
    def attempt_limit(self) -> int:
        return self._attempt_limit

    @property
    def guess_history(self) -> Tuple[str, ...]:
        """Guesses from oldest to newest, uppercase."""
        return tuple(self._guesses)

    def has_guessed(self, guess: str) -> bool:
        return normalize_word(guess) in self._guesses

    def submit_guess(self, guess: str) -> GameState:
        """
        Attempt to perform a guess.

        Returns:
            GameState: The state right after the guess was recorded

        Raises:
            LengthMismatchError: If the guess length differs from the target's
            AlreadyGuessedError: If the same word was already played
        """
        guess = normalize_word(guess)
        if len(guess) != len(self._target_word):
            raise LengthMismatchError(given=len(guess), expected=len(self._target_word))
        if guess in self._guesses:
            raise AlreadyGuessedError(guess)

        self._guesses.append(guess)
        return self.current_state()

    def current_state(self) -> GameState:
        """
        Derive the game state from the guesses.

        A winning last guess takes priority over an exhausted attempt limit.
        """
        if self._guesses and self._guesses[-1] == self._target_word:
            return Won(attempts=len(self._guesses))
        if len(self._guesses) >= self._attempt_limit:
            return Lost()
        return Pending(attempts_remaining=self._attempt_limit - len(self._guesses))

    def hint_for(self, index: int) -> GuessHint:
        """
        Hints for the guess at the given history index.

        Raises:
            IndexError: If no guess was recorded at that index
        """
        if index < 0:
            raise IndexError(f"Guess history index must not be negative, got {index}")
        return GuessHint(self._guesses[index], self._target_word)

    def hints(self) -> List[GuessHint]:
        """Hints for every guess, from oldest to newest."""
        return [GuessHint(guess, self._target_word) for guess in self._guesses]

    def latest_hint(self) -> Optional[GuessHint]:
        if not self._guesses:
            return None
        return GuessHint(self._guesses[-1], self._target_word)

    def __repr__(self) -> str:
        return (f"Game(word_length={len(self._target_word)}, "
                f"attempt_limit={self._attempt_limit}, guesses={len(self._guesses)})")


class GameService:
    """
    Registry of games played through opaque ids.

    This class handles:
    - Game creation, drawing the word from a picker when none is given
    - Guess submission and state queries by game id
    - Snapshots that never expose the answer before the game is over
    """

    def __init__(self, picker: Optional[WordPicker] = None, attempt_limit: Optional[int] = None):
        self.games: Dict[str, Game] = {}  # Store active games by game_id
        self.picker = picker
        self.attempt_limit = attempt_limit if attempt_limit is not None else Config.ATTEMPT_LIMIT

    def create_game(self, target_word: Optional[str] = None, attempt_limit: Optional[int] = None) -> str:
        """
        Creates a new game.

        Args:
            target_word: Word to guess; picked from the service's picker if omitted
            attempt_limit: Overrides the service default

        Returns:
            str: Unique game ID for this game

        Raises:
            GameCreationError: If the word or the attempt limit is invalid
            ValueError: If no word is given and the service has no picker
        """
        if target_word is None:
            if self.picker is None:
                raise ValueError("A target word is required when no word picker is configured")
            target_word = self.picker.pick_word()

        limit = attempt_limit if attempt_limit is not None else self.attempt_limit
        try:
            game = Game(target_word, limit)
        except GameCreationError as e:
            game_logger.log_error(e, 'create_game')
            raise

        game_id = str(uuid.uuid4())
        self.games[game_id] = game
        game_logger.log_game_event(
            game_id, 'game_created',
            word_length=len(game.target_word), attempt_limit=game.attempt_limit
        )
        return game_id

    def get_game(self, game_id: str) -> Game:
        """
        Raises:
            GameNotFoundError: If no game is registered under game_id
        """
        try:
            return self.games[game_id]
        except KeyError:
            raise GameNotFoundError(game_id) from None

    def submit_guess(self, game_id: str, guess: str) -> GameState:
        """
        Processes a guess for a registered game.

        Raises:
            GameNotFoundError: If the game does not exist
            GuessError: If the guess is rejected; the game is left untouched
        """
        game = self.get_game(game_id)
        try:
            state = game.submit_guess(guess)
        except GuessError as e:
            game_logger.log_guess(game_id, guess, accepted=False, reason=type(e).__name__)
            raise

        game_logger.log_guess(game_id, normalize_word(guess), accepted=True, status=state.status)
        if isinstance(state, Won):
            game_logger.log_game_event(game_id, 'game_won', attempts=state.attempts)
        elif isinstance(state, Lost):
            game_logger.log_game_event(game_id, 'game_lost', attempts=len(game.guess_history))
        return state

    def get_state(self, game_id: str) -> GameState:
        return self.get_game(game_id).current_state()

    def get_hints(self, game_id: str) -> List[GuessHint]:
        return self.get_game(game_id).hints()

    def get_latest_hint(self, game_id: str) -> Optional[GuessHint]:
        return self.get_game(game_id).latest_hint()

    def get_target_word(self, game_id: str) -> str:
        return self.get_game(game_id).target_word

    def get_snapshot(self, game_id: str) -> GameSnapshot:
        """
        Returns the serializable state of a game (without revealing the answer).

        Raises:
            GameNotFoundError: If the game does not exist
        """
        game = self.get_game(game_id)
        state = game.current_state()
        guesses = list(game.guess_history)

        return GameSnapshot(
            game_id=game_id,
            word_length=len(game.target_word),
            attempt_limit=game.attempt_limit,
            attempts_used=len(guesses),
            status=state.status,
            attempts_remaining=state.attempts_remaining if isinstance(state, Pending) else 0,
            guesses=guesses,
            guess_results=[
                [(letter, hint.value) for letter, hint in guess_hint.guessed_letters_and_hints()]
                for guess_hint in game.hints()
            ],
            answer=game.target_word if state.game_over else None
        )

    def active_game_ids(self) -> List[str]:
        return list(self.games)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            game_logger.log_game_event(game_id, 'game_deleted')
            return True
        return False
