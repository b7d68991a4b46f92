"""
Game Errors

Every failure the engine reports to its callers. All of them are recoverable:
callers are expected to re-prompt or report the specific error.
"""


class WordleError(Exception):
    """Base class for all engine errors."""


class GameCreationError(WordleError, ValueError):
    """A new game could not be created."""


class EmptyTargetError(GameCreationError):
    """The target word was empty."""

    def __init__(self):
        super().__init__("Target word must not be empty")


class InvalidAttemptLimitError(GameCreationError):
    """The attempt limit was lower than one."""

    def __init__(self, attempt_limit: int):
        self.attempt_limit = attempt_limit
        super().__init__(f"Attempt limit must be at least 1, got {attempt_limit}")


class GuessError(WordleError, ValueError):
    """A guess was rejected; the game was left untouched."""


class LengthMismatchError(GuessError):
    """The guess length did not match the target word length."""

    def __init__(self, given: int, expected: int):
        self.given = given
        self.expected = expected
        super().__init__(f"Submitted word has invalid length {given}: expected {expected}")


class AlreadyGuessedError(GuessError):
    """The guess was already submitted earlier in the same game."""

    def __init__(self, guess: str):
        self.guess = guess
        super().__init__(f"The word {guess} has already been played")


class GameNotFoundError(WordleError, LookupError):
    """No game is registered under the given id."""

    def __init__(self, game_id: str):
        self.game_id = game_id
        super().__init__(f"Game not found: {game_id}")


class NoWordsError(WordleError):
    """A word picker was given no words to pick from."""

    def __init__(self, message: str = "No words to pick from"):
        super().__init__(message)


class InvalidWordListError(WordleError, ValueError):
    """A word list held an entry that cannot be played."""
