"""
Game Data Models

Contains the game state values and the serializable game snapshot.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional, Tuple


class GameState:
    """Base class for the states a game can be in."""

    @property
    def game_over(self) -> bool:
        return False

    @property
    def won(self) -> bool:
        return False

    @property
    def status(self) -> str:
        return type(self).__name__.upper()


@dataclass(frozen=True)
class Pending(GameState):
    """The game is not done yet."""
    attempts_remaining: int


@dataclass(frozen=True)
class Won(GameState):
    """The game is won; attempts is the number of guesses it took."""
    attempts: int

    @property
    def game_over(self) -> bool:
        return True

    @property
    def won(self) -> bool:
        return True


@dataclass(frozen=True)
class Lost(GameState):
    """All allowed guesses have failed."""

    @property
    def game_over(self) -> bool:
        return True


@dataclass
class GameSnapshot:
    """Serializable view of a registered game."""
    game_id: str
    word_length: int
    attempt_limit: int
    attempts_used: int
    status: str
    attempts_remaining: int
    guesses: List[str] = field(default_factory=list)
    guess_results: List[List[Tuple[str, str]]] = field(default_factory=list)  # Hint as string for JSON serialization
    answer: Optional[str] = None  # Only included when game is over

    @property
    def game_over(self) -> bool:
        return self.status != Pending.__name__.upper()

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['guess_results'] = [[list(pair) for pair in result] for result in self.guess_results]
        return data
