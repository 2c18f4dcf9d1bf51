"""Exception hierarchy for the guessing game.

Every failure during a game session is fatal: nothing is retried inside the
loop. Errors propagate out of :meth:`guessing_game.game.GameLoop.run` and the
CLI turns them into a one-line message on stderr and exit code 1.

Example:
    >>> from guessing_game.errors import GameError, GuessRangeError
    >>> issubclass(GuessRangeError, GameError)
    True
"""


class GameError(Exception):
    """Base class for all errors raised by a game session."""


class GuessParseError(GameError, ValueError):
    """Raised when an input line cannot be parsed as a base-10 integer.

    Attributes:
        raw: The offending input line with surrounding whitespace stripped.
    """

    def __init__(self, raw: str) -> None:
        super().__init__(f"guess must be a number, got {raw!r}")
        self.raw = raw


class GuessRangeError(GameError, ValueError):
    """Raised when a parsed guess falls outside the accepted range.

    Attributes:
        value: The rejected integer.
    """

    def __init__(self, value: int, *, minimum: int, maximum: int) -> None:
        super().__init__(f"Guess value must be between {minimum} and {maximum}, got {value}")
        self.value = value


class InputStreamError(GameError):
    """Raised when the input stream fails or closes before the game is won."""


class GameOverError(GameError):
    """Raised when a turn is played on a game that has already been won."""
