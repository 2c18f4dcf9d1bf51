"""The read-compare-respond loop of a single game session.

A :class:`GameLoop` draws a secret number from the random source it is given,
then plays turns until a guess matches. Each turn moves through
``AwaitingInput -> Validating -> Comparing`` and either continues or ends the
game. Invalid input is fatal: :meth:`GameLoop.run` lets the error propagate
instead of asking again.

Example:
    Play a scripted game with a seeded random source::

        import io
        import random

        from guessing_game.game import GameLoop

        out = io.StringIO()
        loop = GameLoop(rng=random.Random(7), stdin=io.StringIO(), out=out)
        loop.play_turn("50")
        print(loop.attempts)  # 1
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TextIO

from weakincentives import FrozenDataclass

from guessing_game.errors import GameOverError, InputStreamError
from guessing_game.guess import BoundedGuess, parse_guess
from guessing_game.messages import TOO_LARGE, TOO_SMALL, RandomSource, pick

logger = logging.getLogger(__name__)

# The secret is drawn from [SECRET_MIN, SECRET_MAX).
SECRET_MIN = 0
SECRET_MAX = 100

WELCOME_LINES = (
    "Welcome to the guessing game of epic proportions!",
    "Alrighty, what number are you tossing into the ring today?",
)
VICTORY_HEADLINE = "Cue the confetti!!"
VICTORY_SUMMARY = (
    "The secret number is indeed {secret}! You guessed it right with only {attempts} tries! "
)


class Comparison(Enum):
    """Where a guess sits relative to the secret number."""

    LESS = "less"
    GREATER = "greater"
    EQUAL = "equal"

    @classmethod
    def of(cls, guess: int, secret: int) -> Comparison:
        if guess < secret:
            return cls.LESS
        if guess > secret:
            return cls.GREATER
        return cls.EQUAL


@FrozenDataclass()
class TurnResult:
    """Outcome of one accepted turn.

    Attributes:
        guess: The validated guess that was compared.
        comparison: How the guess compared to the secret.
        lines: The lines written to the output for this turn.
        attempts: The attempt count after this turn.
    """

    guess: BoundedGuess
    comparison: Comparison
    lines: tuple[str, ...]
    attempts: int

    @property
    def won(self) -> bool:
        return self.comparison is Comparison.EQUAL


class GameLoop:
    """One game session: a secret number, an attempt counter and I/O streams.

    The secret is drawn once at construction with ``rng.randrange(0, 100)``.
    The same ``rng`` draws a flavor-text index from each pool on every
    accepted turn.

    Attributes:
        secret_number: The number the player is trying to guess.
        attempts: Accepted guesses so far, including a winning one.
        finished: True once a guess has matched the secret.
    """

    def __init__(
        self,
        *,
        rng: RandomSource,
        stdin: TextIO,
        out: TextIO,
    ) -> None:
        self._rng = rng
        self._stdin = stdin
        self._out = out
        self._secret_number = rng.randrange(SECRET_MIN, SECRET_MAX)
        self._attempts = 0
        self._finished = False
        logger.debug("Drew secret number %d", self._secret_number)

    @property
    def secret_number(self) -> int:
        return self._secret_number

    @property
    def attempts(self) -> int:
        return self._attempts

    @property
    def finished(self) -> bool:
        return self._finished

    def play_turn(self, line: str) -> TurnResult:
        """Validate one raw input line, compare it and write the response.

        Parsing and range validation happen before any state changes, so a
        rejected line leaves the attempt counter untouched and writes nothing.

        Args:
            line: One line of player input, with or without its newline.

        Returns:
            TurnResult: The guess, the comparison, the lines written and the
                attempt count after the turn.

        Raises:
            GuessParseError: If ``line`` is not an integer.
            GuessRangeError: If the integer is outside ``[1, 100]``.
            GameOverError: If the game has already been won.
        """
        if self._finished:
            raise GameOverError("the secret number has already been guessed")

        guess = BoundedGuess(value=parse_guess(line))
        self._attempts += 1
        comparison = Comparison.of(guess.value, self._secret_number)

        # One index per pool every turn; the pool not taken is discarded.
        too_small = pick(TOO_SMALL, self._rng)
        too_large = pick(TOO_LARGE, self._rng)

        if comparison is Comparison.LESS:
            lines: tuple[str, ...] = (too_small,)
        elif comparison is Comparison.GREATER:
            lines = (too_large,)
        else:
            lines = (
                VICTORY_HEADLINE,
                VICTORY_SUMMARY.format(secret=self._secret_number, attempts=self._attempts),
            )
            self._finished = True

        for text in lines:
            self._out.write(f"{text}\n")

        logger.debug(
            "Turn %d: guess %d is %s",
            self._attempts,
            guess.value,
            comparison.value,
        )
        if self._finished:
            logger.info("Secret number guessed after %d attempts", self._attempts)

        return TurnResult(
            guess=guess,
            comparison=comparison,
            lines=lines,
            attempts=self._attempts,
        )

    def read_line(self) -> str:
        """Block until one line is available on the input stream.

        Raises:
            InputStreamError: If reading or decoding fails, or the stream is at
                end of file.
        """
        try:
            line = self._stdin.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise InputStreamError(f"Failed to read guess: {e}") from e
        if not line:
            raise InputStreamError("Input closed before the secret number was guessed")
        return line

    def run(self) -> None:
        """Greet the player and play turns until the secret is guessed.

        Any :class:`~guessing_game.errors.GameError` raised by a turn ends
        the session and propagates to the caller.
        """
        for text in WELCOME_LINES:
            self._out.write(f"{text}\n")

        while not self._finished:
            self.play_turn(self.read_line())
