"""Validated guess values.

A :class:`BoundedGuess` can only exist with a value inside
``[MIN_GUESS, MAX_GUESS]``. Out-of-range values are rejected at construction
and never clamped. Turning raw text into an integer is a separate step,
:func:`parse_guess`, so callers see parse failures and range violations as
distinct errors.

Example:
    >>> from guessing_game.guess import BoundedGuess, parse_guess
    >>> BoundedGuess(value=parse_guess(" 42\\n")).value
    42
"""

import re

from weakincentives import FrozenDataclass

from guessing_game.errors import GuessParseError, GuessRangeError

MIN_GUESS = 1
MAX_GUESS = 100

# Guesses are 32-bit signed integers; anything wider is not a number.
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_DECIMAL = re.compile(r"[+-]?[0-9]+")


def parse_guess(raw: str) -> int:
    """Parse one line of player input as a base-10 integer.

    Args:
        raw: The line as read from the input stream, including any trailing
            newline. Leading and trailing whitespace is ignored.

    Returns:
        int: The parsed integer. No range check is applied here.

    Raises:
        GuessParseError: If the stripped text is not made of ASCII decimal
            digits with an optional sign, or does not fit in a 32-bit signed
            integer.

    Example:
        >>> parse_guess("  7\\n")
        7
    """
    text = raw.strip()
    if not _DECIMAL.fullmatch(text):
        raise GuessParseError(text)
    value = int(text)
    if value < INT32_MIN or value > INT32_MAX:
        raise GuessParseError(text)
    return value


@FrozenDataclass()
class BoundedGuess:
    """A guess guaranteed to lie within ``[MIN_GUESS, MAX_GUESS]``.

    Attributes:
        value: The guessed integer. Read-only once constructed.

    Example:
        >>> BoundedGuess(value=100).value
        100
        >>> BoundedGuess(value=0)
        Traceback (most recent call last):
            ...
        guessing_game.errors.GuessRangeError: Guess value must be between 1 and 100, got 0
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < MIN_GUESS or self.value > MAX_GUESS:
            raise GuessRangeError(self.value, minimum=MIN_GUESS, maximum=MAX_GUESS)
