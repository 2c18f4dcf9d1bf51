"""Flavor text for guesses that miss the secret number.

Each comparison outcome that keeps the game going has its own
:class:`MessagePool`. A message is drawn with :func:`pick`, which takes the
random source as an argument so tests can pass a seeded or mocked one.

Example:
    >>> import random
    >>> from guessing_game.messages import TOO_SMALL, pick
    >>> pick(TOO_SMALL, random.Random(0)) in TOO_SMALL.messages
    True
"""

from __future__ import annotations

from typing import Protocol

from weakincentives import FrozenDataclass


class RandomSource(Protocol):
    """The part of :class:`random.Random` the game depends on."""

    def randrange(self, start: int, stop: int, /) -> int: ...


@FrozenDataclass()
class MessagePool:
    """An ordered, immutable set of alternative messages for one outcome.

    Attributes:
        name: Short label for the outcome, used in log records.
        messages: The alternatives. Must not be empty.
    """

    name: str
    messages: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.messages:
            raise ValueError(f"message pool {self.name!r} must not be empty")

    def __len__(self) -> int:
        return len(self.messages)


def pick(pool: MessagePool, rng: RandomSource) -> str:
    """Return one message from ``pool`` chosen uniformly by ``rng``.

    Args:
        pool: The pool to draw from.
        rng: Any object with a ``randrange(start, stop)`` method.

    Returns:
        str: ``pool.messages[i]`` for a fresh index ``0 <= i < len(pool)``.
    """
    return pool.messages[rng.randrange(0, len(pool))]


TOO_SMALL = MessagePool(
    name="too_small",
    messages=(
        "Well, butter my biscuit! That guess is smaller than a flea on a flea's back! Try again!",
        "Oh dear, that guess is tinier than a teaspoon in a sea of soup! Give it another shot!",
        "Whoa, that guess is smaller than a pixel on a smartphone screen! "
        "Back to the drawing board!",
        "Yikes! That guess is smaller than a seed in a sunflower! Let's aim higher, shall we?",
        "Goodness gracious! That guess is smaller than a snowflake in July! "
        "Let's try something bigger!",
        "Oh my stars! That guess is smaller than a teaspoon in a galaxy-sized cup of cosmic "
        "cocoa! Give it another go!",
        "Golly gee! That guess is tinier than a tater tot in a toddler's lunchbox! "
        "Let's aim higher, champ!",
        "Holy guacamole! That guess is smaller than a seed in an avocado! Time to think bigger!",
        "Oh snap! That guess is smaller than a speck of dust on a flea's wing! Let's beef it up!",
        "Well, slap my knee! That guess is smaller than a raindrop in a desert! "
        "Try again, partner!",
    ),
)

TOO_LARGE = MessagePool(
    name="too_large",
    messages=(
        "Whoa there, that guess is bigger than a burger on cheat day! But not quite right!",
        "Hoo boy, that guess is larger than a slice of cake at a birthday party! Try again!",
        "Holy moly, that guess is grander than a triple-decker sandwich! "
        "Let's dial it back a bit!",
        "Goodness gracious, that guess is as huge as a whale in a goldfish bowl! "
        "Try something smaller!",
        "Gee whiz, that guess is larger than a mountain in a molehill contest! "
        "Let's scale it down!",
        "Well, slap my hand! That guess is bigger than Texas on a map! Let's rein it in a tad!",
        "Whoopsie daisy! That guess is bigger than a bus in a bike lane! "
        "Try something more modest!",
        "Oh my, that guess is larger than life itself! But alas, not quite right! "
        "Try again, champ!",
        "Hold your horses! That guess is bigger than a parade float on a sidewalk! "
        "Let's trim it down!",
        "Whoosh! That guess is flying higher than a kite in a thunderstorm! "
        "Bring it back to earth, buddy!",
    ),
)
