"""Command-line entry point for the guessing game.

Example usage from command line::

    # Play with a fresh random secret
    python -m guessing_game

    # Reproducible game with verbose logs on stderr
    python -m guessing_game --seed 42 --log-level debug

Environment variables:
    GUESSING_GAME_SEED: Default for --seed.
    GUESSING_GAME_LOG_LEVEL: Default for --log-level.
"""

from __future__ import annotations

import argparse
import logging
import os
import random
import sys
from collections.abc import Sequence
from dataclasses import field
from typing import TextIO

from weakincentives import FrozenDataclass
from weakincentives.runtime.logging import configure_logging

from guessing_game.config import LOG_LEVELS, GameSettings, load_game_settings
from guessing_game.errors import GameError
from guessing_game.game import GameLoop

logger = logging.getLogger(__name__)


@FrozenDataclass()
class GameRuntime:
    """Runtime dependencies for :func:`main`, enabling dependency injection.

    In production, use the defaults. In tests, inject a seeded random source
    and ``StringIO`` streams.

    Attributes:
        rng: Random source for the secret number and flavor text. When None,
            ``main`` builds a ``random.Random`` from the configured seed.
        stdin: Stream the guesses are read from (default: sys.stdin).
        out: Output stream for game messages (default: sys.stdout).
        err: Output stream for error messages (default: sys.stderr).

    Example:
        >>> from io import StringIO
        >>> runtime = GameRuntime(
        ...     rng=random.Random(0),
        ...     stdin=StringIO("49\\n"),
        ...     out=StringIO(),
        ...     err=StringIO(),
        ... )
        >>> exit_code = main([], runtime=runtime)
    """

    rng: random.Random | None = None
    stdin: TextIO = field(default_factory=lambda: sys.stdin)
    out: TextIO = field(default_factory=lambda: sys.stdout)
    err: TextIO = field(default_factory=lambda: sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="guessing-game",
        description="Guess the secret number between 1 and 100.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the random source for a reproducible game.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level for diagnostics on stderr (default: WARNING).",
    )
    return parser


def resolve_settings(args: argparse.Namespace, settings: GameSettings) -> GameSettings:
    """Apply command-line overrides on top of environment settings."""
    seed = args.seed if args.seed is not None else settings.seed
    return GameSettings(seed=seed, log_level=args.log_level or settings.log_level)


def main(
    argv: Sequence[str] | None = None,
    *,
    runtime: GameRuntime | None = None,
) -> int:
    """Play one game on the runtime's streams.

    Steps:
    1. Parse command-line arguments
    2. Load settings from environment variables, applying CLI overrides
    3. Configure logging
    4. Build the random source and run a :class:`GameLoop` to completion

    Args:
        argv: Command-line arguments to parse. When None, uses sys.argv[1:].
        runtime: Injected runtime dependencies for testing. When None, uses
            the process streams and a freshly built random source.

    Returns:
        Exit code indicating result:
            0 - The secret number was guessed
            1 - Configuration error, invalid guess, or input failure

    Example:
        >>> exit_code = main(["--seed", "42"])
    """
    rt = runtime or GameRuntime()
    err = rt.err

    args = build_parser().parse_args(argv)

    env_settings, error = load_game_settings(os.environ)
    if error:
        err.write(f"Configuration error: {error}\n")
        return 1

    assert env_settings is not None  # for type checker

    settings = resolve_settings(args, env_settings)
    configure_logging(level=settings.log_level)

    rng = rt.rng if rt.rng is not None else random.Random(settings.seed)
    loop = GameLoop(rng=rng, stdin=rt.stdin, out=rt.out)

    try:
        loop.run()
    except GameError as e:
        logger.info("Game aborted after %d attempts: %s", loop.attempts, e)
        err.write(f"Error: {e}\n")
        return 1

    return 0


def main_entry() -> None:
    """Console script entry point."""
    sys.exit(main())
