"""Environment configuration for the guessing game.

Configuration is loaded from environment variables. Command-line flags in
:mod:`guessing_game.cli` take precedence over the values loaded here.

Example:
    Load settings from the current environment::

        import os
        from guessing_game.config import load_game_settings

        settings, error = load_game_settings(os.environ)
        if error:
            raise RuntimeError(error)
        print(f"Logging at {settings.log_level}")

Environment Variables:
    GUESSING_GAME_SEED: Optional. Integer seed for the random source. When
        set, the secret number and flavor text are reproducible.
    GUESSING_GAME_LOG_LEVEL: Optional. One of DEBUG, INFO, WARNING, ERROR or
        CRITICAL (case-insensitive). Defaults to "WARNING".
"""

from collections.abc import Mapping

from weakincentives import FrozenDataclass

SEED_ENV = "GUESSING_GAME_SEED"
LOG_LEVEL_ENV = "GUESSING_GAME_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@FrozenDataclass()
class GameSettings:
    """Settings for one run of the game.

    Attributes:
        seed: Seed for the random source, or None for an OS-seeded source.
        log_level: Upper-case logging level name passed to
            ``configure_logging``.
    """

    seed: int | None
    log_level: str


def parse_log_level(value: str) -> str | None:
    """Normalize a logging level name, or return None if it is not known."""
    level = value.strip().upper()
    return level if level in LOG_LEVELS else None


def load_game_settings(
    env: Mapping[str, str],
) -> tuple[GameSettings | None, str | None]:
    """Load game settings from environment variables.

    Uses the same result tuple pattern as the rest of the CLI plumbing so a
    bad value is reported once at startup instead of raising.

    Args:
        env: A mapping of environment variable names to values. Typically
            ``os.environ``; tests pass a plain dict.

    Returns:
        A 2-tuple of ``(settings, error)``:

        - On success: ``(GameSettings(...), None)``
        - On failure: ``(None, "error message describing the problem")``

    Example:
        >>> settings, error = load_game_settings({"GUESSING_GAME_SEED": "42"})
        >>> error is None and settings.seed == 42
        True
    """
    seed: int | None = None
    seed_str = env.get(SEED_ENV, "").strip()
    if seed_str:
        try:
            seed = int(seed_str)
        except ValueError:
            return None, f"{SEED_ENV} must be an integer, got {seed_str!r}"

    log_level = DEFAULT_LOG_LEVEL
    log_level_str = env.get(LOG_LEVEL_ENV, "")
    if log_level_str:
        parsed = parse_log_level(log_level_str)
        if parsed is None:
            return None, f"{LOG_LEVEL_ENV} must be one of {', '.join(LOG_LEVELS)}"
        log_level = parsed

    return GameSettings(seed=seed, log_level=log_level), None
