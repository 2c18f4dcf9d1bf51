"""Allow ``python -m guessing_game``."""

from guessing_game.cli import main_entry

if __name__ == "__main__":
    main_entry()
