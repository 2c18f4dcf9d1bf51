"""Integration tests that play the game through a real process.

Run with:
    pytest integration-tests
"""

from __future__ import annotations

import os
import random
import subprocess
import sys
from pathlib import Path

import pytest

pytestmark = pytest.mark.integration

SRC_DIR = Path(__file__).resolve().parent.parent / "src"


def _secret_for(seed: int) -> int:
    return random.Random(seed).randrange(0, 100)


def _winnable_seed() -> int:
    return next(seed for seed in range(100) if _secret_for(seed) >= 1)


def play(stdin: str, *args: str) -> subprocess.CompletedProcess[str]:
    """Run ``python -m guessing_game`` with the given input."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("GUESSING_GAME_")}
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "-m", "guessing_game", *args],
        input=stdin,
        capture_output=True,
        text=True,
        env=env,
        timeout=30,
    )


def test_binary_search_wins() -> None:
    """Test a full game that narrows in on the secret."""
    seed = _winnable_seed()
    secret = _secret_for(seed)

    guesses = []
    low, high = 1, 100
    while True:
        guess = (low + high) // 2
        guesses.append(guess)
        if guess == secret:
            break
        if guess < secret:
            low = guess + 1
        else:
            high = guess - 1

    result = play("".join(f"{g}\n" for g in guesses), "--seed", str(seed))

    assert result.returncode == 0, result.stderr
    lines = result.stdout.splitlines()
    assert lines[0] == "Welcome to the guessing game of epic proportions!"
    assert lines[-2] == "Cue the confetti!!"
    assert lines[-1] == (
        f"The secret number is indeed {secret}! "
        f"You guessed it right with only {len(guesses)} tries! "
    )
    assert len(lines) == 2 + (len(guesses) - 1) + 2


def test_non_number_exits_with_failure() -> None:
    """Test that text input aborts the process."""
    result = play("abc\n", "--seed", "1")

    assert result.returncode == 1
    assert "guess must be a number" in result.stderr


def test_out_of_range_exits_with_failure() -> None:
    """Test that an out-of-range guess aborts the process."""
    result = play("150\n", "--seed", "1")

    assert result.returncode == 1
    assert "between 1 and 100" in result.stderr


def test_closed_input_exits_with_failure() -> None:
    """Test that closing stdin mid-game aborts the process."""
    result = play("", "--seed", "1")

    assert result.returncode == 1
    assert "Input closed" in result.stderr


def test_underscored_number_exits_with_failure() -> None:
    """Test that digit separators are not accepted as a number."""
    result = play("1_0\n", "--seed", "1")

    assert result.returncode == 1
    assert "guess must be a number" in result.stderr
    assert len(result.stdout.splitlines()) == 2


def test_invalid_utf8_exits_with_failure() -> None:
    """Test that undecodable input ends with an error line, not a traceback."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("GUESSING_GAME_")}
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH")]))
    env["PYTHONIOENCODING"] = "utf-8:strict"
    result = subprocess.run(
        [sys.executable, "-m", "guessing_game", "--seed", "1"],
        input=b"\xff\n",
        capture_output=True,
        env=env,
        timeout=30,
    )

    assert result.returncode == 1
    assert b"Error: Failed to read guess" in result.stderr
    assert b"Traceback" not in result.stderr
