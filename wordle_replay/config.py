"""Runtime settings, read from the environment."""

import os
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigError


BASE_DIR = os.path.dirname(os.path.abspath(__file__))
WORDS_DIR = os.path.join(BASE_DIR, "words")

DEFAULT_ANSWERS_FILE = os.path.join(WORDS_DIR, "answers.txt")
DEFAULT_ACCEPTED_FILE = os.path.join(WORDS_DIR, "allowed_guesses.txt")


@dataclass(frozen=True)
class Settings:
    """
    Where the word lists live and how many threads numba may use.

    Attributes:
        answers_file: Day-ordered answer list, one word per line
        accepted_file: Extra valid guesses that are never answers
        threads: numba thread count (None keeps numba's default)
    """
    answers_file: str = DEFAULT_ANSWERS_FILE
    accepted_file: str = DEFAULT_ACCEPTED_FILE
    threads: Optional[int] = None

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        environ = os.environ if environ is None else environ
        threads = environ.get("WORDLE_THREADS")
        return cls(
            answers_file=environ.get("WORDLE_ANSWERS_FILE", DEFAULT_ANSWERS_FILE),
            accepted_file=environ.get("WORDLE_ACCEPTED_FILE", DEFAULT_ACCEPTED_FILE),
            threads=parse_threads(threads) if threads else None,
        )


def parse_threads(value) -> int:
    """Thread count from text; must be a positive integer."""
    try:
        threads = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Thread count must be a whole number, got '{value}'") from None
    if threads < 1:
        raise ConfigError(f"Thread count must be at least 1, got {threads}")
    return threads
