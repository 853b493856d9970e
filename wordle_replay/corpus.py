"""
Corpus
======

The two static word lists:
- answers: day-indexed list of daily targets (index = puzzle number)
- accepted: additional words that are valid guesses but never targets

Both are loaded once per process and shared read-only. The union of the two
lists is kept sorted so that a word's index in it follows Token order, which
lets numba kernels work on plain integer indices.
"""

import logging
from functools import lru_cache
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .config import Settings
from .errors import UnknownWordError
from .tokens import Token, check_letters


log = logging.getLogger(__name__)


def load_words(filepath: str) -> List[str]:
    """Load word list from file, checking every word's shape."""
    with open(filepath, 'r', encoding='utf-8') as f:
        return [check_letters(line.strip().lower()) for line in f if line.strip()]


def words_to_chars(words: Sequence[str]) -> np.ndarray:
    """Convert words to char code array (0-25 for a-z)."""
    arr = np.zeros((len(words), 5), dtype=np.int32)
    for i, w in enumerate(words):
        for j, c in enumerate(w):
            arr[i, j] = ord(c) - ord('a')
    return arr


class Corpus:
    """
    Answers and accepted guesses, with the index tables the kernels need.

    Attributes:
        answers: Tokens in day order
        accepted: Tokens that can be guessed but are never answers
        words: Sorted union of both lists
        word_chars: shape (len(words), 5) char codes of ``words``
    """

    def __init__(self, answers: Iterable[str], accepted: Iterable[str] = ()):
        self.answers: Tuple[Token, ...] = tuple(Token._trusted(w) for w in answers)
        self.accepted: Tuple[Token, ...] = tuple(Token._trusted(w) for w in accepted)

        self.words: Tuple[Token, ...] = tuple(sorted(set(self.answers) | set(self.accepted)))
        self.word_to_idx = {w: i for i, w in enumerate(self.words)}
        self.word_chars = words_to_chars(self.words)

        self.answer_idx = np.array(sorted(self.word_to_idx[w] for w in set(self.answers)),
                                   dtype=np.int32)
        self.all_idx = np.arange(len(self.words), dtype=np.int32)

    def __contains__(self, word) -> bool:
        return word in self.word_to_idx

    def __len__(self) -> int:
        return len(self.words)

    def token(self, text: str) -> Token:
        """Validate ``text`` against this corpus."""
        return Token(text, corpus=self)

    def index(self, word: str) -> int:
        """Position of ``word`` in the sorted union."""
        try:
            return self.word_to_idx[word]
        except KeyError:
            raise UnknownWordError(word) from None

    def day(self, puzzle_number: int) -> Token:
        """The answer for a given puzzle number."""
        if puzzle_number < 0:
            raise IndexError(puzzle_number)
        return self.answers[puzzle_number]

    def universe(self, extend: bool = False) -> np.ndarray:
        """
        Sorted indices of the candidate targets.

        Args:
            extend: Include accepted guesses as well as answers
        """
        return self.all_idx if extend else self.answer_idx


@lru_cache(maxsize=None)
def _load_corpus(answers_file: str, accepted_file: str) -> Corpus:
    answers = load_words(answers_file)
    accepted = load_words(accepted_file)
    log.info("Loaded %d answers from %s", len(answers), answers_file)
    log.info("Loaded %d accepted guesses from %s", len(accepted), accepted_file)
    return Corpus(answers, accepted)


def get_corpus(settings: Optional[Settings] = None) -> Corpus:
    """Process-wide corpus for the given (or environment) settings."""
    if settings is None:
        settings = Settings.from_env()
    return _load_corpus(settings.answers_file, settings.accepted_file)
