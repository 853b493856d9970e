"""
Scorer
======

Wordle feedback for (guess, target) pairs.

Two passes over the five positions, so that repeated letters are scored the
way the game does:
1. Exact matches are marked correct and their target letter is consumed.
2. Every other guess letter, left to right, takes the first unconsumed
   matching target letter (if any) and is marked misplaced.

A letter therefore never scores correct + misplaced more times than it
appears in the target, and exact matches always win over misplaced ones.
"""

import logging
import time
from typing import List, Optional

import numpy as np
from numba import jit, prange

from .corpus import Corpus, get_corpus, words_to_chars
from .feedback import Feedback
from .tokens import Token


log = logging.getLogger(__name__)

NOT_USED = 0
MISPLACED = 1
CORRECT = 2
CONSUMED = -1  # never a letter code


# ============================================================================
# NUMBA-ACCELERATED FEEDBACK COMPUTATION
# ============================================================================

@jit(nopython=True, cache=True)
def compute_feedback(guess: np.ndarray, answer: np.ndarray) -> int:
    """
    Compute Wordle feedback for a guess against an answer.

    Args:
        guess: shape (5,) array of char codes (0-25 for a-z)
        answer: shape (5,) array of char codes

    Returns:
        Integer feedback pattern (0-242)
    """
    feedback = np.zeros(5, dtype=np.int32)
    available = answer.copy()

    # First pass: exact matches
    for i in range(5):
        if guess[i] == answer[i]:
            feedback[i] = CORRECT
            available[i] = CONSUMED

    # Second pass: first available slot wins
    for i in range(5):
        if feedback[i] != CORRECT:
            for j in range(5):
                if available[j] == guess[i]:
                    available[j] = CONSUMED
                    feedback[i] = MISPLACED
                    break

    return feedback[0] + 3*feedback[1] + 9*feedback[2] + 27*feedback[3] + 81*feedback[4]


@jit(nopython=True, parallel=True, cache=True)
def compute_feedback_matrix(guess_chars: np.ndarray, answer_chars: np.ndarray) -> np.ndarray:
    """
    Compute feedback for all guess/answer pairs in parallel.

    Args:
        guess_chars: shape (n_guesses, 5) array of char codes
        answer_chars: shape (n_answers, 5) array of char codes

    Returns:
        shape (n_guesses, n_answers) feedback matrix
    """
    n_guesses = guess_chars.shape[0]
    n_answers = answer_chars.shape[0]
    result = np.zeros((n_guesses, n_answers), dtype=np.uint8)

    for i in prange(n_guesses):
        for j in range(n_answers):
            result[i, j] = compute_feedback(guess_chars[i], answer_chars[j])

    return result


@jit(nopython=True, parallel=True, cache=True)
def compute_feedback_column(guess_chars: np.ndarray, answer: np.ndarray) -> np.ndarray:
    """Feedback of every guess against one fixed answer."""
    n_guesses = guess_chars.shape[0]
    result = np.zeros(n_guesses, dtype=np.uint8)
    for i in prange(n_guesses):
        result[i] = compute_feedback(guess_chars[i], answer)
    return result


@jit(nopython=True, parallel=True, cache=True)
def compute_feedback_row(guess: np.ndarray, answer_chars: np.ndarray) -> np.ndarray:
    """Feedback of one fixed guess against every answer."""
    n_answers = answer_chars.shape[0]
    result = np.zeros(n_answers, dtype=np.uint8)
    for j in prange(n_answers):
        result[j] = compute_feedback(guess, answer_chars[j])
    return result


# ============================================================================
# PUBLIC API
# ============================================================================

def score(guess: str, target: str) -> Feedback:
    """Feedback for playing ``guess`` when the answer is ``target``."""
    chars = words_to_chars([guess, target])
    return Feedback(int(compute_feedback(chars[0], chars[1])))


def filter_targets(guess: Token, feedback: Feedback, corpus: Optional[Corpus] = None,
                   extend: bool = False) -> List[Token]:
    """
    Every target that would have produced ``feedback`` for ``guess``.

    Args:
        guess: The word that was played
        feedback: What the game answered
        corpus: Word lists (process-wide corpus if None)
        extend: Consider accepted guesses as targets too, not only answers

    Returns:
        Matching targets in Token order
    """
    if corpus is None:
        corpus = get_corpus()
    universe = corpus.universe(extend)

    start = time.time()
    row = compute_feedback_row(corpus.word_chars[corpus.index(guess)],
                               corpus.word_chars[universe])
    log.debug("Scored %s against %d targets in %.3fs", guess, len(universe), time.time() - start)

    matches = universe[row == feedback.pattern]
    return [corpus.words[i] for i in matches]
