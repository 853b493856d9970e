"""
Feedback
========

Per-letter outcome of a guess, in three interchangeable forms:
- a tuple of LetterOutcome values
- text: plain ``=+-`` symbols or the pictographic squares of a Wordle share
- an integer pattern 0-242 (base 3, position 0 least significant), which is
  what the numba kernels produce

Named-emoji shares (``:large_green_square:`` etc.) are accepted too.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Tuple

from .errors import InvalidCharacterError, InvalidLengthError


class LetterOutcome(IntEnum):
    NOT_USED = 0
    MISPLACED = 1
    CORRECT = 2


# ============================================================================
# CONSTANTS
# ============================================================================

N_PATTERNS = 243  # 3^5 possible feedback patterns
CORRECT_PATTERN = 242  # all green

GREEN_SQUARE = '\U0001F7E9'
YELLOW_SQUARE = '\U0001F7E8'
BLACK_SQUARE = '⬛'

SYMBOLS = {
    '=': LetterOutcome.CORRECT,
    '+': LetterOutcome.MISPLACED,
    '-': LetterOutcome.NOT_USED,
    GREEN_SQUARE: LetterOutcome.CORRECT,
    YELLOW_SQUARE: LetterOutcome.MISPLACED,
    BLACK_SQUARE: LetterOutcome.NOT_USED,
}

GLYPHS = {
    LetterOutcome.CORRECT: GREEN_SQUARE,
    LetterOutcome.MISPLACED: YELLOW_SQUARE,
    LetterOutcome.NOT_USED: BLACK_SQUARE,
}

PLAIN = {
    LetterOutcome.CORRECT: '=',
    LetterOutcome.MISPLACED: '+',
    LetterOutcome.NOT_USED: '-',
}

NAMED_SQUARES = (
    (':black_large_square:', BLACK_SQUARE),
    (':large_yellow_square:', YELLOW_SQUARE),
    (':large_green_square:', GREEN_SQUARE),
)


def pattern_to_outcomes(n: int) -> Tuple[LetterOutcome, ...]:
    """Convert integer pattern (0-242) to five outcomes."""
    outcomes = []
    for _ in range(5):
        outcomes.append(LetterOutcome(n % 3))
        n //= 3
    return tuple(outcomes)


def outcomes_to_pattern(outcomes: Iterable[LetterOutcome]) -> int:
    """Convert five outcomes to an integer pattern (0-242)."""
    result = 0
    multiplier = 1
    for outcome in outcomes:
        result += int(outcome) * multiplier
        multiplier *= 3
    return result


@dataclass(frozen=True)
class Feedback:
    """
    Feedback for one guess, stored as its integer pattern.

    Equality and hashing go through the pattern, so two Feedback values parsed
    from different notations compare equal.
    """
    pattern: int

    def __post_init__(self):
        if not 0 <= self.pattern < N_PATTERNS:
            raise ValueError(f"Invalid feedback pattern: {self.pattern}")

    @classmethod
    def from_outcomes(cls, outcomes: Iterable[LetterOutcome]) -> "Feedback":
        outcomes = tuple(outcomes)
        if len(outcomes) != 5:
            raise InvalidLengthError(len(outcomes))
        return cls(outcomes_to_pattern(outcomes))

    @classmethod
    def parse(cls, text: str) -> "Feedback":
        """
        Parse feedback text.

        Args:
            text: e.g. "=+--=", "🟩🟨⬛⬛🟩" or a named-emoji share row

        Raises:
            InvalidCharacterError: on any symbol outside the six accepted ones
            InvalidLengthError: if there are not exactly five symbols
        """
        if ':' in text:
            for name, glyph in NAMED_SQUARES:
                text = text.replace(name, glyph, 5)
        for ch in text:
            if ch not in SYMBOLS:
                raise InvalidCharacterError(text, ch, kind="Feedback")
        if len(text) != 5:
            raise InvalidLengthError(len(text))
        return cls(outcomes_to_pattern(SYMBOLS[ch] for ch in text))

    @classmethod
    def solved(cls) -> "Feedback":
        return cls(CORRECT_PATTERN)

    @property
    def outcomes(self) -> Tuple[LetterOutcome, ...]:
        return pattern_to_outcomes(self.pattern)

    @property
    def is_solved(self) -> bool:
        return self.pattern == CORRECT_PATTERN

    def plain(self) -> str:
        """Render with ``=+-`` symbols."""
        return ''.join(PLAIN[o] for o in self.outcomes)

    def __str__(self) -> str:
        return ''.join(GLYPHS[o] for o in self.outcomes)

    def __repr__(self) -> str:
        return f"Feedback({self})"
