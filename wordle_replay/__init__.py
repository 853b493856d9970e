"""
Wordle Replay - Alternative Guess Analysis
==========================================

Scores Wordle guesses and replays a shared game: for every round, which other
words would have given the same feedback, and how much each sequence of such
words would have narrowed down the answer.
"""

__version__ = "1.0.0"

from .errors import (
    WordError,
    InvalidCharacterError,
    InvalidLengthError,
    UnknownWordError,
    MalformedTranscriptHeaderError,
    UnclassifiedError,
)
from .tokens import Token
from .feedback import Feedback, LetterOutcome
from .corpus import Corpus, get_corpus, load_words
from .scorer import score, filter_targets
from .analyzer import CandidateMap, ChainAnalysis, RoundAnalyzer, analyse_transcript
