"""
Round Analyzer
==============

Replays a finished game. For each round of recorded feedback it finds every
word that would have produced the same feedback against the real target
("alternative guesses"), then follows every sequence of such words
("chains") to see how far each one would have narrowed the candidate
targets.

Round k only depends on round k-1:

    chains_k = { chain + [w] : chain in chains_{k-1}, w in alternatives_k }
    targets_k(chain + [w]) = { t in targets_{k-1}(chain) : score(w, t) == observed_k }

The cross product is the expensive part and runs as numba ``prange`` loops.
Candidate sets for a whole round live in one CSR pair (indptr, indices) of
word indices into the sorted corpus union; chains are rows of an integer
array. Row p * n_alternatives + g is parent p extended with alternative g,
so rows stay in chain order whatever the thread scheduling.
"""

import logging
import time
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple, Union

import numpy as np
from numba import jit, prange

from .corpus import Corpus, get_corpus
from .errors import MalformedTranscriptHeaderError, UnclassifiedError
from .feedback import Feedback
from .scorer import compute_feedback_column, compute_feedback_matrix
from .tokens import Token
from .transcript import read_transcript


log = logging.getLogger(__name__)

Chain = Tuple[Token, ...]


# ============================================================================
# NUMBA-ACCELERATED FAN-OUT
# ============================================================================

@jit(nopython=True, parallel=True, cache=True)
def count_survivors(indptr: np.ndarray, indices: np.ndarray, match: np.ndarray) -> np.ndarray:
    """
    Size of every (parent chain, alternative guess) candidate set.

    Args:
        indptr: shape (n_parents + 1,) CSR row offsets of the parent sets
        indices: word indices of the parent sets
        match: shape (n_alternatives, n_words) bool, True where the
            alternative would score the observed feedback against the word

    Returns:
        shape (n_parents * n_alternatives,) survivor counts
    """
    n_parents = indptr.shape[0] - 1
    n_alternatives = match.shape[0]
    counts = np.zeros(n_parents * n_alternatives, dtype=np.int64)

    for k in prange(n_parents * n_alternatives):
        p = k // n_alternatives
        g = k % n_alternatives
        c = 0
        for j in range(indptr[p], indptr[p + 1]):
            if match[g, indices[j]]:
                c += 1
        counts[k] = c

    return counts


@jit(nopython=True, parallel=True, cache=True)
def fill_survivors(indptr: np.ndarray, indices: np.ndarray, match: np.ndarray,
                   new_indptr: np.ndarray) -> np.ndarray:
    """Write every surviving target at the offsets given by ``new_indptr``."""
    n_parents = indptr.shape[0] - 1
    n_alternatives = match.shape[0]
    new_indices = np.empty(new_indptr[-1], dtype=np.int32)

    for k in prange(n_parents * n_alternatives):
        p = k // n_alternatives
        g = k % n_alternatives
        pos = new_indptr[k]
        for j in range(indptr[p], indptr[p + 1]):
            t = indices[j]
            if match[g, t]:
                new_indices[pos] = t
                pos += 1

    return new_indices


# ============================================================================
# CANDIDATE MAP
# ============================================================================

class CandidateMap:
    """
    Chain -> candidate-target-set map for one round.

    Attributes:
        chains: shape (n_chains, chain_length) word indices, in chain order
        indptr: shape (n_chains + 1,) offsets into ``indices``
        indices: sorted word indices of each chain's candidate set
        words: the corpus union the indices refer to
    """

    def __init__(self, chains: np.ndarray, indptr: np.ndarray, indices: np.ndarray,
                 words: Tuple[Token, ...]):
        self.chains = chains
        self.indptr = indptr
        self.indices = indices
        self.words = words

    @classmethod
    def seed(cls, corpus: Corpus, extend: bool = False) -> "CandidateMap":
        """The empty chain, mapped to every candidate target."""
        universe = corpus.universe(extend)
        return cls(
            chains=np.zeros((1, 0), dtype=np.int32),
            indptr=np.array([0, len(universe)], dtype=np.int64),
            indices=universe.astype(np.int32),
            words=corpus.words,
        )

    @classmethod
    def empty(cls, chain_length: int, words: Tuple[Token, ...]) -> "CandidateMap":
        return cls(
            chains=np.zeros((0, chain_length), dtype=np.int32),
            indptr=np.zeros(1, dtype=np.int64),
            indices=np.zeros(0, dtype=np.int32),
            words=words,
        )

    def __len__(self) -> int:
        return self.chains.shape[0]

    @property
    def chain_length(self) -> int:
        return self.chains.shape[1]

    def chain(self, i: int) -> Chain:
        return tuple(self.words[w] for w in self.chains[i])

    def target_indices(self, i: int) -> np.ndarray:
        return self.indices[self.indptr[i]:self.indptr[i + 1]]

    def targets(self, i: int) -> FrozenSet[Token]:
        return frozenset(self.words[t] for t in self.target_indices(i))

    def sizes(self) -> np.ndarray:
        """Candidate-set size of every chain, in chain order."""
        return np.diff(self.indptr)

    def items(self) -> Iterator[Tuple[Chain, FrozenSet[Token]]]:
        for i in range(len(self)):
            yield self.chain(i), self.targets(i)

    def to_dict(self) -> Dict[Chain, FrozenSet[Token]]:
        result = dict(self.items())
        if len(result) != len(self):
            raise UnclassifiedError(
                f"{len(self) - len(result)} duplicate chain keys in round of {len(self)} chains")
        return result


@dataclass
class ChainAnalysis:
    """
    Result of analysing one round.

    Attributes:
        observed: Feedback actually recorded for this round
        alternative_guesses: Every word scoring ``observed`` against the target
        candidates: Chain -> candidate targets after this round
    """
    observed: Feedback
    alternative_guesses: Tuple[Token, ...]
    candidates: CandidateMap

    @property
    def candidate_targets_by_chain(self) -> Dict[Chain, FrozenSet[Token]]:
        return self.candidates.to_dict()


# ============================================================================
# ROUND ANALYZER
# ============================================================================

class RoundAnalyzer:
    """
    Folds a game transcript into one ChainAnalysis per round.
    """

    def __init__(self, target: Token, corpus: Optional[Corpus] = None, extend: bool = False):
        """
        Args:
            target: The real answer of the game
            corpus: Word lists (process-wide corpus if None)
            extend: Seed candidate targets with accepted guesses too
        """
        self.corpus = corpus if corpus is not None else get_corpus()
        self.target = target
        self.extend = extend
        self.target_idx = self.corpus.index(target)

        start = time.time()
        # Feedback of every corpus word, played against the real target
        self.target_column = compute_feedback_column(
            self.corpus.word_chars, self.corpus.word_chars[self.target_idx])
        log.debug("Scored %d guesses against %s in %.3fs",
                  len(self.corpus), target, time.time() - start)

    def seed(self) -> CandidateMap:
        return CandidateMap.seed(self.corpus, self.extend)

    def alternative_guess_indices(self, observed: Feedback) -> np.ndarray:
        return np.flatnonzero(self.target_column == observed.pattern).astype(np.int32)

    def alternative_guesses(self, observed: Feedback) -> Tuple[Token, ...]:
        """Every corpus word that scores ``observed`` against the target."""
        return tuple(self.corpus.words[i] for i in self.alternative_guess_indices(observed))

    def step(self, observed: Feedback, previous: CandidateMap) -> ChainAnalysis:
        """
        Extend every surviving chain by every alternative guess for this round.

        Args:
            observed: This round's recorded feedback
            previous: Last round's map (or ``seed()`` for the first round)
        """
        alternatives = self.alternative_guess_indices(observed)
        guesses = tuple(self.corpus.words[i] for i in alternatives)
        n_parents = len(previous)
        n_alternatives = len(alternatives)

        if n_parents == 0 or n_alternatives == 0:
            log.warning("No chains survive feedback %s", observed)
            return ChainAnalysis(observed, guesses,
                                 CandidateMap.empty(previous.chain_length + 1, self.corpus.words))

        start = time.time()
        feedback = compute_feedback_matrix(self.corpus.word_chars[alternatives],
                                           self.corpus.word_chars)
        match = feedback == observed.pattern

        counts = count_survivors(previous.indptr, previous.indices, match)
        indptr = np.zeros(len(counts) + 1, dtype=np.int64)
        np.cumsum(counts, out=indptr[1:])
        indices = fill_survivors(previous.indptr, previous.indices, match, indptr)

        chains = np.empty((n_parents * n_alternatives, previous.chain_length + 1), dtype=np.int32)
        chains[:, :-1] = np.repeat(previous.chains, n_alternatives, axis=0)
        chains[:, -1] = np.tile(alternatives, n_parents)

        log.info("Feedback %s: %d alternative guesses, %d chains, %d target entries (%.2fs)",
                 observed, n_alternatives, len(chains), len(indices), time.time() - start)

        return ChainAnalysis(observed, guesses, CandidateMap(chains, indptr, indices,
                                                             self.corpus.words))

    def analyse(self, rows: Iterable[Union[str, Feedback]]) -> List[ChainAnalysis]:
        """
        Analyse rounds until a solved row or the end of the transcript.

        Text rows are parsed one at a time, so rows after the solved one are
        never looked at. Any parse error propagates and no result is returned.
        """
        analyses: List[ChainAnalysis] = []
        previous = self.seed()

        for row in rows:
            observed = row if isinstance(row, Feedback) else Feedback.parse(row)
            analysis = self.step(observed, previous)
            analyses.append(analysis)
            previous = analysis.candidates
            if observed.is_solved:
                break

        return analyses


def analyse_transcript(lines: Iterable[str], corpus: Optional[Corpus] = None,
                       extend: bool = False) -> Tuple[Token, List[ChainAnalysis]]:
    """
    Analyse a shared game: header line first, then one feedback row per line.

    Returns:
        (target, per-round analyses)
    """
    if corpus is None:
        corpus = get_corpus()

    day, rows = read_transcript(lines)
    try:
        target = corpus.day(day)
    except IndexError:
        raise MalformedTranscriptHeaderError(f"Wordle {day}") from None

    log.info("Puzzle %d, target %s", day, target)
    return target, RoundAnalyzer(target, corpus, extend).analyse(rows)
