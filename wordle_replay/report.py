"""
Report
======

Per-round statistics of an analysed game: how many alternative guesses there
were, and the smallest and largest candidate-target sets over all chains,
each with a witness chain. Ties go to the chain that sorts first.
"""

import sys
from dataclasses import dataclass
from typing import Iterable, Optional, TextIO

import numpy as np

from .analyzer import Chain, ChainAnalysis
from .feedback import Feedback


@dataclass
class RoundSummary:
    observed: Feedback
    n_guesses: int
    min_targets: int = 0
    max_targets: int = 0
    min_chain: Optional[Chain] = None
    max_chain: Optional[Chain] = None


def summarize(analysis: ChainAnalysis) -> RoundSummary:
    """Extremes of the candidate-set sizes over every chain of a round."""
    candidates = analysis.candidates
    summary = RoundSummary(analysis.observed, len(analysis.alternative_guesses))
    if len(candidates) == 0:
        return summary

    # Chains are stored in order, so argmin/argmax pick the least tied chain
    sizes = candidates.sizes()
    lo = int(np.argmin(sizes))
    hi = int(np.argmax(sizes))
    summary.min_targets = int(sizes[lo])
    summary.max_targets = int(sizes[hi])
    summary.min_chain = candidates.chain(lo)
    summary.max_chain = candidates.chain(hi)
    return summary


def format_summary(summary: RoundSummary, verbose: bool = False) -> str:
    n = summary.n_guesses
    plural = "es" if n != 1 else ""
    if summary.min_chain is None:
        return f"Guess resulting in {summary.observed} has {n} possible guess{plural}."

    if verbose:
        lo = ' '.join(summary.min_chain)
        hi = ' '.join(summary.max_chain)
    else:
        lo = summary.min_chain[-1]
        hi = summary.max_chain[-1]
    return (f"Guess resulting in {summary.observed} has {n} possible guess{plural} "
            f"for between {summary.min_targets} and {summary.max_targets} targets left, "
            f"guessing {lo} and {hi} respectively.")


def print_report(analyses: Iterable[ChainAnalysis], verbose: bool = False,
                 file: TextIO = None):
    """Print one line per round."""
    file = file or sys.stdout
    for analysis in analyses:
        print(format_summary(summarize(analysis), verbose), file=file)
