import io

import numpy as np

from wordle_replay.analyzer import CandidateMap, ChainAnalysis, RoundAnalyzer
from wordle_replay.corpus import Corpus
from wordle_replay.feedback import Feedback
from wordle_replay.report import format_summary, print_report, summarize
from wordle_replay.scorer import score

WORDS = Corpus(["abbey", "cigar", "rebut", "sissy"]).words


def make_analysis(chains, sizes, observed="=+---"):
    indptr = np.zeros(len(sizes) + 1, dtype=np.int64)
    indptr[1:] = np.cumsum(sizes)
    indices = np.concatenate([np.arange(n, dtype=np.int32) for n in sizes])
    candidates = CandidateMap(np.array(chains, dtype=np.int32), indptr, indices, WORDS)
    guesses = tuple(sorted({WORDS[c[-1]] for c in chains}))
    return ChainAnalysis(Feedback.parse(observed), guesses, candidates)


def test_summary_extremes():
    summary = summarize(make_analysis([[0], [1], [2]], [3, 1, 4]))
    assert summary.n_guesses == 3
    assert (summary.min_targets, summary.max_targets) == (1, 4)
    assert summary.min_chain == ("cigar",)
    assert summary.max_chain == ("rebut",)


def test_ties_go_to_first_chain():
    summary = summarize(make_analysis([[0, 1], [0, 3], [2, 1], [2, 3]], [2, 1, 2, 1]))
    assert summary.min_chain == ("abbey", "sissy")
    assert summary.max_chain == ("abbey", "cigar")


def test_format_summary():
    line = format_summary(summarize(make_analysis([[0], [1]], [2, 1])))
    assert line == ("Guess resulting in 🟩🟨⬛⬛⬛ has 2 possible guesses for between 1 and 2 "
                    "targets left, guessing cigar and abbey respectively.")


def test_format_summary_single_guess_verbose():
    line = format_summary(summarize(make_analysis([[0, 1]], [1])), verbose=True)
    assert "has 1 possible guess for" in line
    assert "guessing abbey cigar and abbey cigar" in line


def test_format_summary_without_chains():
    empty = ChainAnalysis(Feedback.parse("====+"), (), CandidateMap.empty(1, WORDS))
    assert format_summary(summarize(empty)) == "Guess resulting in 🟩🟩🟩🟩🟨 has 0 possible guesses."


def test_print_report(small_corpus):
    target = small_corpus.token("cigar")
    analyses = RoundAnalyzer(target, small_corpus).analyse([score("crane", target), "====="])
    out = io.StringIO()
    print_report(analyses, file=out)
    lines = out.getvalue().splitlines()
    assert len(lines) == 2
    assert lines[1].startswith("Guess resulting in 🟩🟩🟩🟩🟩 has 1 possible guess for between 1 and 1")
