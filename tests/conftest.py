import pytest

from wordle_replay.corpus import Corpus, get_corpus


SMALL_ANSWERS = [
    "cigar", "rebut", "sissy", "humph", "awake", "blush", "focal", "evade",
    "naval", "serve", "heath", "dwarf", "model", "karma", "stink", "grade",
    "quiet", "bench", "abate", "feign", "major", "death", "fresh", "crust",
    "stool", "colon", "abase", "marry", "react", "batty",
]
SMALL_ACCEPTED = ["crane", "slate", "salet", "tarse", "cigma"]


@pytest.fixture(scope="session")
def corpus():
    """Bundled word lists."""
    return get_corpus()


@pytest.fixture(scope="session")
def small_corpus():
    return Corpus(SMALL_ANSWERS, SMALL_ACCEPTED)
