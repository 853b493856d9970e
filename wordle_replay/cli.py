"""
Command line entry point.

    wordle-replay filter-from-guess [-x] WORD FEEDBACK
    wordle-replay analyse [-x] < share.txt
"""

import argparse
import logging
import sys
from typing import List, Optional

import numba

from .analyzer import analyse_transcript
from .config import Settings
from .corpus import get_corpus
from .errors import ConfigError, WordError
from .feedback import PLAIN, Feedback
from .report import print_report
from .scorer import filter_targets


log = logging.getLogger(__name__)

PLAIN_SYMBOLS = "".join(PLAIN.values())


def filter_from_guess(args: argparse.Namespace, settings: Settings) -> int:
    corpus = get_corpus(settings)
    guess = corpus.token(args.word)
    feedback = Feedback.parse(args.feedback)
    for word in filter_targets(guess, feedback, corpus, extend=args.extend):
        print(word)
    return 0


def analyse(args: argparse.Namespace, settings: Settings) -> int:
    corpus = get_corpus(settings)
    target, analyses = analyse_transcript(sys.stdin, corpus, extend=args.extend)
    if args.verbose:
        print(f"Target: {target}")
    print_report(analyses, verbose=args.verbose)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordle-replay",
        description="Replay a Wordle game and see which other guesses fit the same feedback",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Debug logging and full witness chains")
    parser.add_argument("--threads", type=int, default=None,
                        help="numba worker threads (default: WORDLE_THREADS or all cores)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    parser_filter = subparsers.add_parser(
        "filter-from-guess",
        help="List targets consistent with one guess and its feedback",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser_filter.add_argument("word", help="The word that was guessed")
    parser_filter.add_argument("feedback", help="Feedback, e.g. '=+--=' or squares")
    parser_filter.add_argument("-x", "--extend", action="store_true",
                               help="Include accepted guesses as possible targets")
    parser_filter.set_defaults(func=filter_from_guess)

    parser_analyse = subparsers.add_parser(
        "analyse",
        help="Analyse a Wordle share read from stdin",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser_analyse.add_argument("-x", "--extend", action="store_true",
                                help="Include accepted guesses as possible targets")
    parser_analyse.set_defaults(func=analyse)

    return parser


def separate_feedback(argv: List[str]) -> List[str]:
    """
    Put ``--`` before a trailing plain-feedback argument such as ``-=---``,
    which argparse would otherwise read as an option.
    """
    if not argv or "--" in argv:
        return argv
    last = argv[-1]
    if last.startswith("-") and set(last) <= set(PLAIN_SYMBOLS):
        return argv[:-1] + ["--", last]
    return argv


def set_threads(threads: Optional[int]):
    if threads is None:
        return
    limit = numba.config.NUMBA_NUM_THREADS
    if not 1 <= threads <= limit:
        raise ConfigError(f"Thread count must be between 1 and {limit}, got {threads}")
    numba.set_num_threads(threads)


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    args = build_parser().parse_args(separate_feedback(argv))
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        settings = Settings.from_env()
        log.debug("Settings: %s", settings)
        set_threads(args.threads if args.threads is not None else settings.threads)
        return args.func(args, settings)
    except (WordError, ConfigError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"Error: input is not valid UTF-8 ({e.reason})", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
