import io

import pytest

from wordle_replay.cli import main, separate_feedback
from wordle_replay.config import DEFAULT_ANSWERS_FILE, Settings
from wordle_replay.errors import ConfigError
from wordle_replay.feedback import Feedback
from wordle_replay.scorer import filter_targets, score
from wordle_replay.tokens import Token


def test_filter_from_guess(capsys, corpus):
    assert main(["filter-from-guess", "sissy", "-=---"]) == 0
    out = capsys.readouterr().out.split()
    assert out == filter_targets(Token("sissy"), Feedback.parse("-=---"), corpus)
    assert "cigar" in out


def test_filter_from_guess_extend(capsys, corpus):
    assert main(["filter-from-guess", "-x", "sissy", "⬛🟩⬛⬛⬛"]) == 0
    out = capsys.readouterr().out.split()
    assert len(out) >= len(filter_targets(Token("sissy"), Feedback.parse("-=---"), corpus))


def test_filter_from_guess_bad_word(capsys):
    assert main(["filter-from-guess", "zzzzz", "-=---"]) == 1
    assert "Error: Word not in the word list: zzzzz" in capsys.readouterr().err


def test_filter_from_guess_bad_feedback(capsys):
    assert main(["filter-from-guess", "sissy", "-=--"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_analyse(capsys, monkeypatch):
    target = Token("cigar")
    share = "Wordle 0 2/6\n{}\n=====\n".format(score("react", target))
    monkeypatch.setattr("sys.stdin", io.StringIO(share))
    assert main(["analyse"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("Guess resulting in {} has ".format(score("react", target)))


def test_analyse_not_a_share(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("Wordel 232\n=====\n"))
    assert main(["analyse"]) == 1
    assert "doesn't look like a Wordle share" in capsys.readouterr().err


def test_settings_from_env():
    settings = Settings.from_env({"WORDLE_THREADS": "2", "WORDLE_ACCEPTED_FILE": "/tmp/x.txt"})
    assert settings.threads == 2
    assert settings.accepted_file == "/tmp/x.txt"
    assert settings.answers_file == DEFAULT_ANSWERS_FILE
    assert Settings.from_env({}).threads is None


@pytest.mark.parametrize("feedback", ["-=---", "-----", "--+=-", "=+---"])
def test_filter_from_guess_plain_feedback(capsys, corpus, feedback):
    assert main(["filter-from-guess", "sissy", feedback]) == 0
    out = capsys.readouterr().out.split()
    assert out == filter_targets(Token("sissy"), Feedback.parse(feedback), corpus)


def test_filter_from_guess_explicit_separator(capsys, corpus):
    assert main(["filter-from-guess", "-x", "sissy", "--", "-=---"]) == 0
    out = capsys.readouterr().out.split()
    assert out == filter_targets(Token("sissy"), Feedback.parse("-=---"), corpus, extend=True)


def test_separate_feedback():
    assert separate_feedback(["filter-from-guess", "sissy", "-=---"]) == \
        ["filter-from-guess", "sissy", "--", "-=---"]
    assert separate_feedback(["filter-from-guess", "-x", "sissy", "=+---"]) == \
        ["filter-from-guess", "-x", "sissy", "=+---"]
    assert separate_feedback(["analyse", "-x"]) == ["analyse", "-x"]
    assert separate_feedback(["filter-from-guess", "sissy", "--", "-=---"]) == \
        ["filter-from-guess", "sissy", "--", "-=---"]


@pytest.mark.parametrize("value", ["two", "0", "-3"])
def test_settings_bad_threads(value):
    with pytest.raises(ConfigError):
        Settings.from_env({"WORDLE_THREADS": value})


def test_bad_threads_env_reported(capsys, monkeypatch):
    monkeypatch.setenv("WORDLE_THREADS", "two")
    assert main(["filter-from-guess", "sissy", "=+---"]) == 1
    assert "Error: Thread count must be a whole number, got 'two'" in capsys.readouterr().err


def test_too_many_threads_reported(capsys):
    assert main(["--threads", "100000", "filter-from-guess", "sissy", "=+---"]) == 1
    assert "Error: Thread count must be between 1 and" in capsys.readouterr().err


def test_analyse_invalid_utf8(capsys, monkeypatch):
    stdin = io.TextIOWrapper(io.BytesIO(b"Wordle 0\n\xff\xfe\n"), encoding="utf-8")
    monkeypatch.setattr("sys.stdin", stdin)
    assert main(["analyse"]) == 1
    assert "Error: input is not valid UTF-8" in capsys.readouterr().err
