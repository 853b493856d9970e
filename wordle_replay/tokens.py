"""
Tokens
======

A Token is a validated five-letter word: lowercase ASCII only, exactly five
letters, and present in at least one of the two word lists. Tokens are
``str`` subclasses, so they hash, compare and sort like the plain word.
"""

from typing import TYPE_CHECKING, Optional

from .errors import InvalidCharacterError, InvalidLengthError, UnknownWordError

if TYPE_CHECKING:
    from .corpus import Corpus


WORD_LENGTH = 5


def check_letters(text: str) -> str:
    """
    Check the shape of a word without consulting any word list.

    Raises:
        InvalidCharacterError: on the first character outside a-z
        InvalidLengthError: if the word is not five letters long
    """
    for ch in text:
        if not ('a' <= ch <= 'z'):
            raise InvalidCharacterError(text, ch)
    if len(text) != WORD_LENGTH:
        raise InvalidLengthError(len(text))
    return text


class Token(str):
    """A five-letter word known to the corpus."""

    __slots__ = ()

    def __new__(cls, text: str, corpus: Optional["Corpus"] = None):
        check_letters(text)
        if corpus is None:
            from .corpus import get_corpus
            corpus = get_corpus()
        if text not in corpus:
            raise UnknownWordError(text)
        return str.__new__(cls, text)

    @classmethod
    def _trusted(cls, text: str) -> "Token":
        """Build a Token from a word the corpus itself has already checked."""
        return str.__new__(cls, text)

    def __repr__(self) -> str:
        return f"Token({str(self)})"
