"""
Errors
======

Every validation failure raises one of these. They all derive from
``WordError`` (itself a ``ValueError``) so callers can catch the whole family.
"""


class WordError(ValueError):
    """Base class for all word, feedback and transcript errors."""


class InvalidCharacterError(WordError):
    """Input contains a character outside the accepted alphabet."""

    def __init__(self, text: str, char: str, kind: str = "Words"):
        self.text = text
        self.char = char
        if kind == "Words":
            message = (f"Words should be ASCII letters only. "
                       f"Got '{text}' which contains '{char}'")
        else:
            message = (f"{kind} should be made of =+- or squares only. "
                       f"Got '{text}' which contains '{char}'")
        super().__init__(message)


class InvalidLengthError(WordError):
    """Input does not have exactly five symbols."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Words have five letters, got a string containing {length} characters")


class UnknownWordError(WordError):
    """Well-formed word that is in neither word list."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Word not in the word list: {text}")


class MalformedTranscriptHeaderError(WordError):
    """First line is not a ``Wordle <day>`` share header."""

    def __init__(self, line: str = ""):
        self.line = line
        super().__init__("Input doesn't look like a Wordle share")


class UnclassifiedError(WordError):
    """Catch-all for failures no normal input can produce."""

    def __init__(self, detail: str = "Unknown error"):
        super().__init__(detail)


class ConfigError(ValueError):
    """Invalid setting from the environment or the command line."""
