"""Exceptions raised by the stemmer."""


class StemmerError(Exception):
    """Base class for stemmer errors"""


class InvalidWordError(StemmerError, ValueError):
    """Word rejected by input validation (empty, non-ASCII, not lowercase a-z)"""

    def __init__(self, word, reason: str):
        self.word = word
        self.reason = reason
        super().__init__(f"Cannot stem {word!r}: {reason}")


class ContextClosedError(StemmerError, RuntimeError):
    """Stemmer context used after close()"""
