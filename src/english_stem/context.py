"""
Stemmer context: one reusable working buffer, one word at a time.

Usage:
    with StemmerContext() as ctx:
        ctx.stem("caresses")                   # 'caress'
        ctx.stem_bytes(b"ponies")              # b'poni'
        ctx.stem_range(b"the cats sat", 4, 8)  # b'cat'

A context is not thread-safe; create one per thread (see stemmer.py).
The irregular table is shared by all contexts.
"""

import logging
import re
from typing import Mapping, Optional

from .buffer import WordBuffer
from .config import StemmerOptions
from .errors import ContextClosedError, InvalidWordError
from .irregulars import IRREGULARS
from .steps import run_steps

logger = logging.getLogger(__name__)

_LOWERCASE_WORD = re.compile(rb"[a-z]+")

# Words this short are returned as-is unless published rules are on
SHORT_WORD_LENGTH = 2


def validate_word(word: str) -> bytes:
    """
    Check that word is non-empty lowercase ASCII a-z.

    Returns:
        The word as ASCII bytes

    Raises:
        InvalidWordError: Empty, non-ASCII, or anything other than a-z
    """
    try:
        data = word.encode("ascii")
    except UnicodeEncodeError:
        raise InvalidWordError(word, "not ASCII")
    if not _LOWERCASE_WORD.fullmatch(data):
        raise InvalidWordError(data, "expected lowercase ASCII letters a-z")
    return data


class StemmerContext:
    """
    Porter stemmer state for a single caller.

    Input validation (default on): words must be non-empty lowercase
    ASCII a-z, otherwise InvalidWordError is raised. With validation off,
    malformed input is stemmed without checks and the result is
    unspecified.
    """

    def __init__(
        self,
        options: Optional[StemmerOptions] = None,
        irregulars: Mapping[bytes, bytes] = IRREGULARS,
    ):
        self.options = options or StemmerOptions()
        self.irregulars = irregulars
        self._word = WordBuffer(self.options.initial_capacity)
        self._closed = False

    @property
    def capacity(self) -> int:
        """Working buffer size in bytes (never shrinks while open)"""
        return self._word.capacity

    @property
    def closed(self) -> bool:
        return self._closed

    def stem(self, word: str) -> str:
        """
        Stem a lowercase ASCII word.

        Examples:
            >>> StemmerContext().stem("hopping")
            'hop'
            >>> StemmerContext().stem("skies")
            'sky'
        """
        try:
            data = word.encode("ascii")
        except UnicodeEncodeError:
            raise InvalidWordError(word, "not ASCII")
        return self.stem_bytes(data).decode("ascii")

    def stem_bytes(self, word: bytes) -> bytes:
        """Stem a whole bytes word"""
        return self.stem_range(word, 0, len(word))

    def stem_range(self, source, start: int, end: int) -> bytes:
        """
        Stem the word at source[start:end].

        Args:
            source: Bytes-like buffer containing the word
            start: Offset of the first byte
            end: Offset one past the last byte

        Returns:
            The stem as a new bytes object

        Raises:
            ContextClosedError: Context was closed
            InvalidWordError: Empty or out-of-bounds range, or (with
                validation on) bytes outside a-z
        """
        if self._closed:
            raise ContextClosedError("Stemmer context is closed")

        if not 0 <= start < end <= len(source):
            raise InvalidWordError(
                bytes(source[start:end]) if 0 <= start <= end else b"",
                f"invalid range [{start}:{end}] for {len(source)}-byte source",
            )

        if self.options.validate_input and not _LOWERCASE_WORD.fullmatch(source, start, end):
            raise InvalidWordError(bytes(source[start:end]), "expected lowercase ASCII letters a-z")

        word = self._word
        word.load(source, start, end)

        # Irregular forms bypass the steps entirely
        irregular = self.irregulars.get(word.active())
        if irregular is not None:
            return irregular

        if self.options.published_rules or len(word) > SHORT_WORD_LENGTH:
            run_steps(word, self.options.published_rules)

        return word.active()

    def close(self):
        """Release the working buffer; the shared irregular table is untouched"""
        if self._closed:
            return
        self._word.release()
        self._closed = True
        logger.debug("Stemmer context closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
