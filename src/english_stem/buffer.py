"""
Reusable working buffer for one word at a time.

The word lives in buffer[0..k]; k shrinks as suffixes are removed.
j is scratch: ends() sets it to the index just before a matched suffix,
and set_to() / the measure-based helpers read it.
"""

import logging

from . import letters

logger = logging.getLogger(__name__)


class WordBuffer:
    """
    Grow-only bytearray holding the active word.

    Capacity policy:
    - Grow when len(word) + GROWTH_MARGIN exceeds capacity
    - New capacity = len(word) + GROWTH_SLACK
    - Never shrink (amortizes allocation across calls)
    """

    GROWTH_MARGIN = 50
    GROWTH_SLACK = 75

    def __init__(self, capacity: int = 0):
        self._data = bytearray(capacity)
        self.k = -1
        self.j = -1

    @property
    def capacity(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return self.k + 1

    def __getitem__(self, i: int) -> int:
        return self._data[i]

    def __setitem__(self, i: int, value: int):
        self._data[i] = value

    def reserve(self, length: int):
        """Ensure room for a word of `length` bytes plus margin"""
        if length + self.GROWTH_MARGIN <= len(self._data):
            return
        new_capacity = length + self.GROWTH_SLACK
        logger.debug(f"Growing word buffer: {len(self._data)} -> {new_capacity} bytes")
        self._data.extend(bytes(new_capacity - len(self._data)))

    def load(self, source, start: int, end: int):
        """Copy source[start:end] into the buffer and make it the active word"""
        length = end - start
        self.reserve(length)
        self._data[:length] = memoryview(source)[start:end]
        self.k = length - 1
        self.j = self.k

    def release(self):
        """Drop the storage; the buffer is empty until the next load()"""
        self._data = bytearray()
        self.k = -1
        self.j = -1

    def active(self) -> bytes:
        """Copy of the active word buffer[0..k]"""
        return bytes(self._data[:self.k + 1])

    # Suffix matching and rewriting

    def ends(self, suffix: bytes) -> bool:
        """
        True if the active word ends with `suffix`.

        On a match, j is set to the index before the suffix. On a
        mismatch, j is left as it was.
        """
        if not self._data.endswith(suffix, 0, self.k + 1):
            return False
        self.j = self.k - len(suffix)
        return True

    def set_to(self, replacement: bytes):
        """Overwrite everything after j with `replacement` and readjust k"""
        start = self.j + 1
        self._data[start:start + len(replacement)] = replacement
        self.k = self.j + len(replacement)

    def replace_if_measure(self, replacement: bytes):
        """set_to(replacement) only when the stem before the suffix has m > 0"""
        if self.measure() > 0:
            self.set_to(replacement)

    # Predicates over the active word

    def measure(self) -> int:
        """m of buffer[0..j]"""
        return letters.measure(self._data, self.j)

    def has_vowel(self) -> bool:
        """True if buffer[0..j] contains a vowel"""
        return letters.has_vowel(self._data, self.j)

    def is_consonant(self, i: int) -> bool:
        return letters.is_consonant(self._data, i)

    def is_double_consonant(self, i: int) -> bool:
        return letters.is_double_consonant(self._data, i)

    def is_cvc(self, i: int) -> bool:
        return letters.is_cvc(self._data, i)
