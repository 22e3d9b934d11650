"""
Letter classification and the measure function.

All functions work on a bytes-like word (lowercase ASCII) and take
inclusive indexes, so ``end=-1`` denotes the empty prefix.

Consonant rule:
- a, e, i, o, u are vowels
- y is a consonant at position 0, otherwise the opposite of the letter
  before it ("toy": consonant, "syzygy": vowel at 1, 3, 5)
- every other letter is a consonant

Measure (m) counts vowel-run -> consonant-run transitions:
    <C><V>         gives 0   (tr, ee, tree, y, by)
    <C>VC<V>       gives 1   (trouble, oats, trees, ivy)
    <C>VCVC<V>     gives 2   (troubles, private, oaten, orrery)
"""

from typing import List

VOWELS = frozenset(b"aeiou")
Y = ord("y")


def is_consonant(word, i: int) -> bool:
    """
    True if word[i] is a consonant.

    A run of y's alternates starting from the letter before the run,
    so the answer is found with one backward scan instead of recursion.
    """
    ch = word[i]
    if ch in VOWELS:
        return False
    if ch != Y:
        return True

    start = i
    while start > 0 and word[start - 1] == Y:
        start -= 1

    if start == 0:
        # Leading y is a consonant
        return (i - start) % 2 == 0

    before_run = word[start - 1] not in VOWELS
    if (i - start) % 2 == 0:
        return not before_run
    return before_run


def consonant_flags(word, end: int) -> List[bool]:
    """Classify every position in word[0..end] in a single forward pass"""
    flags: List[bool] = []
    for i in range(end + 1):
        ch = word[i]
        if ch in VOWELS:
            flags.append(False)
        elif ch == Y:
            flags.append(i == 0 or not flags[i - 1])
        else:
            flags.append(True)
    return flags


def measure(word, end: int) -> int:
    """
    Count VC sequences in word[0..end].

    Args:
        word: Lowercase ASCII bytes
        end: Inclusive end index (-1 for the empty prefix)

    Returns:
        m >= 0

    Examples:
        >>> measure(b"trouble", 6)
        1
        >>> measure(b"orrery", 5)
        2
    """
    flags = consonant_flags(word, end)
    return sum(
        1 for i in range(1, len(flags))
        if flags[i] and not flags[i - 1]
    )


def has_vowel(word, end: int) -> bool:
    """True if word[0..end] contains a vowel"""
    return not all(consonant_flags(word, end))


def is_double_consonant(word, i: int) -> bool:
    """True if word[i-1], word[i] are the same consonant ("hopp", "fall")"""
    if i < 1:
        return False
    if word[i] != word[i - 1]:
        return False
    return is_consonant(word, i)


def is_cvc(word, i: int) -> bool:
    """
    True if word[i-2..i] is consonant-vowel-consonant and word[i] is not w, x or y.

    Used to restore a silent e on short stems: cav(e), lov(e), hop(e),
    crim(e), but snow, box, tray.
    """
    if i < 2:
        return False
    if not is_consonant(word, i) or is_consonant(word, i - 1) or not is_consonant(word, i - 2):
        return False
    return word[i] not in b"wxy"
