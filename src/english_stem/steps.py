"""
The five suffix-stripping steps.

Steps run in a fixed order on a WordBuffer, each one seeing the word as
the previous step left it:

1ab. Plurals and -ed / -ing      caresses -> caress, hopping -> hop
1c.  Terminal y -> i              happy -> happi, enjoy -> enjoy
2.   Double suffix -> single      relational -> relate (m > 0)
3.   -ic-, -ful, -ness etc.       hopeful -> hope (m > 0)
4.   Final suffix removal         adjustment -> adjust (m > 1)
5.   Final -e and -ll             probate -> probat, controll -> control

Steps 2-4 dispatch on one letter of the word and try an ordered list of
suffixes for that letter. The first suffix that matches decides the step,
whether or not its measure condition then holds.
"""

from typing import Callable, Dict, Mapping, Optional, Tuple

from .buffer import WordBuffer

Rule = Tuple[bytes, bytes]
RemovalRule = Tuple[bytes, Optional[Callable[[WordBuffer], bool]]]


# Step 2, keyed by the penultimate letter
DOUBLE_SUFFIXES: Dict[int, Tuple[Rule, ...]] = {
    ord("a"): ((b"ational", b"ate"), (b"tional", b"tion")),
    ord("c"): ((b"enci", b"ence"), (b"anci", b"ance")),
    ord("e"): ((b"izer", b"ize"),),
    ord("l"): (
        (b"bli", b"ble"),
        (b"alli", b"al"),
        (b"entli", b"ent"),
        (b"eli", b"e"),
        (b"ousli", b"ous"),
    ),
    ord("o"): ((b"ization", b"ize"), (b"ation", b"ate"), (b"ator", b"ate")),
    ord("s"): (
        (b"alism", b"al"),
        (b"iveness", b"ive"),
        (b"fulness", b"ful"),
        (b"ousness", b"ous"),
    ),
    ord("t"): ((b"aliti", b"al"), (b"iviti", b"ive"), (b"biliti", b"ble")),
    ord("g"): ((b"logi", b"log"),),
}

# Step 2 as in Porter (1980): -abli instead of -bli, no -logi
PUBLISHED_DOUBLE_SUFFIXES: Dict[int, Tuple[Rule, ...]] = {
    letter: rules for letter, rules in DOUBLE_SUFFIXES.items() if letter != ord("g")
}
PUBLISHED_DOUBLE_SUFFIXES[ord("l")] = ((b"abli", b"able"),) + DOUBLE_SUFFIXES[ord("l")][1:]

# Step 3, keyed by the final letter
CONTEXT_SUFFIXES: Dict[int, Tuple[Rule, ...]] = {
    ord("e"): ((b"icate", b"ic"), (b"ative", b""), (b"alize", b"al")),
    ord("i"): ((b"iciti", b"ic"),),
    ord("l"): ((b"ical", b"ic"), (b"ful", b"")),
    ord("s"): ((b"ness", b""),),
}


def _preceded_by_s_or_t(word: WordBuffer) -> bool:
    return word.j >= 0 and word[word.j] in b"st"


# Step 4, keyed by the penultimate letter
REMOVABLE_SUFFIXES: Dict[int, Tuple[RemovalRule, ...]] = {
    ord("a"): ((b"al", None),),
    ord("c"): ((b"ance", None), (b"ence", None)),
    ord("e"): ((b"er", None),),
    ord("i"): ((b"ic", None),),
    ord("l"): ((b"able", None), (b"ible", None)),
    ord("n"): ((b"ant", None), (b"ement", None), (b"ment", None), (b"ent", None)),
    # -ou takes care of -ous
    ord("o"): ((b"ion", _preceded_by_s_or_t), (b"ou", None)),
    ord("s"): ((b"ism", None),),
    ord("t"): ((b"ate", None), (b"iti", None)),
    ord("u"): ((b"ous", None),),
    ord("v"): ((b"ive", None),),
    ord("z"): ((b"ize", None),),
}


def step_1ab(word: WordBuffer):
    """
    Remove plurals and -ed / -ing.

        caresses  ->  caress        feed      ->  feed
        ponies    ->  poni          agreed    ->  agree
        sties     ->  sti           disabled  ->  disable
        ties      ->  tie           matting   ->  mat
        caress    ->  caress        mating    ->  mate
        cats      ->  cat           meeting   ->  meet
                                    milling   ->  mill
                                    messing   ->  mess
                                    meetings  ->  meet
    """
    if word[word.k] == ord("s"):
        if word.ends(b"sses"):
            word.k -= 2
        elif word.ends(b"ies"):
            # flies -> fli, but dies -> die
            word.k -= 1 if word.j == 0 else 2
        elif word.k >= 1 and word[word.k - 1] != ord("s"):
            word.k -= 1

    if word.ends(b"ied"):
        # spied -> spi, but died -> die
        word.k -= 1 if word.j == 0 else 2
    elif word.ends(b"eed"):
        if word.measure() > 0:
            word.k -= 1
    elif (word.ends(b"ed") or word.ends(b"ing")) and word.has_vowel():
        word.k = word.j
        if word.ends(b"at"):
            word.set_to(b"ate")
        elif word.ends(b"bl"):
            word.set_to(b"ble")
        elif word.ends(b"iz"):
            word.set_to(b"ize")
        elif word.is_double_consonant(word.k):
            if word[word.k] not in b"lsz":
                word.k -= 1
        elif word.measure() == 1 and word.is_cvc(word.k):
            word.set_to(b"e")


def step_1c(word: WordBuffer):
    """
    Turn terminal y into i when a consonant precedes it.

    happy -> happi, spy -> spi, but enjoy -> enjoy and by -> by.
    """
    if word.ends(b"y") and word.j > 0 and word.is_consonant(word.k - 1):
        word[word.k] = ord("i")


def _first_match(word: WordBuffer, rules: Tuple[Rule, ...]):
    for suffix, replacement in rules:
        if word.ends(suffix):
            word.replace_if_measure(replacement)
            return


def step_2(word: WordBuffer, rules: Mapping[int, Tuple[Rule, ...]] = DOUBLE_SUFFIXES):
    """Map double suffixes to single ones: -ization -> -ize etc. (m > 0)"""
    if word.k < 1:
        return
    _first_match(word, rules.get(word[word.k - 1], ()))


def step_3(word: WordBuffer):
    """Handle -icate, -ative, -alize, -iciti, -ical, -ful, -ness (m > 0)"""
    if word.k < 0:
        return
    _first_match(word, CONTEXT_SUFFIXES.get(word[word.k], ()))


def step_4(word: WordBuffer):
    """Remove -ant, -ence etc. in context <c>vcvc<v> (m > 1)"""
    if word.k < 1:
        return
    for suffix, condition in REMOVABLE_SUFFIXES.get(word[word.k - 1], ()):
        if word.ends(suffix) and (condition is None or condition(word)):
            if word.measure() > 1:
                word.k = word.j
            return


def step_5(word: WordBuffer):
    """Remove a final -e if m > 1 (or m = 1 and not *o), and -ll -> -l if m > 1"""
    word.j = word.k
    if word[word.k] == ord("e"):
        m = word.measure()
        if m > 1 or (m == 1 and not word.is_cvc(word.k - 1)):
            word.k -= 1
    if word[word.k] == ord("l") and word.is_double_consonant(word.k) and word.measure() > 1:
        word.k -= 1


def run_steps(word: WordBuffer, published_rules: bool = False):
    """Apply steps 1ab through 5 in order"""
    step_1ab(word)
    step_1c(word)
    step_2(word, PUBLISHED_DOUBLE_SUFFIXES if published_rules else DOUBLE_SUFFIXES)
    step_3(word)
    step_4(word)
    step_5(word)
