"""
English Porter stemmer for search index normalization.

Reduces a lowercase ASCII word to its stem so that plurals, verb tenses
and derivational suffixes of the same root collapse together.

Components:
- letters: consonant/vowel classification, measure, CVC and double consonant tests
- buffer: reusable grow-only working buffer with suffix matching
- irregulars: hand-picked forms that bypass the algorithm (skies -> sky)
- steps: the five ordered suffix-stripping steps
- context: StemmerContext, one per thread, stems one word at a time
- stemmer: module-level stem() with per-thread contexts and a Snowball backend
- config: StemmerOptions from environment / .env files
"""

from .config import StemmerOptions, load_options
from .context import StemmerContext
from .errors import ContextClosedError, InvalidWordError, StemmerError
from .irregulars import IRREGULARS, build_irregular_table
from .stemmer import configure, get_context, stem, stem_words

__all__ = [
    "StemmerOptions",
    "load_options",
    "StemmerContext",
    "StemmerError",
    "InvalidWordError",
    "ContextClosedError",
    "IRREGULARS",
    "build_irregular_table",
    "configure",
    "get_context",
    "stem",
    "stem_words",
]
