"""
Module-level stemming for index normalization.

Two backends:
- porter (default): this package's Porter stemmer, one StemmerContext per
  thread so callers never share a working buffer
- snowball: NLTK's Snowball English stemmer (Porter2)

Examples (porter):
- "caresses" → "caress"
- "relational" → "relat"
- "hopping" → "hop"
- "skies" → "sky"

Examples (snowball):
- "communication" → "communic"
- "running" → "run"
"""

import logging
import threading
from typing import Iterable, List, Optional

from nltk.stem.snowball import SnowballStemmer

from .config import ALGORITHMS, StemmerOptions, load_options
from .context import StemmerContext, validate_word

logger = logging.getLogger(__name__)

# Initialize Snowball once (thread-safe, reusable)
_snowball = SnowballStemmer('english')

_lock = threading.Lock()
_options: Optional[StemmerOptions] = None
_generation = 0
_local = threading.local()


def configure(options: Optional[StemmerOptions] = None) -> StemmerOptions:
    """
    Set the options used by stem() and stem_words().

    Args:
        options: Options to use; None reloads them from the environment

    Returns:
        The active options

    Per-thread contexts created under older options are replaced on
    their next use.
    """
    global _options, _generation
    if options is None:
        options = load_options()
    with _lock:
        _options = options
        _generation += 1
    logger.info(
        f"Stemmer configured: algorithm={options.algorithm}, "
        f"validate_input={options.validate_input}, published_rules={options.published_rules}"
    )
    return options


def get_options() -> StemmerOptions:
    """Active options, loaded from the environment on first use"""
    if _options is None:
        return configure()
    return _options


def get_context() -> StemmerContext:
    """The calling thread's StemmerContext"""
    options = get_options()
    context = getattr(_local, "context", None)
    if context is None or _local.generation != _generation:
        if context is not None:
            context.close()
        context = StemmerContext(options)
        _local.context = context
        _local.generation = _generation
    return context


def stem(word: str, algorithm: Optional[str] = None) -> str:
    """
    Stem a single lowercase word.

    Args:
        word: Lowercase word to stem
        algorithm: "porter" or "snowball" (default: configured algorithm)

    Returns:
        Stemmed word

    Examples:
        >>> stem("meetings")
        'meet'
        >>> stem("searching", algorithm="snowball")
        'search'
    """
    algorithm = algorithm or get_options().algorithm
    if algorithm == "porter":
        return get_context().stem(word)
    if algorithm == "snowball":
        if get_options().validate_input:
            validate_word(word)
        return _snowball.stem(word)
    raise ValueError(f"Unknown stemming algorithm '{algorithm}'. Supported: {', '.join(ALGORITHMS)}")


def stem_words(words: Iterable[str], algorithm: Optional[str] = None) -> List[str]:
    """Stem each word in order (words are already tokenized and lowercased)"""
    return [stem(word, algorithm) for word in words]
