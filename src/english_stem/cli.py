"""
Command line front end.

    english-stem caresses ponies hopping
    printf 'relational\nconditional\n' | english-stem --show-input

Words come from the arguments, or one per line from stdin when none are
given. They must already be lowercase a-z; rejected words are logged and
skipped, and the exit status is 1 if any were rejected.
"""

import argparse
import logging
import sys
from dataclasses import replace
from typing import Iterable, List, Optional

from .config import ALGORITHMS, load_options
from .errors import InvalidWordError
from .logging_config import setup_logging
from .stemmer import configure, stem

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="english-stem",
        description="Reduce lowercase English words to their Porter stems.",
    )
    parser.add_argument("words", nargs="*", help="Words to stem (default: read stdin, one word per line)")
    parser.add_argument("--algorithm", choices=ALGORITHMS, help="Stemming backend (default: STEMMER_ALGORITHM or porter)")
    parser.add_argument("--published-rules", action="store_true", help="Follow Porter (1980) where this stemmer departs from it")
    parser.add_argument("--no-validate", action="store_true", help="Skip input validation (result unspecified for malformed words)")
    parser.add_argument("--show-input", action="store_true", help="Print 'word<TAB>stem' instead of the stem alone")
    parser.add_argument("--env-file", help="Env file with STEMMER_* settings")
    parser.add_argument("--log-file", help="Also write detailed logs to this file (rotated)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log INFO messages to stderr")
    return parser


def _read_words(stream) -> Iterable[str]:
    for line in stream:
        word = line.strip()
        if word:
            yield word


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point; returns the process exit status"""
    args = build_parser().parse_args(argv)

    setup_logging(args.log_file, console_level=logging.INFO if args.verbose else logging.WARNING)

    try:
        options = load_options(args.env_file)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    overrides = {}
    if args.algorithm:
        overrides["algorithm"] = args.algorithm
    if args.published_rules:
        overrides["published_rules"] = True
    if args.no_validate:
        overrides["validate_input"] = False
    options = configure(replace(options, **overrides))

    words = args.words or _read_words(sys.stdin)
    rejected = 0
    for word in words:
        try:
            result = stem(word)
        except InvalidWordError as e:
            logger.warning(str(e))
            rejected += 1
            continue
        print(f"{word}\t{result}" if args.show_input else result)

    if rejected:
        logger.warning(f"Skipped {rejected} invalid word(s)")
        return 1
    return 0
