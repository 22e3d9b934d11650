"""
Stemmer configuration from environment variables.

Config (env vars):
    STEMMER_ALGORITHM: "porter" | "snowball" (default: porter)
    STEMMER_VALIDATE_INPUT: reject malformed words (default: true)
    STEMMER_PUBLISHED_RULES: follow Porter (1980) where this stemmer departs from it (default: false)
    STEMMER_INITIAL_CAPACITY: initial working buffer size in bytes (default: 0)

Values are read from the process environment after loading .env.local
(highest priority) or .env, or an explicit env file.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ALGORITHMS = ("porter", "snowball")

_TRUE_VALUES = {"true", "1", "yes"}
_FALSE_VALUES = {"false", "0", "no"}


@dataclass(frozen=True)
class StemmerOptions:
    """Per-context stemming behaviour"""
    algorithm: str = "porter"          # Backend for module-level stem()
    validate_input: bool = True        # Raise InvalidWordError on malformed words
    published_rules: bool = False      # -abli/-able, no -logi, no short-word bypass
    initial_capacity: int = 0          # Working buffer bytes allocated up front

    def __post_init__(self):
        if self.algorithm not in ALGORITHMS:
            raise ValueError(
                f"Unknown stemming algorithm '{self.algorithm}'. "
                f"Supported: {', '.join(ALGORITHMS)}"
            )
        if self.initial_capacity < 0:
            raise ValueError(f"initial_capacity must be >= 0, got {self.initial_capacity}")


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be one of true/false/1/0/yes/no, got '{value}'")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{value}'")


def load_env_file(env_file: Optional[Union[str, Path]] = None, base_dir: Optional[Path] = None) -> Optional[Path]:
    """
    Load an env file into os.environ.

    With no explicit file, tries .env.local then .env in base_dir
    (default: current directory). Already-set variables are kept.

    Returns:
        Path that was loaded, or None
    """
    if env_file is not None:
        path = Path(env_file)
        if not path.exists():
            raise ValueError(f"Env file not found: {path}")
        load_dotenv(path)
        return path

    base_dir = base_dir or Path.cwd()
    for candidate in (base_dir / ".env.local", base_dir / ".env"):
        if candidate.exists():
            load_dotenv(candidate)
            return candidate
    return None


def load_options(env_file: Optional[Union[str, Path]] = None, base_dir: Optional[Path] = None) -> StemmerOptions:
    """
    Build StemmerOptions from the environment.

    Args:
        env_file: Explicit env file to load first (optional)
        base_dir: Directory searched for .env.local / .env when env_file is None

    Raises:
        ValueError: Unknown algorithm or malformed value
    """
    loaded = load_env_file(env_file, base_dir)
    if loaded:
        logger.debug(f"Loaded stemmer environment from {loaded}")

    algorithm = (os.getenv("STEMMER_ALGORITHM") or "porter").strip().lower()

    return StemmerOptions(
        algorithm=algorithm,
        validate_input=_env_flag("STEMMER_VALIDATE_INPUT", True),
        published_rules=_env_flag("STEMMER_PUBLISHED_RULES", False),
        initial_capacity=_env_int("STEMMER_INITIAL_CAPACITY", 0),
    )
