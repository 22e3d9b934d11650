"""Shared pytest configuration and fixtures"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

# Add src/ to path so tests run without installing the package
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from english_stem import StemmerContext, StemmerOptions, configure


@pytest.fixture(autouse=True)
def clean_stemmer_env():
    """
    Isolate STEMMER_* environment variables.

    load_dotenv writes straight into os.environ, so variables set by one
    test must not leak into the next.
    """
    saved = {k: v for k, v in os.environ.items() if k.startswith("STEMMER_")}
    for key in saved:
        del os.environ[key]

    yield

    for key in [k for k in os.environ if k.startswith("STEMMER_")]:
        del os.environ[key]
    os.environ.update(saved)


@pytest.fixture(autouse=True)
def default_module_options():
    """Module-level stem() starts every test with default options"""
    configure(StemmerOptions())
    yield
    configure(StemmerOptions())


@pytest.fixture
def restore_root_logging(monkeypatch):
    """Give setup_logging() a scratch handler list on the root logger"""
    root = logging.getLogger()
    saved_level = root.level
    monkeypatch.setattr(root, "handlers", [])

    yield

    for handler in root.handlers:
        if isinstance(handler, RotatingFileHandler):
            handler.close()
    root.setLevel(saved_level)


@pytest.fixture
def context():
    """Fresh StemmerContext with default options"""
    with StemmerContext() as ctx:
        yield ctx


@pytest.fixture
def published_context():
    """StemmerContext following the published Porter (1980) rules"""
    with StemmerContext(StemmerOptions(published_rules=True)) as ctx:
        yield ctx
