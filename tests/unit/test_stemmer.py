"""
Unit tests for module-level stem() with Porter and Snowball backends.
"""

import threading

import pytest
from english_stem import InvalidWordError, StemmerOptions, configure, get_context, stem, stem_words
from english_stem.stemmer import get_options


class TestPorterBackend:
    """Test the default backend"""

    def test_stem(self):
        assert stem("caresses") == "caress"
        assert stem("meetings") == "meet"
        assert stem("skies") == "sky"

    def test_stem_words(self):
        assert stem_words(["hopping", "hoping", "cats"]) == ["hop", "hope", "cat"]

    def test_context_reused_within_thread(self):
        assert get_context() is get_context()

    def test_configure_replaces_context(self):
        old = get_context()
        configure(StemmerOptions(published_rules=True))
        new = get_context()

        assert new is not old
        assert old.closed
        assert new.options.published_rules
        assert stem("possibly") == "possibli"

    def test_configure_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("STEMMER_ALGORITHM", "snowball")
        options = configure()
        assert options.algorithm == "snowball"
        assert get_options() is options

    def test_one_context_per_thread(self):
        contexts = []
        barrier = threading.Barrier(4)
        lock = threading.Lock()

        def worker():
            ctx = get_context()
            barrier.wait()
            with lock:
                contexts.append(ctx)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(contexts) == 4
        assert len({id(ctx) for ctx in contexts}) == 4


class TestSnowballBackend:
    """Test the NLTK Snowball backend"""

    def test_explicit_algorithm(self):
        assert stem("running", algorithm="snowball") == "run"
        assert stem("searching", algorithm="snowball") == "search"

    def test_configured_algorithm(self):
        configure(StemmerOptions(algorithm="snowball"))
        assert stem("communication") == "communic"

    def test_explicit_porter_overrides_configuration(self):
        configure(StemmerOptions(algorithm="snowball"))
        assert stem("skies", algorithm="porter") == "sky"

    @pytest.mark.parametrize("word", ["Cats", "abc1", "", "café"])
    def test_invalid_words_rejected(self, word):
        with pytest.raises(InvalidWordError):
            stem(word, algorithm="snowball")

    def test_validation_disabled(self):
        configure(StemmerOptions(algorithm="snowball", validate_input=False))
        assert stem("Cats") == "cat"

    def test_unknown_algorithm(self):
        with pytest.raises(ValueError, match="Unknown stemming algorithm"):
            stem("cats", algorithm="lancaster")
