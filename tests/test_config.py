"""Tests for keysprint.core.config – settings and YAML config file."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from keysprint.core.config import TestConfig, load_config
from keysprint.core.wordlists import BuiltInWordlist


# ---------------------------------------------------------------------------
# TestConfig dataclass
# ---------------------------------------------------------------------------

class TestDefaults:
    def test_defaults(self):
        cfg = TestConfig()
        assert cfg.num_words == 30
        assert cfg.wordlist is BuiltInWordlist.COMMON
        assert cfg.wordlist_file is None
        assert cfg.log_level == "WARNING"
        assert cfg.log_file is None

    def test_non_positive_word_count(self):
        with pytest.raises(ValueError):
            TestConfig(num_words=0)

    def test_unknown_log_level(self):
        with pytest.raises(ValueError):
            TestConfig(log_level="LOUD")


class TestTextName:
    def test_file_name(self):
        assert TestConfig(wordlist_file=Path("/tmp/lists/words.txt")).text_name() == "words.txt"

    def test_builtin_title(self):
        assert TestConfig().text_name() == "the 200 most common English words"

    def test_nothing(self):
        assert TestConfig(wordlist=None).text_name() == "an unknown word list"


class TestOverrides:
    def test_none_values_ignored(self):
        cfg = TestConfig(num_words=12)
        assert cfg.with_overrides(num_words=None, log_level=None) is cfg

    def test_values_applied(self):
        cfg = TestConfig().with_overrides(num_words=5, wordlist=BuiltInWordlist.TOP1K)
        assert cfg.num_words == 5
        assert cfg.wordlist is BuiltInWordlist.TOP1K

    def test_overrides_are_validated(self):
        with pytest.raises(ValueError):
            TestConfig().with_overrides(num_words=-3)


# ---------------------------------------------------------------------------
# load_config
# ---------------------------------------------------------------------------

class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path: Path):
        assert load_config(tmp_path / "config.yaml") == TestConfig()

    def test_all_keys(self, tmp_path: Path):
        f = tmp_path / "config.yaml"
        f.write_text(
            "num_words: 12\n"
            "wordlist: top1k\n"
            "wordlist_file: words.txt\n"
            "log_level: debug\n"
            "log_file: keysprint.log\n",
            encoding="utf-8",
        )
        cfg = load_config(f)
        assert cfg.num_words == 12
        assert cfg.wordlist is BuiltInWordlist.TOP1K
        assert cfg.wordlist_file == Path("words.txt")
        assert cfg.log_level == "DEBUG"
        assert cfg.log_file == Path("keysprint.log")

    def test_home_expanded(self, tmp_path: Path):
        f = tmp_path / "config.yaml"
        f.write_text("wordlist_file: ~/words.txt\n", encoding="utf-8")
        assert load_config(f).wordlist_file == Path.home() / "words.txt"

    def test_empty_file(self, tmp_path: Path):
        f = tmp_path / "config.yaml"
        f.write_text("", encoding="utf-8")
        assert load_config(f) == TestConfig()

    def test_malformed_yaml_is_ignored(self, tmp_path: Path, caplog: pytest.LogCaptureFixture):
        f = tmp_path / "config.yaml"
        f.write_text("num_words: [1, 2\n", encoding="utf-8")
        with caplog.at_level(logging.WARNING):
            assert load_config(f) == TestConfig()
        assert "Could not load config" in caplog.text

    def test_non_mapping_is_ignored(self, tmp_path: Path, caplog: pytest.LogCaptureFixture):
        f = tmp_path / "config.yaml"
        f.write_text("- 1\n- 2\n", encoding="utf-8")
        with caplog.at_level(logging.WARNING):
            assert load_config(f) == TestConfig()
        assert "expected a mapping" in caplog.text

    def test_unknown_key_is_ignored(self, tmp_path: Path, caplog: pytest.LogCaptureFixture):
        f = tmp_path / "config.yaml"
        f.write_text("num_words: 7\ncolour: red\n", encoding="utf-8")
        with caplog.at_level(logging.WARNING):
            cfg = load_config(f)
        assert cfg.num_words == 7
        assert "colour" in caplog.text

    def test_null_values_keep_defaults(self, tmp_path: Path):
        f = tmp_path / "config.yaml"
        f.write_text("num_words:\nwordlist:\n", encoding="utf-8")
        assert load_config(f) == TestConfig()

    def test_bad_word_count(self, tmp_path: Path):
        f = tmp_path / "config.yaml"
        f.write_text("num_words: lots\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_config(f)

    def test_boolean_word_count_rejected(self, tmp_path: Path):
        f = tmp_path / "config.yaml"
        f.write_text("num_words: yes\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_config(f)

    def test_unknown_wordlist(self, tmp_path: Path):
        f = tmp_path / "config.yaml"
        f.write_text("wordlist: klingon\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_config(f)
