"""Tests for keysprint.core.wordlists – bundled YAML word lists."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from keysprint.core.wordlists import BuiltInWordlist, BundledWordlist, load_bundled


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def wordlists_dir(tmp_path: Path) -> Path:
    d = tmp_path / "data" / "wordlists"
    d.mkdir(parents=True)
    return d


def _write_yaml(path: Path, data: dict) -> None:
    path.write_text(yaml.dump(data, allow_unicode=True, default_flow_style=False), encoding="utf-8")


# ---------------------------------------------------------------------------
# Bundled files
# ---------------------------------------------------------------------------

class TestBundledLists:
    def test_common_has_200_words(self):
        assert len(load_bundled("common").words) == 200

    def test_top1k_has_1000_distinct_words(self):
        words = load_bundled("top1k").words
        assert len(words) == 1000
        assert len(set(words)) == 1000

    def test_yaml_keywords_stay_words(self):
        # "no", "yes", "on" and "off" would turn into booleans in a YAML list
        words = set(load_bundled("top1k").words)
        assert {"no", "yes", "on", "off"} <= words

    def test_cached(self):
        assert load_bundled("common") is load_bundled("common")

    def test_frozen(self):
        wl = load_bundled("common")
        with pytest.raises(Exception):
            wl.title = "other"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# load_bundled with custom files
# ---------------------------------------------------------------------------

class TestLoadBundled:
    def test_block_string(self, wordlists_dir: Path):
        (wordlists_dir / "mine.yaml").write_text("title: Mine\nwords: |\n  a b\n  c\n", encoding="utf-8")
        wl = load_bundled("mine", wordlists_dir)
        assert wl == BundledWordlist(title="Mine", words=("a", "b", "c"))

    def test_list(self, wordlists_dir: Path):
        _write_yaml(wordlists_dir / "lst.yaml", {"title": " Listed ", "words": ["x", " y ", ""]})
        wl = load_bundled("lst", wordlists_dir)
        assert wl.title == "Listed"
        assert wl.words == ("x", "y")

    def test_missing_file(self, wordlists_dir: Path):
        with pytest.raises(FileNotFoundError):
            load_bundled("absent", wordlists_dir)

    def test_not_a_mapping(self, wordlists_dir: Path):
        (wordlists_dir / "bad.yaml").write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError, match="bad.yaml"):
            load_bundled("bad", wordlists_dir)

    def test_missing_title(self, wordlists_dir: Path):
        _write_yaml(wordlists_dir / "notitle.yaml", {"words": "a b"})
        with pytest.raises(ValueError, match="title"):
            load_bundled("notitle", wordlists_dir)

    def test_missing_words(self, wordlists_dir: Path):
        _write_yaml(wordlists_dir / "nowords.yaml", {"title": "T"})
        with pytest.raises(ValueError, match="words"):
            load_bundled("nowords", wordlists_dir)

    def test_empty_words(self, wordlists_dir: Path):
        _write_yaml(wordlists_dir / "blank.yaml", {"title": "T", "words": "   "})
        with pytest.raises(ValueError, match="empty"):
            load_bundled("blank", wordlists_dir)


# ---------------------------------------------------------------------------
# BuiltInWordlist
# ---------------------------------------------------------------------------

class TestBuiltInWordlist:
    def test_contents_of_bundled_list(self):
        assert BuiltInWordlist.COMMON.contents().split() == list(load_bundled("common").words)

    def test_os_has_no_contents(self):
        assert BuiltInWordlist.OS.contents() is None

    def test_titles(self):
        assert BuiltInWordlist.COMMON.title == "the 200 most common English words"
        assert "/usr/share/dict/words" in BuiltInWordlist.OS.title

    def test_from_name(self):
        assert BuiltInWordlist.from_name(" Top1K ") is BuiltInWordlist.TOP1K

    def test_from_unknown_name(self):
        with pytest.raises(ValueError, match="choose from common, top1k, os"):
            BuiltInWordlist.from_name("klingon")
