from __future__ import annotations

import enum
import functools
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

import yaml

OS_WORDLIST_PATH = Path("/usr/share/dict/words")

_DATA_DIR = Path(__file__).resolve().parent.parent / "data" / "wordlists"


@dataclass(frozen=True)
class BundledWordlist:
    title: str
    words: Tuple[str, ...]


class BuiltInWordlist(enum.Enum):
    """Word lists available without a word-list file."""

    COMMON = "common"
    TOP1K = "top1k"
    OS = "os"

    @property
    def title(self) -> str:
        if self is BuiltInWordlist.OS:
            return f"the system dictionary ({OS_WORDLIST_PATH})"
        return load_bundled(self.value).title

    def contents(self) -> Optional[str]:
        """Return the bundled words as one string, or None for the OS dictionary."""
        if self is BuiltInWordlist.OS:
            return None
        return " ".join(load_bundled(self.value).words)

    @classmethod
    def from_name(cls, name: str) -> "BuiltInWordlist":
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(item.value for item in cls)
            raise ValueError(f"Unknown word list '{name}' (choose from {choices})") from None


@functools.lru_cache(maxsize=None)
def load_bundled(key: str, base_dir: Path = _DATA_DIR) -> BundledWordlist:
    """Load one bundled word list from ``data/wordlists/<key>.yaml``.

    Loaded once per process; the result is immutable.
    """
    path = base_dir / f"{key}.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Word list file not found: {path}")

    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not raw or not isinstance(raw, dict):
        raise ValueError(f"{path.name}: expected YAML with 'title' and 'words'")
    title = raw.get("title")
    words = raw.get("words")
    if not title or not isinstance(title, str):
        raise ValueError(f"{path.name}: missing or invalid 'title'")
    if words is None:
        raise ValueError(f"{path.name}: missing 'words'")
    if isinstance(words, list):
        tokens = [str(item).strip() for item in words if str(item).strip()]
    else:
        # allow words as one whitespace separated block
        tokens = str(words).split()
    if not tokens:
        raise ValueError(f"{path.name}: 'words' is empty")
    return BundledWordlist(title=title.strip(), words=tuple(tokens))
