"""Word sources that supply the vocabulary of a typing test."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Sequence

import yaml

from keysprint.core.errors import SourceError
from keysprint.core.wordlists import OS_WORDLIST_PATH, BuiltInWordlist

if TYPE_CHECKING:
    from keysprint.core.config import TestConfig

logger = logging.getLogger(__name__)


def tokenize(text: str) -> List[str]:
    """Split on any whitespace, dropping empty tokens."""
    return text.split()


class WordSource:
    """Draws words uniformly at random, with replacement, from a fixed token set.

    Subclasses only decide where the tokens come from; they are parsed once,
    when the source is built.
    """

    def __init__(self, tokens: Sequence[str], rng: Optional[random.Random] = None) -> None:
        self._tokens = tuple(tokens)
        self._rng = rng if rng is not None else random.Random()

    @property
    def tokens(self) -> tuple[str, ...]:
        return self._tokens

    def next_word(self) -> str:
        if not self._tokens:
            raise SourceError("Word list is empty.")
        return self._rng.choice(self._tokens)

    def next_words(self, n: int) -> List[str]:
        if n < 0:
            raise ValueError(f"Cannot draw a negative number of words: {n}")
        return [self.next_word() for _ in range(n)]


class StringWordSource(WordSource):
    """Words taken from an in-memory whitespace separated string."""

    def __init__(self, text: str, rng: Optional[random.Random] = None) -> None:
        tokens = tokenize(text)
        if not tokens:
            raise SourceError("Word list contains no words.")
        super().__init__(tokens, rng)


class FileWordSource(WordSource):
    """Words read from a whitespace separated word-list file."""

    def __init__(self, path: Path, rng: Optional[random.Random] = None) -> None:
        self.path = Path(path)
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceError(f"Could not read word list {self.path}: {exc}") from exc
        tokens = tokenize(text)
        if not tokens:
            raise SourceError(f"Word list {self.path} contains no words.")
        logger.debug("Loaded %d words from %s", len(tokens), self.path)
        super().__init__(tokens, rng)


class BuiltInWordSource(WordSource):
    """Words from a list shipped with keysprint, or the system dictionary."""

    def __init__(
        self,
        wordlist: BuiltInWordlist = BuiltInWordlist.COMMON,
        rng: Optional[random.Random] = None,
        os_path: Path = OS_WORDLIST_PATH,
    ) -> None:
        self.wordlist = wordlist
        try:
            contents = wordlist.contents()
        except (OSError, ValueError, yaml.YAMLError) as exc:
            raise SourceError(f"Could not load built-in word list '{wordlist.value}': {exc}") from exc
        if contents is None:
            tokens = FileWordSource(os_path).tokens
        else:
            tokens = tokenize(contents)
            if not tokens:
                raise SourceError(f"Built-in word list '{wordlist.value}' contains no words.")
        super().__init__(tokens, rng)


def select_word_source(config: "TestConfig", rng: Optional[random.Random] = None) -> WordSource:
    """Build the word source a config asks for; a word-list file wins over a built-in list."""
    if config.wordlist_file is not None:
        logger.info("Using word list file %s", config.wordlist_file)
        return FileWordSource(config.wordlist_file, rng)
    if config.wordlist is not None:
        logger.info("Using built-in word list '%s'", config.wordlist.value)
        return BuiltInWordSource(config.wordlist, rng)
    raise SourceError("Undefined word list or path.")
