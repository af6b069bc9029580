"""Key events consumed by a typing session and the screen updates it asks for."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Union


class Style(enum.Enum):
    PLAIN = "plain"
    PENDING = "pending"
    CORRECT = "correct"
    INCORRECT = "incorrect"
    HINT = "hint"
    FAINT = "faint"
    HIGHLIGHT = "highlight"
    SPEED = "speed"


class KeyKind(enum.Enum):
    CHAR = "char"
    BACKSPACE = "backspace"
    WORD_DELETE = "word-delete"
    QUIT = "quit"
    RESTART = "restart"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    kind: KeyKind
    char: Optional[str] = None

    @classmethod
    def character(cls, char: str) -> "KeyEvent":
        if len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}")
        return cls(KeyKind.CHAR, char)


BACKSPACE = KeyEvent(KeyKind.BACKSPACE)
WORD_DELETE = KeyEvent(KeyKind.WORD_DELETE)
QUIT = KeyEvent(KeyKind.QUIT)
RESTART = KeyEvent(KeyKind.RESTART)
OTHER = KeyEvent(KeyKind.OTHER)


@dataclass(frozen=True)
class DrawChar:
    """Paint a typed position of the target text."""

    index: int
    char: str
    style: Style


@dataclass(frozen=True)
class AdvanceCursor:
    """Move the visible cursor to ``index``."""

    index: int


@dataclass(frozen=True)
class ReplaceChar:
    """Repaint one position and leave the cursor on it."""

    index: int
    char: str
    style: Style


@dataclass(frozen=True)
class Flush:
    pass


Directive = Union[DrawChar, AdvanceCursor, ReplaceChar, Flush]
