"""curses presentation adapter: reads keys and draws typing-session updates."""

from __future__ import annotations

import contextlib
import curses
import logging
from typing import Any, Dict, Iterator, List, Optional, Sequence

from keysprint.core.errors import AdapterError
from keysprint.core.render import (
    AdvanceCursor,
    Directive,
    DrawChar,
    Flush,
    KeyEvent,
    KeyKind,
    ReplaceChar,
    Style,
)
from keysprint.ui.colors import init_colors, style_attrs
from keysprint.ui.layout import Cell, layout_words
from keysprint.ui.models import Line

logger = logging.getLogger(__name__)

CTRL_C = "\x03"
CTRL_H = "\x08"
CTRL_R = "\x12"
CTRL_W = "\x17"
DEL = "\x7f"

TOP = 1
LEFT = 2

_CONTROL_KEYS = {
    CTRL_C: KeyKind.QUIT,
    CTRL_R: KeyKind.RESTART,
    CTRL_W: KeyKind.WORD_DELETE,
    CTRL_H: KeyKind.BACKSPACE,
    DEL: KeyKind.BACKSPACE,
}


def decode_key(key: Any) -> KeyEvent:
    """Classify a value returned by ``window.get_wch()``."""
    if isinstance(key, int):
        if key == curses.KEY_BACKSPACE:
            return KeyEvent(KeyKind.BACKSPACE)
        return KeyEvent(KeyKind.OTHER)
    kind = _CONTROL_KEYS.get(key)
    if kind is not None:
        return KeyEvent(kind)
    if len(key) == 1 and key.isprintable():
        return KeyEvent.character(key)
    return KeyEvent(KeyKind.OTHER)


@contextlib.contextmanager
def _terminal_errors(action: str) -> Iterator[None]:
    try:
        yield
    except curses.error as exc:
        raise AdapterError(f"Terminal {action} failed: {exc}") from exc


class TerminalUI:
    """Draws a typing test on a curses window.

    The target text is laid out once per test; directives then address its
    characters by index.
    """

    def __init__(self, window: Any, attrs: Optional[Dict[Style, int]] = None) -> None:
        self._window = window
        self._attrs = attrs if attrs is not None else style_attrs(False)
        self._cells: List[Cell] = []

    @classmethod
    def start(cls, window: Any) -> "TerminalUI":
        """Put the terminal in raw mode (so ctrl-c arrives as a key) and set up colors."""
        with _terminal_errors("setup"):
            curses.raw()
            curses.noecho()
            window.keypad(True)
            colors = init_colors()
        logger.debug("Terminal ready (colors: %s)", colors)
        return cls(window, style_attrs(colors))

    def read_key(self) -> KeyEvent:
        with _terminal_errors("read"):
            key = self._window.get_wch()
        return decode_key(key)

    def reset_screen(self) -> None:
        with _terminal_errors("clear"):
            self._window.erase()
            self._window.refresh()
        self._cells = []

    def display_words(self, words: Sequence[str]) -> None:
        """Draw the words to be typed and park the cursor on the first character.

        The bottom row is kept for the restart hint, so text that would reach
        it raises AdapterError before anything is drawn.
        """
        height, width = self._window.getmaxyx()
        try:
            cells = layout_words(words, width, top=TOP, left=LEFT)
        except ValueError as exc:
            raise AdapterError(str(exc)) from exc
        if cells and cells[-1][0] >= height - 1:
            raise AdapterError(
                f"Terminal too small for the text: needs {cells[-1][0] + 2} rows, has {height}"
            )
        self._cells = cells
        attr = self._attrs[Style.PENDING]
        with _terminal_errors("write"):
            for (row, col), char in zip(cells, " ".join(words)):
                self._window.addstr(row, col, char, attr)
            if cells:
                self._window.move(*cells[0])
            self._window.refresh()

    def apply(self, directives: Sequence[Directive]) -> None:
        with _terminal_errors("write"):
            for directive in directives:
                if isinstance(directive, DrawChar):
                    self._put(directive.index, directive.char, directive.style)
                elif isinstance(directive, ReplaceChar):
                    self._put(directive.index, directive.char, directive.style)
                    self._window.move(*self._cells[directive.index])
                elif isinstance(directive, AdvanceCursor):
                    self._window.move(*self._cells[directive.index])
                elif isinstance(directive, Flush):
                    self._window.refresh()

    def display_lines(self, lines: Sequence[Line]) -> None:
        """Draw lines of styled text from the top of the screen."""
        with _terminal_errors("write"):
            for offset, line in enumerate(lines):
                self._draw_line(TOP + offset, line)
            self._window.refresh()

    def display_lines_bottom(self, lines: Sequence[Line]) -> None:
        """Draw lines of styled text against the bottom of the screen."""
        height, _ = self._window.getmaxyx()
        start = max(0, height - len(lines))
        with _terminal_errors("write"):
            y, x = self._window.getyx()
            for offset, line in enumerate(lines):
                self._draw_line(start + offset, line)
            self._window.move(y, x)
            self._window.refresh()

    def hide_cursor(self) -> None:
        with _terminal_errors("cursor"):
            curses.curs_set(0)

    def show_cursor(self) -> None:
        with _terminal_errors("cursor"):
            curses.curs_set(1)

    def _put(self, index: int, char: str, style: Style) -> None:
        row, col = self._cells[index]
        self._window.addstr(row, col, char, self._attrs[style])

    def _draw_line(self, row: int, line: Line) -> None:
        col = LEFT
        for segment in line:
            self._window.addstr(row, col, segment.text, self._attrs[segment.style])
            col += len(segment.text)
