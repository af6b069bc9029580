"""Terminal color palette and style lookup."""

from __future__ import annotations

import curses
from typing import Dict

from keysprint.core.render import Style


class Palette:
    """curses color pair numbers."""

    CORRECT = 1
    INCORRECT = 2
    HINT = 3
    SPEED = 4

    PAIRS = {
        CORRECT: curses.COLOR_GREEN,
        INCORRECT: curses.COLOR_RED,
        HINT: curses.COLOR_BLUE,
        SPEED: curses.COLOR_GREEN,
    }


def init_colors() -> bool:
    """Register the palette with curses. Returns False on terminals without color."""
    if not curses.has_colors():
        return False
    curses.start_color()
    try:
        curses.use_default_colors()
        background = -1
    except curses.error:
        background = curses.COLOR_BLACK
    for pair, foreground in Palette.PAIRS.items():
        curses.init_pair(pair, foreground, background)
    return True


def style_attrs(colors: bool) -> Dict[Style, int]:
    """curses attributes for every Style; monochrome terminals keep the emphasis only."""

    def pair(number: int) -> int:
        return curses.color_pair(number) if colors else 0

    return {
        Style.PLAIN: curses.A_NORMAL,
        Style.PENDING: curses.A_DIM,
        Style.FAINT: curses.A_DIM,
        Style.CORRECT: pair(Palette.CORRECT) | curses.A_BOLD,
        Style.INCORRECT: pair(Palette.INCORRECT) | curses.A_UNDERLINE,
        Style.HINT: pair(Palette.HINT),
        Style.HIGHLIGHT: pair(Palette.HINT) | curses.A_BOLD,
        Style.SPEED: pair(Palette.SPEED) | curses.A_BOLD,
    }
