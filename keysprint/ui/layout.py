from __future__ import annotations

from typing import List, Sequence, Tuple

Cell = Tuple[int, int]


def layout_words(words: Sequence[str], width: int, top: int = 0, left: int = 0) -> List[Cell]:
    """Screen cell (row, col) of every character of ``" ".join(words)``.

    Lines break between words; the separating space stays at the end of the
    line it follows. A word wider than a whole line is split wherever it runs
    out of room. The last column is never used, so the space after a word
    always fits on its line.
    """
    usable = width - left - 1
    if usable < 1:
        raise ValueError(f"Screen is too narrow to lay out text (width {width})")

    cells: List[Cell] = []
    row, col = 0, 0
    for index, word in enumerate(words):
        if col > 0 and col + len(word) > usable:
            row, col = row + 1, 0
        for _ in word:
            if col >= usable:
                row, col = row + 1, 0
            cells.append((top + row, left + col))
            col += 1
        if index < len(words) - 1:
            cells.append((top + row, left + col))
            col += 1
    return cells
