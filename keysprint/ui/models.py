"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from keysprint.core.render import Style


@dataclass(frozen=True)
class Text:
    """A run of text drawn in one style."""

    text: str
    style: Style = Style.PLAIN


Line = Sequence[Text]

RESTART_HINT: Line = (
    Text("ctrl-r", Style.HINT),
    Text(" to restart, ", Style.FAINT),
    Text("ctrl-c", Style.HINT),
    Text(" to quit ", Style.FAINT),
)
