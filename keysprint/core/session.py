from __future__ import annotations

import enum
import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

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

logger = logging.getLogger(__name__)


class SessionState(enum.Enum):
    AWAITING_INPUT = "awaiting-input"
    IN_PROGRESS = "in-progress"
    DONE = "done"
    QUIT = "quit"
    RESTART = "restart"

    @property
    def is_terminal(self) -> bool:
        return self in (SessionState.DONE, SessionState.QUIT, SessionState.RESTART)


@dataclass(frozen=True)
class TestResult:
    """Snapshot of a completed typing test."""

    __test__ = False  # not a pytest test class

    total_words: int
    chars_typed: int
    chars_in_text: int
    errors: int
    final_chars_typed_correctly: int
    final_uncorrected_errors: int
    started_at: float
    ended_at: float


@dataclass(frozen=True)
class Step:
    """Outcome of processing one key: the new state and the screen updates to apply."""

    state: SessionState
    directives: List[Directive] = field(default_factory=list)


class TypingSession:
    """Keystroke state machine for one typing test.

    Wrong characters are accepted and still move the cursor forward, the way
    freeform typing tests behave. ``chars_typed`` and ``errors`` only ever grow:
    backspace and word-delete retract the cursor without touching them.

    The clock starts on the first key of any kind, so time spent reading the
    text before typing is not counted.
    """

    def __init__(self, words: Sequence[str], clock: Callable[[], float] = time.monotonic) -> None:
        """Create a session over ``words`` joined by single spaces."""
        if not words:
            raise ValueError("A typing session needs at least one word")
        self._words = list(words)
        self._target = " ".join(self._words)
        if not self._target:
            raise ValueError("A typing session needs a non-empty target text")
        self._clock = clock
        self._input: List[str] = []
        self._chars_typed = 0
        self._errors = 0
        self._started_at: Optional[float] = None
        self._ended_at: Optional[float] = None
        self._state = SessionState.AWAITING_INPUT
        self._result: Optional[TestResult] = None

    @property
    def target(self) -> str:
        return self._target

    @property
    def words(self) -> List[str]:
        return list(self._words)

    @property
    def typed(self) -> str:
        return "".join(self._input)

    @property
    def cursor(self) -> int:
        return len(self._input)

    @property
    def chars_typed(self) -> int:
        return self._chars_typed

    @property
    def errors(self) -> int:
        return self._errors

    @property
    def started_at(self) -> Optional[float]:
        return self._started_at

    @property
    def ended_at(self) -> Optional[float]:
        return self._ended_at

    @property
    def state(self) -> SessionState:
        return self._state

    def process(self, event: KeyEvent) -> Step:
        """Apply one key event and return the resulting state and directives."""
        if self._state.is_terminal:
            raise RuntimeError(f"Session already finished ({self._state.value})")
        if self._started_at is None:
            self._started_at = self._clock()
            logger.debug("Timer started")

        if event.kind is KeyKind.QUIT:
            self._state = SessionState.QUIT
            return Step(self._state)
        if event.kind is KeyKind.RESTART:
            self._state = SessionState.RESTART
            return Step(self._state)

        directives: List[Directive] = []
        if event.kind is KeyKind.CHAR and event.char is not None:
            self._type_char(event.char, directives)
        elif event.kind is KeyKind.BACKSPACE:
            if self._input:
                self._pop(directives)
        elif event.kind is KeyKind.WORD_DELETE:
            while self._input:
                if self._pop(directives) == " ":
                    break
        else:
            return Step(self._state)

        if directives:
            directives.append(Flush())
        return Step(self._state, directives)

    def result(self) -> TestResult:
        if self._result is None:
            raise RuntimeError("No result: the session has not been completed")
        return self._result

    def _type_char(self, char: str, directives: List[Directive]) -> None:
        position = len(self._input)
        expected = self._target[position]
        self._input.append(char)
        self._chars_typed += 1
        if char == expected:
            directives.append(DrawChar(position, char, Style.CORRECT))
        else:
            self._errors += 1
            directives.append(DrawChar(position, expected, Style.INCORRECT))

        if len(self._input) == len(self._target):
            self._ended_at = self._clock()
            self._state = SessionState.DONE
            self._result = self._snapshot()
            logger.info(
                "Test complete: %d chars typed, %d errors", self._chars_typed, self._errors
            )
        else:
            directives.append(AdvanceCursor(position + 1))
            self._state = SessionState.IN_PROGRESS

    def _pop(self, directives: List[Directive]) -> str:
        popped = self._input.pop()
        position = len(self._input)
        directives.append(ReplaceChar(position, self._target[position], Style.PENDING))
        return popped

    def _snapshot(self) -> TestResult:
        # Compare the final buffer itself; the running error count reflects history.
        correct = sum(1 for typed, expected in zip(self._input, self._target) if typed == expected)
        assert self._started_at is not None and self._ended_at is not None
        return TestResult(
            total_words=len(self._words),
            chars_typed=self._chars_typed,
            chars_in_text=len(self._input),
            errors=self._errors,
            final_chars_typed_correctly=correct,
            final_uncorrected_errors=len(self._input) - correct,
            started_at=self._started_at,
            ended_at=self._ended_at,
        )
