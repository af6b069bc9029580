"""Statistics derived from a completed typing test.

Speed follows the usual convention of five characters to a word:

  * **accuracy** – forward keystrokes that were right / all forward keystrokes.
  * **wpm** – (correct chars in the final text / 5 − uncorrected errors)
    / elapsed minutes, floored at 0. Mistakes left in the text are a penalty;
    mistakes fixed along the way only cost the time spent fixing them.
"""

from __future__ import annotations

from typing import List, Tuple

from keysprint.core.session import TestResult

CHARS_PER_WORD = 5.0

REMARKS: Tuple[Tuple[float, str], ...] = (
    (10.0, "A turtle could type faster."),
    (20.0, "Not bad."),
    (30.0, "Just a tad below average."),
    (40.0, "You're right at the average speed."),
    (50.0, "Great job, you're above average!"),
    (70.0, "You type like a pro!"),
)
TOP_REMARK = "You're a typing god!"


def duration(result: TestResult) -> float:
    """Seconds between the first key and the completing key."""
    return result.ended_at - result.started_at


def accuracy(result: TestResult) -> float:
    if result.chars_typed == 0:
        return 0.0
    return (result.chars_typed - result.errors) / result.chars_typed


def wpm(result: TestResult) -> float:
    elapsed_minutes = max(duration(result) / 60.0, 1e-6)
    words = max(0.0, result.final_chars_typed_correctly / CHARS_PER_WORD - result.final_uncorrected_errors)
    return words / elapsed_minutes


def classify(speed: float) -> str:
    """Remark for a speed; a value on a boundary belongs to the faster bucket."""
    for upper, remark in REMARKS:
        if speed < upper:
            return remark
    return TOP_REMARK


def summary_lines(result: TestResult, text_name: str) -> List[str]:
    """Lines of the results screen."""
    speed = wpm(result)
    return [
        f"Took {int(duration(result))}s for {result.total_words} words of {text_name}",
        f"Accuracy: {accuracy(result) * 100.0:.1f}%",
        f"Mistakes: {result.errors} out of {result.chars_in_text} characters",
        f"Speed: {speed:.1f} wpm (words per minute)",
        classify(speed),
    ]
