"""
Mastery Logic - rolling window of consecutive correct attempts.

Pure Python only: no database, no Flask.
"""
from typing import Iterable

from .outcome_logic import CORRECT

DEFAULT_MASTERY_WINDOW = 3


def is_mastered(outcomes_newest_first: Iterable[str], window: int = DEFAULT_MASTERY_WINDOW) -> bool:
    """
    True when the newest ``window`` attempts are all correct.

    ``outcomes_newest_first`` must include the attempt that was just recorded
    as its first element. Anything older than the window is ignored, so a
    wrong answer in the past does not block mastery once the learner has
    ``window`` correct answers in a row again.

    Examples:
        >>> is_mastered(['correct', 'correct', 'correct'])
        True
        >>> is_mastered(['correct', 'correct'])
        False
        >>> is_mastered(['correct', 'correct', 'correct', 'incorrect'])
        True
    """
    if window < 1:
        raise ValueError("window must be at least 1")

    recent = []
    for outcome in outcomes_newest_first:
        recent.append(outcome)
        if len(recent) == window:
            break

    if len(recent) < window:
        return False
    return all(outcome == CORRECT for outcome in recent)
