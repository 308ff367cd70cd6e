"""
Outcome Logic - decides whether a submitted answer is correct.

Pure Python only: no database, no Flask.
"""
from typing import Any

CORRECT = 'correct'
INCORRECT = 'incorrect'


def evaluate_outcome(submitted: Any, stored: Any) -> str:
    """
    Compare a submitted answer with the stored correct answer.

    Both values are turned into their string form and compared without regard
    to case. Whitespace, punctuation and the order of multi-select answers
    are compared as-is.

    Examples:
        >>> evaluate_outcome('b', 'B')
        'correct'
        >>> evaluate_outcome(42, '42')
        'correct'
        >>> evaluate_outcome('A ', 'A')
        'incorrect'
    """
    if submitted is None or stored is None:
        return CORRECT if submitted is None and stored is None else INCORRECT

    if _as_text(submitted).casefold() == _as_text(stored).casefold():
        return CORRECT
    return INCORRECT


def _as_text(value: Any) -> str:
    # Booleans should read like JSON ('true'), not Python ('True').
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)
