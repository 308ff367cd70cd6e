"""
Learner Stats Logic - accuracy totals per subject and per day.

Pure Python only: no database, no Flask.
"""
from collections import OrderedDict
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .ranking_logic import CORRECT, base_subject_name, round_half_up


def _percentage(correct: int, total: int) -> int:
    return round_half_up(correct / total * 100) if total else 0


def _bucket(total: int, correct: int) -> Dict[str, int]:
    return {
        'total_questions': total,
        'correct_answers': correct,
        'percentage': _percentage(correct, total),
    }


def _day(value: Union[date, datetime]) -> str:
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def compute_learner_stats(
    attempts: Iterable[Tuple[Optional[str], str, Union[date, datetime]]]
) -> Dict[str, object]:
    """
    Summarize ``(subject_name, outcome, created)`` tuples of one learner.

    Returns ``overall``, ``by_subject`` (base subject names, first-seen order)
    and ``by_date`` (ascending ISO dates).
    """
    subjects: "OrderedDict[str, List[int]]" = OrderedDict()
    days: Dict[str, List[int]] = {}
    total = correct = 0

    for subject_name, outcome, created in attempts:
        hit = 1 if outcome == CORRECT else 0
        total += 1
        correct += hit

        subject = base_subject_name(subject_name) or 'Unknown'
        counts = subjects.setdefault(subject, [0, 0])
        counts[0] += 1
        counts[1] += hit

        day_counts = days.setdefault(_day(created), [0, 0])
        day_counts[0] += 1
        day_counts[1] += hit

    by_subject = [dict(subject=name, **_bucket(*counts)) for name, counts in subjects.items()]
    by_date = [dict(date=day, **_bucket(*days[day])) for day in sorted(days)]

    return {
        'overall': _bucket(total, correct),
        'by_subject': by_subject,
        'by_date': by_date,
    }
