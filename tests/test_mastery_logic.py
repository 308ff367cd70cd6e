"""
Tests for the Mastery Tracker.

Mastery is a rolling window: the newest three attempts must all be correct.
"""

import pytest

from examquiz_app.modules.quiz.logics.mastery_logic import is_mastered

C = 'correct'
X = 'incorrect'


def _replay(sequence):
    """Mastery reported after each submission of ``sequence`` (oldest first)."""
    reports = []
    for index in range(len(sequence)):
        newest_first = list(reversed(sequence[:index + 1]))
        reports.append(is_mastered(newest_first))
    return reports


class TestMasteryWindow:

    def test_fewer_than_three_attempts_never_mastered(self):
        assert is_mastered([]) is False
        assert is_mastered([C]) is False
        assert is_mastered([C, C]) is False

    def test_three_correct_in_a_row(self):
        assert is_mastered([C, C, C]) is True

    def test_latest_incorrect_breaks_mastery(self):
        assert is_mastered([X, C, C]) is False

    def test_older_attempts_are_ignored(self):
        assert is_mastered([C, C, C, X, X]) is True

    def test_fourth_correct_answer_stays_mastered(self):
        assert _replay([C, C, C, C]) == [False, False, True, True]

    def test_mastery_regained_after_a_miss(self):
        reports = _replay([C, C, X, C, C, C])
        assert reports == [False, False, False, False, False, True]

    def test_custom_window(self):
        assert is_mastered([C, C], window=2) is True
        assert is_mastered([C, C, C, C], window=5) is False

    def test_window_must_be_positive(self):
        with pytest.raises(ValueError):
            is_mastered([C], window=0)

    def test_accepts_any_iterable(self):
        assert is_mastered(iter([C, C, C, X])) is True
