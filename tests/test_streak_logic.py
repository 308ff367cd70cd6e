"""
Tests for the Streak Engine.

Tests cover:
- First action and the daily threshold
- Same-day repeats count once
- Reset after a missed day or a longer gap
- Read-only day rollover
- longest_streak never falls below current_streak
"""

from datetime import date, timedelta

import pytest

from examquiz_app.modules.gamification.logics.streak_logic import StreakEngine, StreakState

D = date(2024, 3, 10)


def day(offset):
    return D + timedelta(days=offset)


class TestFirstAction:

    def test_first_action_opens_record_without_streak(self):
        engine = StreakEngine(required_daily=1)
        state = engine.first_action(D)
        assert engine.summarize(state) == {
            'currentStreak': 0,
            'longestStreak': 0,
            'questionsAnsweredToday': 1,
            'questionsNeededToday': 0,
            'streakMaintained': True,
        }

    def test_action_on_empty_state_counts_immediately(self):
        engine = StreakEngine()
        state = engine.record_action(StreakState(), D)
        assert state.current_streak == 1
        assert state.longest_streak == 1
        assert state.last_update_date == D

    def test_threshold_must_be_positive(self):
        with pytest.raises(ValueError):
            StreakEngine(required_daily=0)


class TestDailyProgress:

    def test_consecutive_days_extend_streak(self):
        engine = StreakEngine()
        state = engine.first_action(day(0))
        state = engine.record_action(state, day(1))
        state = engine.record_action(state, day(2))
        assert state.current_streak == 2
        assert state.longest_streak == 2

    def test_same_day_actions_count_once(self):
        engine = StreakEngine()
        state = engine.record_action(StreakState(), day(0))
        for _ in range(5):
            state = engine.record_action(state, day(0))
        assert state.current_streak == 1
        assert state.questions_answered_today == 6

    def test_higher_threshold_increments_when_reached_exactly(self):
        engine = StreakEngine(required_daily=3)
        state = StreakState()
        results = []
        for _ in range(4):
            state = engine.record_action(state, day(0))
            results.append(state.current_streak)
        assert results == [0, 0, 1, 1]
        summary = engine.summarize(state)
        assert summary['questionsNeededToday'] == 0
        assert summary['streakMaintained'] is True

    def test_summary_reports_remaining_questions(self):
        engine = StreakEngine(required_daily=3)
        state = engine.record_action(StreakState(), day(0))
        summary = engine.summarize(state)
        assert summary['questionsNeededToday'] == 2
        assert summary['streakMaintained'] is False


class TestResets:

    def test_gap_resets_before_counting_new_day(self):
        engine = StreakEngine()
        state = engine.first_action(day(0))
        state = engine.record_action(state, day(2))
        assert state.current_streak == 1
        assert state.questions_answered_today == 1

    def test_long_gap_resets_any_streak(self):
        engine = StreakEngine()
        state = StreakState(current_streak=12, longest_streak=12,
                            questions_answered_today=4, last_update_date=day(0))
        state = engine.record_action(state, day(5))
        assert state.current_streak == 1
        assert state.longest_streak == 12

    def test_unmet_goal_yesterday_resets(self):
        engine = StreakEngine(required_daily=2)
        state = StreakState(current_streak=4, longest_streak=4,
                            questions_answered_today=1, last_update_date=day(0))
        state = engine.record_action(state, day(1))
        assert state.current_streak == 0
        state = engine.record_action(state, day(1))
        assert state.current_streak == 1

    def test_met_goal_yesterday_keeps_streak(self):
        engine = StreakEngine(required_daily=2)
        state = StreakState(current_streak=4, longest_streak=6,
                            questions_answered_today=2, last_update_date=day(0))
        state = engine.record_action(state, day(1))
        state = engine.record_action(state, day(1))
        assert state.current_streak == 5
        assert state.longest_streak == 6


class TestRollOver:

    def test_same_day_is_untouched(self):
        engine = StreakEngine()
        state = StreakState(3, 3, 1, day(0))
        assert engine.roll_over(state, day(0)) is state

    def test_next_day_keeps_streak_and_clears_counter(self):
        engine = StreakEngine()
        state = engine.roll_over(StreakState(3, 3, 1, day(0)), day(1))
        assert state == StreakState(3, 3, 0, day(1))

    def test_unmet_previous_day_resets_at_rollover(self):
        engine = StreakEngine()
        state = engine.roll_over(StreakState(3, 5, 0, day(0)), day(1))
        assert state.current_streak == 0
        assert state.longest_streak == 5

    def test_missed_day_after_rollover_resets_on_next_action(self):
        engine = StreakEngine()
        state = engine.roll_over(StreakState(3, 3, 1, day(0)), day(1))
        state = engine.record_action(state, day(2))
        assert state.current_streak == 1


class TestMonotonicity:

    def test_longest_never_below_current(self):
        engine = StreakEngine()
        offsets = [0, 0, 1, 2, 2, 3, 6, 7, 8, 8, 12, 13]
        state = StreakState()
        for offset in offsets:
            state = engine.record_action(state, day(offset))
            assert state.longest_streak >= state.current_streak
        assert state.longest_streak == 4
        assert state.current_streak == 2
