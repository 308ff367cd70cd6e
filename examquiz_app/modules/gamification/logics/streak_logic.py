"""
Streak Logic - daily activity streak state machine.

This module contains ONLY pure Python logic.
NO database, NO Flask, NO model dependencies allowed.

A learner keeps a streak by answering at least ``required_daily`` questions
every calendar day. The state is four fields; every transition returns a new
``StreakState`` and leaves the input untouched.
"""
from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Optional

DEFAULT_REQUIRED_DAILY = 1


@dataclass(frozen=True)
class StreakState:
    current_streak: int = 0
    longest_streak: int = 0
    questions_answered_today: int = 0
    last_update_date: Optional[date] = None


class StreakEngine:
    """
    Transitions of the streak state machine.

    Args:
        required_daily: Qualifying actions needed per day to extend the streak.

    Examples:
        >>> from datetime import date
        >>> engine = StreakEngine(required_daily=1)
        >>> state = engine.record_action(StreakState(), date(2024, 1, 1))
        >>> state.current_streak, state.questions_answered_today
        (1, 1)
        >>> state = engine.record_action(state, date(2024, 1, 3))  # skipped Jan 2
        >>> state.current_streak, state.longest_streak
        (1, 1)
    """

    def __init__(self, required_daily: int = DEFAULT_REQUIRED_DAILY):
        if required_daily < 1:
            raise ValueError("required_daily must be at least 1")
        self.required_daily = required_daily

    def roll_over(self, state: StreakState, today: date) -> StreakState:
        """
        Start a new day if ``today`` differs from the stored day.

        The streak survives only if the last recorded day was yesterday and
        yesterday's goal was met. Today's counter starts again at zero.
        """
        last = state.last_update_date
        if last == today:
            return state

        current = state.current_streak
        yesterday = today - timedelta(days=1)
        if last is None or last < yesterday:
            # Gap of more than one day (or nothing recorded yet).
            current = 0
        elif last == yesterday and state.questions_answered_today < self.required_daily:
            current = 0

        return replace(
            state,
            current_streak=current,
            questions_answered_today=0,
            last_update_date=today,
        )

    def record_action(self, state: StreakState, today: date) -> StreakState:
        """Apply one qualifying action performed on ``today``."""
        state = self.roll_over(state, today)

        answered = state.questions_answered_today + 1
        current = state.current_streak
        # Equality, not >=: later actions on the same day must not count again.
        if answered == self.required_daily:
            current += 1

        return replace(
            state,
            current_streak=current,
            longest_streak=max(state.longest_streak, current),
            questions_answered_today=answered,
        )

    def first_action(self, today: date) -> StreakState:
        """
        State for a learner whose very first action happens ``today``.

        The record is opened with the action counted but no streak credited
        yet; the streak starts counting from the next qualifying day.
        """
        return StreakState(
            current_streak=0,
            longest_streak=0,
            questions_answered_today=1,
            last_update_date=today,
        )

    def summarize(self, state: StreakState) -> dict:
        """Response payload for a streak state."""
        answered = state.questions_answered_today
        return {
            'currentStreak': state.current_streak,
            'longestStreak': state.longest_streak,
            'questionsAnsweredToday': answered,
            'questionsNeededToday': max(0, self.required_daily - answered),
            'streakMaintained': answered >= self.required_daily,
        }
