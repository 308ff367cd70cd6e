# File: examquiz_app/modules/gamification/services/streak_service.py
"""
Streak Service
==============
Loads and persists ``learner_streak`` rows around the pure streak engine.
"""
from datetime import date
from typing import Optional

from flask import current_app

from examquiz_app.core.extensions import db
from examquiz_app.models import LearnerStreak
from examquiz_app.services.lookup_service import commit_or_raise, get_learner_by_uid
from examquiz_app.utils.learner_locks import learner_lock
from examquiz_app.utils.time_utils import local_today, utcnow

from ..logics.streak_logic import DEFAULT_REQUIRED_DAILY, StreakEngine, StreakState


class StreakService:
    """Service for learner daily streaks."""

    @staticmethod
    def get_engine() -> StreakEngine:
        return StreakEngine(
            required_daily=current_app.config.get('REQUIRED_DAILY_QUESTIONS', DEFAULT_REQUIRED_DAILY)
        )

    @staticmethod
    def _to_state(record: LearnerStreak) -> StreakState:
        return StreakState(
            current_streak=record.current_streak or 0,
            longest_streak=record.longest_streak or 0,
            questions_answered_today=record.questions_answered_today or 0,
            last_update_date=record.last_streak_update_date,
        )

    @staticmethod
    def _apply(record: LearnerStreak, state: StreakState) -> None:
        record.current_streak = state.current_streak
        record.longest_streak = state.longest_streak
        record.questions_answered_today = state.questions_answered_today
        record.last_streak_update_date = state.last_update_date

    @staticmethod
    def track(uid: str, today: Optional[date] = None) -> dict:
        """
        Record one qualifying action for the learner and return the summary.
        """
        learner = get_learner_by_uid(uid)
        engine = StreakService.get_engine()
        today = today or local_today()

        with learner_lock(learner.id):
            record = db.session.get(LearnerStreak, learner.id)
            if record is None:
                state = engine.first_action(today)
                record = LearnerStreak(learner_id=learner.id)
                db.session.add(record)
                current_app.logger.info(f"Opened streak record for learner {learner.id}")
            else:
                state = engine.record_action(StreakService._to_state(record), today)

            StreakService._apply(record, state)
            record.last_answered_at = utcnow().replace(tzinfo=None)
            commit_or_raise('Error tracking streak')

        return engine.summarize(state)

    @staticmethod
    def get_info(uid: str, today: Optional[date] = None) -> dict:
        """
        Read the streak for display.

        When the stored day is not today the day counters are rolled over and
        persisted; the streak itself is never incremented here.
        """
        learner = get_learner_by_uid(uid)
        engine = StreakService.get_engine()
        today = today or local_today()

        with learner_lock(learner.id):
            record = db.session.get(LearnerStreak, learner.id)
            if record is None:
                return engine.summarize(StreakState())

            state = StreakService._to_state(record)
            if state.last_update_date != today:
                state = engine.roll_over(state, today)
                StreakService._apply(record, state)
                commit_or_raise('Error getting streak info')

        return engine.summarize(state)
