from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from examquiz_app.core.error_handlers import UpstreamError
from examquiz_app.core.extensions import db
from examquiz_app.models import Grade, Learner, Question, Result, Subject
from examquiz_app.services.lookup_service import get_learner_by_uid
from examquiz_app.utils.time_utils import utcnow

from ..logics.ranking_logic import (
    AttemptRecord,
    LearnerScore,
    aggregate_attempts,
    build_leaderboard,
    rank_top_learners,
)


class LeaderboardService:
    @classmethod
    def get_leaderboard(cls, uid: str, period: Optional[int] = None, subject_id: Optional[int] = None,
                        grade_id: Optional[int] = None, limit: Optional[int] = None,
                        now: Optional[datetime] = None) -> Dict[str, Any]:
        """
        Leaderboard over attempts of the last ``period`` days.

        Recomputed from the attempt log on every call; nothing is stored.
        """
        config = current_app.config
        period = config.get('LEADERBOARD_DEFAULT_PERIOD', 7) if period is None else period
        limit = limit or config.get('LEADERBOARD_DEFAULT_LIMIT', 10)

        learner = get_learner_by_uid(uid)

        # Stored timestamps are naive UTC.
        end_date = (now or utcnow()).replace(tzinfo=None)
        start_date = end_date - timedelta(days=period)

        query = (
            db.session.query(
                Learner.id.label('learner_id'),
                Learner.name,
                Grade.number.label('grade'),
                Subject.name.label('subject_name'),
                Result.outcome,
                Result.created,
            )
            .select_from(Result)
            .join(Learner, Result.learner_id == Learner.id)
            .outerjoin(Grade, Learner.grade_id == Grade.id)
            .join(Question, Result.question_id == Question.id)
            .outerjoin(Subject, Question.subject_id == Subject.id)
            .filter(Result.created >= start_date, Result.created <= end_date)
        )
        if subject_id:
            query = query.filter(Subject.id == subject_id)
        if grade_id:
            query = query.filter(Learner.grade_id == grade_id)

        try:
            rows = query.order_by(Result.created.asc(), Result.id.asc()).all()
        except SQLAlchemyError as exc:
            current_app.logger.error(f"Error fetching results for leaderboard: {exc}", exc_info=True)
            raise UpstreamError('Error fetching results', error=str(exc)) from exc

        entries = aggregate_attempts(
            AttemptRecord(
                learner_id=row.learner_id,
                name=row.name,
                grade=row.grade,
                subject_name=row.subject_name,
                outcome=row.outcome,
                created=row.created,
            )
            for row in rows
        )
        board = build_leaderboard(
            entries,
            limit,
            learner_id=learner.id,
            learner_name=learner.name,
            learner_grade=learner.grade.number if learner.grade else None,
        )
        current_app.logger.debug(
            f"Leaderboard for {period}d: {len(rows)} attempts, {len(entries)} learners"
        )

        board['period'] = period
        return board

    @classmethod
    def get_top_learners(cls, uid: str, limit: Optional[int] = None) -> Dict[str, Any]:
        """Positional ranking of every learner by cumulative score."""
        limit = limit or current_app.config.get('TOP_LEARNERS_LIMIT', 10)
        get_learner_by_uid(uid, message='Current learner not found')

        try:
            rows = (
                db.session.query(Learner.uid, Learner.name, Learner.score)
                .order_by(Learner.score.desc(), Learner.id.asc())
                .all()
            )
        except SQLAlchemyError as exc:
            current_app.logger.error(f"Error fetching learners: {exc}", exc_info=True)
            raise UpstreamError('Error fetching learners', error=str(exc)) from exc

        return rank_top_learners(
            [LearnerScore(uid=row.uid, name=row.name, score=row.score or 0) for row in rows],
            uid,
            limit,
        )
