from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from examquiz_app.core.error_handlers import UpstreamError
from examquiz_app.core.extensions import db
from examquiz_app.models import Question, Result, Subject
from examquiz_app.services.lookup_service import get_learner_by_uid
from examquiz_app.utils.time_utils import utcnow

from ..logics.learner_stats_logic import compute_learner_stats


class LearnerStatsService:
    @staticmethod
    def get_stats(uid: str, period: Optional[int] = None, now: Optional[datetime] = None) -> Dict[str, Any]:
        """Accuracy of one learner over the last ``period`` days."""
        period = current_app.config.get('LEADERBOARD_DEFAULT_PERIOD', 7) if period is None else period
        learner = get_learner_by_uid(uid)

        end_date = (now or utcnow()).replace(tzinfo=None)
        start_date = end_date - timedelta(days=period)

        try:
            rows = (
                db.session.query(Subject.name, Result.outcome, Result.created)
                .select_from(Result)
                .join(Question, Result.question_id == Question.id)
                .outerjoin(Subject, Question.subject_id == Subject.id)
                .filter(
                    Result.learner_id == learner.id,
                    Result.created >= start_date,
                    Result.created <= end_date,
                )
                .order_by(Result.created.asc())
                .all()
            )
        except SQLAlchemyError as exc:
            current_app.logger.error(f"Error fetching results for learner {learner.id}: {exc}", exc_info=True)
            raise UpstreamError('Error fetching results', error=str(exc)) from exc

        return compute_learner_stats((row[0], row[1], row[2]) for row in rows)
