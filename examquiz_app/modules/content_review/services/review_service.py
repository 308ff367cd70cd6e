from typing import Optional

from flask import current_app

from examquiz_app.models import Question
from examquiz_app.services.lookup_service import commit_or_raise, get_learner_by_uid, get_question
from examquiz_app.utils.time_utils import isoformat, utcnow


class ReviewService:
    """Reviewer status transitions for questions."""

    @staticmethod
    def update_status(uid: str, question_id: int, status: str, comment: Optional[str] = None) -> dict:
        reviewer = get_learner_by_uid(uid, message='Admin not found')
        question = get_question(question_id)

        question.status = status
        question.reviewed_at = utcnow().replace(tzinfo=None)
        question.reviewer_id = reviewer.id
        if comment:
            question.comment = comment
        if status == Question.STATUS_APPROVED:
            question.active = True

        commit_or_raise('Error updating question')
        current_app.logger.info(f"Question {question.id} set to '{status}' by reviewer {reviewer.id}")

        return {
            'id': question.id,
            'status': question.status,
            'comment': question.comment,
            'updated': isoformat(question.updated),
        }
