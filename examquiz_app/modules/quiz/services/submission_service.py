# File: examquiz_app/modules/quiz/services/submission_service.py
"""
Submission Service
==================
Records an answer, decides its outcome and reports mastery.
"""
import json

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from examquiz_app.core.error_handlers import UpstreamError
from examquiz_app.core.extensions import db
from examquiz_app.core.signals import answer_recorded
from examquiz_app.models import Result
from examquiz_app.services.lookup_service import commit_or_raise, get_learner_by_uid, get_question
from examquiz_app.utils.learner_locks import learner_lock
from examquiz_app.utils.time_utils import isoformat

from ..logics.mastery_logic import DEFAULT_MASTERY_WINDOW, is_mastered
from ..logics.outcome_logic import CORRECT, evaluate_outcome
from ..schemas import SubmissionDTO


class SubmissionService:
    """Answer submission: outcome, attempt log, mastery."""

    @staticmethod
    def recent_outcomes(learner_id: int, question_id: int, limit: int) -> list:
        """Outcomes of the latest ``limit`` attempts, newest first."""
        try:
            rows = (
                db.session.query(Result.outcome)
                .filter(Result.learner_id == learner_id, Result.question_id == question_id)
                .order_by(Result.created.desc(), Result.id.desc())
                .limit(limit)
                .all()
            )
        except SQLAlchemyError as exc:
            current_app.logger.error(
                f"Error fetching previous results for learner {learner_id}, question {question_id}: {exc}"
            )
            raise UpstreamError('Error fetching previous results', error=str(exc)) from exc
        return [row.outcome for row in rows]

    @staticmethod
    def submit_answer(uid: str, question_id: int, answer) -> SubmissionDTO:
        learner = get_learner_by_uid(uid)
        question = get_question(question_id)
        window = current_app.config.get('MASTERY_WINDOW', DEFAULT_MASTERY_WINDOW)

        outcome = evaluate_outcome(answer, question.answer)

        with learner_lock(learner.id):
            result = Result(
                learner_id=learner.id,
                question_id=question.id,
                answer=answer if isinstance(answer, str) else json.dumps(answer),
                outcome=outcome,
            )
            db.session.add(result)
            commit_or_raise('Error saving result')

            outcomes = SubmissionService.recent_outcomes(learner.id, question.id, window)
            mastered = is_mastered(outcomes, window)

        current_app.logger.info(
            f"Learner {learner.id} answered question {question.id}: {outcome} (mastered={mastered})"
        )

        answer_recorded.send(
            current_app._get_current_object(),
            learner_id=learner.id,
            question_id=question.id,
            result_id=result.id,
            outcome=outcome,
        )

        return SubmissionDTO(
            id=result.id,
            correct=outcome == CORRECT,
            mastered=mastered,
            explanation=question.explanation,
            created=isoformat(result.created),
        )
