# File: examquiz_app/modules/quiz/services/question_service.py
"""
Question Delivery Service
=========================
Serves one random question with shuffled options.

Learners draw from approved, active questions of their grade's subject paper.
Staff (admins, reviewers) draw from questions still waiting for review.
"""
import random
from typing import Optional

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from examquiz_app.core.error_handlers import NotFoundError, UpstreamError
from examquiz_app.models import Question, Subject
from examquiz_app.services.lookup_service import get_learner_by_uid, get_question

from ..logics.shuffle_logic import normalize_options, pick_random, shuffle_options


class QuestionDeliveryService:

    @staticmethod
    def _serialize(question: Question, rng: Optional[random.Random]) -> dict:
        payload = question.to_dict()
        if not question.options:
            return payload
        try:
            options = normalize_options(question.options)
        except ValueError as exc:
            # Serve the question with its options untouched.
            current_app.logger.warning(f"Could not shuffle options of question {question.id}: {exc}")
            return payload
        if options is not None:
            payload['options'] = shuffle_options(options, rng).to_json()
        return payload

    @staticmethod
    def get_random_question(subject_name: str, paper_name: str, uid: str,
                            question_id: Optional[int] = None,
                            rng: Optional[random.Random] = None) -> dict:
        learner = get_learner_by_uid(uid)

        if question_id:
            return get_question(question_id).to_dict()

        full_name = f"{subject_name} {paper_name}"

        try:
            if learner.is_staff:
                candidates = (
                    Question.query.join(Subject, Question.subject_id == Subject.id)
                    .filter(
                        Subject.name == full_name,
                        Question.active.is_(True),
                        Question.status == Question.STATUS_NEW,
                    )
                    .all()
                )
                if not candidates:
                    raise NotFoundError('No new questions found for review')
            else:
                if learner.grade_id is None:
                    raise NotFoundError('Learner grade not found')

                subject = Subject.query.filter_by(name=full_name, grade_id=learner.grade_id).first()
                if subject is None:
                    raise NotFoundError('Subject not found')

                candidates = Question.query.filter(
                    Question.subject_id == subject.id,
                    Question.active.is_(True),
                    Question.status == Question.STATUS_APPROVED,
                ).all()
                if not candidates:
                    raise NotFoundError('No more questions available')
        except SQLAlchemyError as exc:
            current_app.logger.error(f"Error fetching questions for {full_name}: {exc}", exc_info=True)
            raise UpstreamError('Error getting random question', error=str(exc)) from exc

        question = pick_random(candidates, rng)
        current_app.logger.debug(
            f"Serving question {question.id} of {len(candidates)} candidates to learner {learner.id}"
        )
        return QuestionDeliveryService._serialize(question, rng)
