"""Lookups shared by every module: learners and questions by identifier."""

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from ..core.error_handlers import NotFoundError, UpstreamError
from ..core.extensions import db
from ..models import Learner, Question


def get_learner_by_uid(uid: str, message: str = 'Learner not found') -> Learner:
    """Fetch a learner by external uid or raise ``NotFoundError``."""
    try:
        learner = Learner.query.filter_by(uid=uid).first()
    except SQLAlchemyError as exc:
        current_app.logger.error(f"Error fetching learner {uid}: {exc}", exc_info=True)
        raise UpstreamError('Error fetching learner', error=str(exc)) from exc
    if learner is None:
        current_app.logger.info(f"Learner {uid} not found.")
        raise NotFoundError(message)
    return learner


def get_question(question_id: int) -> Question:
    """Fetch a question by id or raise ``NotFoundError``."""
    try:
        question = db.session.get(Question, question_id)
    except SQLAlchemyError as exc:
        current_app.logger.error(f"Error fetching question {question_id}: {exc}", exc_info=True)
        raise UpstreamError('Error fetching question', error=str(exc)) from exc
    if question is None:
        raise NotFoundError('Question not found')
    return question


def commit_or_raise(message: str) -> None:
    """Commit the session; on failure roll back and raise ``UpstreamError``."""
    try:
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.error(f"{message}: {exc}", exc_info=True)
        raise UpstreamError(message, error=str(exc)) from exc
