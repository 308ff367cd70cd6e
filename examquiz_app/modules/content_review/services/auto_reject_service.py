# File: examquiz_app/modules/content_review/services/auto_reject_service.py
"""
Auto-Reject Service
===================
Batch sweep over approved choice questions. Rejections are buffered and
written in batches; one malformed question never stops the sweep.
"""
from typing import Dict, List, Optional

from flask import current_app
from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError

from examquiz_app.core.error_handlers import UpstreamError
from examquiz_app.core.extensions import db
from examquiz_app.models import Question
from examquiz_app.utils.time_utils import utcnow

from ..logics.auto_reject_logic import DEFAULT_LENGTH_THRESHOLD, evaluate_question


class AutoRejectService:

    @staticmethod
    def _flush(pending: List[Dict]) -> int:
        """Write one batch of rejections; returns how many were stored."""
        if not pending:
            return 0
        try:
            db.session.execute(update(Question), pending)
            db.session.commit()
        except SQLAlchemyError as exc:
            db.session.rollback()
            current_app.logger.error(
                f"Error updating batch of {len(pending)} rejected questions: {exc}", exc_info=True
            )
            return 0
        current_app.logger.info(f"Auto-reject: stored batch of {len(pending)} rejections.")
        return len(pending)

    @staticmethod
    def run(threshold: Optional[int] = None, batch_size: Optional[int] = None) -> int:
        """Sweep every approved, active choice question. Returns the rejected count."""
        config = current_app.config
        threshold = config.get('AUTO_REJECT_LENGTH_THRESHOLD', DEFAULT_LENGTH_THRESHOLD) if threshold is None else threshold
        batch_size = batch_size or config.get('AUTO_REJECT_BATCH_SIZE', 100)

        try:
            questions = (
                db.session.query(Question.id, Question.answer, Question.options)
                .filter(
                    Question.type.in_(Question.CHOICE_TYPES),
                    Question.status == Question.STATUS_APPROVED,
                    Question.active.is_(True),
                )
                .order_by(Question.id.asc())
                .all()
            )
        except SQLAlchemyError as exc:
            current_app.logger.error(f"Error fetching questions: {exc}", exc_info=True)
            raise UpstreamError('Error fetching questions', error=str(exc)) from exc

        rejected_count = 0
        pending: List[Dict] = []

        for question in questions:
            try:
                verdict = evaluate_question(question.answer, question.options, threshold)
            except (ValueError, TypeError, IndexError) as exc:
                current_app.logger.warning(f"Error processing question {question.id}: {exc}")
                continue

            if verdict is None:
                current_app.logger.debug(f"Question {question.id}: nothing to compare, skipped.")
                continue

            if verdict.rejected:
                pending.append({
                    'id': question.id,
                    'status': Question.STATUS_REJECTED,
                    'comment': verdict.comment,
                    'updated': utcnow().replace(tzinfo=None),
                })

            if len(pending) >= batch_size:
                rejected_count += AutoRejectService._flush(pending)
                pending = []

        rejected_count += AutoRejectService._flush(pending)

        current_app.logger.info(
            f"Auto-reject sweep: {len(questions)} questions scanned, {rejected_count} rejected."
        )
        return rejected_count
