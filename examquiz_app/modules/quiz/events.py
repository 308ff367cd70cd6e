"""
Event handlers for the quiz module.

Keeps ``learner.score`` in step with the attempt log: every correct answer
adds ``SCORE_PER_CORRECT_ANSWER``. A failure here is logged and never undoes
the attempt that triggered it.
"""
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from examquiz_app.core.extensions import db
from examquiz_app.core.signals import answer_recorded
from examquiz_app.models import Learner

from .logics.outcome_logic import CORRECT


@answer_recorded.connect
def on_answer_recorded(sender, **kwargs):
    """
    Expected kwargs:
        - learner_id: int
        - question_id: int
        - result_id: int
        - outcome: str ('correct' | 'incorrect')
    """
    if kwargs.get('outcome') != CORRECT:
        return

    learner_id = kwargs.get('learner_id')
    points = float(current_app.config.get('SCORE_PER_CORRECT_ANSWER', 1.0))
    if not learner_id or points == 0:
        return

    try:
        # Single UPDATE so concurrent answers cannot lose points.
        updated = (
            Learner.query.filter_by(id=learner_id)
            .update({Learner.score: Learner.score + points}, synchronize_session=False)
        )
        db.session.commit()
        if not updated:
            current_app.logger.warning(f"[Quiz] Learner {learner_id} vanished before scoring.")
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"[Quiz] Error awarding points to learner {learner_id}: {e}", exc_info=True)
