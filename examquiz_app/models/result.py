"""Attempt log."""

from __future__ import annotations

from datetime import datetime, timezone

from ..core.extensions import db


def _utc_naive() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Result(db.Model):
    """One immutable answer submission. Rows are only ever inserted."""

    __tablename__ = 'result'

    OUTCOME_CORRECT = 'correct'
    OUTCOME_INCORRECT = 'incorrect'

    id = db.Column(db.Integer, primary_key=True)
    learner_id = db.Column(db.Integer, db.ForeignKey('learner.id'), nullable=False)
    question_id = db.Column(db.Integer, db.ForeignKey('question.id'), nullable=False)
    answer = db.Column(db.Text, nullable=True)
    outcome = db.Column(db.String(10), nullable=False)
    created = db.Column(db.DateTime, default=_utc_naive, nullable=False)

    learner = db.relationship('Learner')
    question = db.relationship('Question')

    __table_args__ = (
        db.Index('ix_result_learner_question_created', 'learner_id', 'question_id', 'created'),
        db.Index('ix_result_created', 'created'),
    )

    @property
    def is_correct(self) -> bool:
        return self.outcome == self.OUTCOME_CORRECT

    def __repr__(self):
        return f'<Result {self.id} {self.outcome}>'
