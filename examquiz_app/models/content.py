"""Grade, subject and question models."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy.types import JSON

from ..core.extensions import db


def _utc_naive() -> datetime:
    # SQLite drops tzinfo; every timestamp column holds naive UTC.
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Grade(db.Model):
    """School grade (e.g. 10, 11, 12)."""

    __tablename__ = 'grade'

    id = db.Column(db.Integer, primary_key=True)
    number = db.Column(db.Integer, nullable=False, unique=True)

    def __repr__(self):
        return f'<Grade {self.number}>'


class Subject(db.Model):
    """A subject paper for one grade, named like ``"Mathematics P1"``."""

    __tablename__ = 'subject'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    grade_id = db.Column(db.Integer, db.ForeignKey('grade.id'), nullable=True)
    active = db.Column(db.Boolean, default=True, nullable=False)

    grade = db.relationship('Grade')

    @property
    def base_name(self) -> str:
        """Subject name without the paper suffix."""
        return self.name.split(' ')[0]

    def __repr__(self):
        return f'<Subject {self.name}>'


class Question(db.Model):
    """Question captured by a capturer and moderated by reviewers."""

    __tablename__ = 'question'

    STATUS_NEW = 'new'
    STATUS_APPROVED = 'approved'
    STATUS_REJECTED = 'rejected'
    STATUSES = (STATUS_NEW, STATUS_APPROVED, STATUS_REJECTED)

    TYPE_MULTIPLE_CHOICE = 'multiple_choice'
    TYPE_MULTI_SELECT = 'multi_select'
    CHOICE_TYPES = (TYPE_MULTIPLE_CHOICE, TYPE_MULTI_SELECT)

    id = db.Column(db.Integer, primary_key=True)
    question = db.Column(db.Text, nullable=False)
    type = db.Column(db.String(50), nullable=False, default=TYPE_MULTIPLE_CHOICE)
    # Plain text, or a JSON array encoded as text for multi-answer questions.
    answer = db.Column(db.Text, nullable=True)
    # Either a list of strings or an object keyed by option label.
    options = db.Column(JSON, nullable=True)
    explanation = db.Column(db.Text, nullable=True)
    status = db.Column(db.String(20), nullable=False, default=STATUS_NEW)
    active = db.Column(db.Boolean, nullable=False, default=True)
    comment = db.Column(db.Text, nullable=True)

    subject_id = db.Column(db.Integer, db.ForeignKey('subject.id'), nullable=True)
    capturer_id = db.Column(db.Integer, db.ForeignKey('learner.id'), nullable=True)
    reviewer_id = db.Column(db.Integer, db.ForeignKey('learner.id'), nullable=True)
    reviewed_at = db.Column(db.DateTime, nullable=True)

    created = db.Column(db.DateTime, default=_utc_naive, nullable=False)
    updated = db.Column(db.DateTime, default=_utc_naive, onupdate=_utc_naive, nullable=False)

    subject = db.relationship('Subject')

    __table_args__ = (
        db.Index('ix_question_status_active', 'status', 'active'),
    )

    def to_dict(self) -> dict:
        from ..utils.time_utils import isoformat

        return {
            'id': self.id,
            'question': self.question,
            'type': self.type,
            'answer': self.answer,
            'options': self.options,
            'explanation': self.explanation,
            'status': self.status,
            'active': self.active,
            'comment': self.comment,
            'subject': {'id': self.subject.id, 'name': self.subject.name} if self.subject else None,
            'created': isoformat(self.created),
            'updated': isoformat(self.updated),
        }

    def __repr__(self):
        return f'<Question {self.id} {self.status}>'
