"""Learner and streak models."""

from __future__ import annotations

from ..core.extensions import db


class Learner(db.Model):
    """A learner (or staff member) identified by an external auth uid."""

    __tablename__ = 'learner'

    ROLE_LEARNER = 'learner'
    ROLE_ADMIN = 'admin'
    ROLE_REVIEWER = 'reviewer'
    STAFF_ROLES = (ROLE_ADMIN, ROLE_REVIEWER)

    id = db.Column(db.Integer, primary_key=True)
    uid = db.Column(db.String(128), unique=True, nullable=False, index=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(120), nullable=True)
    role = db.Column(db.String(20), nullable=False, default=ROLE_LEARNER)
    grade_id = db.Column(db.Integer, db.ForeignKey('grade.id'), nullable=True)
    score = db.Column(db.Float, nullable=False, default=0.0)

    grade = db.relationship('Grade')
    streak = db.relationship('LearnerStreak', uselist=False, backref='learner', cascade='all, delete-orphan')

    @property
    def is_staff(self) -> bool:
        return self.role in self.STAFF_ROLES

    def __repr__(self):
        return f'<Learner {self.uid}>'


class LearnerStreak(db.Model):
    """Daily activity streak bookkeeping, one row per learner."""

    __tablename__ = 'learner_streak'

    learner_id = db.Column(db.Integer, db.ForeignKey('learner.id'), primary_key=True)
    current_streak = db.Column(db.Integer, nullable=False, default=0)
    longest_streak = db.Column(db.Integer, nullable=False, default=0)
    questions_answered_today = db.Column(db.Integer, nullable=False, default=0)
    last_answered_at = db.Column(db.DateTime, nullable=True)
    last_streak_update_date = db.Column(db.Date, nullable=True)

    def __repr__(self):
        return f'<LearnerStreak {self.learner_id}: {self.current_streak}>'
