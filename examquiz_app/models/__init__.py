"""Database models package for Exam Quiz."""

from ..core.extensions import db

from .content import Grade, Question, Subject
from .learner import Learner, LearnerStreak
from .result import Result

__all__ = [
    'db',
    'Grade',
    'Subject',
    'Question',
    'Learner',
    'LearnerStreak',
    'Result',
]
