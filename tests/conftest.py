import os
import sys
from types import SimpleNamespace

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from examquiz_app import create_app, db
from examquiz_app.config import Config
from examquiz_app.models import Grade, Learner, Question, Subject


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {'check_same_thread': False}
    }
    LOG_LEVEL = 'WARNING'
    LOG_DIR = None
    REQUIRED_DAILY_QUESTIONS = 1
    MASTERY_WINDOW = 3
    SCORE_PER_CORRECT_ANSWER = 1.0
    TOP_LEARNERS_LIMIT = 10


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seed(app):
    """Two learners and a reviewer in grade 10, with a few approved questions."""
    grade = Grade(number=10)
    db.session.add(grade)
    db.session.flush()

    maths = Subject(name='Mathematics P1', grade_id=grade.id)
    physics = Subject(name='Physical Sciences P1', grade_id=grade.id)
    db.session.add_all([maths, physics])
    db.session.flush()

    alice = Learner(uid='uid-alice', name='Alice', email='alice@example.com', grade_id=grade.id)
    bob = Learner(uid='uid-bob', name='Bob', email='bob@example.com', grade_id=grade.id)
    reviewer = Learner(uid='uid-reviewer', name='Rita', email='rita@example.com', role=Learner.ROLE_REVIEWER)
    db.session.add_all([alice, bob, reviewer])
    db.session.flush()

    addition = Question(
        question='What is 2 + 2?',
        type='short_answer',
        answer='4',
        explanation='Basic addition.',
        status=Question.STATUS_APPROVED,
        subject_id=maths.id,
        capturer_id=reviewer.id,
    )
    capital = Question(
        question='Capital of France?',
        type=Question.TYPE_MULTIPLE_CHOICE,
        answer='["Paris"]',
        options=['Paris', 'London', 'Rome', 'Madrid'],
        status=Question.STATUS_APPROVED,
        subject_id=maths.id,
        capturer_id=reviewer.id,
    )
    velocity = Question(
        question='Unit of velocity?',
        type='short_answer',
        answer='m/s',
        status=Question.STATUS_APPROVED,
        subject_id=physics.id,
        capturer_id=reviewer.id,
    )
    pending = Question(
        question='Square root of 9?',
        type=Question.TYPE_MULTIPLE_CHOICE,
        answer='["3"]',
        options={'A': '3', 'B': '9', 'C': '81', 'D': '1'},
        status=Question.STATUS_NEW,
        subject_id=maths.id,
        capturer_id=reviewer.id,
    )
    db.session.add_all([addition, capital, velocity, pending])
    db.session.commit()

    return SimpleNamespace(
        grade_id=grade.id,
        maths_id=maths.id,
        physics_id=physics.id,
        alice_id=alice.id,
        bob_id=bob.id,
        reviewer_id=reviewer.id,
        addition_id=addition.id,
        capital_id=capital.id,
        velocity_id=velocity.id,
        pending_id=pending.id,
    )
