# File: examquiz_app/config.py
# Runtime configuration, read from environment variables.

import os

# Project root (one level above the examquiz_app package).
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

DATABASE_PATH = os.path.join(BASE_DIR, "database", "examquiz.db")


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw == '':
        return default
    return int(raw)


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw == '':
        return default
    return float(raw)


class Config:
    """
    Configuration for the Flask application.
    """
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'change-me-in-production'

    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or f'sqlite:///{DATABASE_PATH}'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR')  # None disables the rotating file handler
    LOG_JSON = os.environ.get('LOG_JSON') == '1'

    # Calendar used to decide what "today" is for streaks.
    SYSTEM_TIMEZONE = os.environ.get('SYSTEM_TIMEZONE', 'UTC')

    # Scoring
    REQUIRED_DAILY_QUESTIONS = _env_int('REQUIRED_DAILY_QUESTIONS', 1)
    MASTERY_WINDOW = _env_int('MASTERY_WINDOW', 3)
    SCORE_PER_CORRECT_ANSWER = _env_float('SCORE_PER_CORRECT_ANSWER', 1.0)

    # Rankings
    TOP_LEARNERS_LIMIT = _env_int('TOP_LEARNERS_LIMIT', 10)
    LEADERBOARD_DEFAULT_PERIOD = _env_int('LEADERBOARD_DEFAULT_PERIOD', 7)
    LEADERBOARD_DEFAULT_LIMIT = _env_int('LEADERBOARD_DEFAULT_LIMIT', 10)

    # Content review
    AUTO_REJECT_LENGTH_THRESHOLD = _env_int('AUTO_REJECT_LENGTH_THRESHOLD', 20)
    AUTO_REJECT_BATCH_SIZE = _env_int('AUTO_REJECT_BATCH_SIZE', 100)

    # Only create the default SQLite folder when it is actually used.
    if SQLALCHEMY_DATABASE_URI == f'sqlite:///{DATABASE_PATH}':
        os.makedirs(os.path.dirname(DATABASE_PATH), exist_ok=True)
