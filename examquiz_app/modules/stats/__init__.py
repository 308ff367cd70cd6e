# File: examquiz_app/modules/stats/__init__.py
# Blueprints for rankings and per-learner statistics.

from flask import Blueprint

rankings_api_bp = Blueprint('rankings_api', __name__)
learner_stats_api_bp = Blueprint('learner_stats_api', __name__)

from . import routes  # noqa: E402,F401
