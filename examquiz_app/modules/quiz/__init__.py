from flask import Blueprint

quiz_api_bp = Blueprint('quiz_api', __name__)

from . import routes  # noqa: E402,F401
