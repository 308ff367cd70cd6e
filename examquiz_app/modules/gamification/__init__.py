from flask import Blueprint

streak_api_bp = Blueprint('streak_api', __name__)

from . import routes  # noqa: E402,F401
