from flask import Blueprint

content_review_api_bp = Blueprint('content_review_api', __name__)

from . import routes  # noqa: E402,F401
