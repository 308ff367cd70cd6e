from flask import jsonify, request

from examquiz_app.core.error_handlers import ValidationError, success_response
from examquiz_app.utils.request_utils import load_or_400

from . import streak_api_bp
from .schemas import TrackStreakSchema
from .services import StreakService


@streak_api_bp.route('/track', methods=['POST'])
def track_streak():
    """Count one answered question towards today's streak goal."""
    payload = load_or_400(TrackStreakSchema(), request.get_json(silent=True), 'Learner UID is required')
    return jsonify(success_response(data=StreakService.track(payload['uid'])))


@streak_api_bp.route('/info/<uid>', methods=['GET'])
def streak_info(uid):
    """Streak status without recording an action."""
    if not uid.strip():
        raise ValidationError('Learner UID is required')
    return jsonify(success_response(data=StreakService.get_info(uid)))
