from flask import jsonify, request

from examquiz_app.core.error_handlers import ValidationError, success_response
from examquiz_app.utils.request_utils import load_or_400

from . import learner_stats_api_bp, rankings_api_bp
from .schemas import LeaderboardQuerySchema, LearnerStatsQuerySchema
from .services import LeaderboardService, LearnerStatsService


@rankings_api_bp.route('/top-learners/<uid>', methods=['GET'])
def top_learners(uid):
    """Top learners by cumulative score, plus the caller's own position."""
    if not uid.strip():
        raise ValidationError('UID is required')
    return jsonify(success_response(**LeaderboardService.get_top_learners(uid)))


@learner_stats_api_bp.route('/leaderboard', methods=['GET'])
def leaderboard():
    """Composite-score leaderboard over a recent window of attempts."""
    params = load_or_400(LeaderboardQuerySchema(), request.args.to_dict(), 'UID is required')
    board = LeaderboardService.get_leaderboard(
        params['uid'],
        period=params.get('period'),
        subject_id=params.get('subject_id'),
        grade_id=params.get('grade_id'),
        limit=params.get('limit'),
    )
    return jsonify(success_response(leaderboard=board))


@learner_stats_api_bp.route('/stats', methods=['GET'])
def learner_stats():
    """Overall, per-subject and per-day accuracy of one learner."""
    params = load_or_400(LearnerStatsQuerySchema(), request.args.to_dict(), 'UID is required')
    stats = LearnerStatsService.get_stats(params['uid'], period=params.get('period'))
    return jsonify(success_response(stats=stats))
